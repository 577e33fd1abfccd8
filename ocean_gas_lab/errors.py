import numpy as np


class UnsupportedGasError(ValueError):
    """Raised when a gas code is not one of He, Ne, Ar, Kr, Xe, N2, O2."""


class ShapeMismatchError(ValueError):
    """Raised when array inputs cannot be broadcast against each other."""


def check_broadcastable(**arrays):
    """
    Verify that inputs are mutually broadcastable.

    Parameters
    ----------

    arrays : numeric
      Named inputs; ``None`` values are skipped.

    Returns
    -------

    shape : tuple
      The broadcast shape of the inputs.
    """
    shapes = {k: np.shape(v) for k, v in arrays.items() if v is not None}
    try:
        return np.broadcast_shapes(*shapes.values())
    except ValueError:
        desc = ", ".join(f"{k}={s}" for k, s in shapes.items())
        raise ShapeMismatchError(f"inputs are not broadcastable: {desc}") from None
