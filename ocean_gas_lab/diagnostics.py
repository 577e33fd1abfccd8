import os

import yaml
import numpy as np
import xarray as xr

from . import fluxes
from .gas_properties import check_gas

path_to_here = os.path.dirname(os.path.realpath(__file__))

output_names = {
    "liang13": ["Fd", "Fc", "Fp", "Deq", "Ks"],
    "emerson19": ["Ks", "Kp", "Kc", "Fd", "Fp", "Fc", "Deq"],
}


def get_diag_attrs():
    """return attributes of flux diagnostics keyed by variable name"""
    with open(f"{path_to_here}/flux_diag_definitions.yml") as fid:
        diag_defs = yaml.safe_load(fid)
    return {k: v['attrs'] for k, v in diag_defs.items()}


def total_flux(Fd, Fp, Fc):
    """Total air-sea flux, Ft = Fd + Fp + Fc [mol/m^2/s]."""
    return Fd + Fp + Fc


def flux_dataset(variant, dims=None, coords=None, **kwargs):
    """
    Compute air-sea fluxes and return them as a Dataset.

    Parameters
    ----------

    variant : string
      Parameterization to use. Options: ['liang13', 'emerson19'].

    dims : tuple of str, optional
      Dimension names of the outputs. Defaults to ``('nobs',)`` for 1-D
      output and no dimensions for scalar output.

    coords : dict_like, optional
      Coordinates to attach to the Dataset.

    kwargs : dict
      Arguments passed to the parameterization, e.g. ``gas``, ``u10``,
      ``SP``, ``pt``.

    Returns
    -------

    ds : xarray.Dataset
      All outputs of the parameterization plus the total flux ``Ft``.
    """
    if variant not in output_names:
        raise ValueError(f"unknown variant: {variant}")

    results = getattr(fluxes, variant)(**kwargs)
    data = dict(
        zip(output_names[variant], [np.array(r) for r in np.broadcast_arrays(*results)])
    )
    data["Ft"] = total_flux(data["Fd"], data["Fp"], data["Fc"])

    ndim = data["Fd"].ndim
    if dims is None:
        assert ndim <= 1, "`dims` must be given for multi-dimensional output"
        dims = ("nobs",)[:ndim]

    diag_attrs = get_diag_attrs()

    ds = xr.Dataset(coords=coords)
    for v, values in data.items():
        ds[v] = xr.DataArray(
            values,
            dims=dims,
            attrs=diag_attrs[v],
        )
    ds.attrs["parameterization"] = variant
    ds.attrs["gas"] = check_gas(kwargs["gas"])
    return ds
