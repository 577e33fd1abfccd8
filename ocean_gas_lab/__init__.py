from .errors import UnsupportedGasError, ShapeMismatchError
from .fluxes import (
    liang13,
    emerson19,
    e19_transfer_velocities,
    e19_fluxes,
    e19_supersaturation,
)
from .diagnostics import flux_dataset, total_flux
from . import gasex
from . import gas_properties
