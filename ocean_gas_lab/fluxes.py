"""
Air-sea gas fluxes including bubble injection.

Two parameterizations are provided:

``liang13``
    Liang, J.-H., C. Deutsch, J. C. McWilliams, B. Baschek, P. P. Sullivan,
    and D. Chiba (2013), Parameterizing bubble-mediated air-sea gas
    exchange and its effect on ocean ventilation, Global Biogeochem.
    Cycles, 27, 894-905, doi:10.1002/gbc.20080.

``emerson19``
    Emerson, S., Yang, B., White, M., & Cronin, M. (2019). Air-sea gas
    transfer: Determining bubble fluxes with in situ N2 observations.
    Journal of Geophysical Research: Oceans, 124, 2716-2727,
    doi:10.1029/2018JC014786. Bubble fluxes of L13 scaled by 0.37.

The Emerson et al. variant is staged so that transfer velocities can be
computed without fluxes, and fluxes without the steady-state
supersaturation:

>>> tv = e19_transfer_velocities('Ar', 5.0, 35.0, 10.0)
>>> fl = e19_fluxes(tv, C=0.01410)
>>> Deq = e19_supersaturation(tv, fl)

Flux sign convention follows each paper; the total air-sea flux is
Ft = Fd + Fp + Fc.
"""
import logging
from collections import namedtuple

import numpy as np

from .errors import check_broadcastable
from .gas_properties import (
    check_gas,
    gas_mole_fraction,
    seawater_density,
    equilibrium_concentration,
    solubility_concentration,
    schmidt_number,
    vapor_pressure,
)
from .gasex import (
    bfact,
    drag_coefficient,
    friction_velocities,
    transfer_resistances,
    diffusive_transfer_velocity,
    bubble_transfer_velocity,
    collapsing_bubble_coefficient,
    overpressure,
)

logger = logging.getLogger(__name__)


TransferVelocities = namedtuple(
    "TransferVelocities",
    ["Ks", "Kp", "Kc", "Geq", "dP", "gas", "SP", "pt"],
)
TransferVelocities.__doc__ = """Result of `e19_transfer_velocities`.

Ks, Kp, Kc are in m/s (Kc in mol/m^2/s per unit mole fraction); Geq is the
equilibrium concentration [mol/m^3] and dP the fractional overpressure.
"""

Fluxes = namedtuple("Fluxes", ["Fd", "Fp", "Fc", "pslpc"])
Fluxes.__doc__ = """Result of `e19_fluxes`; fluxes in mol/m^2/s."""


def _as_float(*args):
    return tuple(np.asarray(a, dtype=float) for a in args)


def _surface_transfer(u10, SP, pt, gas, Ceq):
    """diffusive transfer velocity, water-side friction velocity and Schmidt number"""
    rhow = seawater_density(SP, pt)
    ScW = schmidt_number(SP, pt, gas)

    cd10 = drag_coefficient(u10)
    ustar, ustarw = friction_velocities(u10, cd10, rhow)
    rwt, rat = transfer_resistances(ScW, cd10, rhow)

    Ks = diffusive_transfer_velocity(ustar, rwt, rat, Ceq, pt)
    return Ks, ustarw, ScW


def liang13(Cw, Ca, u10, SP, pt, gas):
    """
    Compute air-sea fluxes and steady-state supersaturation with the
    Liang et al. (2013) parameterization.

    Parameters
    ----------

    Cw : numeric
      Dissolved gas concentration [mol/m^3]

    Ca : numeric
      Partial pressure of the gas in the overlying atmosphere [atm],
      e.g. ``xG * (slp - rh * vapor_pressure(SP, pt))``

    u10 : numeric
      Wind speed at 10 m [m/s]

    SP : numeric
      Sea surface practical salinity [PSS]

    pt : numeric
      Sea surface temperature [°C]

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    Returns
    -------

    Fd : numeric
      Diffusive surface gas flux [mol/m^2/s]

    Fc : numeric
      Flux from fully collapsing small bubbles [mol/m^2/s]

    Fp : numeric
      Flux from partially collapsing large bubbles [mol/m^2/s]

    Deq : numeric
      Steady-state equilibrium supersaturation [fraction]

    Ks : numeric
      Diffusive gas transfer velocity [m/s]
    """
    gas = check_gas(gas)
    shape = check_broadcastable(Cw=Cw, Ca=Ca, u10=u10, SP=SP, pt=pt)
    logger.debug("liang13: gas=%s shape=%s", gas, shape)
    Cw, Ca, u10, SP, pt = _as_float(Cw, Ca, u10, SP, pt)

    Ca_mmolm3 = solubility_concentration(SP, pt, Ca, gas)

    # dry mixing ratio assuming 1 atm; not exact
    xG = Ca / (1.0 - vapor_pressure(SP, pt))

    Ks, ustarw, ScW = _surface_transfer(u10, SP, pt, gas, Ca_mmolm3)
    Kb = bubble_transfer_velocity(ustarw, ScW)
    dP = overpressure(ustarw)

    Fd = Ks * (Cw - Ca_mmolm3)  # L13 eqn 3
    Fp = Kb * (Cw - Ca_mmolm3 * (1.0 + dP))  # L13 eqn 3
    Fc = -xG * collapsing_bubble_coefficient(ustarw)  # L13 eqn 15

    Deq = (Kb * Ca_mmolm3 * dP - Fc) / ((Kb + Ks) * Ca_mmolm3)  # L13 eqn 5

    return Fd, Fc, Fp, Deq, Ks


def e19_transfer_velocities(gas, u10, SP, pt):
    """
    Compute gas transfer velocities of Emerson et al. (2019).

    Parameters
    ----------

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    u10 : numeric
      Wind speed at 10 m [m/s]

    SP : numeric
      Sea surface practical salinity [PSS]

    pt : numeric
      Sea surface temperature [°C]

    Returns
    -------

    tv : TransferVelocities
      Ks, Kp, Kc and the intermediates used by `e19_fluxes`.
    """
    gas = check_gas(gas)
    check_broadcastable(u10=u10, SP=SP, pt=pt)
    u10, SP, pt = _as_float(u10, SP, pt)

    Geq = equilibrium_concentration(SP, pt, gas)

    Ks, ustarw, ScW = _surface_transfer(u10, SP, pt, gas, Geq)  # L13 eqn 9
    Kp = bubble_transfer_velocity(ustarw, ScW, scale=bfact)  # L13 eqn 14
    dP = overpressure(ustarw)  # L13 eqn 16
    Kc = collapsing_bubble_coefficient(ustarw, scale=bfact)  # from L13 eqn 15

    return TransferVelocities(Ks=Ks, Kp=Kp, Kc=Kc, Geq=Geq, dP=dP, gas=gas, SP=SP, pt=pt)


def e19_fluxes(tv, C=None, pslp=1.0, rh=None):
    """
    Compute air-sea fluxes of Emerson et al. (2019).

    Parameters
    ----------

    tv : TransferVelocities
      Output of `e19_transfer_velocities`.

    C : numeric, optional
      Dissolved gas concentration [mol/m^3]. Defaults to the dry air mole
      fraction of the gas.

    pslp : numeric, optional
      Sea level pressure [atm]. Defaults to 1.

    rh : numeric, optional
      Relative humidity as a fraction of saturation. Defaults to ones
      shaped like `C`.

    Returns
    -------

    fl : Fluxes
      Fd, Fp, Fc [mol/m^2/s] and the humidity corrected pressure ratio.
    """
    if C is None:
        C = gas_mole_fraction(tv.gas)
    if rh is None:
        rh = np.ones(np.shape(C))
    check_broadcastable(C=C, pslp=pslp, rh=rh, Ks=tv.Ks)
    C, pslp, rh = _as_float(C, pslp, rh)

    ph2oveq = vapor_pressure(tv.SP, tv.pt)
    ph2ov = rh * ph2oveq

    # observed dry air pressure relative to reference dry air pressure
    pslpc = (pslp - ph2ov) / (1.0 - ph2oveq)

    Gsat = C / tv.Geq
    xG = gas_mole_fraction(tv.gas)

    Fd = tv.Ks * tv.Geq * (pslpc - Gsat)  # Fd in L13 eqn 3
    Fp = tv.Kp * tv.Geq * ((1.0 + tv.dP) * pslpc - Gsat)  # Fp in L13 eqn 3
    Fc = tv.Kc * xG  # L13 eqn 15

    return Fluxes(Fd=Fd, Fp=Fp, Fc=Fc, pslpc=pslpc)


def e19_supersaturation(tv, fl):
    """Steady-state equilibrium supersaturation (L13 eqn 5) from the two earlier stages."""
    return (tv.Kp * tv.Geq * tv.dP * fl.pslpc + fl.Fc) / (
        (tv.Kp + tv.Ks) * tv.Geq * fl.pslpc
    )


def emerson19(gas, u10, SP, pt, C=None, pslp=1.0, rh=None):
    """
    Compute air-sea fluxes and steady-state supersaturation with the
    Emerson et al. (2019) modification of Liang et al. (2013).

    Parameters
    ----------

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    u10 : numeric
      Wind speed at 10 m [m/s]

    SP : numeric
      Sea surface practical salinity [PSS]

    pt : numeric
      Sea surface temperature [°C]

    C : numeric, optional
      Dissolved gas concentration [mol/m^3]

    pslp : numeric, optional
      Sea level pressure [atm]

    rh : numeric, optional
      Relative humidity as a fraction of saturation

    Returns
    -------

    Ks, Kp, Kc, Fd, Fp, Fc, Deq : numeric
      Transfer velocities [m/s], fluxes [mol/m^2/s] and supersaturation.
    """
    logger.debug("emerson19: gas=%s", gas)
    tv = e19_transfer_velocities(gas, u10, SP, pt)
    fl = e19_fluxes(tv, C=C, pslp=pslp, rh=rh)
    Deq = e19_supersaturation(tv, fl)
    return tv.Ks, tv.Kp, tv.Kc, fl.Fd, fl.Fp, fl.Fc, Deq
