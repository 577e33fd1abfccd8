"""
Physical properties of dissolved noble gases, N2 and O2 in seawater.

Provides the solubility, diffusivity, vapor pressure and mole fraction
lookups consumed by the air-sea flux parameterizations. Coefficient tables
are read from ``gas_coefficients.yml``.
"""
import os
import logging

import yaml
import numpy as np
import gsw
import seawater as sw

from .errors import UnsupportedGasError

logger = logging.getLogger(__name__)

path_to_here = os.path.dirname(os.path.realpath(__file__))

with open(f"{path_to_here}/gas_coefficients.yml") as fid:
    gas_coefficients = yaml.safe_load(fid)

supported_gases = tuple(gas_coefficients.keys())
_gas_lookup = {g.lower(): g for g in supported_gases}

# gas constant for Arrhenius diffusivity fits (J mol^-1 K^-1)
R_diff = 8.314510

# mol water per kg water
mol_water_per_kg = 1.0e3 / 18.01528

# (native units) --> (mol/kg)
units_convert_factor = {
    "nmol/kg": 1.0e-9,
    "umol/kg": 1.0e-6,
}


def check_gas(gas):
    """
    Return the canonical code of a supported gas.

    Parameters
    ----------

    gas : string
      Gas formula, case insensitive, e.g. 'Ar' or 'ar'.

    Returns
    -------

    gas : string
      One of He, Ne, Ar, Kr, Xe, N2, O2.
    """
    try:
        return _gas_lookup[gas.lower()]
    except (AttributeError, KeyError):
        raise UnsupportedGasError(
            f"unsupported gas: {gas!r}; must be one of {supported_gases}"
        ) from None


def gas_mole_fraction(gas):
    """Dry air mole fraction of `gas` [mol/mol]."""
    return gas_coefficients[check_gas(gas)]["mole_fraction"]


def seawater_density(SP, pt):
    """
    Compute surface potential density of seawater with TEOS-10.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Potential temperature [°C]

    Returns
    -------

    rho : numeric
      Potential density [kg/m^3]
    """
    SA = SP * 35.16504 / 35.0
    CT = gsw.CT_from_pt(SA, pt)
    return gsw.sigma0(SA, CT) + 1000.0


def vapor_pressure(SP, pt):
    """
    Compute the saturation vapor pressure of water over seawater.

    Pure water vapor pressure from Wagner and Pruss (2002) with the
    osmotic coefficient salinity correction of Millero (1974), as given in
    Dickson et al. (2007), SOP 5.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Temperature [°C]

    Returns
    -------

    ph2o : numeric
      Vapor pressure [atm]
    """
    temp_K = pt + 273.15
    tau = 1.0 - temp_K / 647.096

    wagner = (647.096 / temp_K) * (
        -7.85951783 * tau
        + 1.84408259 * tau**1.5
        - 11.7866497 * tau**3
        + 22.6807411 * tau**3.5
        - 15.9618719 * tau**4
        + 1.80122502 * tau**7.5
    )
    vapor_0sal_kPa = np.exp(wagner) * 22.064e3

    molality = 31.998 * SP / (1.0e3 - 1.005 * SP)
    half_m = 0.5 * molality
    osmotic_coef = (
        0.90799
        - 0.08992 * half_m
        + 0.18458 * half_m**2
        - 0.07395 * half_m**3
        - 0.00221 * half_m**4
    )
    vapor_press_kPa = vapor_0sal_kPa * np.exp(-0.018 * osmotic_coef * molality)

    return vapor_press_kPa / 101.32501


def _ln_weiss(SP, pt, coef):
    """ln of a Weiss (1970) style solubility function"""
    T100 = (pt + 273.15) / 100.0
    a1, a2, a3, a4 = coef["A"]
    b1, b2, b3 = coef["B"]
    return (
        a1
        + a2 / T100
        + a3 * np.log(T100)
        + a4 * T100
        + SP * (b1 + b2 * T100 + b3 * T100**2)
    )


def _ln_ts_polynomial(SP, pt, coef):
    """ln of a Benson and Krause style solubility polynomial"""
    Ts = np.log((298.15 - pt) / (273.15 + pt))
    polyval = np.polynomial.polynomial.polyval
    return polyval(Ts, coef["A"]) + SP * polyval(Ts, coef["B"]) + coef["C0"] * SP**2


_solubility_forms = {
    "weiss": _ln_weiss,
    "ts_polynomial": _ln_ts_polynomial,
}


def equilibrium_concentration_gravimetric(SP, pt, gas):
    """
    Compute the equilibrium gas concentration per unit mass of seawater.

    Concentration is in equilibrium with moist air at 1 atm total
    pressure.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Potential temperature [°C]

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    Returns
    -------

    Ceq : numeric
      Equilibrium concentration [mol/kg]
    """
    gas = check_gas(gas)
    coef = gas_coefficients[gas]["solubility"]
    Ceq = np.exp(_solubility_forms[coef["form"]](SP, pt, coef))

    units = coef["units"]
    if units == "mole_fraction":
        # Henry's law mole fraction at 1 atm of pure gas
        pgas = gas_mole_fraction(gas) * (1.0 - vapor_pressure(SP, pt))
        return Ceq * mol_water_per_kg * pgas
    elif units == "mL/kg":
        return Ceq / (coef["molar_volume"] * 1.0e3)
    return Ceq * units_convert_factor[units]


def equilibrium_concentration(SP, pt, gas):
    """
    Compute the equilibrium gas concentration per unit volume of seawater.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Potential temperature [°C]

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    Returns
    -------

    Geq : numeric
      Equilibrium concentration [mol/m^3]
    """
    return equilibrium_concentration_gravimetric(SP, pt, gas) * seawater_density(SP, pt)


def solubility_concentration(SP, pt, pgas, gas):
    """
    Compute the dissolved concentration in equilibrium with a partial pressure.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Potential temperature [°C]

    pgas : numeric
      Partial pressure of the gas [atm]

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    Returns
    -------

    C : numeric
      Concentration [mol/m^3]
    """
    gas = check_gas(gas)
    Geq = equilibrium_concentration(SP, pt, gas)
    K0 = Geq / (gas_mole_fraction(gas) * (1.0 - vapor_pressure(SP, pt)))  # mol/m^3/atm
    return K0 * pgas


def diffusivity(SP, pt, gas):
    """
    Compute the molecular diffusivity of a gas in seawater.

    Arrhenius fits of Jahne et al. (1987) and Ferrell and Himmelblau
    (1967), reduced by 4.9 % at a salinity of 35.5.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Temperature [°C]

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    Returns
    -------

    D : numeric
      Diffusivity [m^2/s]
    """
    coef = gas_coefficients[check_gas(gas)]["diffusivity"]
    D = coef["A"] * np.exp(-coef["Ea"] / (R_diff * (pt + 273.15)))
    return D * (1.0 - 0.049 * SP / 35.5)


def kinematic_viscosity(SP, pt):
    """Kinematic viscosity of seawater [m^2/s], fit to Knauss (1978) Table II-8."""
    return 1.0e-4 * (17.91 - 0.5381 * pt + 0.00694 * pt**2 + 0.02305 * SP) / sw.dens0(SP, pt)


def schmidt_number(SP, pt, gas):
    """
    Compute the water-side Schmidt number of a gas.

    Parameters
    ----------

    SP : numeric
      Practical salinity [PSS]

    pt : numeric
      Temperature [°C]

    gas : string
      Gas code (He, Ne, Ar, Kr, Xe, N2, or O2)

    Returns
    -------

    ScW : numeric
      Schmidt number
    """
    return kinematic_viscosity(SP, pt) / diffusivity(SP, pt, gas)


logger.debug("loaded gas coefficients for %s", ", ".join(supported_gases))
