import numpy as np


# gas constant (m^3 Pa K^-1 mol^-1)
R = 8.314

# Pascals per atm
atm2Pa = 1.01325e5

# cm in a meter, seconds in an hour
m2cm = 100.0
h2s = 3600.0

# air density (kg/m^3)
rhoa = 1.225

# COARE 3.0 parameters
lam = 13.3
A = 1.3
phi = 1.0
tkt = 0.01
hw = lam / A / phi
ha = lam

# air-side Schmidt number
ScA = 0.9

# bubble scaling factor from Emerson et al. 2019
bfact = 0.37


def drag_coefficient(u10):
    """
    Compute the neutral drag coefficient (Large and Pond, 1981).

    Parameters
    ----------

    u10 : numeric
      Wind speed at 10 m [m/s]

    Returns
    -------

    cd10 : numeric
      Drag coefficient [dimensionless]
    """
    u10 = np.asarray(u10, dtype=float)
    cd10 = 4.9e-4 + 6.5e-5 * u10
    cd10 = np.where(u10 <= 11.0, 0.0012, cd10)
    cd10 = np.where(u10 >= 20.0, 0.0018, cd10)
    return cd10


def friction_velocities(u10, cd10, rhow, rhoa=rhoa):
    """
    Compute air-side and water-side friction velocity.

    Parameters
    ----------

    u10 : numeric
      Wind speed at 10 m [m/s]

    cd10 : numeric
      Drag coefficient

    rhow : numeric
      Seawater density [kg/m^3]

    rhoa : numeric, optional
      Air density [kg/m^3]

    Returns
    -------

    ustar : numeric
      Air-side friction velocity [m/s]

    ustarw : numeric
      Water-side friction velocity [m/s]
    """
    ustar = u10 * np.sqrt(cd10)
    ustarw = ustar / np.sqrt(rhow / rhoa)
    return ustar, ustarw


def transfer_resistances(ScW, cd10, rhow, rhoa=rhoa):
    """
    Compute water-side and air-side resistance to diffusive transfer
    following COARE 3.0 as used by Liang et al. (2013).

    Parameters
    ----------

    ScW : numeric
      Water-side Schmidt number

    cd10 : numeric
      Drag coefficient

    rhow : numeric
      Seawater density [kg/m^3]

    rhoa : numeric, optional
      Air density [kg/m^3]

    Returns
    -------

    rwt : numeric
      Water-side resistance

    rat : numeric
      Air-side resistance
    """
    rwt = np.sqrt(rhow / rhoa) * (hw * np.sqrt(ScW) + np.log(0.5 / tkt) / 0.4)
    rat = ha * np.sqrt(ScA) + 1.0 / np.sqrt(cd10) - 5.0 + 0.5 * np.log(ScA) / 0.4
    return rwt, rat


def diffusive_transfer_velocity(ustar, rwt, rat, Ceq, pt):
    """
    Compute the diffusive gas transfer velocity (L13 eqn 9).

    Parameters
    ----------

    ustar : numeric
      Air-side friction velocity [m/s]

    rwt, rat : numeric
      Water-side and air-side resistance

    Ceq : numeric
      Equilibrium gas concentration [mol/m^3]

    pt : numeric
      Sea surface temperature [°C]

    Returns
    -------

    Ks : numeric
      Diffusive gas transfer velocity [m/s]
    """
    alc = (Ceq / atm2Pa) * R * (pt + 273.15)
    return ustar / (rwt + rat * alc)


def bubble_transfer_velocity(ustarw, ScW, scale=1.0):
    """
    Compute the transfer velocity of partially collapsing bubbles
    (L13 eqn 14), converted from cm/hr to m/s.

    Parameters
    ----------

    ustarw : numeric
      Water-side friction velocity [m/s]

    ScW : numeric
      Water-side Schmidt number

    scale : float, optional
      Bubble scaling factor; use ``bfact`` for Emerson et al. (2019)

    Returns
    -------

    Kb : numeric
      Bubble transfer velocity [m/s]
    """
    return scale * 1.98e6 * ustarw**2.76 * (ScW / 660.0) ** (-2.0 / 3.0) / (m2cm * h2s)


def collapsing_bubble_coefficient(ustarw, scale=1.0):
    """Injection coefficient of fully collapsing bubbles (L13 eqn 15) [mol/m^2/s]."""
    return scale * 5.56 * ustarw**3.86


def overpressure(ustarw):
    """Fractional bubble overpressure as a function of ustarw (L13 eqn 16)."""
    return 1.5244 * ustarw**1.06
