import numpy as np
import pytest

import ocean_gas_lab.gas_properties as gp
from ocean_gas_lab import UnsupportedGasError


def test_check_gas():
    assert gp.check_gas('ar') == 'Ar'
    assert gp.check_gas('N2') == 'N2'
    assert set(gp.supported_gases) == {'He', 'Ne', 'Ar', 'Kr', 'Xe', 'N2', 'O2'}

    with pytest.raises(UnsupportedGasError):
        gp.check_gas('CO2')

    with pytest.raises(ValueError):
        gp.gas_mole_fraction(None)


def test_gas_mole_fraction():
    np.testing.assert_equal(gp.gas_mole_fraction('Ar'), 9.332e-3)
    total = sum(gp.gas_mole_fraction(g) for g in gp.supported_gases)
    # remainder is mostly CO2
    np.testing.assert_allclose(total, 1.0, rtol=1e-3)


def test_vapor_pressure():
    # pure water at 10°C: 1.2281 kPa
    np.testing.assert_allclose(gp.vapor_pressure(0.0, 10.0), 1.2281 / 101.32501, rtol=1e-3)

    # salt lowers vapor pressure
    assert gp.vapor_pressure(35.0, 10.0) < gp.vapor_pressure(0.0, 10.0)


def test_equilibrium_concentration_gravimetric():
    np.testing.assert_allclose(
        gp.equilibrium_concentration_gravimetric(35.0, 10.0, 'Ar'), 13.4621e-6, rtol=1e-4
    )
    np.testing.assert_allclose(
        gp.equilibrium_concentration_gravimetric(35.0, 10.0, 'N2'), 500.9e-6, rtol=2e-3
    )
    np.testing.assert_allclose(
        gp.equilibrium_concentration_gravimetric(35.0, 10.0, 'O2'), 274.6e-6, rtol=2e-3
    )


def test_equilibrium_concentration_all_gases():
    pt = np.array([0.0, 10.0, 25.0])
    for gas in gp.supported_gases:
        Geq = gp.equilibrium_concentration(35.0, pt, gas)
        assert Geq.shape == (3,)
        assert np.all(Geq > 0)
        # solubility decreases with warming
        assert np.all(np.diff(Geq) < 0), gas


def test_solubility_concentration():
    SP, pt = 35.0, 10.0
    pAr = gp.gas_mole_fraction('Ar') * (1.0 - gp.vapor_pressure(SP, pt))
    np.testing.assert_allclose(
        gp.solubility_concentration(SP, pt, pAr, 'Ar'),
        gp.equilibrium_concentration(SP, pt, 'Ar'),
    )
    np.testing.assert_allclose(
        gp.solubility_concentration(SP, pt, 2 * pAr, 'Ar'),
        2 * gp.equilibrium_concentration(SP, pt, 'Ar'),
    )


def test_seawater_density():
    np.testing.assert_allclose(gp.seawater_density(35.0, 10.0), 1026.95, atol=0.1)


def test_schmidt_number():
    np.testing.assert_allclose(gp.schmidt_number(35.0, 10.0, 'Ar'), 769.5, rtol=2e-3)

    # lighter gases diffuse faster
    assert gp.schmidt_number(35.0, 10.0, 'He') < gp.schmidt_number(35.0, 10.0, 'Xe')
