import numpy as np
import pytest
import xarray as xr

import ocean_gas_lab as ogl


def test_flux_dataset_emerson19():
    u10 = np.array([5.0, 10.0, 15.0])
    ds = ogl.flux_dataset('emerson19', gas='ar', u10=u10, SP=35.0, pt=10.0, C=0.0141)

    assert isinstance(ds, xr.Dataset)
    assert ds.sizes['nobs'] == 3
    assert ds.attrs['gas'] == 'Ar'
    assert ds.Fd.attrs['units'] == 'mol/m^2/s'
    assert ds.Ks.attrs['units'] == 'm/s'

    np.testing.assert_allclose(ds.Ft, ds.Fd + ds.Fp + ds.Fc)
    np.testing.assert_array_equal(
        ds.Ks, ogl.e19_transfer_velocities('Ar', u10, 35.0, 10.0).Ks
    )


def test_flux_dataset_liang13_scalar():
    ds = ogl.flux_dataset(
        'liang13', Cw=0.014, Ca=0.0092, u10=12.0, SP=35.0, pt=10.0, gas='Ar'
    )
    assert set(ds.data_vars) == {'Fd', 'Fc', 'Fp', 'Deq', 'Ks', 'Ft'}
    assert ds.Fd.dims == ()


def test_flux_dataset_unknown_variant():
    with pytest.raises(ValueError):
        ogl.flux_dataset('nightingale00', gas='Ar', u10=5.0, SP=35.0, pt=10.0)


def test_total_flux():
    np.testing.assert_equal(ogl.total_flux(1.0, -2.0, 0.5), -0.5)
