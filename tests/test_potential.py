import numpy as np
import pytest

from atomqed.grid import RadialGrid
from atomqed.hydrogenic import radial_orbital
from atomqed.nuclear import NuclearModel, nuclear_zr
from atomqed.potential import nuclear_potential, screened_potential, v_hartree
from atomqed.subshell import Subshell


@pytest.mark.quick
def test_nuclear_model_validation():
    with pytest.raises(ValueError):
        NuclearModel(0.0)
    with pytest.raises(ValueError):
        NuclearModel(26.0, model="Fermi")
    with pytest.raises(ValueError):
        NuclearModel(26.0, model="uniform")


@pytest.mark.quick
def test_uniform_sphere_radius():
    nm = NuclearModel(82.0, model="uniform", mass_number=208.0)
    r_rms = 0.836 * 208.0 ** (1.0 / 3.0) + 0.570
    assert np.isclose(nm.rms_radius_fm, r_rms)
    assert np.isclose(nm.sphere_radius, np.sqrt(5.0 / 3.0) * r_rms / 52917.721090380)
    assert NuclearModel(82.0).sphere_radius == 0.0


@pytest.mark.quick
def test_nuclear_zr_point_and_uniform():
    grid = RadialGrid.log(500, 1e-7, 10.0)
    point = nuclear_zr(NuclearModel(50.0), grid.r)
    assert np.all(point == 50.0)

    nm = NuclearModel(50.0, model="uniform", mass_number=120.0)
    zr = nuclear_zr(nm, grid.r)
    R = nm.sphere_radius
    assert np.all(zr[grid.r < R] < 50.0)
    assert np.allclose(zr[grid.r >= R], 50.0)


@pytest.mark.quick
def test_v_hartree_asymptotic_charge():
    grid = RadialGrid.log(3000, 1e-6, 50.0)
    rho = 4.0 * grid.r**2 * np.exp(-2.0 * grid.r)  # 氢 1s，∫ρ dr = 1
    vh = v_hartree(rho, grid.r, grid.w)
    assert np.isclose(vh[-1] * grid.r[-1], 1.0, atol=1e-3)
    # 原点处 v_H(0) = <1/r> = 1
    assert np.isclose(vh[0], 1.0, atol=1e-3)


def test_screened_potential_charge():
    grid = RadialGrid.log(3000, 1e-7, 40.0)
    nm = NuclearModel(10.0)
    orb = radial_orbital(Subshell(1, -1), 10.0, grid)
    pot = screened_potential(nm, grid, [orb], [2.0])
    assert pot.name == "Hartree"
    assert np.isclose(pot.Zr[0], 10.0, atol=1e-3)
    assert np.isclose(pot.Zr[-1], 8.0, atol=1e-6)
    assert np.allclose(nuclear_potential(nm, grid).V * grid.r, -10.0)


@pytest.mark.quick
def test_screened_potential_length_mismatch():
    grid = RadialGrid.log(100, 1e-5, 10.0)
    with pytest.raises(ValueError):
        screened_potential(NuclearModel(10.0), grid, [], [1.0])
