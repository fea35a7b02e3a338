"""类氢 Dirac-Coulomb 轨道测试"""

import numpy as np
import pytest

from atomqed.constants import ALPHA
from atomqed.grid import RadialGrid
from atomqed.hydrogenic import dirac_energy, radial_orbital
from atomqed.subshell import Subshell


@pytest.fixture(scope="module")
def grid():
    return RadialGrid.log(4000, 1e-7, 60.0)


@pytest.mark.quick
def test_dirac_energy_nonrelativistic_limit():
    # 氢原子 1s：-0.5 Ha，相对论修正约 -6.7e-6 Ha
    e1s = dirac_energy(1, -1, 1.0)
    assert np.isclose(e1s, -0.5, atol=1e-5)
    assert e1s < -0.5


@pytest.mark.quick
def test_dirac_energy_fine_structure_degeneracy():
    # Dirac-Coulomb 中 2s_1/2 与 2p_1/2 简并，2p_3/2 更高
    Z = 50.0
    e2s = dirac_energy(2, -1, Z)
    e2p1 = dirac_energy(2, 1, Z)
    e2p3 = dirac_energy(2, -2, Z)
    assert np.isclose(e2s, e2p1, rtol=1e-12)
    assert e2p3 > e2p1


@pytest.mark.quick
def test_dirac_energy_no_bound_state():
    with pytest.raises(ValueError, match="无束缚态"):
        dirac_energy(1, -1, 140.0)


@pytest.mark.parametrize("label", ["1s_1/2", "2s_1/2", "2p_1/2", "2p_3/2", "3d_3/2", "3d_5/2"])
def test_radial_orbital_normalized(grid, label):
    sh = Subshell.from_label(label)
    orb = radial_orbital(sh, 74.0, grid)
    assert orb.subshell == sh
    assert np.isclose(grid.integrate(orb.density()), 1.0, atol=1e-10)
    assert np.all(np.isfinite(orb.P)) and np.all(np.isfinite(orb.Q))
    assert np.isclose(orb.energy, dirac_energy(sh.n, sh.kappa, 74.0))


def test_radial_orbital_1s_signs(grid):
    orb = radial_orbital(Subshell(1, -1), 10.0, grid)
    assert np.all(orb.P[grid.r < 5.0] > 0)
    assert np.all(orb.Q[grid.r < 5.0] < 0)


def test_radial_orbital_2s_node_near_nonrelativistic(grid):
    # 非相对论 2s 节点 r = 2/Z
    Z = 5.0
    orb = radial_orbital(Subshell(2, -1), Z, grid)
    inner = grid.r < 10.0
    sign_change = np.where(np.diff(np.sign(orb.P[inner])) != 0)[0]
    assert sign_change.size == 1
    r_node = grid.r[sign_change[0]]
    assert np.isclose(r_node, 2.0 / Z, rtol=0.02)


@pytest.mark.parametrize("label", ["1s_1/2", "2p_1/2", "3d_5/2"])
def test_radial_orbital_satisfies_dirac_equation(label):
    r"""检验径向 Dirac 方程残差（原子单位）

    P' = -(κ/r) P + [(E - V)/c + 2c] Q,   Q' = (κ/r) Q - [(E - V)/c] P
    """
    Z = 30.0
    grid = RadialGrid.log(6000, 1e-5, 20.0)
    sh = Subshell.from_label(label)
    orb = radial_orbital(sh, Z, grid)
    c = 1.0 / ALPHA
    r = grid.r
    V = -Z / r
    dP = np.gradient(orb.P, r)
    dQ = np.gradient(orb.Q, r)
    res_P = dP + sh.kappa / r * orb.P - ((orb.energy - V) / c + 2.0 * c) * orb.Q
    res_Q = dQ - sh.kappa / r * orb.Q + (orb.energy - V) / c * orb.P
    interior = (r > 1e-3) & (r < 2.0)
    scale = np.max(np.abs(dP[interior]))
    assert np.max(np.abs(res_P[interior])) < 1e-3 * scale
    assert np.max(np.abs(res_Q[interior])) < 1e-3 * scale
