from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .grid import RadialGrid, trapezoid_weights
from .nuclear import NuclearModel, nuclear_zr
from .subshell import Orbital

__all__ = [
    "RadialPotential",
    "v_hartree",
    "nuclear_potential",
    "screened_potential",
]


@dataclass(frozen=True, eq=False)
class RadialPotential:
    r"""局域径向势，以有效电荷 :math:`Z(r) = -r V(r)` 表示。

    Attributes
    ----------
    name : str
        势的名称（如 ``"nuclear"``、``"Hartree"``）。
    Zr : numpy.ndarray
        有效电荷 :math:`Z(r_i)`。
    grid : RadialGrid
        所在径向网格。
    """

    name: str
    Zr: np.ndarray
    grid: RadialGrid

    def __post_init__(self):
        if self.Zr.shape != self.grid.r.shape:
            raise ValueError("Zr 与网格形状不一致")

    @property
    def V(self) -> np.ndarray:
        """势能 :math:`V(r) = -Z(r)/r`（Hartree）。"""
        return -self.Zr / np.maximum(self.grid.r, 1e-12)


def v_hartree(rho: np.ndarray, r: np.ndarray, w: np.ndarray | None = None) -> np.ndarray:
    r"""由径向电荷密度 :math:`\rho(r)` 计算 Hartree 势 :math:`v_H(r)`。

    :math:`\rho` 已包含体积因子，:math:`\int \rho\,dr` 为电子数：

    .. math::
        v_H(r) = \frac{1}{r}\int_0^r \rho(r')\,dr' + \int_r^{\infty} \frac{\rho(r')}{r'}\,dr'.

    Parameters
    ----------
    rho : numpy.ndarray
        径向电荷密度 :math:`\sum_a q_a (P_a^2 + Q_a^2)`。
    r : numpy.ndarray
        径向网格，需严格单调递增。
    w : numpy.ndarray, optional
        梯形积分权重；若为 ``None`` 则内部计算一次。

    Notes
    -----
    - 采用向前/向后累积，:math:`r\to r_\max` 时 :math:`v_H \approx N/r`。
    - 在极小 :math:`r` 处对 :math:`1/r` 做安全下界裁剪。
    """
    if rho.shape != r.shape:
        raise ValueError("rho 与 r 的形状必须一致")
    if np.any(np.diff(r) <= 0):
        raise ValueError("r 必须严格单调递增")
    if w is None:
        w = trapezoid_weights(r)

    r_safe = np.maximum(r, 1e-12)
    inner = np.cumsum(rho * w)
    outer = np.cumsum((rho / r_safe * w)[::-1])[::-1]
    return inner / r_safe + outer


def nuclear_potential(nm: NuclearModel, grid: RadialGrid) -> RadialPotential:
    """纯核势（裸离子）。"""
    return RadialPotential("nuclear", nuclear_zr(nm, grid.r), grid)


def screened_potential(
    nm: NuclearModel,
    grid: RadialGrid,
    orbitals: Sequence[Orbital],
    occupations: Sequence[float],
) -> RadialPotential:
    r"""核势加占据轨道的 Hartree 屏蔽：:math:`Z(r) = Z_{\rm nuc}(r) - r\,v_H(r)`。

    Parameters
    ----------
    orbitals : sequence of Orbital
        占据轨道（与 ``grid`` 同形状）。
    occupations : sequence of float
        各轨道占据数 :math:`q_a`。
    """
    if len(orbitals) != len(occupations):
        raise ValueError("orbitals 与 occupations 长度不一致")
    rho = np.zeros_like(grid.r)
    for orb, q in zip(orbitals, occupations):
        rho += q * orb.density()
    vh = v_hartree(rho, grid.r, grid.w)
    return RadialPotential("Hartree", nuclear_zr(nm, grid.r) - grid.r * vh, grid)
