r"""QED 单电子径向积分
======================

本模块实现局域 QED 修正所需的径向矩阵元。所有势均为单电子势能（Hartree），
矩阵元按

.. math::

    \langle a | V | b \rangle = \int_0^\infty \left(P_a P_b + Q_a Q_b\right) V(r)\,dr

计算（磁形状因子项为大小分量交叉项）。约化 Compton 波长 :math:`\lambda_C = \alpha`。

参数积分 :math:`\int_1^\infty dt\,(\cdots)` 经代换 :math:`t = 1/u` 化到 :math:`u\in(0,1]`，
在 [0, 1] 上的 Gauss-Legendre 网格（默认 7 点）上求积。

References
----------
.. [FlambaumGinges] Flambaum, V. V. & Ginges, J. S. M. (2005)
   "Radiative potential and calculations of QED radiative corrections to energy levels
   and electromagnetic amplitudes in many-electron atoms", Phys. Rev. A 72, 052115
.. [Shabaev2013] Shabaev, V. M., Tupitsyn, I. I. & Yerokhin, V. A. (2013)
   "Model operator approach to the Lamb shift calculations in relativistic
   many-electron atoms", Phys. Rev. A 88, 012513
"""

from __future__ import annotations

import numpy as np

from .constants import compton_wavelength
from .grid import GaussLegendreGrid, RadialGrid
from .nuclear import NuclearModel
from .potential import RadialPotential
from .subshell import Orbital

__all__ = [
    "qed_damped_overlap",
    "uehling_kernel",
    "qed_uehling_simple",
    "qed_low_frequency",
    "qed_wichmann_kroll_simple",
    "qed_electric_form_factor",
    "qed_magnetic_form_factor",
]


def _check_pair(a: Orbital, b: Orbital, grid: RadialGrid) -> None:
    if a.P.shape != grid.r.shape or b.P.shape != grid.r.shape:
        raise ValueError(
            f"轨道与网格长度不一致: a={a.P.shape}, b={b.P.shape}, grid={grid.r.shape}"
        )


def _diagonal_density(a: Orbital, b: Orbital) -> np.ndarray:
    return a.P * b.P + a.Q * b.Q


def _t_integral(r: np.ndarray, qgrid: GaussLegendreGrid, alpha: float, weight) -> np.ndarray:
    r"""计算 :math:`\int_0^1 du\, g(u)\, e^{-2r/(\lambda_C u)}`，``weight`` 给出 :math:`g(u)`。"""
    u = qgrid.t
    lam = compton_wavelength(alpha)
    expo = np.exp(-2.0 * np.outer(r, 1.0 / u) / lam)
    return expo @ (qgrid.wt * weight(u))


def qed_damped_overlap(alpha: float, a: Orbital, b: Orbital, grid: RadialGrid) -> float:
    r"""Compton 波长阻尼的重叠积分。

    .. math::
        \int_0^\infty \left(P_a P_b + Q_a Q_b\right) e^{-r/\lambda_C}\,dr

    该积分衡量轨道在 :math:`r \lesssim \lambda_C` 区域的权重，是自能模型算子
    从类氢离子向多电子原子换算的依据。
    """
    _check_pair(a, b, grid)
    damping = np.exp(-grid.r / compton_wavelength(alpha))
    return grid.integrate(_diagonal_density(a, b) * damping)


def uehling_kernel(r: np.ndarray, alpha: float, qgrid: GaussLegendreGrid) -> np.ndarray:
    r"""Uehling 势的参数积分

    .. math::
        K_U(r) = \int_1^\infty dt\, e^{-2rt/\lambda_C}\sqrt{t^2-1}
        \left(\frac{1}{t^2} + \frac{1}{2t^4}\right)
        = \int_0^1 du\, e^{-2r/(\lambda_C u)} \frac{\sqrt{1-u^2}\,(1+u^2/2)}{u}.
    """
    return _t_integral(r, qgrid, alpha, lambda u: np.sqrt(1.0 - u * u) * (1.0 + 0.5 * u * u) / u)


def qed_uehling_simple(
    a: Orbital,
    b: Orbital,
    pot: RadialPotential,
    grid: RadialGrid,
    qgrid: GaussLegendreGrid,
    alpha: float,
) -> float:
    r"""Uehling 真空极化矩阵元。

    以势的有效电荷 :math:`Z(r)` 作为局域源电荷：

    .. math::
        V_U(r) = -\frac{2\alpha}{3\pi}\,\frac{Z(r)}{r}\,K_U(r).
    """
    _check_pair(a, b, grid)
    r_safe = np.maximum(grid.r, 1e-12)
    vu = -2.0 * alpha / (3.0 * np.pi) * pot.Zr / r_safe * uehling_kernel(grid.r, alpha, qgrid)
    return grid.integrate(_diagonal_density(a, b) * vu)


def qed_low_frequency(
    a: Orbital, b: Orbital, nm: NuclearModel, grid: RadialGrid, alpha: float
) -> float:
    r"""Flambaum-Ginges 低频自能势的矩阵元。

    .. math::
        V_l(r) = B(Z)\, Z^4 \alpha^3\, e^{-Zr},\qquad B(Z) = 0.074 + 0.035\, Z\alpha.
    """
    _check_pair(a, b, grid)
    Z = nm.Z
    B = 0.074 + 0.035 * Z * alpha
    vl = B * Z**4 * alpha**3 * np.exp(-Z * grid.r)
    return grid.integrate(_diagonal_density(a, b) * vl)


def qed_wichmann_kroll_simple(
    a: Orbital, b: Orbital, nm: NuclearModel, grid: RadialGrid, alpha: float
) -> float:
    r"""近似 Wichmann-Kroll 真空极化势的矩阵元。

    .. math::
        V_{WK}(r) = \frac{2\alpha}{3\pi}\, 0.092\,(\alpha Z)^2\, \frac{Z}{r}\,
        \frac{1}{1 + (1.62\, r/\lambda_C)^4}

    符号与 Uehling 项相反。
    """
    _check_pair(a, b, grid)
    Z = nm.Z
    r_safe = np.maximum(grid.r, 1e-12)
    lam = compton_wavelength(alpha)
    vwk = (
        2.0 * alpha / (3.0 * np.pi) * 0.092 * (alpha * Z) ** 2
        * Z / r_safe / (1.0 + (1.62 * grid.r / lam) ** 4)
    )
    return grid.integrate(_diagonal_density(a, b) * vwk)


def _electric_form_factor_kernel(r: np.ndarray, Z: float, alpha: float, qgrid: GaussLegendreGrid) -> np.ndarray:
    log_term = 4.0 * np.log(1.0 / (alpha * Z) + 0.5)

    def weight(u):
        # t = 1/u: 1/t^2 = u^2, ln(t^2 - 1) = ln(1 - u^2) - 2 ln u
        t2inv = u * u
        bracket = (1.0 - 0.5 * t2inv) * (np.log(1.0 - t2inv) - 2.0 * np.log(u) + log_term) - 1.5 + t2inv
        return bracket / (u * np.sqrt(1.0 - t2inv))

    return _t_integral(r, qgrid, alpha, weight)


def qed_electric_form_factor(
    a: Orbital,
    b: Orbital,
    nm: NuclearModel,
    grid: RadialGrid,
    qgrid: GaussLegendreGrid,
    alpha: float,
) -> float:
    r"""Flambaum-Ginges 高频电形状因子势的矩阵元。

    .. math::
        V_f(r) = A(Z, r)\,\frac{\alpha}{\pi}\,\frac{Z}{r}\int_1^\infty \frac{dt}{\sqrt{t^2-1}}
        \left[\left(1-\frac{1}{2t^2}\right)\left(\ln(t^2-1) + 4\ln\left(\frac{1}{Z\alpha}+\frac12\right)\right)
        - \frac32 + \frac{1}{t^2}\right] e^{-2rt/\lambda_C}

    其中 :math:`A(Z,r) = (1.071 - 1.976x^2 - 2.128x^3 + 0.169x^4)\, r/(r + 0.07(Z\alpha)^2\lambda_C)`，
    :math:`x = (Z - 80)\alpha`。
    """
    _check_pair(a, b, grid)
    Z = nm.Z
    lam = compton_wavelength(alpha)
    x = (Z - 80.0) * alpha
    r = grid.r
    r_safe = np.maximum(r, 1e-12)
    A = (1.071 - 1.976 * x**2 - 2.128 * x**3 + 0.169 * x**4) * r / (r + 0.07 * (Z * alpha) ** 2 * lam)
    vf = A * alpha / np.pi * Z / r_safe * _electric_form_factor_kernel(r, Z, alpha, qgrid)
    return grid.integrate(_diagonal_density(a, b) * vf)


def qed_magnetic_form_factor(
    a: Orbital,
    b: Orbital,
    nm: NuclearModel,
    grid: RadialGrid,
    qgrid: GaussLegendreGrid,
    alpha: float,
) -> float:
    r"""Flambaum-Ginges 磁形状因子（反常磁矩）项的矩阵元。

    .. math::
        \Phi_g(r) = \frac{Z}{r}\left(\int_1^\infty dt\,
        \frac{e^{-2rt/\lambda_C}}{t^2\sqrt{t^2-1}} - 1\right),\qquad
        \langle a|h_g|b\rangle = \frac{\alpha\lambda_C}{4\pi}\int \Phi_g'(r)
        \left(P_a Q_b + Q_a P_b\right) dr.
    """
    _check_pair(a, b, grid)
    lam = compton_wavelength(alpha)
    r_safe = np.maximum(grid.r, 1e-12)
    kg = _t_integral(grid.r, qgrid, alpha, lambda u: u / np.sqrt(1.0 - u * u))
    phi = nm.Z / r_safe * (kg - 1.0)
    dphi = np.gradient(phi, grid.r)
    cross = a.P * b.Q + a.Q * b.P
    return alpha * lam / (4.0 * np.pi) * grid.integrate(dphi * cross)
