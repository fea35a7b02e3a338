from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = [
    "trapezoid_weights",
    "radial_grid_linear",
    "radial_grid_log",
    "RadialGrid",
    "GaussLegendreGrid",
    "gauss_legendre_grid",
]


def trapezoid_weights(r: np.ndarray) -> np.ndarray:
    r"""为给定单调递增的径向网格计算梯形积分权重。

    .. math::
        \int_{r_\min}^{r_\max} f(r)\,\mathrm{d}r \approx \sum_{i=0}^{N-1} w_i f(r_i)

    端点权重为半步长，内部点为左右间距的平均值。

    Parameters
    ----------
    r : numpy.ndarray
        单调递增的径向坐标数组，要求 :math:`r_i < r_{i+1}`。

    Returns
    -------
    w : numpy.ndarray
        梯形积分权重 :math:`(w_0, \dots, w_{N-1})`。
    """
    if r.ndim != 1:
        raise ValueError("r 必须是一维数组")
    if np.any(np.diff(r) <= 0):
        raise ValueError("r 必须严格单调递增")
    w = np.empty_like(r, dtype=float)
    if r.size == 1:
        w[0] = 0.0
        return w
    dr = np.diff(r)
    w[0] = 0.5 * dr[0]
    w[1:-1] = 0.5 * (dr[1:] + dr[:-1])
    w[-1] = 0.5 * dr[-1]
    return w


def radial_grid_linear(n: int, rmin: float, rmax: float) -> tuple[np.ndarray, np.ndarray]:
    r"""生成线性（等间隔）径向网格及其梯形积分权重。

    Parameters
    ----------
    n : int
        网格点数，要求 :math:`N\ge 2`。
    rmin, rmax : float
        径向上下限，要求 :math:`r_\max > r_\min \ge 0`。

    Returns
    -------
    r, w : numpy.ndarray
        网格坐标与梯形权重。
    """
    if n < 2:
        raise ValueError("n 必须 >= 2")
    if rmax <= rmin:
        raise ValueError("要求 rmax > rmin")
    r = np.linspace(rmin, rmax, n)
    return r, trapezoid_weights(r)


def radial_grid_log(n: int, rmin: float, rmax: float) -> tuple[np.ndarray, np.ndarray]:
    r"""生成对数（几何）径向网格及其梯形积分权重。

    .. math::
        r_i = r_\min\,\exp(i\,\Delta x),\ \ \Delta x = \frac{\ln r_\max - \ln r_\min}{N-1}.

    对数网格在核附近加密，适合高 Z 离子的内壳层轨道以及 :math:`\lambda_C = \alpha`
    尺度上的 QED 势。

    Parameters
    ----------
    n : int
        网格点数，要求 :math:`N\ge 2`。
    rmin : float
        径向下限，需严格大于 0。
    rmax : float
        径向上限。
    """
    if n < 2:
        raise ValueError("n 必须 >= 2")
    if rmin <= 0:
        raise ValueError("对数网格要求 rmin > 0")
    if rmax <= rmin:
        raise ValueError("要求 rmax > rmin")
    r = np.exp(np.linspace(np.log(rmin), np.log(rmax), n))
    return r, trapezoid_weights(r)


@dataclass(frozen=True, eq=False)
class RadialGrid:
    r"""径向网格 :math:`r_i` 及其积分权重 :math:`w_i`。

    Attributes
    ----------
    r : numpy.ndarray
        严格单调递增的径向坐标（Bohr）。
    w : numpy.ndarray
        梯形积分权重。
    """

    r: np.ndarray
    w: np.ndarray

    def __post_init__(self):
        if self.r.shape != self.w.shape:
            raise ValueError("r 与 w 的形状必须一致")

    @classmethod
    def log(cls, n: int = 800, rmin: float = 1e-6, rmax: float = 60.0) -> "RadialGrid":
        """对数网格（QED 计算的默认选择）。"""
        return cls(*radial_grid_log(n, rmin, rmax))

    @classmethod
    def linear(cls, n: int, rmin: float, rmax: float) -> "RadialGrid":
        return cls(*radial_grid_linear(n, rmin, rmax))

    @property
    def size(self) -> int:
        return int(self.r.size)

    def integrate(self, f: np.ndarray) -> float:
        r"""返回 :math:`\sum_i w_i f_i`。"""
        if f.shape != self.w.shape:
            raise ValueError("被积函数与网格形状不一致")
        return float(np.sum(self.w * f))


@dataclass(frozen=True, eq=False)
class GaussLegendreGrid:
    """区间 [0, 1] 上的 Gauss-Legendre 求积网格。"""

    name: str
    t: np.ndarray
    wt: np.ndarray

    @property
    def order(self) -> int:
        return int(self.t.size)


def gauss_legendre_grid(name: str, order: int = 7) -> GaussLegendreGrid:
    r"""生成 [0, 1] 上 ``order`` 点的 Gauss-Legendre 节点与权重。

    由 :func:`numpy.polynomial.legendre.leggauss` 的 [-1, 1] 节点线性映射：
    :math:`t = (x+1)/2`，:math:`w_t = w_x/2`。

    Parameters
    ----------
    name : str
        网格名称（仅用于标识，例如 ``"QED"``）。
    order : int
        求积阶数（>= 1）。
    """
    if order < 1:
        raise ValueError("order 必须 >= 1")
    x, wx = np.polynomial.legendre.leggauss(order)
    return GaussLegendreGrid(name=name, t=0.5 * (x + 1.0), wt=0.5 * wx)
