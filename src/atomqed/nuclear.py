"""核模型

提供点核与均匀带电球两种核电荷分布，用于构造核势 :math:`Z(r) = -r V_{\\rm nuc}(r)`。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import BOHR_RADIUS_FM, RMS_RADIUS_A, RMS_RADIUS_B

__all__ = ["NuclearModel", "nuclear_zr"]

_MODELS = ("point", "uniform")


@dataclass(frozen=True)
class NuclearModel:
    r"""核模型参数。

    Attributes
    ----------
    Z : float
        核电荷数。
    model : {"point", "uniform"}
        核电荷分布模型。
    mass_number : float | None
        质量数 :math:`A`；``model="uniform"`` 且未给出 ``radius`` 时必需。
    radius : float | None
        均匀球半径（fm）；缺省时由 :math:`r_{\rm rms} = 0.836 A^{1/3} + 0.570` fm
        与 :math:`R = \sqrt{5/3}\, r_{\rm rms}` 给出。
    """

    Z: float
    model: str = "point"
    mass_number: float | None = None
    radius: float | None = None

    def __post_init__(self):
        if self.Z <= 0:
            raise ValueError(f"核电荷 Z 必须为正，当前值: {self.Z}")
        if self.model not in _MODELS:
            raise ValueError(f"不支持的核模型: {self.model!r}，可选 {_MODELS}")
        if self.model == "uniform" and self.radius is None and self.mass_number is None:
            raise ValueError("均匀球核模型需要 mass_number 或 radius")

    @property
    def rms_radius_fm(self) -> float:
        """核电荷均方根半径（fm）；点核为 0。"""
        if self.model == "point":
            return 0.0
        if self.radius is not None:
            return float(self.radius) / np.sqrt(5.0 / 3.0)
        return RMS_RADIUS_A * float(self.mass_number) ** (1.0 / 3.0) + RMS_RADIUS_B

    @property
    def sphere_radius(self) -> float:
        """均匀球半径（Bohr）；点核为 0。"""
        if self.model == "point":
            return 0.0
        if self.radius is not None:
            return float(self.radius) / BOHR_RADIUS_FM
        return np.sqrt(5.0 / 3.0) * self.rms_radius_fm / BOHR_RADIUS_FM


def nuclear_zr(nm: NuclearModel, r: np.ndarray) -> np.ndarray:
    r"""核势的有效电荷 :math:`Z(r) = -r V_{\rm nuc}(r)`。

    点核：:math:`Z(r) = Z`；均匀球（半径 :math:`R`）：

    .. math::
        Z(r) = \frac{Z r}{2R}\left(3 - \frac{r^2}{R^2}\right),\quad r < R.
    """
    zr = np.full_like(r, float(nm.Z), dtype=float)
    if nm.model == "uniform":
        R = nm.sphere_radius
        inside = r < R
        x = r[inside] / R
        zr[inside] = 0.5 * nm.Z * x * (3.0 - x * x)
    return zr
