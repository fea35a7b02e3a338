from __future__ import annotations

import enum
import re
from dataclasses import dataclass

import numpy as np
from sympy import Rational

from .errors import UnsupportedKappaError
from .grid import RadialGrid

__all__ = [
    "Subshell",
    "Orbital",
    "KappaClass",
    "kappa_to_l_j",
    "normalize_orbital",
]

_L_SYMBOLS = "spdfghiklmnoqrtuv"
_LABEL_RE = re.compile(r"^\s*(\d+)([a-z])_(\d+)/2\s*$")


def kappa_to_l_j(kappa: int) -> tuple[int, Rational]:
    r"""由相对论角量子数 :math:`\kappa` 求 :math:`(\ell, j)`。

    :math:`j = |\kappa| - 1/2`；:math:`\kappa < 0` 时 :math:`\ell = -\kappa - 1`，
    否则 :math:`\ell = \kappa`。:math:`j` 以 ``sympy.Rational`` 精确表示。
    """
    if kappa == 0:
        raise ValueError("kappa = 0 不是合法的相对论角量子数")
    l = -kappa - 1 if kappa < 0 else kappa
    return l, Rational(2 * abs(kappa) - 1, 2)


@dataclass(frozen=True)
class Subshell:
    r"""相对论子壳层 :math:`(n, \kappa)`。

    Attributes
    ----------
    n : int
        主量子数（>= 1）。
    kappa : int
        相对论角量子数（非零，且 :math:`\ell < n`）。
    """

    n: int
    kappa: int

    def __post_init__(self):
        if self.n < 1:
            raise ValueError(f"主量子数 n 必须 >= 1，当前值: {self.n}")
        l, _ = kappa_to_l_j(self.kappa)
        if l >= self.n:
            raise ValueError(f"子壳层 n={self.n}, kappa={self.kappa} 不满足 l < n")

    @property
    def l(self) -> int:
        return kappa_to_l_j(self.kappa)[0]

    @property
    def j(self) -> Rational:
        return kappa_to_l_j(self.kappa)[1]

    @property
    def label(self) -> str:
        """人类可读标签，例如 ``"2p_3/2"``。"""
        return f"{self.n}{_L_SYMBOLS[self.l]}_{2 * abs(self.kappa) - 1}/2"

    @classmethod
    def from_label(cls, label: str) -> "Subshell":
        """由 ``"1s_1/2"`` 形式的标签构造子壳层。"""
        m = _LABEL_RE.match(label)
        if m is None:
            raise ValueError(f"无法解析子壳层标签: {label!r}")
        n = int(m.group(1))
        l = _L_SYMBOLS.index(m.group(2))
        j = Rational(int(m.group(3)), 2)
        if j == l + Rational(1, 2):
            kappa = -(l + 1)
        elif l > 0 and j == l - Rational(1, 2):
            kappa = l
        else:
            raise ValueError(f"子壳层标签中的 j 与 l 不匹配: {label!r}")
        return cls(n, kappa)

    def __str__(self) -> str:
        return self.label


class KappaClass(enum.IntEnum):
    """F(αZ) 表格模型支持的五个角动量类别。

    枚举值即表格列号（1 起），:attr:`effective_n` 为该类别最低子壳层的主量子数。
    """

    S1_2 = 1
    P1_2 = 2
    P3_2 = 3
    D3_2 = 4
    D5_2 = 5

    @classmethod
    def from_kappa(cls, kappa: int) -> "KappaClass":
        try:
            return _KAPPA_CLASSES[kappa]
        except KeyError:
            raise UnsupportedKappaError(kappa) from None

    @property
    def kappa(self) -> int:
        return _CLASS_DATA[self][0]

    @property
    def effective_n(self) -> int:
        return _CLASS_DATA[self][1]

    @property
    def column(self) -> int:
        """0 起的表格列索引。"""
        return int(self) - 1

    @property
    def reference_subshell(self) -> Subshell:
        """用于氢样参考积分的最低子壳层（1s_1/2, 2p_1/2, ...）。"""
        return Subshell(self.effective_n, self.kappa)


# 类别 -> (kappa, 有效主量子数)
_CLASS_DATA = {
    KappaClass.S1_2: (-1, 1),
    KappaClass.P1_2: (1, 2),
    KappaClass.P3_2: (-2, 2),
    KappaClass.D3_2: (2, 3),
    KappaClass.D5_2: (-3, 3),
}
_KAPPA_CLASSES = {kappa: cls for cls, (kappa, _) in _CLASS_DATA.items()}


@dataclass(frozen=True, eq=False)
class Orbital:
    r"""径向 Dirac 轨道。

    Attributes
    ----------
    subshell : Subshell
        子壳层 :math:`(n, \kappa)`。
    P : numpy.ndarray
        大分量 :math:`P(r) = r\,g(r)`。
    Q : numpy.ndarray
        小分量 :math:`Q(r) = r\,f(r)`。
    energy : float
        单电子能量（Hartree，不含静能）。

    Notes
    -----
    归一化约定：:math:`\int (P^2 + Q^2)\,dr = 1`。
    """

    subshell: Subshell
    P: np.ndarray
    Q: np.ndarray
    energy: float = 0.0

    def __post_init__(self):
        if self.P.shape != self.Q.shape:
            raise ValueError("P 与 Q 的形状必须一致")

    def density(self) -> np.ndarray:
        r"""径向电荷密度 :math:`P^2 + Q^2`。"""
        return self.P * self.P + self.Q * self.Q


def normalize_orbital(orbital: Orbital, grid: RadialGrid) -> Orbital:
    r"""返回满足 :math:`\int (P^2+Q^2)\,dr = 1` 的新轨道。"""
    if orbital.P.shape != grid.r.shape:
        raise ValueError("轨道与网格形状不一致")
    norm2 = grid.integrate(orbital.density())
    norm = float(np.sqrt(max(norm2, 1e-300)))
    return Orbital(orbital.subshell, orbital.P / norm, orbital.Q / norm, orbital.energy)
