"""atomqed 包
=============

原子与离子的局域单电子 QED 修正（真空极化与自能）。

- 径向网格与 Gauss-Legendre 求积网格
- 相对论子壳层、Dirac 径向轨道与类氢 Dirac-Coulomb 解
- 核模型与局域径向势
- QED 径向积分（Uehling、低频自能、Wichmann-Kroll、形状因子、阻尼重叠积分）
- Sydney / Petersburg 两种局域 QED 模型与 F(αZ) 表格插值

注：文档与注释使用中文，Docstring 采用 Sphinx + NumPy 风格，公式使用 ``:math:`` 标记。
"""

from atomqed.errors import (
    AtomQedError,
    CacheNotInitializedError,
    QedModelError,
    TableRangeError,
    UnsupportedKappaError,
)
from atomqed.grid import RadialGrid, gauss_legendre_grid
from atomqed.hydrogenic import dirac_energy, radial_orbital
from atomqed.nuclear import NuclearModel
from atomqed.potential import RadialPotential, nuclear_potential, screened_potential
from atomqed.qed import (
    qed_local,
    refresh_hydrogenic_reference,
    self_energy_volotka,
    tabulate_fze_over_hydrogenic,
)
from atomqed.settings import QedContext, QedModel, QedSettings, QedTerms
from atomqed.subshell import KappaClass, Orbital, Subshell

__all__ = [
    "AtomQedError",
    "CacheNotInitializedError",
    "QedModelError",
    "TableRangeError",
    "UnsupportedKappaError",
    "RadialGrid",
    "gauss_legendre_grid",
    "dirac_energy",
    "radial_orbital",
    "NuclearModel",
    "RadialPotential",
    "nuclear_potential",
    "screened_potential",
    "qed_local",
    "refresh_hydrogenic_reference",
    "self_energy_volotka",
    "tabulate_fze_over_hydrogenic",
    "QedContext",
    "QedModel",
    "QedSettings",
    "QedTerms",
    "KappaClass",
    "Orbital",
    "Subshell",
]

__version__ = "0.1.0"
