r"""局域单电子 QED 修正
======================

为多电子原子结构计算提供局域的单电子 QED 矩阵元 :math:`\langle a|h^{\rm QED}|b\rangle`：

- **Sydney 模型**：Uehling 真空极化 + Flambaum-Ginges 低频自能（可选 Wichmann-Kroll
  与电/磁形状因子项，见 :class:`~atomqed.settings.QedTerms`）。
- **Petersburg 模型**：Uehling 真空极化 + 基于 F(αZ) 表格的简化自能
  （:func:`self_energy_volotka`）。

Petersburg 自能按类氢结果标度：

.. math::

    \langle a|h^{\rm SE}|a\rangle = \frac{F(\alpha Z)}{\langle e^{-r/\lambda_C}\rangle_{\rm hyd}}
    \,\frac{\alpha}{\pi}\,\frac{(\alpha Z)^4}{n_{\rm eff}^3\,\alpha^2}\,
    \langle a|e^{-r/\lambda_C}|a\rangle

其中分母为同一 kappa 最低子壳层的类氢阻尼重叠积分，按 Z 缓存在
:class:`~atomqed.settings.QedContext` 中。
"""

from __future__ import annotations

import numpy as np

from .errors import CacheNotInitializedError, QedModelError
from .grid import GaussLegendreGrid, RadialGrid, gauss_legendre_grid
from .hydrogenic import radial_orbital
from .logging_config import get_logger
from .nuclear import NuclearModel
from .potential import RadialPotential
from .radial_integrals import (
    qed_damped_overlap,
    qed_electric_form_factor,
    qed_low_frequency,
    qed_magnetic_form_factor,
    qed_uehling_simple,
    qed_wichmann_kroll_simple,
)
from .refdata import fze_bucket, interpolate_fze
from .settings import HydrogenicReference, QedContext, QedModel
from .subshell import KappaClass, Orbital, Subshell

__all__ = [
    "refresh_hydrogenic_reference",
    "qed_local",
    "self_energy_volotka",
    "tabulate_fze_over_hydrogenic",
    "self_energy_function",
]

logger = get_logger(__name__)

# 自能表格模型适用的最大主量子数
_SE_MAX_N = 4


def refresh_hydrogenic_reference(context: QedContext, nm: NuclearModel, grid: RadialGrid) -> HydrogenicReference:
    """确保上下文缓存中存在 ``nm.Z`` 的类氢阻尼重叠积分。

    若缓存已含该 Z 则直接返回；否则对五个参考子壳层（1s_1/2, 2p_1/2, 2p_3/2,
    3d_3/2, 3d_5/2）生成类氢轨道并计算自身的阻尼重叠积分，存入缓存。
    """
    if nm.Z in context.cache:
        return context.cache.get(nm.Z)

    alpha = context.settings.alpha
    values = []
    for kclass in KappaClass:
        orb = radial_orbital(kclass.reference_subshell, nm.Z, grid, alpha)
        values.append(qed_damped_overlap(alpha, orb, orb, grid))
    ref = HydrogenicReference(float(nm.Z), tuple(values))
    context.cache.store(ref)
    logger.info(
        "Redefined damped hydrogenic radial integrals for Z=%g: %s",
        nm.Z,
        np.array2string(ref.as_array(), precision=6),
    )
    return ref


def qed_local(
    a: Orbital,
    b: Orbital,
    nm: NuclearModel,
    pot: RadialPotential,
    grid: RadialGrid,
    context: QedContext,
) -> float:
    """计算所选 QED 模型下的局域单电子 QED 矩阵元。

    Parameters
    ----------
    a, b : Orbital
        左、右轨道。
    nm : NuclearModel
        核模型（提供 Z）。
    pot : RadialPotential
        平均场势（Uehling 项的源电荷）。
    grid : RadialGrid
        径向网格。
    context : QedContext
        配置与氢样参考缓存；必要时会被刷新。

    Returns
    -------
    float
        单电子振幅（Hartree）。

    Raises
    ------
    QedModelError
        ``context.settings.model`` 不是已知模型。
    """
    settings = context.settings
    alpha = settings.alpha
    refresh_hydrogenic_reference(context, nm, grid)
    qgrid = gauss_legendre_grid("QED", settings.quadrature_order)

    if settings.model == QedModel.SYDNEY:
        wa = qed_uehling_simple(a, b, pot, grid, qgrid, alpha) + qed_low_frequency(a, b, nm, grid, alpha)
        terms = settings.terms
        if terms.wichmann_kroll:
            wa += qed_wichmann_kroll_simple(a, b, nm, grid, alpha)
        if terms.electric_form_factor:
            wa += qed_electric_form_factor(a, b, nm, grid, qgrid, alpha)
        if terms.magnetic_form_factor:
            wa += qed_magnetic_form_factor(a, b, nm, grid, qgrid, alpha)
    elif settings.model == QedModel.PETERSBURG:
        wa = qed_uehling_simple(a, b, pot, grid, qgrid, alpha) + self_energy_volotka(
            a, b, nm, pot, grid, qgrid, context
        )
    else:
        raise QedModelError(f"不支持的 QED 模型: {settings.model!r}")
    return float(wa)


def self_energy_volotka(
    a: Orbital,
    b: Orbital,
    nm: NuclearModel,
    pot: RadialPotential,
    grid: RadialGrid,
    qgrid: GaussLegendreGrid,
    context: QedContext,
) -> float:
    r"""Petersburg 模型（经 A. Volotka 简化）的局域单电子自能。

    仅对对角矩阵元且 :math:`n \le 4`、:math:`\kappa \in \{-1, 1, -2, 2, -3\}` 给出非零值；
    对更高的 :math:`(n, \kappa)` 该方法精度不足，返回 0。``pot`` 与 ``qgrid`` 不参与
    计算，保留以与其他 QED 项调用方式一致。

    Raises
    ------
    UnsupportedKappaError
        kappa 不在支持范围内。
    CacheNotInitializedError
        上下文缓存中没有 ``nm.Z`` 的参考积分。
    """
    if a.subshell != b.subshell or a.subshell.n > _SE_MAX_N:
        return 0.0

    kclass = KappaClass.from_kappa(a.subshell.kappa)
    alpha = context.settings.alpha
    Z = nm.Z
    reference = context.cache.get(Z)

    whydrogenic = (
        tabulate_fze_over_hydrogenic(Z, a.subshell, reference)
        * alpha / np.pi * (alpha * Z) ** 4 / kclass.effective_n**3 / alpha**2
    )
    wb = qed_damped_overlap(alpha, a, a, grid)
    wa = whydrogenic * wb

    if context.settings.report_self_energy_function:
        logger.debug(
            "Self-energy function for %s: F(alpha Z) = %.6f, wdamped = %.6e, wa = %.6e",
            a.subshell,
            self_energy_function(wa, Z, a.subshell.n, alpha),
            wb,
            wa,
        )
    logger.info("QED single-electron strength <%s| h^(SE, Volotka) |%s> = %.10e", a.subshell, b.subshell, wa)
    return float(wa)


def tabulate_fze_over_hydrogenic(Z: float, subshell: Subshell, reference: HydrogenicReference) -> float:
    """按 Z 插值 F(αZ) 表格并除以同类氢参考阻尼重叠积分。

    Parameters
    ----------
    Z : float
        核电荷数。
    subshell : Subshell
        子壳层；仅 kappa 用于选择表格列。
    reference : HydrogenicReference
        该 Z 下的类氢参考积分（:func:`refresh_hydrogenic_reference` 的返回值）。

    Returns
    -------
    float
        ``Z < 10`` 时为 0。

    Raises
    ------
    UnsupportedKappaError
        kappa 不在支持范围内。
    TableRangeError
        ``Z >= 120``。
    CacheNotInitializedError
        ``reference`` 不是针对该 Z 计算的。
    """
    kclass = KappaClass.from_kappa(subshell.kappa)
    if fze_bucket(Z) is None:
        return 0.0
    if float(reference.Z) != float(Z):
        raise CacheNotInitializedError(Z)
    return interpolate_fze(Z, kclass) / reference[kclass]


def self_energy_function(wa: float, Z: float, n: int, alpha: float) -> float:
    r"""由自能矩阵元反推 :math:`F(\alpha Z) = w_a \big/ \left[\frac{\alpha}{\pi}\frac{(\alpha Z)^4}{n^3\alpha^2}\right]`。

    用于与表格值对照的诊断量。
    """
    scale = alpha / np.pi * (alpha * Z) ** 4 / n**3 / alpha**2
    return float(wa / scale)
