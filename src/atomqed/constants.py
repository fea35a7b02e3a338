"""物理常量集中维护
====================

原子单位制（Hartree）：:math:`\\hbar = m_e = e = 1`，光速 :math:`c = 1/\\alpha`。
约化 Compton 波长 :math:`\\lambda_C = \\hbar/(m_e c) = \\alpha`（单位 Bohr）。

参考来源：CODATA 2018。
"""

from __future__ import annotations

# 精细结构常数
ALPHA = 7.2973525693e-3

# Bohr 半径（fm），用于核半径换算
BOHR_RADIUS_FM = 52917.721090380

# 核电荷半径经验公式 r_rms = a A^{1/3} + b（fm）
RMS_RADIUS_A = 0.836
RMS_RADIUS_B = 0.570


def compton_wavelength(alpha: float = ALPHA) -> float:
    """约化 Compton 波长 :math:`\\lambda_C`（Bohr）。"""
    return alpha
