r"""类氢离子的 Dirac-Coulomb 径向轨道
=====================================

点核 Coulomb 势 :math:`V = -Z/r` 下 Dirac 方程的精确束缚态解（原子单位，
:math:`c = 1/\alpha`）。记

.. math::

    \gamma = \sqrt{\kappa^2 - (\alpha Z)^2},\quad n_r = n - |\kappa|,\quad
    \varepsilon = \left[1 + \frac{(\alpha Z)^2}{(n_r + \gamma)^2}\right]^{-1/2},

    N = \sqrt{n_r^2 + 2 n_r \gamma + \kappa^2},\quad \lambda = Z/N,\quad x = 2\lambda r,

则大、小分量为

.. math::

    P(r) &\propto \sqrt{1+\varepsilon}\; x^{\gamma} e^{-x/2}
        \left[(N-\kappa)\,M(-n_r, 2\gamma+1, x) - n_r\,M(1-n_r, 2\gamma+1, x)\right] \\
    Q(r) &\propto -\sqrt{1-\varepsilon}\; x^{\gamma} e^{-x/2}
        \left[(N-\kappa)\,M(-n_r, 2\gamma+1, x) + n_r\,M(1-n_r, 2\gamma+1, x)\right]

其中 :math:`M` 为合流超几何函数（``scipy.special.hyp1f1``）。共同的归一化常数在网格上
数值确定，使 :math:`\int (P^2+Q^2)\,dr = 1`。

References
----------
.. [BetheSalpeter] Bethe, H. A. & Salpeter, E. E. (1957)
   "Quantum Mechanics of One- and Two-Electron Atoms", §14
"""

from __future__ import annotations

import numpy as np
from scipy.special import hyp1f1

from .constants import ALPHA
from .grid import RadialGrid
from .subshell import Orbital, Subshell, normalize_orbital

__all__ = ["dirac_energy", "radial_orbital"]


def _check_bound(subshell: Subshell, Z: float, alpha: float) -> float:
    za = alpha * Z
    if za >= abs(subshell.kappa):
        raise ValueError(f"αZ = {za:.4f} >= |kappa| = {abs(subshell.kappa)}：点核下无束缚态")
    return za


def dirac_energy(n: int, kappa: int, Z: float, alpha: float = ALPHA) -> float:
    r"""类氢 Dirac 束缚能（Hartree，不含静能 :math:`c^2`）。

    .. math::
        E = c^2 (\varepsilon - 1)

    非相对论极限下趋于 :math:`-Z^2/(2n^2)`。
    """
    sh = Subshell(n, kappa)
    za = _check_bound(sh, Z, alpha)
    gamma = np.sqrt(kappa * kappa - za * za)
    n_r = n - abs(kappa)
    eps = 1.0 / np.sqrt(1.0 + za * za / (n_r + gamma) ** 2)
    return float((eps - 1.0) / (alpha * alpha))


def radial_orbital(subshell: Subshell, Z: float, grid: RadialGrid, alpha: float = ALPHA) -> Orbital:
    """在给定网格上生成类氢 Dirac 径向轨道（点核）。

    Parameters
    ----------
    subshell : Subshell
        子壳层 :math:`(n, \\kappa)`。
    Z : float
        核电荷数，要求 :math:`\\alpha Z < |\\kappa|`。
    grid : RadialGrid
        径向网格；需足够远以容纳轨道尾部（约 :math:`r_\\max \\gtrsim 20 n^2/Z`）。
    alpha : float
        精细结构常数。

    Returns
    -------
    Orbital
        归一化的类氢轨道，``energy`` 为 :func:`dirac_energy`。
    """
    n, kappa = subshell.n, subshell.kappa
    za = _check_bound(subshell, Z, alpha)
    gamma = np.sqrt(kappa * kappa - za * za)
    n_r = n - abs(kappa)
    eps = 1.0 / np.sqrt(1.0 + za * za / (n_r + gamma) ** 2)
    N = np.sqrt(n_r * n_r + 2.0 * n_r * gamma + kappa * kappa)
    lam = Z / N

    x = 2.0 * lam * grid.r
    envelope = np.power(x, gamma) * np.exp(-0.5 * x)
    m0 = (N - kappa) * hyp1f1(-n_r, 2.0 * gamma + 1.0, x)
    # n_r = 0 时 M(1, b, x) 指数增长，直接略去该项
    m1 = n_r * hyp1f1(1 - n_r, 2.0 * gamma + 1.0, x) if n_r > 0 else np.zeros_like(x)

    P = np.sqrt(1.0 + eps) * envelope * (m0 - m1)
    Q = -np.sqrt(1.0 - eps) * envelope * (m0 + m1)
    energy = float((eps - 1.0) / (alpha * alpha))
    return normalize_orbital(Orbital(subshell, P, Q, energy), grid)
