r"""自能函数 F(αZ) 表格
=====================

Shabaev 等人给出的类氢自能函数 :math:`F(\alpha Z)`，仅保留每个 kappa 的最低子壳层。
表中数据在可获得时取扩展核结果，否则为点核结果；均由类氢波函数计算，
在多电子原子中需借助阻尼重叠积分重新标度。

行：Z = 10, 20, ..., 120；列：1s_1/2, 2p_1/2, 2p_3/2, 3d_3/2, 3d_5/2。

数据来源: Shabaev, Tupitsyn & Yerokhin, Phys. Rev. A 88, 012513 (2013)
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from .errors import TableRangeError
from .subshell import KappaClass

__all__ = ["FZE_TABLE", "FZE_Z_MIN", "FZE_Z_MAX", "FzeBucket", "fze_bucket", "interpolate_fze"]

#                  1s_1/2   2p_1/2   2p_3/2   3d_3/2   3d_5/2      Z
FZE_TABLE = np.array([
    [4.6542, -0.1148, 0.1304, -0.0427, 0.0408],   # 10
    [3.2462, -0.0925, 0.1438, -0.0420, 0.0417],   # 20
    [2.5518, -0.0643, 0.1606, -0.0410, 0.0432],   # 30
    [2.1347, -0.0310, 0.1796, -0.0396, 0.0452],   # 40
    [1.8633, 0.0080, 0.2001, -0.0378, 0.0475],    # 50
    [1.6820, 0.0547, 0.2216, -0.0353, 0.0503],    # 60
    [1.5637, 0.1126, 0.2441, -0.0321, 0.0536],    # 70
    [1.4955, 0.1877, 0.2671, -0.0279, 0.0572],    # 80
    [1.4721, 0.2912, 0.2904, -0.0229, 0.0612],    # 90
    [1.4961, 0.4450, 0.3135, -0.0154, 0.0654],    # 100
    [1.5771, 0.6961, 0.3356, -0.0063, 0.0699],    # 110
    [1.7335, 1.1559, 0.3548, 0.0051, 0.0745],     # 120
])
FZE_TABLE.setflags(write=False)

FZE_Z_MIN = 10.0
FZE_Z_MAX = 120.0
_Z_STEP = 10.0


class FzeBucket(NamedTuple):
    """Z 所在的表格区间 [floor, floor + 10)。"""

    index: int
    floor: float
    fraction: float


def fze_bucket(Z: float) -> FzeBucket | None:
    r"""定位 Z 所在的十进制区间。

    区间索引 :math:`i = \lfloor (Z-10)/10 \rfloor`，插值分数 :math:`(Z - Z_i)/10`。

    Returns
    -------
    FzeBucket | None
        ``Z < 10`` 时返回 ``None``（表格未定义，视为无修正）。

    Raises
    ------
    TableRangeError
        ``Z >= 120``。
    """
    if Z >= FZE_Z_MAX:
        raise TableRangeError(Z, FZE_Z_MAX)
    if Z < FZE_Z_MIN:
        return None
    index = int(math.floor((Z - FZE_Z_MIN) / _Z_STEP))
    floor = FZE_Z_MIN + _Z_STEP * index
    return FzeBucket(index, floor, (Z - floor) / _Z_STEP)


def interpolate_fze(Z: float, kclass: KappaClass) -> float:
    """对 F(αZ) 表格按 Z 线性插值；``Z < 10`` 时返回 0。"""
    bucket = fze_bucket(Z)
    if bucket is None:
        return 0.0
    k = kclass.column
    lo = FZE_TABLE[bucket.index, k]
    hi = FZE_TABLE[bucket.index + 1, k]
    return float(lo + bucket.fraction * (hi - lo))
