"""atomqed 异常类型

QED 局域修正中的致命配置错误统一继承 :class:`AtomQedError`，
同时保留 ``ValueError``/``RuntimeError`` 语义，便于调用方按内建类型捕获。
"""

from __future__ import annotations

__all__ = [
    "AtomQedError",
    "QedModelError",
    "UnsupportedKappaError",
    "TableRangeError",
    "CacheNotInitializedError",
]


class AtomQedError(Exception):
    """atomqed 所有异常的基类。"""


class QedModelError(AtomQedError, ValueError):
    """不支持的 QED 模型选择。"""


class UnsupportedKappaError(AtomQedError, ValueError):
    """kappa 不属于表格模型定义的五个角动量类别。"""

    def __init__(self, kappa: int):
        super().__init__(f"kappa={kappa} 不在自能表格模型支持范围内（-1, 1, -2, 2, -3）")
        self.kappa = kappa


class TableRangeError(AtomQedError, ValueError):
    """核电荷超出 F(αZ) 表格上限。"""

    def __init__(self, Z: float, upper: float):
        super().__init__(f"Z={Z} 超出 F(αZ) 表格范围（要求 Z < {upper}）")
        self.Z = Z
        self.upper = upper


class CacheNotInitializedError(AtomQedError, RuntimeError):
    """氢样参考积分尚未针对所需 Z 计算。"""

    def __init__(self, Z: float):
        super().__init__(f"Z={Z} 的氢样阻尼重叠积分尚未计算，请先调用 refresh_hydrogenic_reference")
        self.Z = Z
