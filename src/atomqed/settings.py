"""QED 计算配置与氢样参考积分缓存

- :class:`QedModel`：两种局域 QED 模型（Sydney / Petersburg）
- :class:`QedTerms`：Sydney 模型中可选的附加项（默认全部关闭）
- :class:`QedSettings`：模型、精细结构常数、求积阶数等配置
- :class:`HydrogenicReferenceCache`：按核电荷 Z 索引的有界缓存（LRU）
- :class:`QedContext`：由调用方持有的配置 + 缓存
"""

from __future__ import annotations

import enum
import os
from collections import OrderedDict
from dataclasses import dataclass, field

import numpy as np

from .constants import ALPHA
from .errors import CacheNotInitializedError, QedModelError
from .subshell import KappaClass

__all__ = [
    "QedModel",
    "QedTerms",
    "QedSettings",
    "HydrogenicReference",
    "HydrogenicReferenceCache",
    "QedContext",
]


class QedModel(enum.Enum):
    """局域单电子 QED 模型。"""

    SYDNEY = "sydney"
    PETERSBURG = "petersburg"

    @classmethod
    def parse(cls, value: "str | QedModel") -> "QedModel":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise QedModelError(f"不支持的 QED 模型: {value!r}，可选 {[m.value for m in cls]}") from None


@dataclass(frozen=True)
class QedTerms:
    """Sydney 模型的可选附加项。

    这些项尚未完成数值验证，默认关闭；启用后直接加到 Uehling + 低频自能之和上。
    """

    wichmann_kroll: bool = False
    electric_form_factor: bool = False
    magnetic_form_factor: bool = False


@dataclass
class QedSettings:
    r"""局域 QED 修正的配置参数。

    Attributes
    ----------
    model : QedModel
        选用的 QED 模型。
    alpha : float
        精细结构常数 :math:`\alpha`。
    quadrature_order : int
        参数 :math:`t` 积分的 Gauss-Legendre 阶数。
    terms : QedTerms
        Sydney 模型的可选附加项。
    cache_size : int
        氢样参考缓存可保留的不同 Z 数目。
    report_self_energy_function : bool
        是否在 DEBUG 日志中输出 :math:`F(\alpha Z)` 诊断值。
    """

    model: QedModel = QedModel.PETERSBURG
    alpha: float = ALPHA
    quadrature_order: int = 7
    terms: QedTerms = field(default_factory=QedTerms)
    cache_size: int = 8
    report_self_energy_function: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "QedSettings":
        """从环境变量 ``ATOMQED_QED_MODEL`` 与 ``ATOMQED_ALPHA`` 读取配置。

        显式传入的关键字参数优先于环境变量。
        """
        kwargs = {}
        env_model = os.environ.get("ATOMQED_QED_MODEL")
        if env_model:
            kwargs["model"] = QedModel.parse(env_model)
        env_alpha = os.environ.get("ATOMQED_ALPHA")
        if env_alpha:
            kwargs["alpha"] = float(env_alpha)
        kwargs.update(overrides)
        return cls(**kwargs)


@dataclass(frozen=True)
class HydrogenicReference:
    """某一 Z 下五个参考子壳层的类氢阻尼重叠积分。

    ``values[k]`` 对应 :class:`KappaClass` 的第 ``k`` 列（0 起：1s_1/2, 2p_1/2,
    2p_3/2, 3d_3/2, 3d_5/2）。
    """

    Z: float
    values: tuple[float, float, float, float, float]

    def __getitem__(self, kclass: KappaClass) -> float:
        return self.values[kclass.column]

    def as_array(self) -> np.ndarray:
        return np.array(self.values)


class HydrogenicReferenceCache:
    """按核电荷 Z 索引的氢样参考积分缓存（LRU，有界）。

    Examples
    --------
    >>> cache = HydrogenicReferenceCache(maxsize=2)
    >>> cache.store(HydrogenicReference(74.0, (1.0, 2.0, 3.0, 4.0, 5.0)))
    >>> 74.0 in cache
    True
    """

    def __init__(self, maxsize: int = 8):
        if maxsize < 1:
            raise ValueError("maxsize 必须 >= 1")
        self.maxsize = maxsize
        self.cache: OrderedDict[float, HydrogenicReference] = OrderedDict()

    def __contains__(self, Z: float) -> bool:
        return float(Z) in self.cache

    def get(self, Z: float) -> HydrogenicReference:
        """返回 Z 的参考积分；未计算时抛出 :class:`CacheNotInitializedError`。"""
        key = float(Z)
        try:
            ref = self.cache[key]
        except KeyError:
            raise CacheNotInitializedError(Z) from None
        self.cache.move_to_end(key)
        return ref

    def store(self, ref: HydrogenicReference) -> None:
        key = float(ref.Z)
        self.cache[key] = ref
        self.cache.move_to_end(key)
        while len(self.cache) > self.maxsize:
            self.cache.popitem(last=False)

    def clear(self):
        """清空缓存。"""
        self.cache.clear()

    def __len__(self):
        return len(self.cache)


@dataclass
class QedContext:
    """调用方持有的 QED 计算上下文（配置 + 参考缓存）。

    不同线程或不同离子序列可各自持有独立上下文。
    """

    settings: QedSettings = field(default_factory=QedSettings)
    cache: HydrogenicReferenceCache | None = None

    def __post_init__(self):
        if self.cache is None:
            self.cache = HydrogenicReferenceCache(self.settings.cache_size)
