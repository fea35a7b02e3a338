"""统一日志配置

各模块通过 :func:`get_logger` 获取命名 logger::

    from atomqed.logging_config import get_logger
    logger = get_logger(__name__)

日志级别可由环境变量 ``ATOMQED_LOG_LEVEL`` 控制（默认 INFO），
也可调用 :func:`set_log_level` 在程序中修改。
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["get_logger", "set_log_level"]

_ROOT_NAME = "atomqed"
_DEFAULT_FORMAT = "%(asctime)s | %(name)-25s | %(levelname)-8s | %(message)s"
_DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO

_handlers_configured = False


def _configure_root_handler() -> None:
    """为包级 logger 配置一次输出 handler。"""
    global _handlers_configured
    if _handlers_configured:
        return

    env_level = os.environ.get("ATOMQED_LOG_LEVEL", "").upper()
    level = logging.getLevelName(env_level) if env_level else _DEFAULT_LEVEL
    if not isinstance(level, int):
        level = _DEFAULT_LEVEL

    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATE_FORMAT))
        root.addHandler(handler)
    _handlers_configured = True


def get_logger(name: str) -> logging.Logger:
    """返回挂在 ``atomqed`` 包 logger 之下的命名 logger。

    Parameters
    ----------
    name : str
        通常为 ``__name__``。
    """
    _configure_root_handler()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """修改包级日志级别（例如 ``logging.DEBUG`` 或 ``"DEBUG"``）。"""
    _configure_root_handler()
    logging.getLogger(_ROOT_NAME).setLevel(level)
