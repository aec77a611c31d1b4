"""
neondb.logger
-------------

统一日志入口：各模块通过 get_logger(__name__) 获取 logger。

说明：
- 仅在顶层 "neondb" logger 上挂一个 StreamHandler，避免重复输出；
- 日志级别由环境变量 LOG_LEVEL 控制，默认 INFO。
"""

from __future__ import annotations

import logging
import os

_ROOT_NAME = "neondb"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
        root.setLevel(getattr(logging, level, logging.INFO))
    return root


def get_logger(name: str) -> logging.Logger:
    """
    获取模块 logger。

    输入：
        name: 通常传 __name__；非 neondb 前缀的名称会挂到 neondb 之下。
    输出：
        logging.Logger 实例。
    """
    _configure_root()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)
