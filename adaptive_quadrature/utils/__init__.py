"""
utils - 工具函数模块

包含:
- formatting: 实数文本输出
- logging_config: 日志配置
"""

from .formatting import format_real
from .logging_config import configure_from_env, disable_logging, enable_console_logging, set_level

__all__ = [
    "format_real",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
]
