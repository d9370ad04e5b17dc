"""
logging_config - 日志配置

库默认静默 (包日志器上挂有 NullHandler)，需显式启用:

    from adaptive_quadrature.utils import enable_console_logging
    enable_console_logging(level="DEBUG")

环境变量:
    AQ_LOGGING: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

import logging
import os
import sys
from typing import Literal

LOGGER_NAME = "adaptive_quadrature"
LOGGING_ENV_VAR = "AQ_LOGGING"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(level: LogLevel = "INFO", format: str = DEFAULT_FORMAT) -> None:
    """输出日志到 stderr，替换已有的处理器。"""
    logger = _get_logger()
    _remove_handlers(logger)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format, datefmt=DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())


def disable_logging() -> None:
    """移除所有处理器，恢复静默。"""
    logger = _get_logger()
    _remove_handlers(logger)
    logger.setLevel(logging.WARNING)


def set_level(level: LogLevel) -> None:
    _get_logger().setLevel(level.upper())


def configure_from_env() -> bool:
    """
    按环境变量 AQ_LOGGING 指定的级别启用控制台日志。

    Returns:
        环境变量已设置并启用日志时返回 True
    """
    level = os.environ.get(LOGGING_ENV_VAR)
    if not level:
        return False
    enable_console_logging(level=level.upper())
    return True
