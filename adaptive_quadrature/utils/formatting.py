"""
formatting - 实数的文本输出

按实数自身的精度输出定点小数，非负数前补一个空格以便列对齐。
"""

import numpy as np


def max_decimals(value: np.floating) -> int:
    """该浮点类型可输出的有效小数位数 (digits10 + 1)"""
    return np.finfo(value.dtype).precision + 1


def format_real(value, decimals: int = 8) -> str:
    """
    实数转文本。

    decimals = 0 时输出最短的可还原表示，而不是零位小数。

    Args:
        value: 实数 (Python float 或 numpy 浮点标量)
        decimals: 小数位数，上限为该类型的 digits10 + 1

    Returns:
        文本，非负数以空格开头
    """
    if not isinstance(value, np.floating):
        value = np.float64(value)

    if decimals:
        text = np.format_float_positional(
            value, precision=min(decimals, max_decimals(value)), unique=False, trim="k"
        )
    else:
        text = np.format_float_positional(value, unique=True, trim="-")

    return text if text.startswith("-") else " " + text
