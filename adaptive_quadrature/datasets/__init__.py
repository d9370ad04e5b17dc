"""
datasets - 参考积分数据集

包含:
- reference_integrals: 带解析解的被积函数
"""

from .reference_integrals import (
    ReferenceIntegral,
    monomial_integrals,
    reference_integral,
    reference_integrals,
)

__all__ = [
    "ReferenceIntegral",
    "monomial_integrals",
    "reference_integral",
    "reference_integrals",
]
