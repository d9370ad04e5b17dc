"""
reference_integrals - 带解析解的参考积分

用于演示与回归测试:
- sine:       ∫_0^π sin(x) dx = 2
- polynomial: ∫_1^4 (6x² - 8x + 5) dx = 81
- logarithm:  ∫_1^2 ln(x) dx = 2ln2 - 1
- sqrt:       ∫_4^9 (√x + 1/(3√x)) dx = 40/3
- gaussian:   ∫_0^1 exp(-x²) dx = (√π / 2) erf(1)
- monomials:  ∫_0^1 x^i dx = 1/(i+1)
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np
from scipy.special import erf


@dataclass(frozen=True)
class ReferenceIntegral:
    """被积函数、积分区间与解析解"""

    name: str
    integrand: Callable
    a: float
    b: float
    exact: float
    expression: str = ""

    @property
    def label(self) -> str:
        return f"f(x)={self.expression or self.name}, x=[{self.a:g};{self.b:g}]"


def _polynomial(x):
    return 6 * x * x - 8 * x + 5


def _sqrt_sum(x):
    return np.sqrt(x) + 1 / (3 * np.sqrt(x))


def _gaussian(x):
    return np.exp(-x * x)


def _monomial(power: int) -> Callable:
    def integrand(x):
        return x**power

    return integrand


def reference_integrals() -> list[ReferenceIntegral]:
    """
    获取参考积分列表。

    Returns:
        ReferenceIntegral 列表，顺序固定
    """
    return [
        ReferenceIntegral("sine", np.sin, 0.0, np.pi, 2.0, "sin(x)"),
        # 2x³ - 4x² + 5x
        ReferenceIntegral("polynomial", _polynomial, 1.0, 4.0, 81.0, "6x^2-8x+5"),
        # x ln(x) - x
        ReferenceIntegral("logarithm", np.log, 1.0, 2.0, 2 * np.log(2.0) - 1, "ln(x)"),
        # 2/3 (x^(3/2) + x^(1/2))
        ReferenceIntegral("sqrt", _sqrt_sum, 4.0, 9.0, 40.0 / 3.0, "sqrt(x)+1/(3*sqrt(x))"),
        ReferenceIntegral("gaussian", _gaussian, 0.0, 1.0, np.sqrt(np.pi) / 2 * erf(1.0), "exp(-x^2)"),
    ]


def reference_integral(name: str) -> ReferenceIntegral:
    """按名称获取参考积分。"""
    for reference in reference_integrals():
        if reference.name == name:
            return reference
    raise ValueError(f"Reference integral {name!r} not found")


def monomial_integrals(max_power: int = 4) -> list[ReferenceIntegral]:
    """
    单项式 x^i 在 [0, 1] 上的积分, i = 0..max_power。

    Args:
        max_power: 最高次数

    Returns:
        ReferenceIntegral 列表
    """
    return [
        ReferenceIntegral(f"x^{i}", _monomial(i), 0.0, 1.0, 1.0 / (i + 1), f"x^{i}")
        for i in range(max_power + 1)
    ]


if __name__ == "__main__":
    print("=== 参考积分 ===")
    for reference in reference_integrals() + monomial_integrals():
        print(f"{reference.label}: {reference.exact:.15f}")
