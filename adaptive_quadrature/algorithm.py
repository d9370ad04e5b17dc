"""
algorithm - 自适应积分入口

该模块实现 AdaptiveIntegrator 类，按配置选择 Simpson 或 Lobatto 积分器，
并统计单次调用的被积函数求值次数。
"""

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .core.lobatto import lobatto
from .core.policy import DEFAULT_POLICY, NumericPolicy
from .core.simpson import simpson
from .exceptions import IntegrationError

logger = logging.getLogger(__name__)

METHODS = {
    "simpson": simpson,
    "lobatto": lobatto,
}

DEFAULT_MAX_DEPTH = {
    "simpson": 8,
    "lobatto": 2,
}


@dataclass(frozen=True)
class QuadratureResult:
    """单次积分的结果与求值次数"""

    value: np.floating
    evaluations: int
    method: str

    @property
    def is_valid(self) -> bool:
        return bool(np.isfinite(self.value))


class AdaptiveIntegrator:
    """
    自适应积分器。

    积分器本身无状态: 每次调用相互独立，不在调用之间缓存任何数据。

    Attributes:
        method: "simpson" 或 "lobatto"
        tolerance: 误差容差
        max_depth: 最大递归深度
        policy: 数值策略
        strict: 为 True 时非有限结果抛出 IntegrationError
    """

    def __init__(
        self,
        method: str = "lobatto",
        tolerance: float = 1e-10,
        max_depth: int | None = None,
        policy: NumericPolicy | None = None,
        strict: bool = False,
    ):
        """
        Args:
            method: 积分方法名
            tolerance: 误差容差
            max_depth: 最大递归深度，None 时使用方法默认值 (Simpson 8, Lobatto 2)
            policy: 数值策略，None 时使用 DEFAULT_POLICY
            strict: 非有限结果是否抛出异常
        """
        method = method.lower()
        if method not in METHODS:
            raise ValueError(f"Method {method!r} not supported, expected one of {sorted(METHODS)}")

        self.method = method
        self.tolerance = tolerance
        self.max_depth = DEFAULT_MAX_DEPTH[method] if max_depth is None else max_depth
        self.policy = policy or DEFAULT_POLICY
        self.strict = strict

    def integrate_with_info(self, f: Callable, a: float, b: float) -> QuadratureResult:
        """
        计算 ∫_a^b f(x) dx 并返回求值次数。

        Args:
            f: 被积函数
            a: 积分下限
            b: 积分上限

        Returns:
            QuadratureResult
        """
        evaluations = 0

        def counted(x):
            nonlocal evaluations
            evaluations += 1
            return f(x)

        value = METHODS[self.method](
            counted, a, b, self.tolerance, self.max_depth, policy=self.policy
        )
        result = QuadratureResult(value, evaluations, self.method)

        logger.debug(
            "%s on [%s, %s]: value=%s, evaluations=%d", self.method, a, b, value, evaluations
        )
        if not result.is_valid:
            logger.warning("%s integration on [%s, %s] returned %s", self.method, a, b, value)
            if self.strict:
                raise IntegrationError(self.method, value)

        return result

    def integrate(self, f: Callable, a: float, b: float):
        """计算 ∫_a^b f(x) dx。"""
        return self.integrate_with_info(f, a, b).value

    def __call__(self, f: Callable, a: float, b: float):
        return self.integrate(f, a, b)

    def __repr__(self) -> str:
        return (
            f"AdaptiveIntegrator(method={self.method!r}, tolerance={self.tolerance:g}, "
            f"max_depth={self.max_depth}, dtype={self.policy.dtype.__name__})"
        )


def integrate(f: Callable, a: float, b: float, method: str = "lobatto", **kwargs):
    """
    便捷函数: 使用指定方法计算 ∫_a^b f(x) dx。

    Args:
        f: 被积函数
        a: 积分下限
        b: 积分上限
        method: "simpson" 或 "lobatto"
        **kwargs: 传给 AdaptiveIntegrator 的其它参数

    Returns:
        积分值
    """
    return AdaptiveIntegrator(method, **kwargs).integrate(f, a, b)


if __name__ == "__main__":
    from adaptive_quadrature.datasets import monomial_integrals, reference_integrals
    from adaptive_quadrature.utils import configure_from_env, format_real

    configure_from_env()

    simpson_integrator = AdaptiveIntegrator("simpson")
    lobatto_integrator = AdaptiveIntegrator("lobatto")
    decimals = 20

    for reference in reference_integrals():
        print(f"\n{reference.label}")
        print(f"Exact value: {format_real(reference.exact, decimals)}")
        print(f"Simpson:     {format_real(simpson_integrator(reference.integrand, reference.a, reference.b), decimals)}")
        print(f"Lobatto:     {format_real(lobatto_integrator(reference.integrand, reference.a, reference.b), decimals)}")

    print("\nf(x)=x^i, x=[0;1]")
    for reference in monomial_integrals():
        value = lobatto_integrator(reference.integrand, reference.a, reference.b)
        print(f"{reference.name}: {format_real(value, decimals)}")
