"""
simpson - 自适应复合 Simpson 积分

Algorithm 103, Guy F. Kuncir: Simpson's rule integrator
J. N. Lyness: Notes on the Adaptive Simpson Quadrature Routine

实现:
1. 三点 Simpson 面积估计 (粗估计)
2. 五点估计 (细估计) = 左右两个三点估计之和
3. Lyness 误差估计与 Richardson 修正
4. 对不满足误差条件的区间二分递归，容差逐层减半
"""

import logging
from typing import Callable

from .points import PanelEstimate, SamplePoint
from .policy import DEFAULT_POLICY, NumericPolicy

logger = logging.getLogger(__name__)

# 最大递归深度, 2^22 ~= 4e6 个子区间
MAX_DEPTH_LIMIT = 22

# 容差逐层减半，保证至少能递归若干层
TOLERANCE_FLOOR_FACTOR = 512


def evaluate_panel(
    f: Callable,
    start: SamplePoint,
    end: SamplePoint,
    policy: NumericPolicy = DEFAULT_POLICY,
) -> PanelEstimate:
    """
    三点 Simpson 面积估计。

        A3 = |b - a| * (f(a) + 4f(m) + f(b)) / 6

    Args:
        f: 被积函数
        start: 区间起点
        end: 区间终点
        policy: 数值策略

    Returns:
        区间中点及其面积
    """
    x = (start.x + end.x) / 2
    y = policy.evaluate(f, x)
    area = abs(end.x - start.x) * (start.y + 4 * y + end.y) / 6
    return PanelEstimate(x, y, area)


def _refine(f, start, middle, end, tolerance, depth, max_depth, policy):
    if tolerance < policy.machine_epsilon or abs(end.x - start.x) < policy.min_interval:
        return middle.area

    # start  left  middle  right  end
    # 五点估计 A5 = left.area + right.area
    left = evaluate_panel(f, start, middle, policy)
    right = evaluate_panel(f, middle, end, policy)

    if not (policy.is_finite(left.y) and policy.is_finite(right.y)):
        return policy.nan

    # Lyness 修正 1 和 2
    error = (left.area + right.area - middle.area) / 15
    depth += 1
    if abs(error) < tolerance or depth > max_depth:
        return left.area + right.area + error

    return _refine(f, start, left, middle, tolerance / 2, depth, max_depth, policy) + _refine(
        f, middle, right, end, tolerance / 2, depth, max_depth, policy
    )


def simpson(
    f: Callable,
    a: float,
    b: float,
    tolerance: float = 1e-10,
    max_depth: int = 8,
    *,
    policy: NumericPolicy = DEFAULT_POLICY,
):
    """
    自适应 Simpson 积分。

    区间 [a, b] 顺序无关: b < a 时交换上下限，结果不取负。
    任何数值退化都不抛出异常，而是返回 NaN;
    被积函数的定义域错误 (ValueError) 与算术错误也按 NaN 处理。

    Args:
        f: 被积函数，纯函数 Real -> Real
        a: 积分下限
        b: 积分上限
        tolerance: 误差容差，下限为 512 * machine_epsilon
        max_depth: 最大递归深度，上限为 22
        policy: 数值策略

    Returns:
        积分值，若 f(a)、f(b) 或中点值非有限则返回 NaN
    """
    a, b = policy.real(a), policy.real(b)
    if b < a:
        a, b = b, a

    max_depth = min(max(int(max_depth), 0), MAX_DEPTH_LIMIT)
    tolerance = policy.clamp_tolerance(tolerance, TOLERANCE_FLOOR_FACTOR)

    start = SamplePoint(a, policy.evaluate(f, a))
    end = SamplePoint(b, policy.evaluate(f, b))
    middle = evaluate_panel(f, start, end, policy)

    if not (policy.is_finite(start.y) and policy.is_finite(end.y) and policy.is_finite(middle.y)):
        logger.debug("Integrand not finite on [%s, %s] endpoints or midpoint", a, b)
        return policy.nan

    return _refine(f, start, middle, end, tolerance, 0, max_depth, policy)


if __name__ == "__main__":
    import numpy as np

    print("=== 自适应 Simpson 积分测试 ===")
    result = simpson(np.sin, 0, np.pi)
    print("∫sin(x) dx from 0 to π:")
    print(f"  计算值: {result:.15f}")
    print(f"  误差: {abs(result - 2):.2e}")
