"""
lobatto 模块单元测试
"""

import math

import numpy as np
import pytest

from adaptive_quadrature.algorithm import AdaptiveIntegrator
from adaptive_quadrature.core.lobatto import lobatto, lobatto_nodes
from adaptive_quadrature.core.policy import NumericPolicy


class TestLobattoNodes:
    """节点比例测试"""

    def test_node_values(self):
        """测试 √(2/3) 与 √(1/5)"""
        kronrod, node = lobatto_nodes()
        assert np.isclose(kronrod, np.sqrt(2 / 3))
        assert np.isclose(node, np.sqrt(1 / 5))
        assert 0 < node < kronrod < 1


class TestLobatto:
    """自适应 Lobatto 积分测试"""

    def test_sine(self):
        """测试 ∫_0^π sin(x) dx = 2"""
        result = lobatto(np.sin, 0, np.pi)
        assert abs(result - 2) < 1e-10

    def test_logarithm(self):
        """测试 ∫_1^2 ln(x) dx = 2ln2 - 1"""
        result = lobatto(np.log, 1, 2)
        assert abs(result - (2 * np.log(2) - 1)) < 1e-10

    def test_sqrt(self):
        """测试 ∫_4^9 (√x + 1/(3√x)) dx = 40/3"""
        result = lobatto(lambda x: np.sqrt(x) + 1 / (3 * np.sqrt(x)), 4, 9)
        assert abs(result - 40 / 3) < 1e-10

    @pytest.mark.parametrize("power", range(6))
    def test_exact_for_monomials(self, power):
        """测试 ∫_0^1 x^i dx = 1/(i+1)"""
        result = lobatto(lambda x: x**power, 0, 1)
        assert abs(result - 1 / (power + 1)) < 1e-14

    def test_exact_for_degree_nine(self):
        """测试单个面板对 9 次多项式精确"""
        # ∫_0^1 x^9 dx = 1/10
        result = lobatto(lambda x: x**9, 0, 1, max_depth=0)
        assert abs(result - 0.1) < 1e-14

    def test_bound_order_invariance(self):
        """测试上下限顺序无关"""
        assert lobatto(np.exp, 0.0, 1.5) == lobatto(np.exp, 1.5, 0.0)
        assert lobatto(np.cos, -1.0, 2.0) == lobatto(np.cos, 2.0, -1.0)

    def test_zero_width_interval(self):
        """测试 a == b 时结果为零"""
        assert lobatto(np.sin, 1.0, 1.0) == 0

    def test_nan_at_midpoint(self):
        """测试中点为 NaN 时返回 NaN"""
        result = lobatto(lambda x: np.nan if x == 0.5 else x, 0, 1)
        assert np.isnan(result)

    def test_nan_inside_panel(self):
        """测试内部节点为 NaN 时返回 NaN"""
        result = lobatto(lambda x: np.nan if 0.2 < x < 0.3 else 1.0, 0, 1)
        assert np.isnan(result)

    def test_infinite_endpoint(self):
        """测试端点为无穷时返回 NaN"""
        result = lobatto(lambda x: np.inf if x == 1 else x, 0, 1)
        assert np.isnan(result)

    def test_jump_discontinuity_terminates(self):
        """测试间断函数在深度上限内终止"""
        result = lobatto(lambda x: 1.0 if x >= 0.3 else -1.0, 0, 1)
        assert np.isfinite(result)
        assert abs(result - 0.4) < 0.1

    def test_high_frequency_terminates(self):
        """测试高频振荡函数返回有限值"""
        result = lobatto(lambda x: np.sin(500 * x), 0, 1, max_depth=4)
        assert np.isfinite(result)

    def test_depth_zero_is_single_panel(self):
        """测试深度为 0 时仅计算一个七点估计"""
        result = lobatto(lambda x: x * x, 0, 1, max_depth=0)
        assert abs(result - 1 / 3) < 1e-15

    def test_double_policy(self):
        """测试 double 精度策略"""
        policy = NumericPolicy.from_name("double")
        result = lobatto(np.log, 1, 2, policy=policy)
        assert isinstance(result, np.float64)
        assert abs(result - (2 * np.log(2) - 1)) < 1e-10

    def test_math_domain_error(self):
        """测试 math.log 定义域错误返回 NaN"""
        assert np.isnan(lobatto(math.log, -1.0, 2.0))

    def test_domain_error_at_interior_node(self):
        """测试内部节点的定义域错误返回 NaN"""
        # 中点 (第 4 点) 处 log(0)
        assert np.isnan(lobatto(lambda x: math.log(abs(x - 0.5)), 0.0, 1.0))

    def test_zero_division(self):
        """测试除零返回 NaN"""
        assert np.isnan(lobatto(lambda x: 1.0 / float(x), 0.0, 1.0))


class TestLobattoRecursionRules:
    """递归规则测试，通过求值次数验证"""

    def test_same_tolerance_for_sub_panels(self):
        """测试子区间使用相同容差，不减半"""
        # x^6 的 K - L = 0.060952 h^7: 根 4.8e-4，最宽子区间 1.33e-8
        integrator = AdaptiveIntegrator("lobatto", tolerance=2e-8)
        result = integrator.integrate_with_info(lambda x: x**6, 0, 1)
        # 2 + 5 (根) + 6 * 5 (子区间全部通过)
        assert result.evaluations == 37
        assert abs(result.value - 1 / 7) < 1e-14

    def test_interval_below_min_interval(self):
        """测试半宽小于 min_interval 时直接返回七点估计"""
        integrator = AdaptiveIntegrator("lobatto")
        result = integrator.integrate_with_info(
            lambda x: 1e12 if x >= 3e-17 else -1e12, 0.0, 1e-16
        )
        assert result.evaluations == 7
        assert np.isfinite(result.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
