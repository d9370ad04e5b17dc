"""
policy - 数值稳定性策略

两种自适应积分器共用的数值常量与退化情形规则:
1. 工作实数类型 (默认 long double 扩展精度)
2. 机器精度 machine_epsilon
3. 最小区间宽度 min_interval (固定取 double 精度)
4. NaN 哨兵值，作为唯一的"无效结果"通道
5. 常数 π
"""

import os
from dataclasses import dataclass, field

import numpy as np

# 环境变量: 选择工作实数类型
REAL_ENV_VAR = "AQ_REAL"

_REAL_TYPES = {
    "double": np.float64,
    "float64": np.float64,
    "longdouble": np.longdouble,
    "extended": np.longdouble,
}


@dataclass(frozen=True)
class NumericPolicy:
    """
    数值策略。

    工作精度是配置项而不是运行时分支: 同一个策略对象贯穿两种积分器。

    Attributes:
        dtype: numpy 浮点类型
        machine_epsilon: 满足 1 + eps != 1 的最小值
        min_interval: 有意义的最小子区间宽度
        nan: 工作类型的 quiet NaN
        pi: 工作类型的 π
    """

    dtype: type = np.longdouble
    machine_epsilon: np.floating = field(init=False, repr=False, compare=False)
    min_interval: np.floating = field(init=False, repr=False, compare=False)
    nan: np.floating = field(init=False, repr=False, compare=False)
    pi: np.floating = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not issubclass(self.dtype, np.floating):
            raise ValueError(f"Real type {self.dtype!r} is not a floating type")
        real = self.dtype
        object.__setattr__(self, "machine_epsilon", np.finfo(real).eps)
        # 与工作类型无关，限制过度细分
        object.__setattr__(self, "min_interval", real(np.finfo(np.float64).eps))
        object.__setattr__(self, "nan", real(np.nan))
        object.__setattr__(self, "pi", 4 * np.arctan(real(1)))

    @classmethod
    def from_name(cls, name: str) -> "NumericPolicy":
        """
        按名称创建策略。

        Args:
            name: "double" / "float64" / "longdouble" / "extended"

        Returns:
            对应的 NumericPolicy
        """
        try:
            return cls(_REAL_TYPES[name.strip().lower()])
        except KeyError:
            raise ValueError(f"Real type {name!r} not supported") from None

    @classmethod
    def from_env(cls, default: str = "longdouble") -> "NumericPolicy":
        """读取环境变量 AQ_REAL 创建策略。"""
        return cls.from_name(os.environ.get(REAL_ENV_VAR, default))

    def real(self, value) -> np.floating:
        """转换为工作实数类型"""
        return self.dtype(value)

    def clamp_tolerance(self, tolerance, factor: int = 1) -> np.floating:
        """
        将容差下限钳制到 factor * machine_epsilon。

        保证即使请求的容差过严，递归也能在有限步内终止。
        """
        return max(self.real(tolerance), factor * self.machine_epsilon)

    def evaluate(self, f, x) -> np.floating:
        """
        计算 f(x) 并转换为工作实数类型。

        定义域错误 (ValueError) 与算术错误 (ZeroDivisionError、OverflowError 等)
        视为该点非有限，返回 NaN。

        Args:
            f: 被积函数
            x: 采样点

        Returns:
            f(x)，或 NaN
        """
        try:
            return self.real(f(x))
        except (ArithmeticError, ValueError):
            return self.nan

    def is_finite(self, value) -> bool:
        return bool(np.isfinite(value))


DEFAULT_POLICY = NumericPolicy.from_env()


if __name__ == "__main__":
    for name in ("double", "longdouble"):
        policy = NumericPolicy.from_name(name)
        print(f"=== {name} ===")
        print(f"machine_epsilon: {policy.machine_epsilon}")
        print(f"min_interval:    {policy.min_interval}")
        print(f"pi:              {policy.pi}")
