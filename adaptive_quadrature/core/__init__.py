"""
core - 核心算法模块

包含:
- policy: 数值稳定性策略 (工作实数类型、机器精度、最小区间、NaN)
- points: 采样点与子区间估计
- simpson: 自适应 Simpson 积分
- lobatto: 自适应 Gauss-Lobatto/Kronrod 积分
"""

from .policy import DEFAULT_POLICY, NumericPolicy
from .points import PanelEstimate, SamplePoint
from .simpson import simpson
from .lobatto import lobatto

__all__ = [
    "DEFAULT_POLICY",
    "NumericPolicy",
    "PanelEstimate",
    "SamplePoint",
    "simpson",
    "lobatto",
]
