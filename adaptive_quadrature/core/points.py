"""
points - 积分过程中的采样点

每次顶层调用内部临时创建，不跨调用共享，也不保存父节点引用。
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SamplePoint:
    """采样点 (x, f(x))，f(x) 只计算一次"""

    x: np.floating
    y: np.floating


@dataclass(frozen=True)
class PanelEstimate(SamplePoint):
    """
    子区间中点及其三点 Simpson 面积。

    area 只有与界定该子区间的两个端点一起时才有意义。
    """

    area: np.floating = 0.0
