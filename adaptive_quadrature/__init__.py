"""
adaptive_quadrature - 一维自适应数值积分库

基于:
- Guy F. Kuncir, Algorithm 103: Simpson's rule integrator
- J. N. Lyness, Notes on the Adaptive Simpson Quadrature Routine
- Walter Gander, Walter Gautschi, Adaptive Quadrature - Revisited

提供自适应 Simpson 与自适应 Gauss-Lobatto/Kronrod 两种积分器。
数值退化时不抛出异常，而是返回 NaN。
"""

import logging

from .algorithm import AdaptiveIntegrator, QuadratureResult, integrate
from .core import DEFAULT_POLICY, NumericPolicy, lobatto, simpson
from .exceptions import IntegrationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AdaptiveIntegrator",
    "QuadratureResult",
    "integrate",
    "simpson",
    "lobatto",
    "NumericPolicy",
    "DEFAULT_POLICY",
    "IntegrationError",
]
