"""
Markup optimizers run before compilation.
"""

from __future__ import annotations

from .base import Optimizer
from .scour_optimizer import ScourOptimizer

__all__ = [
    "Optimizer",
    "ScourOptimizer",
]
