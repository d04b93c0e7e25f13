"""
Base class for markup optimizers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Optimizer(ABC):
    """Abstract base class for SVG markup optimizers."""

    @abstractmethod
    def optimize(self, text: str, config: dict[str, Any]) -> str:
        """
        Optimize the given markup.

        Args:
            text: SVG markup
            config: Optimizer options, with the source file under "path"

        Returns:
            Optimized markup

        Raises:
            OptimizationError: If the markup cannot be optimized
        """
