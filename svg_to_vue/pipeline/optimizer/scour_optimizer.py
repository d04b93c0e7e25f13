"""
Scour optimizer for SVG markup.
"""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any

from scour import scour

from ...errors import OptimizationError
from .base import Optimizer

logger = logging.getLogger(__name__)


class ScourOptimizer(Optimizer):
    """Optimizer using scour.

    Config keys are scour option names (``remove_metadata``,
    ``strip_xml_prolog``, ``shorten_ids``, ...). Keys scour does not know,
    ``path`` included, are ignored by scour's option sanitizer.
    """

    def optimize(self, text: str, config: dict[str, Any]) -> str:
        path = config.get("path")
        options = SimpleNamespace(**{k: v for k, v in config.items() if k != "path"})

        try:
            result = scour.scourString(text, options)
        except Exception as e:
            raise OptimizationError(f"Failed to optimize {path or '<markup>'}: {e}") from e

        logger.debug("Optimized %s: %d -> %d characters", path or "<markup>", len(text), len(result))
        return result
