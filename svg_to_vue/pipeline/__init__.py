"""
Pipeline - SVG markup to Vue functional component generator.

1. Phase 1 (Optimizer): Optionally optimize the markup (scour by default)
2. Phase 2 (Compiler): Compile the markup into an element tree
3. Phase 3 (Codegen): Generate virtual-node expressions for the children
4. Phase 4 (Backend): Render the functional component template
"""

from __future__ import annotations

from .config import OutputConfig, OutputMode, TransformConfig
from .generator import SvgToVueGenerator, transform_svg

__all__ = [
    "SvgToVueGenerator",
    "transform_svg",
    "TransformConfig",
    "OutputConfig",
    "OutputMode",
]
