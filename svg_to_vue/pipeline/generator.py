"""
SVG to Vue pipeline generator.

Runs the phases in order: optimize the markup, compile it into an element
tree, then render the functional component module around the root.
"""

from __future__ import annotations

import logging
from typing import Any

from .codegen import ComponentBackend
from .config import TransformConfig
from .markup_ast import MarkupCompiler, SvgMarkupCompiler
from .optimizer import Optimizer, ScourOptimizer

logger = logging.getLogger(__name__)


class SvgToVueGenerator:
    """Transforms SVG markup into a Vue functional component module."""

    def __init__(
        self,
        config: TransformConfig | None = None,
        optimizer: Optimizer | None = None,
        compiler: MarkupCompiler | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Transform configuration
            optimizer: Markup optimizer (defaults to scour)
            compiler: Markup compiler (defaults to the SVG compiler)
        """
        self.config = config or TransformConfig()
        self.optimizer = optimizer or ScourOptimizer()
        self.compiler = compiler or SvgMarkupCompiler()
        self.backend = ComponentBackend()

    def generate(self, content: str) -> str:
        """
        Generate the component module source.

        Args:
            content: SVG markup

        Returns:
            Component module source

        Raises:
            ConfigFormatError: If the optimizer configuration is invalid
            OptimizationError: If the optimizer rejects the markup
            CompilationError: If the markup cannot be compiled
        """
        markup = content

        optimizer_config = self.config.optimizer_config()
        if optimizer_config is not None:
            markup = self.optimizer.optimize(markup, optimizer_config)
        else:
            logger.debug("Optimization disabled for %s", self.config.svgo_path or "<markup>")

        root = self.compiler.compile(markup, preserve_whitespace=self.config.preserve_whitespace)
        return self.backend.generate(root)


def transform_svg(
    content: str,
    svgo_config: dict[str, Any] | bool | None = None,
    svgo_path: str | None = None,
    optimizer: Optimizer | None = None,
    compiler: MarkupCompiler | None = None,
) -> str:
    """Transform SVG markup into component source with a one-off generator."""
    config = TransformConfig(svgo_config={} if svgo_config is None else svgo_config, svgo_path=svgo_path)
    return SvgToVueGenerator(config, optimizer, compiler).generate(content)
