"""SVG to Vue Generator

A Python package for transforming SVG markup into Vue functional
component modules, with a loader entry point for build pipelines and
a permissive loader query parser.
"""

__version__ = "1.0.0"

from .errors import (
    CompilationError,
    ConfigFormatError,
    OptimizationError,
    OutputValidationError,
    PipelineFailure,
    SvgToVueError,
)
from .loader import LoaderContext, load
from .pipeline import OutputConfig, OutputMode, SvgToVueGenerator, TransformConfig, transform_svg
from .query import parse_query
from .writer import AtomicWriter

__all__ = [
    "SvgToVueGenerator",
    "transform_svg",
    "TransformConfig",
    "OutputConfig",
    "OutputMode",
    "LoaderContext",
    "load",
    "parse_query",
    "AtomicWriter",
    "SvgToVueError",
    "ConfigFormatError",
    "OptimizationError",
    "CompilationError",
    "PipelineFailure",
    "OutputValidationError",
]
