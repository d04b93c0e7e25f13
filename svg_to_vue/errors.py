"""
Exceptions raised by the SVG to Vue transform.
"""

from __future__ import annotations


class SvgToVueError(Exception):
    """Base class for all errors raised by svg_to_vue."""


class ConfigFormatError(SvgToVueError):
    """Raised when loader options cannot be interpreted.

    This can happen when:
    - A query string does not begin with "?"
    - A "{...}" query is not a valid relaxed-JSON object literal
    - A percent-escape does not decode to valid UTF-8
    """


class OptimizationError(SvgToVueError):
    """Raised when the optimizer rejects the input markup."""


class CompilationError(SvgToVueError):
    """Raised when the markup cannot be compiled into an element tree."""


class PipelineFailure(SvgToVueError):
    """Reported to the loader host when a transform fails.

    Carries no message: the host only learns that the file failed.
    """


class OutputValidationError(SvgToVueError):
    """Raised when a generated module fails structural validation before being written."""
