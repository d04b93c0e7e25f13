"""
Loader entry point for build pipelines.

The host hands over the raw file content together with a ``LoaderContext``
(request query and resource path) and receives the generated module, or a
bare failure, through the context's completion callback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .errors import PipelineFailure
from .pipeline import SvgToVueGenerator, TransformConfig
from .pipeline.markup_ast import MarkupCompiler
from .pipeline.optimizer import Optimizer
from .query import OptionsMap, parse_query

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[Exception | None, str | None], None]


@dataclass
class LoaderContext:
    """Per-file state supplied by the host.

    Attributes:
        resource_path: Path of the file being transformed
        query: Loader query, either a "?..." string or an options mapping
        on_complete: Called once with (error, result)
    """

    resource_path: str
    query: Any = None
    on_complete: CompletionCallback | None = None
    _completed: bool = field(default=False, init=False, repr=False)

    def complete(self, error: Exception | None = None, result: str | None = None) -> None:
        """Report the outcome to the host. May be called only once."""
        if self._completed:
            raise RuntimeError(f"Loader already completed for {self.resource_path}")
        self._completed = True
        if self.on_complete is not None:
            self.on_complete(error, result)


def get_options(context: LoaderContext) -> OptionsMap | None:
    """
    Read the loader options from the context query.

    Returns:
        The parsed or passed-through options, or None for unsupported query shapes

    Raises:
        ConfigFormatError: If a query string cannot be parsed
    """
    query = context.query

    if isinstance(query, str) and query != "":
        return parse_query(query)

    if not query or not isinstance(query, dict):
        # Not object-like queries are not supported
        return None

    return query


def load(
    content: str,
    context: LoaderContext,
    optimizer: Optimizer | None = None,
    compiler: MarkupCompiler | None = None,
) -> None:
    """
    Transform one SVG file and report the result through ``context.complete``.

    Never raises: any error is reported to the host as a bare PipelineFailure.

    Args:
        content: Raw SVG markup
        context: Host-supplied loader context
        optimizer: Markup optimizer override
        compiler: Markup compiler override
    """
    try:
        options = get_options(context) or {}
        config = TransformConfig.from_options(options, context.resource_path)
        result = SvgToVueGenerator(config, optimizer, compiler).generate(content)
    except Exception:
        logger.debug("Failed to transform %s", context.resource_path, exc_info=True)
        context.complete(PipelineFailure())
        return

    context.complete(None, result)
