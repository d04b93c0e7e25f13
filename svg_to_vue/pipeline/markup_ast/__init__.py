"""
Markup AST module.

Contains the node definitions and the compiler for SVG markup.
"""

from __future__ import annotations

from .compiler import MarkupCompiler, SvgMarkupCompiler, parse_style_text
from .nodes import AttrEntry, ElementNode, MarkupNode, TextNode

__all__ = [
    "MarkupNode",
    "TextNode",
    "ElementNode",
    "AttrEntry",
    "MarkupCompiler",
    "SvgMarkupCompiler",
    "parse_style_text",
]
