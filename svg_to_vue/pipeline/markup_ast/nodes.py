"""
AST node definitions for compiled SVG markup.

These nodes mirror the attributed element tree a Vue template compiler
produces: raw attributes, the processed attribute list, and the static
class/style expressions already rendered as JavaScript literals.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MarkupNode:
    """Base class for all markup nodes."""


@dataclass
class TextNode(MarkupNode):
    """Literal text content."""

    text: str = ""


@dataclass
class AttrEntry:
    """A single attribute in source order."""

    name: str
    value: str


@dataclass
class ElementNode(MarkupNode):
    """An element with its attributes and children."""

    tag: str = ""

    # Every raw attribute, including class and style (last duplicate wins)
    attrs_map: dict[str, str] = field(default_factory=dict)

    # Attributes left after class/style were routed to the static paths
    attrs_list: list[AttrEntry] = field(default_factory=list)

    # JavaScript expressions, e.g. '"icon large"' and '{"fill":"red"}'
    static_class: str | None = None
    static_style: str | None = None

    children: list[MarkupNode] = field(default_factory=list)
