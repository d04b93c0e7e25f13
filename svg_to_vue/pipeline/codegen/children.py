"""
Child-node code generation.

Turns compiled markup nodes into virtual-node expressions: ``_v('text')``
for text and ``_c('tag', {data}, [children])`` for elements.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any

from ..markup_ast.nodes import AttrEntry, ElementNode, MarkupNode, TextNode

# Characters that cannot appear raw inside a single-quoted JavaScript literal
_JS_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_JS_STRING_TRANSLATION = str.maketrans(_JS_STRING_ESCAPES)


def js_string(text: str) -> str:
    """Render text as a single-quoted JavaScript string literal."""
    return "'" + text.translate(_JS_STRING_TRANSLATION) + "'"


def to_json(value: Any) -> str:
    """Serialize a value the way JSON.stringify does (compact, unicode kept)."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def attrs_to_mapping(entries: Iterable[AttrEntry]) -> dict[str, str]:
    """Reduce an attribute list into a name -> value mapping (later entries win)."""
    return {entry.name: entry.value for entry in entries}


def mapping_to_attrs(mapping: dict[str, str]) -> list[AttrEntry]:
    """Expand a name -> value mapping into an attribute list."""
    return [AttrEntry(name, value) for name, value in mapping.items()]


def _generate_data(element: ElementNode) -> str | None:
    data = []
    if element.static_class:
        data.append(f"staticClass:{element.static_class}")
    if element.static_style:
        data.append(f"staticStyle:{element.static_style}")
    if element.attrs_list:
        data.append(f"attrs:{to_json(attrs_to_mapping(element.attrs_list))}")

    if not data:
        return None
    return "{" + ",".join(data) + "}"


def _generate_element(element: ElementNode) -> str:
    args = [js_string(element.tag)]

    if element.attrs_map:
        data = _generate_data(element)
        if data is not None:
            args.append(data)

    if element.children:
        args.append(generate_children(element.children))

    return f"_c({','.join(args)})"


def generate_children(nodes: Sequence[MarkupNode]) -> str:
    """
    Generate the virtual-node array expression for a list of nodes.

    Args:
        nodes: Child nodes in document order

    Returns:
        JavaScript array literal, e.g. ``[_c('path',{attrs:{"d":"M0 0"}}),_v('hi')]``
    """
    parts = []
    for node in nodes:
        if isinstance(node, TextNode):
            parts.append(f"_v({js_string(node.text)})")
        elif isinstance(node, ElementNode):
            parts.append(_generate_element(node))
        else:
            raise TypeError(f"Unsupported markup node: {type(node).__name__}")
    return "[" + ",".join(parts) + "]"
