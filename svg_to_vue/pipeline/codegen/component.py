"""
Component module generation.

Renders the functional component template around the root element: the
root's own class/style/attributes are merged with what the consumer passes
in, and its children are appended after the consumer's children.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..markup_ast.nodes import ElementNode
from .children import generate_children, to_json

# Identifiers destructured from the render context in the template
CHILDREN_IDENTIFIER = "children"
ATTRS_IDENTIFIER = "attrs"
CLASS_IDENTIFIERS = ("classNames", "staticClass")
STYLE_IDENTIFIERS = ("style", "staticStyle")


def join_candidates(candidates: list[str | None]) -> str:
    """Join the truthy candidates with "," (the contents of an array literal)."""
    return ",".join(item for item in candidates if item)


def children_fragment(root: ElementNode) -> str:
    if not root.children:
        return CHILDREN_IDENTIFIER
    return f"{CHILDREN_IDENTIFIER}.concat({generate_children(root.children)})"


def attrs_fragment(root: ElementNode) -> str:
    # class is routed through the static class binding instead
    attrs = {name: value for name, value in root.attrs_map.items() if name != "class"}
    if not attrs:
        return ATTRS_IDENTIFIER
    return f"{ATTRS_IDENTIFIER}: Object.assign({to_json(attrs)}, {ATTRS_IDENTIFIER})"


def class_fragment(root: ElementNode) -> str:
    return join_candidates([root.static_class, *CLASS_IDENTIFIERS])


def style_fragment(root: ElementNode) -> str:
    return join_candidates([root.static_style, *STYLE_IDENTIFIERS])


class ComponentBackend:
    """Renders functional component modules from a compiled root element."""

    TEMPLATE_NAME = "component.js.jinja2"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.component_template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def generate(self, root: ElementNode) -> str:
        """
        Generate the component module for a compiled root element.

        Args:
            root: Root element of the compiled markup

        Returns:
            Component module source
        """
        return self.component_template.render(
            class_fragment=class_fragment(root),
            style_fragment=style_fragment(root),
            attrs_fragment=attrs_fragment(root),
            children_fragment=children_fragment(root),
        )
