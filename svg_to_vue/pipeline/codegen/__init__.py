"""
Code generation from compiled markup.
"""

from __future__ import annotations

from .children import attrs_to_mapping, generate_children, js_string, mapping_to_attrs
from .component import ComponentBackend

__all__ = [
    "ComponentBackend",
    "generate_children",
    "attrs_to_mapping",
    "mapping_to_attrs",
    "js_string",
]
