"""
Markup compiler that builds the element tree.

Phase 2 of the pipeline: tokenize (optimized) SVG markup and build the
attributed tree the code generator walks. Attribute names are kept exactly
as written (case and namespace prefixes included), so the generated
component reproduces the source attributes verbatim.
"""

from __future__ import annotations

import html
import json
import logging
import re
from abc import ABC, abstractmethod

from ...errors import CompilationError
from .nodes import AttrEntry, ElementNode, TextNode

logger = logging.getLogger(__name__)

_START_TAG_OPEN = re.compile(r"<([a-zA-Z_][\w\-.:]*)")
_START_TAG_CLOSE = re.compile(r"\s*(/?)>")
_ATTRIBUTE = re.compile(r"""\s*([^\s"'<>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?""")
_END_TAG = re.compile(r"</([a-zA-Z_][\w\-.:]*)[^>]*>")
_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_DOCTYPE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_PROCESSING_INSTRUCTION = re.compile(r"<\?.*?\?>", re.DOTALL)
_CDATA = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)

_STYLE_DECLARATION_SEPARATOR = re.compile(r";(?![^(]*\))")
_WHITESPACE_RUN = re.compile(r"\s+")

# Elements with side effects are dropped from the tree, content included
_FORBIDDEN_TAGS = {"style", "script"}


def parse_style_text(css_text: str) -> dict[str, str]:
    """Parse an inline style declaration list into a property mapping.

    Examples:
        "fill: red; stroke:blue" -> {"fill": "red", "stroke": "blue"}
        "background: url(a;b)" -> {"background": "url(a;b)"}
    """
    result: dict[str, str] = {}
    for item in _STYLE_DECLARATION_SEPARATOR.split(css_text):
        name, sep, value = item.partition(":")
        if sep and value:
            result[name.strip()] = value.strip()
    return result


class MarkupCompiler(ABC):
    """Abstract markup-to-tree compiler."""

    @abstractmethod
    def compile(self, text: str, preserve_whitespace: bool = False) -> ElementNode:
        """
        Compile markup into an element tree.

        Args:
            text: Markup source
            preserve_whitespace: Keep whitespace-only text between elements (condensed to " ")

        Returns:
            The root element

        Raises:
            CompilationError: If the markup cannot be compiled
        """


class SvgMarkupCompiler(MarkupCompiler):
    """Regex-driven compiler for SVG markup."""

    def compile(self, text: str, preserve_whitespace: bool = False) -> ElementNode:
        root = _TreeBuilder(text, preserve_whitespace).build()
        logger.debug("Compiled markup into <%s> with %d child node(s)", root.tag, len(root.children))
        return root


def _create_element(tag: str, attrs: list[tuple[str, str]]) -> ElementNode:
    element = ElementNode(tag=tag)

    for name, value in attrs:
        element.attrs_map[name] = value
        if name not in ("class", "style"):
            element.attrs_list.append(AttrEntry(name, value))

    static_class = element.attrs_map.get("class")
    if static_class:
        element.static_class = json.dumps(_WHITESPACE_RUN.sub(" ", static_class).strip(), ensure_ascii=False)

    static_style = element.attrs_map.get("style")
    if static_style:
        element.static_style = json.dumps(parse_style_text(static_style), separators=(",", ":"), ensure_ascii=False)

    return element


class _TreeBuilder:
    """Single-use tokenizer state for one compile call."""

    def __init__(self, text: str, preserve_whitespace: bool):
        self.text = text
        self.preserve_whitespace = preserve_whitespace
        self.pos = 0
        self.stack: list[ElementNode] = []
        self.root: ElementNode | None = None

    def build(self) -> ElementNode:
        text = self.text

        while self.pos < len(text):
            if text.startswith("<", self.pos):
                if self._skip(_COMMENT) or self._skip(_DOCTYPE) or self._skip(_PROCESSING_INSTRUCTION):
                    continue

                cdata = _CDATA.match(text, self.pos)
                if cdata:
                    self.pos = cdata.end()
                    self._chars(cdata.group(1), decode=False)
                    continue

                end_tag = _END_TAG.match(text, self.pos)
                if end_tag:
                    self.pos = end_tag.end()
                    self._end(end_tag.group(1))
                    continue

                if _START_TAG_OPEN.match(text, self.pos):
                    self._start_tag()
                    continue

            # Plain text up to the next "<" (a stray "<" is text as well)
            next_tag = text.find("<", self.pos + 1)
            if next_tag < 0:
                next_tag = len(text)
            self._chars(text[self.pos : next_tag])
            self.pos = next_tag

        if self.stack:
            raise CompilationError(f"Tag <{self.stack[-1].tag}> has no matching end tag")
        if self.root is None:
            raise CompilationError("Markup requires a root element")
        return self.root

    def _skip(self, pattern: re.Pattern[str]) -> bool:
        match = pattern.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            return True
        return False

    def _start_tag(self) -> None:
        start = self.pos
        open_match = _START_TAG_OPEN.match(self.text, start)
        tag = open_match.group(1)
        self.pos = open_match.end()

        attrs: list[tuple[str, str]] = []
        while True:
            close = _START_TAG_CLOSE.match(self.text, self.pos)
            if close:
                self.pos = close.end()
                unary = bool(close.group(1))
                break

            attr = _ATTRIBUTE.match(self.text, self.pos)
            if not attr or attr.end() == self.pos:
                raise CompilationError(f"Malformed start tag <{tag}> at offset {start}")
            self.pos = attr.end()

            raw_value = next((v for v in attr.group(2, 3, 4) if v is not None), "")
            attrs.append((attr.group(1), html.unescape(raw_value)))

        if tag in _FORBIDDEN_TAGS:
            logger.debug("Dropping <%s> element at offset %d", tag, start)
            if not unary:
                self._skip_raw_text(tag)
            return

        element = _create_element(tag, attrs)
        if self.stack:
            self.stack[-1].children.append(element)
        elif self.root is None:
            self.root = element
        else:
            raise CompilationError("Markup should contain exactly one root element")

        if not unary:
            self.stack.append(element)

    def _skip_raw_text(self, tag: str) -> None:
        end = re.compile(rf"</{re.escape(tag)}\s*>").search(self.text, self.pos)
        if not end:
            raise CompilationError(f"Tag <{tag}> has no matching end tag")
        self.pos = end.end()

    def _end(self, tag: str) -> None:
        if not self.stack or self.stack[-1].tag != tag:
            raise CompilationError(f"Unexpected end tag </{tag}>")

        element = self.stack.pop()
        children = element.children
        if children and isinstance(children[-1], TextNode) and not children[-1].text.strip():
            children.pop()

    def _chars(self, text: str, decode: bool = True) -> None:
        if not self.stack:
            if text.strip():
                raise CompilationError("Text is not allowed outside the root element")
            return

        children = self.stack[-1].children
        if text.strip():
            children.append(TextNode(html.unescape(text) if decode else text))
        elif self.preserve_whitespace and children:
            last = children[-1]
            if not (isinstance(last, TextNode) and last.text == " "):
                children.append(TextNode(" "))
