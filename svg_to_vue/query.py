"""
Loader query string parsing.

Turns the raw query attached to a loader request (``?svgo=false``,
``?-svgo``, ``?{svgo: {remove_metadata: true}}``) into an options mapping.
"""

from __future__ import annotations

import logging
import re
from typing import Any, TypeAlias
from urllib.parse import unquote

import json5

from .errors import ConfigFormatError

logger = logging.getLogger(__name__)

OptionValue: TypeAlias = "bool | None | str | list[OptionValue]"
OptionsMap: TypeAlias = "dict[str, OptionValue | Any]"

_TOKEN_SEPARATOR = re.compile(r"[,&]")
_ARRAY_SUFFIX = "[]"

# "%" not starting a two-digit hex escape
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Literal tokens that become typed values instead of strings
_SPECIAL_VALUES: dict[str, bool | None] = {
    "null": None,
    "true": True,
    "false": False,
}


def _decode(text: str) -> str:
    """URL-decode a name or value the way decodeURIComponent does ("+" stays "+")."""
    if _MALFORMED_ESCAPE.search(text):
        raise ConfigFormatError(f"Malformed percent-escape in query component {text!r}")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as e:
        raise ConfigFormatError(f"Invalid percent-encoding in query component {text!r}") from e


def _parse_value(raw_value: str) -> OptionValue:
    value = _decode(raw_value)
    if value in _SPECIAL_VALUES:
        return _SPECIAL_VALUES[value]
    return value


def parse_query(query: str) -> OptionsMap:
    """
    Parse a loader query string into an options mapping.

    Args:
        query: Raw query, "" or beginning with "?"

    Returns:
        Mapping of decoded option names to values

    Raises:
        ConfigFormatError: If the query does not begin with "?" or the
            object-literal form is malformed
    """
    if query == "":
        return {}

    if not query.startswith("?"):
        raise ConfigFormatError('A valid query string passed to parse_query should begin with "?"')

    query = query[1:]
    if not query:
        return {}

    if query.startswith("{") and query.endswith("}"):
        try:
            return json5.loads(query)
        except ValueError as e:
            raise ConfigFormatError(f"Invalid object literal in query: {e}") from e

    result: OptionsMap = {}
    for arg in _TOKEN_SEPARATOR.split(query):
        name, sep, raw_value = arg.partition("=")

        if sep:
            value = _parse_value(raw_value)
            if name.endswith(_ARRAY_SUFFIX):
                name = _decode(name[: -len(_ARRAY_SUFFIX)])
                if not isinstance(result.get(name), list):
                    result[name] = []
                result[name].append(value)
            else:
                result[_decode(name)] = value
        elif arg.startswith("-"):
            result[_decode(arg[1:])] = False
        elif arg.startswith("+"):
            result[_decode(arg[1:])] = True
        else:
            result[_decode(arg)] = True

    logger.debug("Parsed query %r into %d option(s)", query, len(result))
    return result
