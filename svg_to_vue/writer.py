"""
Atomic file writer for generated component modules.

Ensures that file writes are atomic to prevent half-written modules
from interrupted operations.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import OutputValidationError
from .pipeline.config import OutputConfig, OutputMode

logger = logging.getLogger(__name__)

# Single- and double-quoted JavaScript string literals
_JS_STRING_LITERAL = re.compile(r"""'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*\"""")
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


def validate_component(content: str) -> None:
    """Default structural validation of a generated component module.

    Raises:
        OutputValidationError: If validation fails
    """
    if "functional: true" not in content:
        raise OutputValidationError("Generated module is missing the functional marker")

    if "render(" not in content:
        raise OutputValidationError("Generated module has no render function")

    # Brackets inside string literals (text content, attribute values) don't count
    stack: list[str] = []
    for char in _JS_STRING_LITERAL.sub("''", content):
        if char in "([{":
            stack.append(char)
        elif char in _BRACKET_PAIRS:
            if not stack or stack.pop() != _BRACKET_PAIRS[char]:
                raise OutputValidationError(f"Generated module has an unbalanced '{char}'")
    if stack:
        raise OutputValidationError(f"Generated module has {len(stack)} unclosed bracket(s)")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, config: OutputConfig | None = None, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            config: Output handling configuration
            validate: Optional validation function for generated modules
        """
        self.config = config or OutputConfig()
        self._validate = validate or validate_component

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically, honoring the output mode.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            FileExistsError: If the file exists and the mode is ERROR_IF_EXISTS
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        if self.config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if self.config.validate_before_write:
                self._validate(content)

            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Wrote %s", path)
