"""
Configuration for the SVG to Vue pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate the module before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class TransformConfig:
    """Configuration options for one transform."""

    # Optimizer options; False disables optimization, any non-dict value means defaults
    svgo_config: dict[str, Any] | bool | None = field(default_factory=dict)

    # Source file, forwarded to the optimizer under "path"
    svgo_path: str | None = None

    # Keep whitespace-only text between elements
    preserve_whitespace: bool = False

    def optimizer_config(self) -> dict[str, Any] | None:
        """
        Resolve the options handed to the optimizer.

        Only a mapping contributes options; any other value except False
        (null, true, strings such as "?svgo=1", lists) means default options.

        Returns:
            The merged optimizer options, or None when optimization is disabled
        """
        match self.svgo_config:
            case False:
                return None
            case dict():
                base = self.svgo_config
            case None | True:
                base = {}
            case _:
                logger.debug("Ignoring non-object svgo option %r, using default options", self.svgo_config)
                base = {}
        return {**base, "path": self.svgo_path}

    @staticmethod
    def from_options(options: dict[str, Any] | None, path: str | None = None) -> TransformConfig:
        """Create a config from loader options (the "svgo" option) and the resource path."""
        config = TransformConfig(svgo_path=path)
        if options and "svgo" in options:
            config.svgo_config = options["svgo"]
        return config

    @staticmethod
    def from_dict(d: dict) -> TransformConfig:
        """Create a config from a dictionary."""
        config = TransformConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "svgo_config": self.svgo_config,
            "svgo_path": self.svgo_path,
            "preserve_whitespace": self.preserve_whitespace,
        }
