"""
Runtime configuration for unlif-tools.

Provides global settings that can be modified at runtime.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from unlif.core.constants import ENV_OUTPUT_DIR


def _default_output_dir() -> Path:
    """Output directory from the environment, else the working directory."""
    env_path = os.environ.get(ENV_OUTPUT_DIR)
    if env_path:
        return Path(env_path)
    return Path.cwd()


@dataclass
class RuntimeConfig:
    """Global runtime configuration."""

    verbose: bool = False
    """Enable verbose output for debugging marker matches and spans."""

    output: TextIO | None = None
    """Output stream for verbose messages (None: current sys.stderr)."""

    output_dir: Path | None = None
    """Directory for extracted images (None: resolved at call time)."""

    def vprint(self, *args, **kwargs) -> None:
        """Print message only if verbose mode is enabled."""
        if self.verbose:
            print(*args, file=self.output or sys.stderr, **kwargs)


# Global singleton instance
_config = RuntimeConfig()


def get_config() -> RuntimeConfig:
    """Get the global runtime configuration."""
    return _config


def set_verbose(enabled: bool) -> None:
    """Enable or disable verbose mode."""
    _config.verbose = enabled


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _config.verbose


def vprint(*args, **kwargs) -> None:
    """Print message only if verbose mode is enabled."""
    _config.vprint(*args, **kwargs)


def set_output_dir(path: str | Path | None) -> None:
    """Set the directory extracted images are written to."""
    _config.output_dir = Path(path) if path is not None else None


def get_output_dir() -> Path:
    """
    Get the directory extracted images are written to.

    Checks:
        1. A directory set with set_output_dir()
        2. UNLIF_OUTPUT_DIR environment variable
        3. The current working directory
    """
    if _config.output_dir is not None:
        return _config.output_dir
    return _default_output_dir()
