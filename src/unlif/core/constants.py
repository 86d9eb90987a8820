"""
LIF Constants - Shared constants for LIF image extraction.

This module centralizes all magic numbers and byte sequences used throughout
the codebase for easier maintenance and consistency.
"""

from __future__ import annotations

# =============================================================================
# Version
# =============================================================================
VERSION: str = "1.0"

BANNER: str = (
    f"Unlif version {VERSION}\n"
    "Copyright (C) 2014 Ian Martin\n"
    "Unlif is free software and comes with ABSOLUTELY NO WARRANTY; not even for\n"
    "MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. For details, see LICENSE.\n"
)


# =============================================================================
# Stream Scanning
# =============================================================================
# Read size for both the forward scan and the positioned copy
BUF_SIZE: int = 4096

# "MemBlock_" as stored in the container: UTF-16LE, each character followed
# by a zero byte. The padding byte after "_" is not part of the marker.
MARKER: bytes = "MemBlock_".encode("utf-16-le")[:-1]

# Block identifier: 4 digits, each preceded by a padding byte
BLOCK_ID_DIGITS: int = 4

# Bytes between the end of the identifier and the first image sample
POST_ID_SKIP: int = 2


# =============================================================================
# Image Geometry Defaults
# =============================================================================
# Not stored in the container; constant for a whole run.
DEFAULT_IMAGE_WIDTH: int = 1600
DEFAULT_IMAGE_HEIGHT: int = 1200
DEFAULT_BYTES_PER_PIXEL: int = 2
DEFAULT_MAX_VALUE: int = 4095  # 12-bit camera


# =============================================================================
# Output Format
# =============================================================================
PGM_MAGIC: str = "P5"
OUTPUT_NAME_TEMPLATE: str = "MemBlock_{block_id:04d}_{index:03d}.pgm"

# Environment variable overriding the default output directory
ENV_OUTPUT_DIR: str = "UNLIF_OUTPUT_DIR"


# =============================================================================
# Exit Codes
# =============================================================================
EXIT_OK: int = 0
EXIT_USAGE: int = 1
EXIT_OPEN_INPUT: int = 2
EXIT_OPEN_SPLICE: int = 3
EXIT_CREATE_OUTPUT: int = 4
EXIT_READ: int = 5
EXIT_WRITE: int = 6
EXIT_SEEK: int = 7
