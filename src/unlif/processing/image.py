"""
PGM Image Reading - Load extracted images as numpy arrays.

Samples are left in the byte order they were stored in the container,
so the byte order must be given when reading them back.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from unlif.core.constants import PGM_MAGIC
from unlif.core.exceptions import LIFParseError

logger = logging.getLogger(__name__)


def _read_token(data: bytes, pos: int) -> tuple[bytes, int]:
    """Read one whitespace-delimited header token, skipping comments."""
    n = len(data)
    while pos < n:
        if data[pos:pos + 1].isspace():
            pos += 1
        elif data[pos:pos + 1] == b"#":
            while pos < n and data[pos:pos + 1] not in (b"\n", b"\r"):
                pos += 1
        else:
            break
    start = pos
    while pos < n and not data[pos:pos + 1].isspace():
        pos += 1
    return data[start:pos], pos


def read_pgm_header(data: bytes) -> tuple[int, int, int, int]:
    """
    Parse a binary PGM header.

    Args:
        data: File contents

    Returns:
        Tuple of (width, height, max_value, data_offset)

    Raises:
        LIFParseError: If the header is malformed
    """
    magic, pos = _read_token(data, 0)
    if magic != PGM_MAGIC.encode("ascii"):
        raise LIFParseError(f"Not a binary PGM file (magic {magic!r})")

    fields = []
    for name in ("width", "height", "max_value"):
        token, pos = _read_token(data, pos)
        try:
            value = int(token)
        except ValueError:
            raise LIFParseError(f"Invalid PGM {name}: {token!r}") from None
        if value <= 0:
            raise LIFParseError(f"PGM {name} must be positive, got {value}")
        fields.append(value)

    # Exactly one whitespace byte separates the header from the samples
    if pos >= len(data) or not data[pos:pos + 1].isspace():
        raise LIFParseError("PGM header is not terminated")
    width, height, max_value = fields
    return width, height, max_value, pos + 1


def read_pgm(path: str | Path, byteorder: str = "<") -> np.ndarray:
    """
    Load an extracted PGM file.

    Args:
        path: PGM file path
        byteorder: "<" for little-endian samples (as stored in LIF files),
                   ">" for standard big-endian PGM

    Returns:
        Array of shape (height, width), uint8 if max_value < 256 else uint16

    Raises:
        LIFParseError: If the file is malformed or truncated
    """
    if byteorder not in ("<", ">"):
        raise ValueError(f"byteorder must be '<' or '>', got {byteorder!r}")

    data = Path(path).read_bytes()
    width, height, max_value, offset = read_pgm_header(data)

    bytes_per_pixel = 1 if max_value < 256 else 2
    expected = width * height * bytes_per_pixel
    available = len(data) - offset
    if available < expected:
        raise LIFParseError(f"Truncated PGM: expected {expected} sample bytes, found {available}")
    if available > expected:
        logger.debug(f"Ignoring {available - expected} trailing bytes in {path}")

    dtype = np.dtype(f"{byteorder}u{bytes_per_pixel}")
    pixels = np.frombuffer(data, dtype=dtype, count=width * height, offset=offset)
    return pixels.reshape(height, width)
