"""
LIF Types - Data classes for LIF image extraction.

This module contains the core data structures:
    - ImageGeometry: Fixed image layout for a whole run
    - MarkerMatch: Stream position right after a recognized marker
    - ExtractionSpan: One block's inferred records
    - ExtractedImage: One written output file
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from unlif.core.constants import (
    DEFAULT_BYTES_PER_PIXEL,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_MAX_VALUE,
    PGM_MAGIC,
)


@dataclass(frozen=True)
class ImageGeometry:
    """Raw image layout, constant for a run (not read from the container)."""

    width: int = DEFAULT_IMAGE_WIDTH
    height: int = DEFAULT_IMAGE_HEIGHT
    bytes_per_pixel: int = DEFAULT_BYTES_PER_PIXEL
    max_value: int = DEFAULT_MAX_VALUE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")
        if self.bytes_per_pixel not in (1, 2):
            raise ValueError(f"bytes_per_pixel must be 1 or 2, got {self.bytes_per_pixel}")
        if not (0 < self.max_value < 256 ** self.bytes_per_pixel):
            raise ValueError(
                f"max_value {self.max_value} does not fit in {self.bytes_per_pixel} byte(s)"
            )
        # PGM readers infer the sample width from max_value
        if self.bytes_per_pixel == 2 and self.max_value < 256:
            raise ValueError(
                f"max_value {self.max_value} implies 1-byte samples, but bytes_per_pixel is 2"
            )

    @property
    def image_size(self) -> int:
        """Bytes per raw image."""
        return self.width * self.height * self.bytes_per_pixel

    @property
    def shape(self) -> tuple[int, int]:
        """Array shape (Y, X)."""
        return (self.height, self.width)

    def pgm_header(self) -> bytes:
        """Binary PGM header for one image of this geometry."""
        return f"{PGM_MAGIC}\n{self.width} {self.height}\n{self.max_value}\n".encode("ascii")


@dataclass(frozen=True)
class MarkerMatch:
    """A recognized marker; offset is the stream position just past it."""

    offset: int


@dataclass(frozen=True)
class ExtractionSpan:
    """
    Records inferred for one block.

    marker_offset is the stream position after the marker and its
    identifier; span is measured from the previous block's marker_offset.
    """

    block_id: int
    marker_offset: int
    data_start: int
    span: int
    record_count: int
    image_size: int

    def record_offset(self, index: int) -> int:
        """Input offset of the record at zero-based index."""
        return self.data_start + index * self.image_size


@dataclass(frozen=True)
class ExtractedImage:
    """An output image and the input offset its samples were copied from."""

    path: Path
    offset: int
