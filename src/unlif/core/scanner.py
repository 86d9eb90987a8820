"""
LIF Scanner - Marker search, block identifiers and record inference.

This module provides:
    - PatternScanner: Incremental byte-at-a-time marker matcher
    - parse_block_id: Reads the 4-digit identifier following a marker
    - locate_records: Infers how many images a block holds
    - BlockScanner: Drives the above over a ByteSource
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from unlif.core.constants import BLOCK_ID_DIGITS, MARKER, POST_ID_SKIP
from unlif.core.source import ByteSource
from unlif.core.types import ExtractionSpan, ImageGeometry, MarkerMatch

logger = logging.getLogger(__name__)

_ZERO = ord("0")


class PatternScanner:
    """
    Matches a constant marker against bytes fed one at a time.

    A mismatch restarts the match from the beginning of the marker and the
    mismatching byte is not retried as a new start, so a marker whose prefix
    recurs inside itself can be missed.
    """

    def __init__(self, marker: bytes = MARKER) -> None:
        if not marker:
            raise ValueError("marker must not be empty")
        self.marker = marker
        self.progress = 0

    def feed(self, byte: int) -> bool:
        """Consume one byte; True when it completes the marker."""
        if byte == self.marker[self.progress]:
            self.progress += 1
            if self.progress >= len(self.marker):
                self.progress = 0
                return True
        else:
            self.progress = 0
        return False

    def reset(self) -> None:
        self.progress = 0


def parse_block_id(source: ByteSource) -> int:
    """
    Read the block identifier that follows a marker.

    Consumes 8 bytes: a padding byte before each of 4 ASCII digits.
    Digits are not validated; other bytes yield whatever value the
    arithmetic produces, kept to 16 bits unsigned.

    Args:
        source: Byte source positioned right after the marker

    Returns:
        Identifier in [0, 65535] (0-9999 for well-formed input)
    """
    value = 0
    malformed = False
    for _ in range(BLOCK_ID_DIGITS):
        source.next_byte()
        char = source.next_byte()
        if not (_ZERO <= char <= _ZERO + 9):
            malformed = True
        # signed char arithmetic
        if char >= 0x80:
            char -= 0x100
        value = (value * 10 + char - _ZERO) & 0xFFFF

    if malformed:
        logger.warning(
            f"Block identifier before offset {source.position} is not decimal, using {value}"
        )
    return value


def locate_records(
    previous_offset: int,
    current_offset: int,
    geometry: ImageGeometry,
) -> tuple[int, int, int]:
    """
    Infer the records of one block.

    Args:
        previous_offset: Previous block's offset after marker and ID (0 at first)
        current_offset: This block's offset after marker and ID
        geometry: Image layout

    Returns:
        Tuple of (data_start, span, record_count). A trailing partial
        record is dropped.
    """
    data_start = current_offset + POST_ID_SKIP
    span = current_offset - previous_offset
    record_count = span // geometry.image_size
    return data_start, span, record_count


class BlockScanner:
    """
    Single-pass scanner yielding one ExtractionSpan per marker.

    Owns all scan state: the match progress and the previous block offset.
    Iteration ends only by the source raising LIFEndOfStreamError.

    Usage:
        with ByteSource.open(path) as source:
            for block in BlockScanner(source, geometry):
                ...
    """

    def __init__(self, source: ByteSource, geometry: ImageGeometry | None = None) -> None:
        self.source = source
        self.geometry = geometry or ImageGeometry()
        self.matcher = PatternScanner()
        self.previous_offset = 0

    def next_match(self) -> MarkerMatch:
        """Consume bytes up to and including the next marker."""
        source = self.source
        matcher = self.matcher
        first = matcher.marker[0]
        while True:
            if matcher.progress == 0:
                source.skip_until(first)
            if matcher.feed(source.next_byte()):
                return MarkerMatch(offset=source.position)

    def next_block(self) -> ExtractionSpan:
        """Find the next marker, read its identifier and infer its records."""
        match = self.next_match()
        block_id = parse_block_id(self.source)
        current = self.source.position
        data_start, span, count = locate_records(self.previous_offset, current, self.geometry)
        self.previous_offset = current

        logger.debug(
            f"Marker at {match.offset}: block {block_id:04d}, span {span}, "
            f"{count} record(s) from {data_start}"
        )
        return ExtractionSpan(
            block_id=block_id,
            marker_offset=current,
            data_start=data_start,
            span=span,
            record_count=count,
            image_size=self.geometry.image_size,
        )

    def __iter__(self) -> Iterator[ExtractionSpan]:
        while True:
            yield self.next_block()
