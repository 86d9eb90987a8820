"""
LIF Extraction - Copy embedded raw images into standalone PGM files.

Each record is copied through a second, independent handle on the input so
the forward scan's position is never disturbed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from unlif.core.config import get_output_dir
from unlif.core.constants import BUF_SIZE, OUTPUT_NAME_TEMPLATE
from unlif.core.exceptions import (
    LIFOutputError,
    LIFReadError,
    LIFSeekError,
    LIFSpliceOpenError,
    LIFWriteError,
)
from unlif.core.scanner import BlockScanner
from unlif.core.source import ByteSource
from unlif.core.types import ExtractedImage, ExtractionSpan, ImageGeometry

logger = logging.getLogger(__name__)


def output_filename(block_id: int, index: int) -> str:
    """Name of the output file for a block and one-based record index."""
    return OUTPUT_NAME_TEMPLATE.format(block_id=block_id, index=index)


def _write_all(out: BinaryIO, data: bytes) -> None:
    try:
        written = out.write(data)
    except OSError as exc:
        raise LIFWriteError(f"Unable to write to output file: {exc}") from exc
    if written is not None and written != len(data):
        raise LIFWriteError(f"Unable to write to output file: wrote {written} of {len(data)} bytes")


def splice(input_path: str | Path, offset: int, length: int, out: BinaryIO) -> None:
    """
    Copy length bytes starting at offset of input_path into out.

    Args:
        input_path: Input file, opened afresh for this copy
        offset: Absolute input offset of the first byte
        length: Number of bytes to copy
        out: Binary stream receiving the bytes

    Raises:
        LIFSpliceOpenError: If the input cannot be opened
        LIFSeekError: If the input cannot be positioned at offset
        LIFReadError: If the input ends before length bytes were copied
        LIFWriteError: If out rejects the bytes
    """
    try:
        f = open(input_path, "rb")
    except OSError as exc:
        raise LIFSpliceOpenError(f"Unable to open file: {exc}") from exc

    with f:
        try:
            position = f.seek(offset)
        except (OSError, ValueError, OverflowError) as exc:
            raise LIFSeekError(
                f"Unable to seek to offset {offset} of input file: {exc}", offset=offset
            ) from exc
        if position != offset:
            raise LIFSeekError(
                f"Unable to seek to offset {offset} of input file: landed at {position}",
                offset=offset,
            )

        progress = 0
        while progress < length:
            try:
                chunk = f.read(min(length - progress, BUF_SIZE))
            except OSError as exc:
                raise LIFReadError(f"Unable to read input file: {exc}", offset=offset + progress) from exc
            if not chunk:
                raise LIFReadError("Unexpected end of input file.", offset=offset + progress)
            _write_all(out, chunk)
            progress += len(chunk)

    logger.debug(f"Copied {length} bytes from offset {offset}")


def emit_images(
    input_path: str | Path,
    block: ExtractionSpan,
    geometry: ImageGeometry,
    output_dir: str | Path | None = None,
) -> Iterator[ExtractedImage]:
    """
    Write every record of a block to its own PGM file.

    Files are named MemBlock_<id>_<n>.pgm with n counting from 1. A file
    is yielded once it is complete; a failure leaves the partial file in
    place.

    Args:
        input_path: Input LIF file
        block: Records to extract
        geometry: Image layout (header fields and record size)
        output_dir: Destination directory (default: get_output_dir())

    Yields:
        ExtractedImage for each written file
    """
    directory = Path(output_dir) if output_dir is not None else get_output_dir()
    header = geometry.pgm_header()

    for index in range(block.record_count):
        path = directory / output_filename(block.block_id, index + 1)
        offset = block.record_offset(index)
        try:
            out = open(path, "wb")
        except OSError as exc:
            raise LIFOutputError(f"Unable to open output file: {exc}") from exc

        with out:
            _write_all(out, header)
            splice(input_path, offset, geometry.image_size, out)

        yield ExtractedImage(path=path, offset=offset)


def extract_lif(
    input_path: str | Path,
    geometry: ImageGeometry | None = None,
    output_dir: str | Path | None = None,
) -> Iterator[ExtractedImage]:
    """
    Scan a LIF file and extract every embedded image.

    The scan only stops by raising: LIFEndOfStreamError once the whole
    input has been read, or another LIFError on failure. Images are
    yielded as they are written.

    Usage:
        try:
            for image in extract_lif("sample.lif"):
                print(image.path)
        except LIFEndOfStreamError:
            pass
    """
    geometry = geometry or ImageGeometry()
    with ByteSource.open(input_path) as source:
        for block in BlockScanner(source, geometry):
            yield from emit_images(input_path, block, geometry, output_dir)
