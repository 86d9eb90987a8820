"""
Unlif Tools - Python library for extracting images from Leica LIF files.

This package scans LIF containers for embedded raw image blocks and
writes each image out as a standalone grayscale PGM file.

Modules:
    core: Stream scanning, types, constants, and exceptions
    processing: Image extraction, PGM reading, TIFF export
"""

from unlif.core import (
    # Scanning
    ByteSource,
    PatternScanner,
    BlockScanner,
    parse_block_id,
    locate_records,
    # Types
    ImageGeometry,
    MarkerMatch,
    ExtractionSpan,
    ExtractedImage,
    # Exceptions
    LIFError,
    LIFArgumentError,
    LIFInputError,
    LIFSpliceOpenError,
    LIFOutputError,
    LIFReadError,
    LIFEndOfStreamError,
    LIFWriteError,
    LIFSeekError,
    LIFParseError,
)
from unlif.processing import (
    # Extraction
    emit_images,
    extract_lif,
    output_filename,
    splice,
    # Image reading
    read_pgm,
    read_pgm_header,
    # Export
    export_to_tiff,
)

__version__ = "1.0.0"

__all__ = [
    # Core - Scanning
    "ByteSource",
    "PatternScanner",
    "BlockScanner",
    "parse_block_id",
    "locate_records",
    # Core - Types
    "ImageGeometry",
    "MarkerMatch",
    "ExtractionSpan",
    "ExtractedImage",
    # Core - Exceptions
    "LIFError",
    "LIFArgumentError",
    "LIFInputError",
    "LIFSpliceOpenError",
    "LIFOutputError",
    "LIFReadError",
    "LIFEndOfStreamError",
    "LIFWriteError",
    "LIFSeekError",
    "LIFParseError",
    # Processing
    "emit_images",
    "extract_lif",
    "output_filename",
    "splice",
    "read_pgm",
    "read_pgm_header",
    # Export
    "export_to_tiff",
]
