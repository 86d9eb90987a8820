"""
Unlif core module - Stream scanning, types, and exceptions.

This module provides the foundational classes for scanning LIF files:
    - ByteSource: Buffered forward reader with stream position
    - PatternScanner / BlockScanner: Marker search and record inference
    - ImageGeometry, ExtractionSpan, ExtractedImage: Data types
    - Custom exceptions for error handling
"""

from unlif.core.constants import (
    # Scanning
    BUF_SIZE,
    MARKER,
    POST_ID_SKIP,
    # Geometry
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_BYTES_PER_PIXEL,
    DEFAULT_MAX_VALUE,
    # Output
    PGM_MAGIC,
    OUTPUT_NAME_TEMPLATE,
)
from unlif.core.exceptions import (
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
from unlif.core.types import (
    ImageGeometry,
    MarkerMatch,
    ExtractionSpan,
    ExtractedImage,
)
from unlif.core.source import ByteSource
from unlif.core.scanner import (
    PatternScanner,
    BlockScanner,
    parse_block_id,
    locate_records,
)

__all__ = [
    # Constants - Scanning
    "BUF_SIZE",
    "MARKER",
    "POST_ID_SKIP",
    # Constants - Geometry
    "DEFAULT_IMAGE_WIDTH",
    "DEFAULT_IMAGE_HEIGHT",
    "DEFAULT_BYTES_PER_PIXEL",
    "DEFAULT_MAX_VALUE",
    # Constants - Output
    "PGM_MAGIC",
    "OUTPUT_NAME_TEMPLATE",
    # Exceptions
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
    # Types
    "ImageGeometry",
    "MarkerMatch",
    "ExtractionSpan",
    "ExtractedImage",
    # Scanning
    "ByteSource",
    "PatternScanner",
    "BlockScanner",
    "parse_block_id",
    "locate_records",
]
