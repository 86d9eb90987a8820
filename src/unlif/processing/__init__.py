"""
Unlif Processing - Image extraction and conversion utilities.

This module provides functions for:
    - Extracting embedded images to PGM files
    - Reading extracted PGM files
    - Export to TIFF
"""

from unlif.processing.export import export_to_tiff
from unlif.processing.extract import (
    emit_images,
    extract_lif,
    output_filename,
    splice,
)
from unlif.processing.image import read_pgm, read_pgm_header

__all__ = [
    # Extraction
    "emit_images",
    "extract_lif",
    "output_filename",
    "splice",
    # Image reading
    "read_pgm",
    "read_pgm_header",
    # Export
    "export_to_tiff",
]
