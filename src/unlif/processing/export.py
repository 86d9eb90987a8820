"""
Image Export - Convert extracted PGM images to other formats.

Supported formats:
    - TIFF (single page, 8-bit or 16-bit grayscale)
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from unlif.processing.image import read_pgm

logger = logging.getLogger(__name__)


def export_to_tiff(
    pgm_path: str | Path,
    output_path: str | Path | None = None,
    byteorder: str = "<",
    compression: str = "none",
) -> Path:
    """
    Export an extracted PGM image to a TIFF file.

    Args:
        pgm_path: Extracted PGM file
        output_path: Output file path (default: pgm_path with .tiff suffix)
        byteorder: Byte order of the PGM samples (see read_pgm)
        compression: TIFF compression ("lzw", "zlib", "none")

    Returns:
        Path to the saved TIFF file

    Note:
        Sample values are written unchanged; TIFF stores them in native
        byte order with the order recorded in the file header.
    """
    try:
        import tifffile
    except ImportError:
        raise ImportError("tifffile package required: pip install tifffile")

    pgm_path = Path(pgm_path)
    if output_path is None:
        output_path = pgm_path.with_suffix(".tiff")
    output_path = Path(output_path)
    if not output_path.suffix.lower() in (".tif", ".tiff"):
        output_path = output_path.with_suffix(".tiff")

    data = read_pgm(pgm_path, byteorder=byteorder)
    data_out = data.astype(data.dtype.newbyteorder("="))

    compression_map = {"lzw": "lzw", "zlib": "zlib", "none": None}
    tifffile.imwrite(
        output_path,
        data_out,
        photometric="minisblack",
        compression=compression_map.get(compression),
        description=f"{pgm_path.name} (range {int(np.min(data))}-{int(np.max(data))})",
    )

    logger.debug(f"Exported {pgm_path} to {output_path}")
    return output_path
