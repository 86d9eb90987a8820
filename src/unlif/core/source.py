"""
LIF Byte Source - Buffered forward-only reader over the input stream.

The source counts every byte it delivers so diagnostics can report the exact
stream offset at which scanning stopped.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO

from unlif.core.constants import BUF_SIZE
from unlif.core.exceptions import LIFEndOfStreamError, LIFInputError, LIFReadError

logger = logging.getLogger(__name__)


class ByteSource:
    """
    Sequential byte reader with an absolute stream position.

    Usage:
        with ByteSource.open(path) as source:
            while True:
                b = source.next_byte()

    Or over any binary stream:
        source = ByteSource(io.BytesIO(data))
    """

    def __init__(self, stream: BinaryIO, buffer_size: int = BUF_SIZE) -> None:
        """
        Initialize the source.

        Args:
            stream: Binary stream positioned at the start of the data.
                    Streams that are not an io.BufferedReader get wrapped in one.
            buffer_size: Buffer size for the wrapping reader
        """
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if not isinstance(stream, io.BufferedReader):
            stream = io.BufferedReader(stream, buffer_size)
        self._stream = stream
        self._position = 0

    @classmethod
    def open(cls, path: str | Path, buffer_size: int = BUF_SIZE) -> ByteSource:
        """Open a file for scanning."""
        try:
            stream = open(path, "rb", buffering=buffer_size)
        except OSError as exc:
            raise LIFInputError(f"Unable to open input file: {exc}") from exc
        logger.debug(f"Opened {path} for scanning")
        return cls(stream, buffer_size)

    @property
    def position(self) -> int:
        """Number of bytes delivered so far."""
        return self._position

    def _read_error(self, exc: OSError) -> LIFReadError:
        return LIFReadError(
            f"Unable to read data from input file at offset {self._position}: {exc}",
            offset=self._position,
        )

    def _end_of_stream(self) -> LIFEndOfStreamError:
        return LIFEndOfStreamError(
            f"Unable to read data from input file at offset {self._position}: end of file",
            offset=self._position,
        )

    def next_byte(self) -> int:
        """
        Return the next byte of the stream.

        Raises:
            LIFEndOfStreamError: If the stream is exhausted
            LIFReadError: If the underlying read fails
        """
        try:
            data = self._stream.read(1)
        except OSError as exc:
            raise self._read_error(exc) from exc
        if not data:
            raise self._end_of_stream()
        self._position += 1
        return data[0]

    def skip_until(self, value: int) -> None:
        """
        Advance until the next byte delivered will equal value.

        Skipped bytes count towards position exactly as if each had been
        read with next_byte().
        """
        while True:
            try:
                # Only inspects what is already buffered, refilling when empty
                chunk = self._stream.peek(1)
            except OSError as exc:
                raise self._read_error(exc) from exc
            if not chunk:
                raise self._end_of_stream()
            found = chunk.find(value)
            skip = found if found >= 0 else len(chunk)
            self._stream.read(skip)
            self._position += skip
            if found >= 0:
                return

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def __enter__(self) -> ByteSource:
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit."""
        self.close()
