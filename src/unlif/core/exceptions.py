"""
LIF Exceptions - Custom exception classes for LIF image extraction.

Exception Hierarchy:
    LIFError (base)
    ├── LIFArgumentError - Missing or invalid command-line arguments
    ├── LIFInputError - Input file cannot be opened
    ├── LIFSpliceOpenError - Input cannot be reopened for a positioned copy
    ├── LIFOutputError - Output image cannot be created
    ├── LIFReadError - Read failure or unexpected end of input
    │   └── LIFEndOfStreamError - Forward scan reached the end of the input
    ├── LIFWriteError - Output image write failure
    ├── LIFSeekError - Positioned copy could not seek to its offset
    └── LIFParseError - Malformed extracted image

Every exception carries the process exit status the CLI reports for it.
"""

from __future__ import annotations

from unlif.core.constants import (
    EXIT_CREATE_OUTPUT,
    EXIT_OPEN_INPUT,
    EXIT_OPEN_SPLICE,
    EXIT_READ,
    EXIT_SEEK,
    EXIT_USAGE,
    EXIT_WRITE,
)


class LIFError(Exception):
    """Base exception for all LIF extraction errors."""

    exit_code: int = EXIT_USAGE


class LIFArgumentError(LIFError):
    """Exception raised when no input is given or an option is invalid."""

    exit_code = EXIT_USAGE


class LIFInputError(LIFError):
    """Exception raised when the input file cannot be opened for scanning."""

    exit_code = EXIT_OPEN_INPUT


class LIFSpliceOpenError(LIFError):
    """Exception raised when the input cannot be reopened for copying."""

    exit_code = EXIT_OPEN_SPLICE


class LIFOutputError(LIFError):
    """Exception raised when an output image file cannot be created."""

    exit_code = EXIT_CREATE_OUTPUT


class LIFReadError(LIFError):
    """Exception raised for read failures.

    Examples:
        - Input stream raised an OSError
        - Positioned copy hit the end of the input early
    """

    exit_code = EXIT_READ

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class LIFEndOfStreamError(LIFReadError):
    """Exception raised when the forward scan exhausts its input.

    This is how every complete scan ends.
    """


class LIFWriteError(LIFError):
    """Exception raised when an output image cannot be fully written."""

    exit_code = EXIT_WRITE


class LIFSeekError(LIFError):
    """Exception raised when a positioned copy cannot reach its offset."""

    exit_code = EXIT_SEEK

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class LIFParseError(LIFError):
    """Exception raised for malformed extracted images.

    Examples:
        - Missing P5 magic
        - Non-numeric header fields
        - Fewer sample bytes than the header promises
    """
