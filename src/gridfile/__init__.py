"""Positional read, edit and build access to delimited text files."""

from .core import (
    CSV_DELIMITER,
    DEFAULT_DELIMITER,
    CoordinateError,
    Grid,
    GridFileError,
    InvalidArgumentError,
    ValueParseError,
    format_value,
    parse_fields,
    parse_value,
)
from .handle import DEFAULT_ENCODING, FileHandle
from .sessions import BuildSession, EditSession, ReadSession

__version__ = "0.1.0"

__all__ = [
    # Handle and sessions
    "FileHandle",
    "ReadSession",
    "EditSession",
    "BuildSession",
    # Grid and values
    "Grid",
    "parse_value",
    "parse_fields",
    "format_value",
    "DEFAULT_DELIMITER",
    "DEFAULT_ENCODING",
    "CSV_DELIMITER",
    # Errors
    "GridFileError",
    "CoordinateError",
    "ValueParseError",
    "InvalidArgumentError",
]
