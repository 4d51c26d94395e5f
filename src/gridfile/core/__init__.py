"""Core grid parsing, value conversion and safe writing."""

from .codec import format_value, parse_fields, parse_value
from .errors import (
    CoordinateError,
    GridFileError,
    InvalidArgumentError,
    ValueParseError,
)
from .grid import (
    CSV_DELIMITER,
    DEFAULT_DELIMITER,
    Grid,
    check_coordinate,
    check_count,
    check_delimiter,
    join_fields,
    render_lines,
    split_fields,
    split_lines,
)
from .safety import (
    DEFAULT_LOCK_TIMEOUT,
    AtomicCommit,
    replace_file_text,
)

__all__ = [
    # Grid parsing
    "Grid",
    "split_lines",
    "split_fields",
    "join_fields",
    "render_lines",
    "check_delimiter",
    "check_coordinate",
    "check_count",
    "DEFAULT_DELIMITER",
    "CSV_DELIMITER",
    # Value conversion
    "parse_value",
    "parse_fields",
    "format_value",
    # Safe writing
    "AtomicCommit",
    "replace_file_text",
    "DEFAULT_LOCK_TIMEOUT",
    # Errors
    "GridFileError",
    "CoordinateError",
    "ValueParseError",
    "InvalidArgumentError",
]
