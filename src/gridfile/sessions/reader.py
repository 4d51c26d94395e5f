"""Positional reads against a snapshot of a delimited file."""
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from ..core.codec import parse_fields, parse_value
from ..core.errors import CoordinateError
from ..core.grid import (
    CSV_DELIMITER,
    Grid,
    check_coordinate,
    check_count,
    split_fields,
)

if TYPE_CHECKING:
    from ..handle import FileHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReadSession:
    """Reader for several values of the same file in succession.

    The file is read once when the session is created; later changes on
    disk are not seen. Coordinates are 1-based and checked as soon as a
    read is queued, while type conversion happens in :meth:`resolve`.

    Example:
        >>> reader = FileHandle.from_path("data.txt").with_delimiter(",").reader()
        >>> reader.queue_read(1, 2).queue_read(3, 2).resolve(int)
        [2, 8]
    """

    def __init__(self, handle: "FileHandle"):
        """Load the file behind handle.

        Args:
            handle: File handle providing path, delimiter and encoding

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        self.handle = handle
        with open(handle.path, encoding=handle.encoding, newline="") as f:
            self.text = f.read()

        self.grid = Grid.from_text(self.text, handle.delimiter)
        self._values: list[str] = []
        logger.info(f"Loaded {handle.path} for reading ({self.grid.line_count} lines)")

    @property
    def values(self) -> list[str]:
        """Raw strings queued so far."""
        return self._values.copy()

    def raw_text(self) -> str:
        """Get the full loaded text, unmodified."""
        return self.text

    def line_count(self) -> int:
        return self.grid.line_count

    def fields(self, line: int) -> list[str]:
        """Get the raw fields of a 1-based line."""
        return self.grid.fields(line)

    def queue_read(self, line: int, field: int) -> "ReadSession":
        """Queue the value at (line, field) for :meth:`resolve`.

        Args:
            line: Line number (1-based)
            field: Field position within the line (1-based)

        Returns:
            This session, for chaining

        Raises:
            CoordinateError: If either coordinate is out of range
        """
        raw = self.grid.field(line, field)
        self._values.append(raw)
        logger.debug(f"Queued read ({line}, {field}) -> {raw!r}")
        return self

    def resolve(self, value_type: Callable[[str], T] = str) -> list[T]:
        """Parse every queued value, in queue order.

        The queue is kept, so resolving again yields the same values.

        Raises:
            ValueParseError: If any queued value fails to parse
        """
        return parse_fields(self._values, value_type)

    def header(self, length: int, value_type: Callable[[str], T] = str) -> list[list[T]]:
        """Parse the first ``length`` lines field by field.

        Raises:
            InvalidArgumentError: If length is not an integer of at least 1
            CoordinateError: If the file has fewer than ``length`` lines
        """
        check_count(length, "Header length", 1)
        return [
            parse_fields(self.grid.fields(n), value_type) for n in range(1, length + 1)
        ]

    def footer(self, value_type: Callable[[str], T] = str) -> list[T]:
        """Parse the last line field by field.

        Raises:
            CoordinateError: If the file is empty
        """
        if self.grid.line_count == 0:
            raise CoordinateError(f"{self.handle.path} has no lines")
        return parse_fields(self.grid.fields(self.grid.line_count), value_type)

    def body(
        self, header_lines: int, footer_lines: int, value_type: Callable[[str], T] = str
    ) -> list[list[T]]:
        """Parse every line between the header and the footer.

        If ``header_lines + footer_lines`` covers the whole file the result
        is empty rather than an error.

        Args:
            header_lines: Number of leading lines to skip
            footer_lines: Number of trailing lines to skip
            value_type: Target type for every field

        Raises:
            InvalidArgumentError: If either count is not a non-negative integer
        """
        check_count(header_lines, "Header line count")
        check_count(footer_lines, "Footer line count")

        end = self.grid.line_count - footer_lines
        return [
            parse_fields(self.grid.fields(n), value_type)
            for n in range(header_lines + 1, end + 1)
        ]

    def csv_column(self, row: int, value_type: Callable[[str], T] = str) -> list[T]:
        """Read one comma-separated column, skipping the first line.

        The split always uses a comma, whatever delimiter the handle has.

        Args:
            row: Column position (1-based)
            value_type: Target type

        Raises:
            CoordinateError: If a line has fewer than ``row`` fields
            ValueParseError: If any value fails to parse
        """
        column = []
        for line in self.grid.lines[1:]:
            fields = split_fields(line, CSV_DELIMITER)
            raw = fields[check_coordinate(row, len(fields), "row")]
            column.append(parse_value(raw, value_type))
        return column

    def to_frame(
        self, header_lines: int = 0, footer_lines: int = 0, value_type: Any = str
    ):
        """Load the body into a pandas DataFrame.

        Rows come from :meth:`body`; columns are numbered from 1 to match
        field coordinates.

        Raises:
            ImportError: If pandas is not installed
        """
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "pandas is required for ReadSession.to_frame. "
                "Install with: pip install 'gridfile[pandas]'"
            ) from None

        rows = self.body(header_lines, footer_lines, value_type)
        width = max((len(r) for r in rows), default=0)
        return pd.DataFrame(rows, columns=range(1, width + 1))
