"""Line and field splitting for delimited text grids."""
from collections.abc import Iterable
from typing import Any, Optional

from .errors import CoordinateError, InvalidArgumentError

DEFAULT_DELIMITER = " "
CSV_DELIMITER = ","


def split_lines(text: str) -> list[str]:
    """Split text into lines.

    Lines end with ``\\n`` or ``\\r\\n``. A final newline does not produce an
    empty last line, and no other line separators are recognised.

    Args:
        text: Raw file content

    Returns:
        List of lines without terminators
    """
    lines = text.split("\n")
    tail = lines.pop()

    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        lines.append(tail)
    return lines


def split_fields(line: str, delimiter: str) -> list[str]:
    """Split a line into fields, keeping empty fields."""
    return line.split(delimiter)


def join_fields(fields: Iterable[str], delimiter: str) -> str:
    """Join fields back into a line."""
    return delimiter.join(fields)


def render_lines(lines: Iterable[str]) -> str:
    """Render lines as file content, each terminated by a newline."""
    return "".join(f"{line}\n" for line in lines)


def check_delimiter(delimiter: Any) -> str:
    """Validate a delimiter.

    Raises:
        InvalidArgumentError: If delimiter is not a single character
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidArgumentError(
            f"Delimiter must be a single character, got {delimiter!r}"
        )
    return delimiter


def check_coordinate(index: Any, size: int, axis: str = "line") -> int:
    """Convert a 1-based coordinate into a list index.

    Args:
        index: 1-based coordinate
        size: Number of available items
        axis: Name used in the error message

    Returns:
        0-based index

    Raises:
        CoordinateError: If index is not an integer in ``1..size``
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise CoordinateError(f"{axis} must be an integer, got {index!r}")
    if index < 1 or index > size:
        raise CoordinateError(f"{axis} {index} out of range (1..{size})")
    return index - 1


def check_count(value: Any, name: str, minimum: int = 0) -> int:
    """Validate a line count argument.

    Raises:
        InvalidArgumentError: If value is not an integer of at least minimum
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value}")
    return value


class Grid:
    """Ordered lines with fields derived on access.

    Fields are never cached; every access splits the line again so that
    edits through :meth:`replace_field` are visible immediately.
    """

    def __init__(self, lines: list[str], delimiter: str = DEFAULT_DELIMITER):
        self.lines = lines
        self.delimiter = check_delimiter(delimiter)

    @classmethod
    def from_text(cls, text: str, delimiter: str = DEFAULT_DELIMITER) -> "Grid":
        """Build a grid from raw file content."""
        return cls(split_lines(text), delimiter)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line(self, line: int) -> str:
        """Get the raw text of a 1-based line."""
        return self.lines[check_coordinate(line, len(self.lines), "line")]

    def fields(self, line: int, delimiter: Optional[str] = None) -> list[str]:
        """Get the fields of a 1-based line.

        Args:
            line: Line number (1-based)
            delimiter: Override for the grid delimiter
        """
        return split_fields(self.line(line), delimiter or self.delimiter)

    def field(self, line: int, field: int) -> str:
        """Get a single raw field by 1-based coordinate."""
        fields = self.fields(line)
        return fields[check_coordinate(field, len(fields), "field")]

    def replace_field(self, line: int, field: int, value: str) -> str:
        """Replace a field in place.

        Both coordinates are validated before the line is modified.

        Returns:
            The rewritten line
        """
        line_index = check_coordinate(line, len(self.lines), "line")
        fields = split_fields(self.lines[line_index], self.delimiter)
        fields[check_coordinate(field, len(fields), "field")] = value

        new_line = join_fields(fields, self.delimiter)
        self.lines[line_index] = new_line
        return new_line

    def render(self) -> str:
        """Render the grid as file content."""
        return render_lines(self.lines)
