"""In-place field edits committed as a full-file replace."""
import logging
from typing import TYPE_CHECKING, Any

from ..core.codec import format_value
from ..core.grid import Grid
from ..core.safety import replace_file_text

if TYPE_CHECKING:
    from ..handle import FileHandle

logger = logging.getLogger(__name__)


class EditSession:
    """Editor for changing several values of the same file in succession.

    Edits are applied to an in-memory copy of the lines and only reach the
    disk on :meth:`commit`.

    Example:
        >>> handle = FileHandle.from_path("data.txt").with_delimiter(",")
        >>> handle.editor().set_value(2, 2, "123").set_value(3, 2, 567).commit()
    """

    def __init__(self, handle: "FileHandle"):
        """Load the file behind handle.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        self.handle = handle
        with open(handle.path, encoding=handle.encoding, newline="") as f:
            self.grid = Grid.from_text(f.read(), handle.delimiter)
        logger.info(f"Loaded {handle.path} for editing ({self.grid.line_count} lines)")

    @property
    def lines(self) -> list[str]:
        return self.grid.lines.copy()

    def set_value(self, line: int, field: int, value: Any) -> "EditSession":
        """Overwrite the field at (line, field).

        Args:
            line: Line number (1-based)
            field: Field position within the line (1-based)
            value: Replacement; non-string values are formatted first

        Returns:
            This session, for chaining

        Raises:
            CoordinateError: If either coordinate is out of range
        """
        text = format_value(value)
        self.grid.replace_field(line, field, text)
        logger.debug(f"Set ({line}, {field}) to {text!r}")
        return self

    def render(self) -> str:
        """Get the text :meth:`commit` would write."""
        return self.grid.render()

    def commit(self) -> "FileHandle":
        """Replace the file with the edited lines.

        Returns:
            The handle this session was created from
        """
        replace_file_text(
            self.handle.path,
            self.render(),
            encoding=self.handle.encoding,
            timeout=self.handle.lock_timeout,
            create_backup=self.handle.create_backup,
        )
        logger.info(f"Committed {self.grid.line_count} lines to {self.handle.path}")
        return self.handle
