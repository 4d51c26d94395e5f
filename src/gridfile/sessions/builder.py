"""Line-by-line construction of a new file body."""
import logging
from typing import TYPE_CHECKING, Any

from ..core.codec import format_value
from ..core.grid import join_fields, render_lines
from ..core.safety import replace_file_text

if TYPE_CHECKING:
    from ..handle import FileHandle

logger = logging.getLogger(__name__)


class BuildSession:
    """Builder for writing a new file line by line.

    Nothing touches the disk until :meth:`commit`, which creates the file or
    truncates an existing one.
    """

    def __init__(self, handle: "FileHandle"):
        self.handle = handle
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return self._lines.copy()

    def append_line(self, text: str) -> "BuildSession":
        """Append a raw line; it is written as given."""
        self._lines.append(text)
        return self

    def append_fields(self, *values: Any) -> "BuildSession":
        """Append a line made of values joined by the handle's delimiter."""
        return self.append_line(
            join_fields((format_value(v) for v in values), self.handle.delimiter)
        )

    def render(self) -> str:
        return render_lines(self._lines)

    def commit(self) -> "FileHandle":
        """Write every appended line to the file, replacing any content.

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
        logger.info(f"Wrote {len(self._lines)} lines to {self.handle.path}")
        return self.handle
