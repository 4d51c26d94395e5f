"""File handle: path plus delimiter, and the factory for sessions."""
import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .core.grid import DEFAULT_DELIMITER, check_delimiter
from .core.safety import DEFAULT_LOCK_TIMEOUT
from .sessions import BuildSession, EditSession, ReadSession

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class FileHandle:
    """Identifies a delimited text file and how to split it.

    A handle does no I/O by itself except :meth:`remove` and
    :meth:`exists`. Handles are values: the ``with_*`` methods return a
    new handle and leave the original untouched.

    Attributes:
        path: Location of the file
        delimiter: Field separator, a single character (default space)
        encoding: Text encoding used for reading and writing
        lock_timeout: Seconds to wait for the commit lock
        create_backup: Keep a backup of the old file while committing

    Example:
        >>> handle = FileHandle.from_path("data.txt").with_delimiter(",")
        >>> handle.builder().append_line("1,2,3").append_line("4,5,6").commit()
        >>> handle.reader().header(1, int)
        [[1, 2, 3]]
    """

    path: Path
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    create_backup: bool = True

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))
        check_delimiter(self.delimiter)

    @classmethod
    def from_path(cls, path: Union[str, Path], **options) -> "FileHandle":
        """Create a handle; no file is touched.

        Args:
            path: Location of the file
            **options: Any other handle field, e.g. ``encoding``
        """
        return cls(Path(path), **options)

    def with_delimiter(self, delimiter: str) -> "FileHandle":
        """Return a copy of this handle splitting on delimiter.

        Raises:
            InvalidArgumentError: If delimiter is not a single character
        """
        return dataclasses.replace(self, delimiter=delimiter)

    def with_encoding(self, encoding: str) -> "FileHandle":
        return dataclasses.replace(self, encoding=encoding)

    def reader(self) -> ReadSession:
        """Load the file and start a read session."""
        return ReadSession(self)

    def editor(self) -> EditSession:
        """Load the file and start an edit session."""
        return EditSession(self)

    def builder(self) -> BuildSession:
        """Start a session that builds the file from scratch."""
        return BuildSession(self)

    def remove(self) -> None:
        """Delete the file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be deleted
        """
        try:
            os.remove(self.path)
        except OSError as e:
            logger.error(f"Failed to remove {self.path}: {e}")
            raise
        logger.info(f"Removed {self.path}")

    def exists(self) -> bool:
        return self.path.exists()
