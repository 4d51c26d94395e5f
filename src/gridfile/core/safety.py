"""Locked, atomic full-file replacement used by committing sessions."""
import errno
import logging
import os
import shutil
import time
import uuid
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 30


class AtomicCommit:
    """Context manager that swaps new content into a file in one step.

    On entry the target's directory is checked, ``<path>.lock`` is taken and
    the current file is backed up. :meth:`write` puts the new content in a
    sibling temp file and :meth:`replace` moves it over the target. If the
    block raises, the backup is moved back. On exit the temp file, the backup
    and the lock file are all removed, so only the target remains on disk.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        timeout: float = DEFAULT_LOCK_TIMEOUT,
        create_backup: bool = True,
    ):
        """Prepare a commit to file_path.

        Args:
            file_path: File being written
            timeout: Lock timeout in seconds
            create_backup: Whether to back up the current file first
        """
        self.file_path = Path(file_path)
        self.timeout = timeout
        self.create_backup = create_backup
        self.lock_path = Path(f"{self.file_path}.lock")
        self.backup_path: Optional[Path] = None
        self.temp_path: Optional[Path] = None
        self._lock: Optional[FileLock] = None

    def __enter__(self):
        parent = self.file_path.parent
        if not parent.is_dir():
            raise FileNotFoundError(
                errno.ENOENT, "Directory does not exist", str(parent)
            )

        self._lock = FileLock(self.lock_path, timeout=self.timeout)
        try:
            self._lock.acquire()
        except Exception as e:
            logger.error(f"Failed to acquire lock for {self.file_path}: {e}")
            raise
        logger.info(f"Acquired lock for {self.file_path}")

        try:
            if self.create_backup and self.file_path.exists():
                self.backup_path = Path(f"{self.file_path}.backup.{time.time_ns()}")
                shutil.copy2(self.file_path, self.backup_path)
                logger.info(f"Created backup: {self.backup_path}")
        except Exception:
            self._release()
            raise

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                logger.error(f"Commit to {self.file_path} failed: {exc_val}")
                self._restore_backup()
            elif self.backup_path and self.backup_path.exists():
                os.remove(self.backup_path)
                logger.info("Commit successful, removed backup")
        finally:
            if self.temp_path and self.temp_path.exists():
                os.remove(self.temp_path)
            self._release()

    def _restore_backup(self):
        if self.backup_path and self.backup_path.exists():
            shutil.move(self.backup_path, self.file_path)
            logger.info(f"Restored from backup: {self.backup_path}")

    def _release(self):
        self._lock.release()
        try:
            os.remove(self.lock_path)
        except FileNotFoundError:
            pass
        logger.info(f"Released lock for {self.file_path}")

    def write(self, text: str, encoding: str = "utf-8") -> Path:
        """Write text to a fresh temp file next to the target.

        The temp file is created with mode 0666 filtered by the process
        umask, or takes the target's mode when the target exists. Newlines
        are written untranslated.

        Returns:
            Path of the temp file
        """
        temp_path = self.file_path.with_name(
            f".{self.file_path.name}.{uuid.uuid4().hex[:8]}.tmp"
        )
        fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
        self.temp_path = temp_path

        with open(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
        if self.file_path.exists():
            shutil.copymode(self.file_path, temp_path)

        return temp_path

    def replace(self):
        """Atomically move the written temp file over the target."""
        if self.temp_path is None:
            raise RuntimeError("Nothing written to commit")

        os.replace(self.temp_path, self.file_path)
        logger.info(f"Atomically replaced {self.file_path}")
        self.temp_path = None


def replace_file_text(
    file_path: Union[str, Path],
    text: str,
    encoding: str = "utf-8",
    timeout: float = DEFAULT_LOCK_TIMEOUT,
    create_backup: bool = True,
) -> Path:
    """Replace the whole content of a file with text.

    Readers never observe a partially written file, and nothing but the
    target is left in its directory afterwards.

    Args:
        file_path: Target file, created if missing
        text: Full new content
        encoding: Text encoding
        timeout: Lock timeout in seconds
        create_backup: Whether to back up the current file while writing

    Returns:
        Path of the written file

    Raises:
        FileNotFoundError: If the target's directory does not exist
        OSError: If any other filesystem step fails
        filelock.Timeout: If the lock cannot be acquired in time
    """
    file_path = Path(file_path)

    with AtomicCommit(file_path, timeout, create_backup) as commit:
        commit.write(text, encoding)
        commit.replace()

    return file_path
