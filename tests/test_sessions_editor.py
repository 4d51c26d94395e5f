"""Tests for the edit session."""
import tempfile
from pathlib import Path

import pytest
from gridfile import FileHandle
from gridfile.core.errors import CoordinateError
from gridfile.sessions.editor import EditSession

SAMPLE = "1,2,3\n4,5,6\n7,8,9\n10,12"


class TestEditSession:
    """Test field edits and commits."""

    def setup_method(self) -> None:
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_file = Path(self.temp_dir) / "filename.gph"
        self.test_file.write_text(SAMPLE)
        self.handle = FileHandle.from_path(self.test_file).with_delimiter(",")

    def teardown_method(self) -> None:
        """Clean up test environment."""
        import shutil

        shutil.rmtree(self.temp_dir)

    def test_chained_edits(self) -> None:
        """Several edits commit together."""
        editor = self.handle.editor()
        assert isinstance(editor, EditSession)

        returned = (
            editor.set_value(2, 2, "123")
            .set_value(3, 2, "567")
            .set_value(4, 2, "560")
            .commit()
        )

        assert returned is self.handle
        assert self.test_file.read_text() == "1,2,3\n4,123,6\n7,567,9\n10,560\n"

    def test_edit_then_read_back(self) -> None:
        """A fresh reader sees the new value and nothing else changes."""
        before = self.handle.reader()

        self.handle.editor().set_value(3, 3, "90").commit()
        after = self.handle.reader()

        assert after.queue_read(3, 3).resolve(int) == [90]
        for line in range(1, before.line_count() + 1):
            if line != 3:
                assert after.fields(line) == before.fields(line)
        assert after.fields(3) == ["7", "8", "90"]

    def test_non_string_values(self) -> None:
        """Numbers and booleans are formatted before writing."""
        editor = self.handle.editor().set_value(1, 1, 100).set_value(1, 2, True)
        assert editor.lines[0] == "100,true,3"

    def test_edit_same_field_twice(self) -> None:
        editor = self.handle.editor().set_value(1, 1, "a").set_value(1, 1, "b")
        assert editor.lines[0] == "b,2,3"

    @pytest.mark.parametrize("line, field", [(0, 1), (5, 1), (1, 0), (1, 4), (-1, 1)])
    def test_out_of_range_no_mutation(self, line: int, field: int) -> None:
        """Rejected edits leave the session and the file untouched."""
        editor = self.handle.editor()
        before = editor.lines

        with pytest.raises(CoordinateError):
            editor.set_value(line, field, "x")

        assert editor.lines == before
        assert self.test_file.read_text() == SAMPLE

    def test_nothing_written_before_commit(self) -> None:
        self.handle.editor().set_value(1, 1, "changed")
        assert self.test_file.read_text() == SAMPLE

    def test_render(self) -> None:
        editor = self.handle.editor().set_value(4, 1, "11")
        assert editor.render() == "1,2,3\n4,5,6\n7,8,9\n11,12\n"

    def test_commit_is_repeatable(self) -> None:
        """Committing twice writes the same content twice."""
        editor = self.handle.editor().set_value(1, 3, "30")
        editor.commit()
        first = self.test_file.read_bytes()
        editor.commit()

        assert self.test_file.read_bytes() == first

    def test_commit_normalises_line_endings(self) -> None:
        """Committed lines always end with a plain newline."""
        self.test_file.write_bytes(b"1,2\r\n3,4\r\n")
        self.handle.editor().set_value(2, 1, "30").commit()

        assert self.test_file.read_bytes() == b"1,2\n30,4\n"

    def test_edits_keep_empty_fields(self) -> None:
        self.test_file.write_text("a,,c\n")
        self.handle.editor().set_value(1, 3, "z").commit()
        assert self.test_file.read_text() == "a,,z\n"

    def test_space_delimited_edit(self) -> None:
        self.test_file.write_text("1 2 3\n")
        FileHandle.from_path(self.test_file).editor().set_value(1, 2, "20").commit()
        assert self.test_file.read_text() == "1 20 3\n"

    def test_commit_replaces_concurrent_changes(self) -> None:
        """Commit writes the session's lines, not a merge."""
        editor = self.handle.editor()
        self.test_file.write_text("completely,different\n")

        editor.set_value(1, 1, "x").commit()

        assert self.test_file.read_text() == "x,2,3\n4,5,6\n7,8,9\n10,12\n"

    def test_missing_file(self) -> None:
        handle = FileHandle.from_path(Path(self.temp_dir) / "missing.txt")
        with pytest.raises(FileNotFoundError):
            handle.editor()
