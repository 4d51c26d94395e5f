"""Tests for the build session."""
import tempfile
from pathlib import Path

import pytest
from gridfile import FileHandle
from gridfile.sessions.builder import BuildSession
from hypothesis import given, settings
from hypothesis import strategies as st


class TestBuildSession:
    """Test building files from scratch."""

    def setup_method(self) -> None:
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_file = Path(self.temp_dir) / "filename.gph"
        self.handle = FileHandle.from_path(self.test_file)

    def teardown_method(self) -> None:
        """Clean up test environment."""
        import shutil

        shutil.rmtree(self.temp_dir)

    def test_no_io_before_commit(self) -> None:
        """Creating and filling a builder does not touch the disk."""
        builder = self.handle.builder().append_line("first")
        assert isinstance(builder, BuildSession)
        assert not self.test_file.exists()

    def test_write_lines(self) -> None:
        returned = (
            self.handle.builder()
            .append_line("This is the second line.")
            .append_line("This is the third line.")
            .append_line("This is the forth line.")
            .commit()
        )

        assert returned is self.handle
        assert self.test_file.read_text() == (
            "This is the second line.\n"
            "This is the third line.\n"
            "This is the forth line.\n"
        )

    def test_commit_truncates(self) -> None:
        """Existing content is replaced."""
        self.test_file.write_text("old 1\nold 2\nold 3\n")
        self.handle.builder().append_line("new").commit()
        assert self.test_file.read_text() == "new\n"

    def test_missing_directory(self) -> None:
        """Committing into a missing directory fails without creating it."""
        handle = FileHandle.from_path(Path(self.temp_dir) / "nope" / "data.txt")

        with pytest.raises(FileNotFoundError):
            handle.builder().append_line("x").commit()

        assert not (Path(self.temp_dir) / "nope").exists()
        assert not handle.exists()

    def test_empty_build(self) -> None:
        self.handle.builder().commit()
        assert self.test_file.read_text() == ""

    def test_append_fields(self) -> None:
        """Values are formatted and joined with the handle delimiter."""
        handle = self.handle.with_delimiter(",")
        builder = handle.builder().append_fields(1, 2.5, "x", False)

        assert builder.lines == ["1,2.5,x,false"]
        assert builder.render() == "1,2.5,x,false\n"

    def test_lines_not_split(self) -> None:
        """Raw lines are written as given."""
        self.handle.with_delimiter(",").builder().append_line("a b,c").commit()
        assert self.handle.reader().fields(1) == ["a", "b,c"]

    def test_repeated_commit_is_idempotent(self) -> None:
        builder = self.handle.builder().append_line("1 2").append_line("3 4")
        builder.commit()
        first = self.test_file.read_bytes()
        builder.commit()

        assert self.test_file.read_bytes() == first == b"1 2\n3 4\n"

    def test_build_then_header(self) -> None:
        """Header reads return exactly the first lines."""
        handle = self.handle.with_delimiter(",")
        builder = handle.builder().append_line("1,2,3").append_line("4,5,6")
        builder.append_line("not,numbers").commit()

        assert handle.reader().header(2, int) == [[1, 2, 3], [4, 5, 6]]

    @settings(max_examples=50, deadline=None)
    @given(
        lines=st.lists(
            st.text(alphabet="abcxyz0123456789 ,;-", max_size=30), max_size=20
        )
    )
    def test_property_build_then_raw_text(self, lines: list[str]) -> None:
        """Reading back gives the lines joined by newlines, newline-terminated."""
        builder = self.handle.builder()
        for line in lines:
            builder.append_line(line)
        builder.commit()

        expected = "".join(f"{line}\n" for line in lines)
        assert self.handle.reader().raw_text() == expected
        assert self.handle.reader().line_count() == len(lines)
