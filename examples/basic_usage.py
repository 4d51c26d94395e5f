#!/usr/bin/env python3
"""Basic usage examples for the gridfile library."""

import logging
import tempfile
from pathlib import Path

from gridfile import CoordinateError, FileHandle


def build_example(workspace: Path) -> FileHandle:
    """Build a comma-delimited file from scratch."""
    print("=== Build Example ===")

    handle = FileHandle.from_path(workspace / "filename.gph").with_delimiter(",")
    builder = handle.builder().append_line("1,2,3").append_line("4,5,6")
    builder.append_fields(7, 8, 9).append_line("10,12").commit()

    print(f"Wrote {handle.path}:\n{handle.reader().raw_text()}")
    return handle


def read_example(handle: FileHandle):
    """Read values by position, and as header, body and footer."""
    print("=== Read Example ===")

    reader = handle.reader()
    print(f"Lines: {reader.line_count()}")
    print(f"Header: {reader.header(1, int)}")
    print(f"Body: {reader.body(1, 1, int)}")
    print(f"Footer: {reader.footer(int)}")

    # Queue several coordinates, then parse them together
    values = reader.queue_read(1, 2).queue_read(3, 2).queue_read(2, 1).resolve(int)
    print(f"Selected values: {values}")

    try:
        reader.queue_read(9, 1)
    except CoordinateError as e:
        print(f"Out of range: {e}")


def edit_example(handle: FileHandle):
    """Change some values and commit them."""
    print("\n=== Edit Example ===")

    handle.editor().set_value(2, 2, "123").set_value(3, 2, 567).commit()
    print(f"After edit:\n{handle.reader().raw_text()}")


def csv_example(workspace: Path):
    """Read a column from a CSV file with a header line."""
    print("=== CSV Example ===")

    handle = FileHandle.from_path(workspace / "table.csv")
    builder = handle.builder().append_line("x,y,z")
    builder.append_line("1,4,7").append_line("2,5,10").commit()

    # csv_column always splits on commas, whatever the handle delimiter
    print(f"Column 3: {handle.reader().csv_column(3, int)}")

    handle.remove()
    print(f"Removed table.csv: {not handle.exists()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    with tempfile.TemporaryDirectory() as temp_dir:
        workspace = Path(temp_dir)
        grid_handle = build_example(workspace)
        read_example(grid_handle)
        edit_example(grid_handle)
        csv_example(workspace)

    print("\n=== All examples completed successfully! ===")
