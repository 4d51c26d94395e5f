"""Exception types raised by gridfile."""


class GridFileError(Exception):
    """Base exception for gridfile."""


class CoordinateError(GridFileError, IndexError):
    """Raised when a line or field coordinate is outside the loaded grid."""


class ValueParseError(GridFileError, ValueError):
    """Raised when a field cannot be converted to the requested type."""

    def __init__(self, raw: str, value_type: type, reason: str = ""):
        self.raw = raw
        self.value_type = value_type
        name = getattr(value_type, "__name__", repr(value_type))
        message = f"Cannot parse {raw!r} as {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidArgumentError(GridFileError, ValueError):
    """Raised for arguments that are invalid regardless of file content."""
