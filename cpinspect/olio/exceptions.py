"""Custom exceptions used in cpinspect."""


class GridInspectionError(Exception):
    """Base class for errors raised when inspecting corner point grid data."""
    pass


class MissingFieldError(GridInspectionError, KeyError):
    """Raised when a keyword needed for the requested operation is not present in the grid data."""
    pass


class SizeMismatchError(GridInspectionError, ValueError):
    """Raised when the length of a keyword array does not match the length implied by the grid dimensions."""
    pass


class OutOfRangeError(GridInspectionError, IndexError):
    """Raised when a logical cell coordinate or cell index lies outside the grid."""
    pass
