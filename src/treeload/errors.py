"""Typed exceptions for tree loading and serialization.

The three load failure kinds (missing path, malformed file, excessive include
depth) never escape :meth:`IncludeResolver.load`: they are turned into
diagnostics. They are still defined here so that adapters and callers that
load files directly have something precise to raise and catch.
"""


class TreeLoadError(Exception):
    """Base exception for all tree loading errors."""


class PathNotFoundError(TreeLoadError):
    """Raised when a file to load does not exist."""

    def __init__(self, path: str):
        """Initialize with the missing path.

        Parameters
        ----------
        path : str
            Effective path which could not be found
        """
        self.path = path
        super().__init__(f"Path not found: {path}")


class TreeParseError(TreeLoadError):
    """Raised when a file content cannot be parsed into a tree."""


class DepthLimitError(TreeLoadError):
    """Raised when an include chain is nested deeper than allowed."""

    def __init__(self, path: str, limit: int):
        """Initialize with the offending path and the limit.

        Parameters
        ----------
        path : str
            Path of the include which went over the limit
        limit : int
            Maximum nesting level allowed
        """
        self.path = path
        self.limit = limit
        super().__init__(
            f"Recursive include loop detected (more than {limit} nested "
            f"levels) while including: {path}"
        )


class TreeSerializeError(TreeLoadError):
    """Raised when a tree cannot be written in the requested format."""


class UnknownFormatError(TreeLoadError):
    """Raised when no format adapter matches a name or file extension."""
