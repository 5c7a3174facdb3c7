"""Append-only record of what the include resolver did."""

from typing import List, Tuple

from .report import frame
from .utils.logger import logger

__all__ = ["Diagnostics"]


class Diagnostics:
    """Ordered log of human-readable diagnostic lines.

    Lines are only ever appended; the log is never rewound or cleared.
    """

    def __init__(self):
        """Initialize an empty log."""
        self._lines: List[str] = []

    def record(self, line: str):
        """Append one line to the log.

        Parameters
        ----------
        line : str
            Diagnostic message, without trailing newline
        """
        self._lines.append(line)
        logger.debug(line)

    @property
    def lines(self) -> Tuple[str, ...]:
        """Immutable view of the lines recorded so far."""
        return tuple(self._lines)

    def report(self) -> str:
        """Render every line recorded so far as a framed block.

        Returns
        -------
        str
            Framed report, one line per diagnostic
        """
        return frame("".join(f"{line}\n" for line in self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)
