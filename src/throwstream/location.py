# topmark:header:start
#
#   project      : ThrowStream
#   file         : location.py
#   file_relpath : src/throwstream/location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-site locations and provenance records.

A provenance record names the file, line and function where an error was
raised, re-raised or annotated. `SourceLocation.here()` captures the caller's
location by inspecting the interpreter frame at the call site.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from throwstream.constants import RECORD_SEPARATOR, RECORD_TEMPLATE

if TYPE_CHECKING:
    from types import FrameType


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """The file, line and function of a single call site."""

    line: int
    file: str
    function: str

    @classmethod
    def here(cls, stacklevel: int = 1) -> SourceLocation:
        """Capture the location of a caller.

        Args:
            stacklevel: How many frames to walk up from the caller of ``here()``.
                ``1`` is the function calling ``here()``; ``2`` is its caller.

        Returns:
            The captured location. Frames that cannot be reached yield an
            ``<unknown>`` location.
        """
        frame: FrameType | None = sys._getframe(1)  # pyright: ignore[reportPrivateUsage]
        for _ in range(stacklevel - 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return cls(line=0, file="<unknown>", function="<unknown>")
        return cls(
            line=frame.f_lineno,
            file=frame.f_code.co_filename,
            function=frame.f_code.co_name,
        )

    def format_record(self, include_source_location: bool = True) -> str:
        """Render the provenance record for this location.

        Args:
            include_source_location: If False, only the record separator is returned.

        Returns:
            ``"\\n( <file>:<line> , in <function>() )    ->  "`` or ``"\\n"``.
        """
        return format_record(
            self.line,
            self.file,
            self.function,
            include_source_location=include_source_location,
        )

    def __str__(self) -> str:
        return f"{self.file}:{self.line} ({self.function})"


def format_record(
    line: int,
    file: str,
    function: str,
    *,
    include_source_location: bool = True,
) -> str:
    """Render one provenance record.

    Args:
        line: Line number of the call site.
        file: File name of the call site.
        function: Function name of the call site.
        include_source_location: If False, only the record separator is returned.

    Returns:
        The record text, always starting with the record separator.
    """
    if not include_source_location:
        return RECORD_SEPARATOR
    return RECORD_SEPARATOR + RECORD_TEMPLATE.format(file=file, line=line, function=function)
