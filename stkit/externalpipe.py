"""Piping the text on screen to an external command."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class ScreenLine:
    """One row of the screen; ``wrapped`` means it continues on the next row."""

    text: str
    wrapped: bool = False

    @property
    def length(self) -> int:
        """Length of the row without trailing blanks, or full width if wrapped."""
        if self.wrapped:
            return len(self.text)
        return len(self.text.rstrip(" "))


def screen_text(lines: Iterable[ScreenLine]) -> str:
    """Return the screen content as sent to the command.

    Each row is written up to and including one cell past its last
    non-blank character; wrapped rows are joined with the next one.
    A row of width zero ends the text.
    """
    parts: list[str] = []
    pending_newline = False
    for line in lines:
        last = min(line.length + 1, len(line.text)) - 1
        if last < 0:
            break
        parts.append(line.text[:last + 1])
        pending_newline = line.wrapped
        if pending_newline:
            continue
        parts.append("\n")
    if pending_newline:
        parts.append("\n")
    return "".join(parts)


def external_pipe(argv: Sequence[str], lines: Iterable[ScreenLine]) -> subprocess.Popen | None:
    """Start ``argv`` and write the screen text to its standard input.

    Returns the started process, or ``None`` when it could not be started.
    """
    try:
        process = subprocess.Popen(list(argv), stdin=subprocess.PIPE)
    except OSError as exc:
        print(f"st: execvp {argv[0]}: {exc}", file=sys.stderr)
        return None
    try:
        process.stdin.write(screen_text(lines).encode("utf-8"))
    except BrokenPipeError:
        pass
    finally:
        try:
            process.stdin.close()
        except BrokenPipeError:
            pass
    return process