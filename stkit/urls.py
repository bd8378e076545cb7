"""Finding URLs in the text shown on the terminal screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

# () and [] can appear in URLs, but leaving them out reduces false positives
# when working out where a URL ends.
URLCHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789-._~:/?#@!$&'*+,;=%"
)

URL_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class UrlMatch:
    """A URL found on screen: its row, starting column and text."""

    row: int
    column: int
    url: str

    @property
    def end(self) -> int:
        """Column of the last character of the URL."""
        return self.column + len(self.url) - 1


def find_last_any(text: str, needles: Iterable[str]) -> int | None:
    """Return the last index in ``text`` where any of ``needles`` starts."""
    needles = tuple(needles)
    for pos in range(len(text) - 1, -1, -1):
        if any(text.startswith(needle, pos) for needle in needles):
            return pos
    return None


def trim_url(text: str) -> str:
    """Cut ``text`` at the first character that cannot be part of a URL."""
    for pos, char in enumerate(text):
        if char not in URLCHARS:
            return text[:pos]
    return text


def _first_url_start(line: str) -> int | None:
    for prefix in URL_PREFIXES:
        pos = line.find(prefix)
        if pos >= 0:
            return pos
    return None


def find_previous_url(
    lines: Sequence[str], start_row: int, top: int, bottom: int
) -> UrlMatch | None:
    """Search upwards from ``start_row`` for a line holding a URL.

    Rows are scanned from ``start_row`` towards ``top``, wrapping around to
    ``bottom``, until every row between ``top`` and ``bottom`` has been seen
    once. On each line an ``http://`` URL is preferred to an ``https://`` one.
    """
    row = min(max(start_row, top), bottom)
    first = row
    while True:
        line = lines[row]
        column = _first_url_start(line)
        if column is not None:
            return UrlMatch(row, column, trim_url(line[column:]))
        row -= 1
        if row < top:
            row = bottom
        if row == first:
            return None