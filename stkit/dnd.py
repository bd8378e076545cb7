"""Turning dropped URI lists into text to paste into the terminal."""

from __future__ import annotations

_HEXDIGITS = frozenset("0123456789abcdefABCDEF")
_FILE_PREFIX = "file://"


def _is_hex(char: str) -> bool:
    return len(char) == 1 and char in _HEXDIGITS


def url_decode(src: str, escchars: str) -> str:
    """Decode ``%xx`` escapes and backslash-escape ``escchars``.

    The result ends with a single space, separating it from the next item.
    """
    out: list[str] = []
    pos = 0
    while pos < len(src):
        if src[pos] == "%" and _is_hex(src[pos + 1:pos + 2]) and _is_hex(src[pos + 2:pos + 3]):
            char = chr(int(src[pos + 1:pos + 3], 16))
            pos += 3
        else:
            char = src[pos]
            pos += 1
        if char in escchars or char == "\0":
            out.append("\\")
        out.append(char)
    out.append(" ")
    return "".join(out)


def paste_data(data: str, escchars: str) -> str:
    """Convert dropped data, one URI per line, into text to paste."""
    pieces = []
    for item in data.replace("\r", "\n").split("\n"):
        if not item:
            continue
        if item.startswith(_FILE_PREFIX):
            item = item[len(_FILE_PREFIX):]
        pieces.append(url_decode(item, escchars))
    return "".join(pieces)