"""Entering a character by its hexadecimal codepoint."""

from __future__ import annotations

import subprocess

ISO14755CMD = 'dmenu -w "$WINDOWID" -p codepoint: </dev/null'

_ULONG_MAX = 2**64 - 1
_READ_LIMIT = 8
_HEXDIGITS = frozenset("0123456789abcdefABCDEF")
_SPACE = frozenset(" \t\n\v\f\r")
_REPLACEMENT = 0xFFFD


def _first_line(text: str) -> str:
    """Return what a line-buffered read of at most eight characters yields."""
    head = text[:_READ_LIMIT]
    newline = head.find("\n")
    return head if newline < 0 else head[:newline + 1]


def parse_codepoint(text: str) -> int | None:
    """Parse the hexadecimal codepoint typed in answer to the prompt.

    Returns ``None`` when the answer is empty, negative, too long or not
    a hexadecimal number followed by at most a newline.
    """
    line = _first_line(text)
    if not line or line[0] == "-" or len(line) > 7:
        return None

    pos, size = 0, len(line)
    while pos < size and line[pos] in _SPACE:
        pos += 1
    negative = False
    if pos < size and line[pos] in "+-":
        negative = line[pos] == "-"
        pos += 1
    if line[pos:pos + 2].lower() == "0x" and pos + 2 < size and line[pos + 2] in _HEXDIGITS:
        pos += 2
    start = pos
    while pos < size and line[pos] in _HEXDIGITS:
        pos += 1

    if pos == start:
        value, rest = 0, line[0]
    else:
        value, rest = int(line[start:pos], 16), line[pos:pos + 1]
    if rest not in ("\n", ""):
        return None
    if negative:
        value = -value % (_ULONG_MAX + 1)
    if value == _ULONG_MAX:
        return None
    return value


def utf8_encode(codepoint: int) -> bytes:
    """Encode a codepoint as UTF-8, replacing invalid ones with U+FFFD."""
    if codepoint < 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        codepoint = _REPLACEMENT
    return chr(codepoint).encode("utf-8")


def prompt_codepoint(command: str = ISO14755CMD) -> int | None:
    """Run the prompt command through the shell and parse its answer."""
    try:
        result = subprocess.run(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError:
        return None
    return parse_codepoint(result.stdout)