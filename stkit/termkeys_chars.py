"""Key table for modified printable keys.

These libtermkey-compatible bindings send ``CSI code;modifier u`` for
letters, digits, space and punctuation held with Control and/or Alt.
The order matters: the first binding that applies wins.
"""

from __future__ import annotations

from typing import Iterator

from stkit.keymap import (
    Key,
    Modifier,
    XK_0,
    XK_A,
    XK_ampersand,
    XK_apostrophe,
    XK_asciicircum,
    XK_asciitilde,
    XK_asterisk,
    XK_at,
    XK_backslash,
    XK_bar,
    XK_braceleft,
    XK_braceright,
    XK_bracketleft,
    XK_bracketright,
    XK_colon,
    XK_comma,
    XK_dollar,
    XK_equal,
    XK_exclam,
    XK_grave,
    XK_greater,
    XK_I,
    XK_i,
    XK_J,
    XK_K,
    XK_less,
    XK_M,
    XK_m,
    XK_minus,
    XK_numbersign,
    XK_parenleft,
    XK_parenright,
    XK_percent,
    XK_period,
    XK_plus,
    XK_question,
    XK_quotedbl,
    XK_semicolon,
    XK_slash,
    XK_space,
    XK_underscore,
)
from stkit.termkeys_nav import keypad_keys

_SHIFT = int(Modifier.SHIFT)
_CONTROL = int(Modifier.CONTROL)
_ALT = int(Modifier.MOD1)

# Modifier parameters in the order the table lists them.
_PUNCT_MODS = "563784"
_SPACE_MODS = "637842"
_PERIOD_MODS = "56784"
_SLASH_MODS = "63784"

# Punctuation keys bound with every modifier combination except Shift alone.
_PUNCTUATION = (
    XK_ampersand, XK_apostrophe, XK_asciicircum, XK_asciitilde, XK_asterisk,
    XK_at, XK_backslash, XK_bar, XK_braceleft, XK_braceright, XK_bracketleft,
    XK_bracketright, XK_colon, XK_comma, XK_dollar, XK_equal, XK_exclam,
    XK_grave, XK_greater, XK_less, XK_minus, XK_numbersign, XK_parenleft,
    XK_parenright, XK_percent,
)

# The table gives J and K each other's codes; kept as it is.
_LETTER_CODES = {XK_J: 75, XK_K: 74}


def _mask(param: int) -> int:
    """Modifier mask for an xterm modifier parameter (1 + shift + 2 alt + 4 ctrl)."""
    bits = param - 1
    return (
        (_SHIFT if bits & 1 else 0)
        | (_ALT if bits & 2 else 0)
        | (_CONTROL if bits & 4 else 0)
    )


def _key(keysym: int, code: int, param: int) -> Key:
    return Key(keysym, _mask(param), f"\033[{code};{param}u")


def _csi_u(keysym: int, code: int, params: str) -> Iterator[Key]:
    for param in map(int, params):
        yield _key(keysym, code, param)


def _letters() -> Iterator[Key]:
    for keysym in range(XK_A, XK_A + 26):
        code = _LETTER_CODES.get(keysym, keysym)
        yield _key(keysym, code, 6)
        if keysym in (XK_I, XK_M):
            yield _key(keysym, code, 8)


def _digits() -> Iterator[Key]:
    yield _key(XK_0, XK_0, 7)
    for keysym in range(XK_0 + 1, XK_0 + 10):
        yield _key(keysym, keysym, 5)
        yield _key(keysym, keysym, 7)


def _char_keys() -> Iterator[Key]:
    yield from _csi_u(XK_i, 105, "57")
    yield from _csi_u(XK_m, 109, "57")
    yield from _csi_u(XK_space, 32, _SPACE_MODS)
    yield _key(XK_0, XK_0, 5)
    yield from _letters()
    yield from _digits()
    for keysym in _PUNCTUATION:
        yield from _csi_u(keysym, keysym, _PUNCT_MODS)
    yield from _csi_u(XK_period, XK_period, _PERIOD_MODS)
    for keysym in (XK_plus, XK_question, XK_quotedbl, XK_semicolon):
        yield from _csi_u(keysym, keysym, _PUNCT_MODS)
    yield from _csi_u(XK_slash, XK_slash, _SLASH_MODS)
    yield from _csi_u(XK_underscore, XK_underscore, _PUNCT_MODS)


_CHAR_KEYS: tuple[Key, ...] = tuple(_char_keys())
_DEFAULT_KEYS: tuple[Key, ...] = keypad_keys() + _CHAR_KEYS


def char_keys() -> tuple[Key, ...]:
    """Bindings for modified letters, digits, space and punctuation, in match order."""
    return _CHAR_KEYS


def default_keys() -> tuple[Key, ...]:
    """The whole key table: keypad and navigation keys, then printable keys."""
    return _DEFAULT_KEYS