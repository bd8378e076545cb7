"""Key table for the cursor, editing, function and keypad keys.

The first part of the table holds the xterm-style sequences. The second part
adds libtermkey-compatible ``CSI code;modifier u`` sequences for modified keys.
The order matters: the first binding that applies wins.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from stkit.keymap import (
    ANY_MOD,
    NO_MOD,
    Key,
    Modifier,
    XK_BackSpace,
    XK_Delete,
    XK_Down,
    XK_End,
    XK_Escape,
    XK_F1,
    XK_F13,
    XK_F25,
    XK_Home,
    XK_Insert,
    XK_ISO_Left_Tab,
    XK_KP_0,
    XK_KP_1,
    XK_KP_2,
    XK_KP_3,
    XK_KP_4,
    XK_KP_5,
    XK_KP_6,
    XK_KP_7,
    XK_KP_8,
    XK_KP_9,
    XK_KP_Add,
    XK_KP_Begin,
    XK_KP_Decimal,
    XK_KP_Delete,
    XK_KP_Divide,
    XK_KP_Down,
    XK_KP_End,
    XK_KP_Enter,
    XK_KP_Home,
    XK_KP_Insert,
    XK_KP_Left,
    XK_KP_Multiply,
    XK_KP_Next,
    XK_KP_Prior,
    XK_KP_Right,
    XK_KP_Subtract,
    XK_KP_Up,
    XK_Left,
    XK_Menu,
    XK_Next,
    XK_Pause,
    XK_Print,
    XK_Prior,
    XK_Return,
    XK_Right,
    XK_Scroll_Lock,
    XK_Tab,
    XK_Up,
)

S = int(Modifier.SHIFT)
C = int(Modifier.CONTROL)
A = int(Modifier.MOD1)
M3 = int(Modifier.MOD3)
M4 = int(Modifier.MOD4)

# Modifier parameters in the order the table lists them.
_ALL_MODS = "5637842"
_NO_SHIFT_ONLY = "563784"
_NO_CTRL_NO_SHIFT = "63784"

# Sequences of F1..F4 use a final letter, F5..F12 a numeric code and "~".
_F_LETTERS = "PQRS"
_F_CODES = (15, 17, 18, 19, 20, 21, 23, 24)


def _mask(param: int) -> int:
    """Modifier mask for an xterm modifier parameter (1 + shift + 2 alt + 4 ctrl)."""
    bits = param - 1
    return (S if bits & 1 else 0) | (A if bits & 2 else 0) | (C if bits & 4 else 0)


def _csi_u(keysym: int, code: int, params: str) -> Iterator[Key]:
    for param in map(int, params):
        yield Key(keysym, _mask(param), f"\033[{code};{param}u")


def _cursor(keysym: int, final: str) -> Iterator[Key]:
    for param in range(2, 9):
        yield Key(keysym, _mask(param), f"\033[1;{param}{final}")
    yield Key(keysym, ANY_MOD, f"\033[{final}", 0, -1)
    yield Key(keysym, ANY_MOD, f"\033O{final}", 0, +1)


def _function_seq(number: int, param: int | None) -> str:
    """Sequence of function key ``number`` (1..12) with an optional modifier."""
    if number <= 4:
        letter = _F_LETTERS[number - 1]
        return f"\033O{letter}" if param is None else f"\033[1;{param}{letter}"
    code = _F_CODES[number - 5]
    return f"\033[{code}~" if param is None else f"\033[{code};{param}~"


def _function_keys() -> Iterator[Key]:
    for number in range(1, 13):
        keysym = XK_F1 + number - 1
        yield Key(keysym, NO_MOD, _function_seq(number, None))
        yield Key(keysym, S, _function_seq(number, 2))
        yield Key(keysym, C, _function_seq(number, 5))
        yield Key(keysym, M4, _function_seq(number, 6))
        yield Key(keysym, A, _function_seq(number, 3))
        if number <= 3:
            yield Key(keysym, M3, _function_seq(number, 4))
    # F13..F24 send shifted F1..F12, F25..F35 send controlled F1..F11.
    for number in range(1, 13):
        yield Key(XK_F13 + number - 1, NO_MOD, _function_seq(number, 2))
    for number in range(1, 12):
        yield Key(XK_F25 + number - 1, NO_MOD, _function_seq(number, 5))


def _classic() -> Iterator[Key]:
    yield from (
        Key(XK_KP_Home, S, "\033[2J", 0, -1),
        Key(XK_KP_Home, S, "\033[1;2H", 0, +1),
        Key(XK_KP_Prior, S, "\033[5;2~"),
        Key(XK_KP_End, C, "\033[J", -1, 0),
        Key(XK_KP_End, C, "\033[1;5F", +1, 0),
        Key(XK_KP_End, S, "\033[K", -1, 0),
        Key(XK_KP_End, S, "\033[1;2F", +1, 0),
        Key(XK_KP_Next, S, "\033[6;2~"),
        Key(XK_KP_Insert, S, "\033[2;2~", +1, 0),
        Key(XK_KP_Insert, S, "\033[4l", -1, 0),
        Key(XK_KP_Insert, C, "\033[L", -1, 0),
        Key(XK_KP_Insert, C, "\033[2;5~", +1, 0),
        Key(XK_KP_Delete, C, "\033[M", -1, 0),
        Key(XK_KP_Delete, C, "\033[3;5~", +1, 0),
        Key(XK_KP_Delete, S, "\033[2K", -1, 0),
        Key(XK_KP_Delete, S, "\033[3;2~", +1, 0),
    )
    yield from _cursor(XK_Up, "A")
    yield from _cursor(XK_Down, "B")
    yield from _cursor(XK_Left, "D")
    yield from _cursor(XK_Right, "C")
    yield from (
        Key(XK_ISO_Left_Tab, S, "\033[Z"),
        Key(XK_Return, A, "\033\r"),
        Key(XK_Return, NO_MOD, "\r"),
        Key(XK_Insert, S, "\033[4l", -1, 0),
        Key(XK_Insert, S, "\033[2;2~", +1, 0),
        Key(XK_Insert, C, "\033[L", -1, 0),
        Key(XK_Insert, C, "\033[2;5~", +1, 0),
        Key(XK_Delete, C, "\033[M", -1, 0),
        Key(XK_Delete, C, "\033[3;5~", +1, 0),
        Key(XK_Delete, S, "\033[2K", -1, 0),
        Key(XK_Delete, S, "\033[3;2~", +1, 0),
        Key(XK_BackSpace, NO_MOD, "\177"),
        Key(XK_BackSpace, A, "\033\177"),
        Key(XK_Home, S, "\033[2J", 0, -1),
        Key(XK_Home, S, "\033[1;2H", 0, +1),
        Key(XK_End, C, "\033[J", -1, 0),
        Key(XK_End, C, "\033[1;5F", +1, 0),
        Key(XK_End, S, "\033[K", -1, 0),
        Key(XK_End, S, "\033[1;2F", +1, 0),
        Key(XK_Prior, C, "\033[5;5~"),
        Key(XK_Prior, S, "\033[5;2~"),
        Key(XK_Next, C, "\033[6;5~"),
        Key(XK_Next, S, "\033[6;2~"),
    )
    yield from _function_keys()


def _keypad_cursor(keysym: int, app: str, final: str, code: int) -> Iterator[Key]:
    yield Key(keysym, NO_MOD, f"\033O{app}", +1, 0)
    yield Key(keysym, NO_MOD, f"\033[{final}", 0, -1)
    yield Key(keysym, NO_MOD, f"\033O{final}", 0, +1)
    yield from _csi_u(keysym, code, _ALL_MODS)


def _keypad_app(keysym: int, app: str, code_keysym: int, code: int) -> Iterator[Key]:
    yield Key(keysym, NO_MOD, f"\033O{app}", +2, 0)
    yield from _csi_u(code_keysym, code, _ALL_MODS)


def _sections(*parts: Iterable[Key]) -> Iterator[Key]:
    for part in parts:
        yield from part


def _libtermkey() -> Iterator[Key]:
    yield from _sections(
        (Key(XK_KP_Home, NO_MOD, "\033[H", 0, -1), Key(XK_KP_Home, NO_MOD, "\033[1~", 0, +1)),
        _csi_u(XK_KP_Home, 149, _ALL_MODS),
        _keypad_cursor(XK_KP_Up, "x", "A", 151),
        _keypad_cursor(XK_KP_Down, "r", "B", 153),
        _keypad_cursor(XK_KP_Left, "t", "D", 150),
        _keypad_cursor(XK_KP_Right, "v", "C", 152),
        (Key(XK_KP_Prior, NO_MOD, "\033[5~"),),
        _csi_u(XK_KP_Prior, 154, _NO_SHIFT_ONLY),
        (Key(XK_KP_Begin, NO_MOD, "\033[E"),),
        _csi_u(XK_KP_Begin, 157, _ALL_MODS),
        (Key(XK_KP_End, NO_MOD, "\033[4~"),),
        _csi_u(XK_KP_End, 156, _NO_CTRL_NO_SHIFT),
        (Key(XK_KP_Next, NO_MOD, "\033[6~"),),
        _csi_u(XK_KP_Next, 155, _NO_SHIFT_ONLY),
        (Key(XK_KP_Insert, NO_MOD, "\033[4h", -1, 0), Key(XK_KP_Insert, NO_MOD, "\033[2~", +1, 0)),
        _csi_u(XK_KP_Insert, 158, _NO_CTRL_NO_SHIFT),
        (Key(XK_KP_Delete, NO_MOD, "\033[P", -1, 0), Key(XK_KP_Delete, NO_MOD, "\033[3~", +1, 0)),
        _csi_u(XK_KP_Delete, 159, _NO_CTRL_NO_SHIFT),
        _keypad_app(XK_KP_Multiply, "j", XK_KP_Multiply, 170),
        _keypad_app(XK_KP_Add, "k", XK_KP_Add, 171),
        (
            Key(XK_KP_Enter, NO_MOD, "\033OM", +2, 0),
            Key(XK_KP_Enter, NO_MOD, "\r", -1, 0),
            Key(XK_KP_Enter, NO_MOD, "\r\n", -1, 0),
        ),
        _csi_u(XK_KP_Enter, 141, _ALL_MODS),
        _keypad_app(XK_KP_Subtract, "m", XK_KP_Subtract, 173),
        _keypad_app(XK_KP_Decimal, "n", XK_KP_Decimal, 174),
        _keypad_app(XK_KP_Divide, "o", XK_KP_Divide, 175),
        _keypad_app(XK_KP_0, "p", XK_KP_0, 176),
        # The modified KP_1 sequences are bound to KP_0, as the table has it.
        _keypad_app(XK_KP_1, "q", XK_KP_0, 177),
        _keypad_app(XK_KP_2, "r", XK_KP_2, 178),
        _keypad_app(XK_KP_3, "s", XK_KP_3, 179),
        _keypad_app(XK_KP_4, "t", XK_KP_4, 180),
        _keypad_app(XK_KP_5, "u", XK_KP_5, 181),
        _keypad_app(XK_KP_6, "v", XK_KP_6, 182),
        _keypad_app(XK_KP_7, "w", XK_KP_7, 183),
        _keypad_app(XK_KP_8, "x", XK_KP_8, 184),
        _keypad_app(XK_KP_9, "y", XK_KP_9, 185),
        _csi_u(XK_BackSpace, 127, _ALL_MODS),
        (
            Key(XK_Tab, C, "\033[9;5u"),
            Key(XK_Tab, C | S, "\033[1;5Z"),
            Key(XK_Tab, A, "\033[1;3Z"),
            Key(XK_Tab, A | C, "\033[1;7Z"),
            Key(XK_Tab, A | C | S, "\033[1;8Z"),
            Key(XK_Tab, A | S, "\033[1;4Z"),
        ),
        _csi_u(XK_Return, 13, _ALL_MODS),
        _csi_u(XK_Pause, 18, _ALL_MODS),
        _csi_u(XK_Scroll_Lock, 20, _ALL_MODS),
        _csi_u(XK_Escape, 27, _ALL_MODS),
        (Key(XK_Home, NO_MOD, "\033[H", 0, -1), Key(XK_Home, NO_MOD, "\033[1~", 0, +1)),
        _csi_u(XK_Home, 80, _NO_CTRL_NO_SHIFT),
        (Key(XK_End, NO_MOD, "\033[4~"),),
        _csi_u(XK_End, 87, _NO_CTRL_NO_SHIFT),
        (Key(XK_Prior, NO_MOD, "\033[5~"),),
        _csi_u(XK_Prior, 85, _NO_CTRL_NO_SHIFT),
        (Key(XK_Next, NO_MOD, "\033[6~"),),
        _csi_u(XK_Next, 86, _NO_CTRL_NO_SHIFT),
        _csi_u(XK_Print, 97, _ALL_MODS),
        (Key(XK_Insert, NO_MOD, "\033[4h", -1, 0), Key(XK_Insert, NO_MOD, "\033[2~", +1, 0)),
        _csi_u(XK_Insert, 99, _NO_CTRL_NO_SHIFT),
        _csi_u(XK_Menu, 103, _ALL_MODS),
        (Key(XK_Delete, NO_MOD, "\033[P", -1, 0), Key(XK_Delete, NO_MOD, "\033[3~", +1, 0)),
        _csi_u(XK_Delete, 255, _NO_CTRL_NO_SHIFT),
    )


_KEYPAD_KEYS: tuple[Key, ...] = tuple(_sections(_classic(), _libtermkey()))


def keypad_keys() -> tuple[Key, ...]:
    """Bindings for cursor, editing, function and keypad keys, in match order."""
    return _KEYPAD_KEYS