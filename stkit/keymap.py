"""Keyboard mapping: keysyms, modifier masks and the rules for choosing a
key's escape sequence.

A key binding applies to one keysym under one modifier mask. ``appkey`` and
``appcursor`` restrict it by keypad and cursor mode. A value below zero means
"only when the mode is off", above zero "only when it is on", and zero means
"either way".
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class Modifier(enum.IntFlag):
    """X11 modifier state bits."""

    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7
    SWITCH = 1 << 13


# A mask that matches whatever modifiers are held.
ANY_MOD = 0xFFFFFFFF
NO_MOD = 0

# Modifiers that never take part in matching (Num Lock and the group switch).
IGNORED_MODIFIERS = Modifier.MOD2 | Modifier.SWITCH

# Keysyms at or above this value (in their low 16 bits) are function keys
# and always go through the key table.
FUNCTION_KEYS_START = 0xFD00

# X11 keysyms used by the key table.
XK_space = 0x0020
XK_exclam = 0x0021
XK_quotedbl = 0x0022
XK_numbersign = 0x0023
XK_dollar = 0x0024
XK_percent = 0x0025
XK_ampersand = 0x0026
XK_apostrophe = 0x0027
XK_parenleft = 0x0028
XK_parenright = 0x0029
XK_asterisk = 0x002A
XK_plus = 0x002B
XK_comma = 0x002C
XK_minus = 0x002D
XK_period = 0x002E
XK_slash = 0x002F
XK_0 = 0x0030
XK_1 = 0x0031
XK_2 = 0x0032
XK_3 = 0x0033
XK_4 = 0x0034
XK_5 = 0x0035
XK_6 = 0x0036
XK_7 = 0x0037
XK_8 = 0x0038
XK_9 = 0x0039
XK_colon = 0x003A
XK_semicolon = 0x003B
XK_less = 0x003C
XK_equal = 0x003D
XK_greater = 0x003E
XK_question = 0x003F
XK_at = 0x0040
XK_A = 0x0041
XK_B = 0x0042
XK_C = 0x0043
XK_D = 0x0044
XK_E = 0x0045
XK_F = 0x0046
XK_G = 0x0047
XK_H = 0x0048
XK_I = 0x0049
XK_J = 0x004A
XK_K = 0x004B
XK_L = 0x004C
XK_M = 0x004D
XK_N = 0x004E
XK_O = 0x004F
XK_P = 0x0050
XK_Q = 0x0051
XK_R = 0x0052
XK_S = 0x0053
XK_T = 0x0054
XK_U = 0x0055
XK_V = 0x0056
XK_W = 0x0057
XK_X = 0x0058
XK_Y = 0x0059
XK_Z = 0x005A
XK_bracketleft = 0x005B
XK_backslash = 0x005C
XK_bracketright = 0x005D
XK_asciicircum = 0x005E
XK_underscore = 0x005F
XK_grave = 0x0060
XK_i = 0x0069
XK_m = 0x006D
XK_braceleft = 0x007B
XK_bar = 0x007C
XK_braceright = 0x007D
XK_asciitilde = 0x007E

XK_ISO_Left_Tab = 0xFE20

XK_BackSpace = 0xFF08
XK_Tab = 0xFF09
XK_Return = 0xFF0D
XK_Pause = 0xFF13
XK_Scroll_Lock = 0xFF14
XK_Escape = 0xFF1B
XK_Home = 0xFF50
XK_Left = 0xFF51
XK_Up = 0xFF52
XK_Right = 0xFF53
XK_Down = 0xFF54
XK_Prior = 0xFF55
XK_Next = 0xFF56
XK_End = 0xFF57
XK_Print = 0xFF61
XK_Insert = 0xFF63
XK_Menu = 0xFF67

XK_KP_Enter = 0xFF8D
XK_KP_Home = 0xFF95
XK_KP_Left = 0xFF96
XK_KP_Up = 0xFF97
XK_KP_Right = 0xFF98
XK_KP_Down = 0xFF99
XK_KP_Prior = 0xFF9A
XK_KP_Next = 0xFF9B
XK_KP_End = 0xFF9C
XK_KP_Begin = 0xFF9D
XK_KP_Insert = 0xFF9E
XK_KP_Delete = 0xFF9F
XK_KP_Multiply = 0xFFAA
XK_KP_Add = 0xFFAB
XK_KP_Subtract = 0xFFAD
XK_KP_Decimal = 0xFFAE
XK_KP_Divide = 0xFFAF
XK_KP_0 = 0xFFB0
XK_KP_1 = 0xFFB1
XK_KP_2 = 0xFFB2
XK_KP_3 = 0xFFB3
XK_KP_4 = 0xFFB4
XK_KP_5 = 0xFFB5
XK_KP_6 = 0xFFB6
XK_KP_7 = 0xFFB7
XK_KP_8 = 0xFFB8
XK_KP_9 = 0xFFB9

XK_F1 = 0xFFBE
XK_F2 = 0xFFBF
XK_F3 = 0xFFC0
XK_F4 = 0xFFC1
XK_F5 = 0xFFC2
XK_F6 = 0xFFC3
XK_F7 = 0xFFC4
XK_F8 = 0xFFC5
XK_F9 = 0xFFC6
XK_F10 = 0xFFC7
XK_F11 = 0xFFC8
XK_F12 = 0xFFC9
XK_F13 = 0xFFCA
XK_F14 = 0xFFCB
XK_F15 = 0xFFCC
XK_F16 = 0xFFCD
XK_F17 = 0xFFCE
XK_F18 = 0xFFCF
XK_F19 = 0xFFD0
XK_F20 = 0xFFD1
XK_F21 = 0xFFD2
XK_F22 = 0xFFD3
XK_F23 = 0xFFD4
XK_F24 = 0xFFD5
XK_F25 = 0xFFD6
XK_F26 = 0xFFD7
XK_F27 = 0xFFD8
XK_F28 = 0xFFD9
XK_F29 = 0xFFDA
XK_F30 = 0xFFDB
XK_F31 = 0xFFDC
XK_F32 = 0xFFDD
XK_F33 = 0xFFDE
XK_F34 = 0xFFDF
XK_F35 = 0xFFE0

XK_Delete = 0xFFFF

# Keys other than the function keys that still go through the key table.
MAPPED_KEYS: tuple[int, ...] = (
    XK_space, XK_m, XK_i,
    XK_A, XK_B, XK_C, XK_D, XK_E, XK_F, XK_G, XK_H, XK_I, XK_K, XK_J,
    XK_L, XK_M, XK_N, XK_O, XK_P, XK_Q, XK_R, XK_S, XK_T, XK_U, XK_V,
    XK_W, XK_X, XK_Y, XK_Z,
    XK_0, XK_1, XK_2, XK_3, XK_4, XK_5, XK_6, XK_7, XK_8, XK_9,
    XK_exclam, XK_quotedbl, XK_numbersign, XK_dollar, XK_percent,
    XK_ampersand, XK_apostrophe, XK_parenleft, XK_parenright, XK_asterisk,
    XK_plus, XK_comma, XK_minus, XK_period, XK_slash, XK_colon,
    XK_semicolon, XK_less, XK_equal, XK_greater, XK_question, XK_at,
    XK_bracketleft, XK_backslash, XK_bracketright, XK_asciicircum,
    XK_underscore, XK_grave, XK_braceleft, XK_bar, XK_braceright,
    XK_asciitilde,
)

_MAPPED_SET = frozenset(MAPPED_KEYS)


def _mode_allows(restriction: int, mode_on: bool) -> bool:
    if mode_on:
        return restriction >= 0
    return restriction <= 0


@dataclass(frozen=True)
class Key:
    """A binding from a keysym and modifier mask to the string it sends."""

    keysym: int
    mask: int
    string: str
    appkey: int = 0
    appcursor: int = 0

    def matches(self, keysym: int, state: int, appkeypad: bool, appcursor: bool) -> bool:
        """Tell whether this binding applies to the key press described."""
        if self.keysym != keysym:
            return False
        if self.mask != ANY_MOD and self.mask != (state & ~IGNORED_MODIFIERS):
            return False
        if not _mode_allows(self.appkey, appkeypad):
            return False
        return _mode_allows(self.appcursor, appcursor)


def is_mapped(keysym: int) -> bool:
    """Tell whether ``keysym`` is looked up in the key table at all."""
    return keysym in _MAPPED_SET or (keysym & 0xFFFF) >= FUNCTION_KEYS_START


def find_key(
    keys: Iterable[Key], keysym: int, state: int, appkeypad: bool, appcursor: bool
) -> Key | None:
    """Return the first binding in ``keys`` that applies, or ``None``."""
    if not is_mapped(keysym):
        return None
    for key in keys:
        if key.matches(keysym, state, appkeypad, appcursor):
            return key
    return None