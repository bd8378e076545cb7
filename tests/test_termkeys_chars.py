import re

import pytest

from stkit.keymap import (
    Modifier,
    XK_J,
    XK_K,
    XK_i,
    XK_period,
    XK_slash,
    XK_space,
    XK_Up,
    find_key,
    is_mapped,
)
from stkit.termkeys_chars import char_keys, default_keys
from stkit.termkeys_nav import keypad_keys

S = int(Modifier.SHIFT)
C = int(Modifier.CONTROL)
A = int(Modifier.MOD1)

_CSI_U = re.compile(r"\033\[(\d+);([2-8])u")


def _lookup(keysym, state):
    key = find_key(default_keys(), keysym, state, False, False)
    return None if key is None else key.string


def test_default_keys_is_keypad_then_chars():
    keys = default_keys()
    assert keys == keypad_keys() + char_keys()


@pytest.mark.parametrize(
    "keysym, state, expected",
    [
        (XK_J, C | S, "\033[75;6u"),
        (XK_K, C | S, "\033[74;6u"),
        (XK_i, C, "\033[105;5u"),
        (XK_space, S, "\033[32;2u"),
        (XK_period, A | S, "\033[46;4u"),
        (XK_slash, A, "\033[47;3u"),
    ],
)
def test_lookup_source_strings(keysym, state, expected):
    assert _lookup(keysym, state) == expected


def test_num_lock_is_ignored():
    assert _lookup(XK_i, C | int(Modifier.MOD2)) == "\033[105;5u"


@pytest.mark.parametrize(
    "keysym, state",
    [(XK_period, A), (XK_slash, C), (XK_space, 0), (XK_i, 0)],
)
def test_unbound_combinations(keysym, state):
    assert _lookup(keysym, state) is None


def test_all_char_keys_are_mapped():
    assert all(is_mapped(key.keysym) for key in char_keys())


def test_no_duplicate_bindings():
    pairs = [(key.keysym, key.mask) for key in char_keys()]
    assert len(pairs) == len(set(pairs))


def test_no_mode_restrictions():
    assert all(key.appkey == 0 and key.appcursor == 0 for key in char_keys())


def test_strings_are_csi_u_with_consistent_modifier():
    for key in char_keys():
        match = _CSI_U.fullmatch(key.string)
        assert match is not None, key
        bits = int(match.group(2)) - 1
        assert bool(bits & 1) == bool(key.mask & S)
        assert bool(bits & 2) == bool(key.mask & A)
        assert bool(bits & 4) == bool(key.mask & C)


def test_codes_follow_keysym_for_printables():
    for key in char_keys():
        code = int(_CSI_U.fullmatch(key.string).group(1))
        if key.keysym in (XK_J, XK_K, XK_i, 0x6D):
            continue
        assert code == key.keysym


def test_char_keys_do_not_shadow_keypad():
    assert _lookup(XK_Up, S) == "\033[1;2A"
    keypad_syms = {key.keysym for key in keypad_keys()}
    assert keypad_syms.isdisjoint(key.keysym for key in char_keys())