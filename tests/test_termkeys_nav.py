import pytest

from stkit import keymap
from stkit.keymap import Modifier, find_key, is_mapped
from stkit.termkeys_nav import keypad_keys

SHIFT = Modifier.SHIFT
CTRL = Modifier.CONTROL
ALT = Modifier.MOD1


def lookup(keysym, state=0, appkeypad=False, appcursor=False):
    key = find_key(keypad_keys(), keysym, state, appkeypad, appcursor)
    return None if key is None else key.string


@pytest.mark.parametrize(
    "keysym, state, appkeypad, appcursor, expected",
    [
        (keymap.XK_Up, 0, False, False, "\033[A"),
        (keymap.XK_Up, 0, False, True, "\033OA"),
        (keymap.XK_Up, SHIFT, False, False, "\033[1;2A"),
        (keymap.XK_Right, CTRL, False, False, "\033[1;5C"),
        (keymap.XK_Left, SHIFT | CTRL | ALT, False, False, "\033[1;8D"),
        (keymap.XK_F1, 0, False, False, "\033OP"),
        (keymap.XK_F5, 0, False, False, "\033[15~"),
        (keymap.XK_F12, CTRL, False, False, "\033[24;5~"),
        (keymap.XK_F13, 0, False, False, "\033[1;2P"),
        (keymap.XK_F35, 0, False, False, "\033[23;5~"),
        (keymap.XK_Delete, 0, False, False, "\033[P"),
        (keymap.XK_Delete, 0, True, False, "\033[3~"),
        (keymap.XK_Tab, CTRL, False, False, "\033[9;5u"),
        (keymap.XK_Tab, CTRL | SHIFT, False, False, "\033[1;5Z"),
        (keymap.XK_Return, 0, False, False, "\r"),
        (keymap.XK_Return, ALT, False, False, "\033\r"),
        (keymap.XK_BackSpace, 0, False, False, "\177"),
        (keymap.XK_KP_Enter, 0, False, False, "\r"),
        (keymap.XK_KP_Home, SHIFT, False, True, "\033[1;2H"),
        (keymap.XK_Home, CTRL | SHIFT, False, False, "\033[80;6u"),
        (keymap.XK_KP_0, CTRL, False, False, "\033[176;5u"),
        (keymap.XK_Escape, SHIFT, False, False, "\033[27;2u"),
    ],
)
def test_lookup_matches_table(keysym, state, appkeypad, appcursor, expected):
    assert lookup(keysym, state, appkeypad, appcursor) == expected


def test_num_lock_is_ignored():
    assert lookup(keymap.XK_Up, SHIFT | Modifier.MOD2) == "\033[1;2A"


def test_kp1_modified_bindings_belong_to_kp0():
    assert lookup(keymap.XK_KP_1, CTRL) is None
    assert lookup(keymap.XK_KP_1, 0, True) == "\033Oq"


def test_keypad_app_mode_sequences():
    assert lookup(keymap.XK_KP_Add, 0, True) == "\033Ok"
    assert lookup(keymap.XK_KP_Add, 0, False) is None


def test_all_keys_are_function_keys():
    assert all(is_mapped(key.keysym) for key in keypad_keys())


def test_mode_restrictions_are_in_range():
    assert {key.appkey for key in keypad_keys()} <= {-1, 0, 1, 2}
    assert {key.appcursor for key in keypad_keys()} <= {-1, 0, 1}


def test_strings_are_escape_sequences_or_controls():
    for key in keypad_keys():
        assert key.string.startswith("\033") or key.string in {"\r", "\r\n", "\177"}


def test_classic_block_precedes_libtermkey_block():
    keys = keypad_keys()
    classic = keys.index(keymap.Key(keymap.XK_KP_Home, int(SHIFT), "\033[2J", 0, -1))
    termkey = keys.index(keymap.Key(keymap.XK_KP_Home, 0, "\033[H", 0, -1))
    assert classic == 0
    assert classic < termkey


def test_up_arrow_bindings_in_table_order():
    strings = [key.string for key in keypad_keys() if key.keysym == keymap.XK_Up]
    assert strings == [
        "\033[1;2A",
        "\033[1;3A",
        "\033[1;4A",
        "\033[1;5A",
        "\033[1;6A",
        "\033[1;7A",
        "\033[1;8A",
        "\033[A",
        "\033OA",
    ]