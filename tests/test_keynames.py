# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest

from actiontrace.keyboard_consts import KEYMAPS, MODIFIER_KEYS, SPECIAL_KEYS, KeyCode
from actiontrace.keynames import (
    DESKTOP_KEY_NAMES,
    RDEV_KEY_NAMES,
    character,
    combo_name,
    is_combo_only,
    is_letter,
    is_modifier,
    is_shift,
    is_special,
    letter,
    normalize,
    symbol,
)


@pytest.mark.parametrize(
    "desktop,rdev,expected",
    (
        ("A", "KeyA", KeyCode.KEY_A),
        ("Z", "KeyZ", KeyCode.KEY_Z),
        ("One", "Num1", KeyCode.KEY_1),
        ("Zero", "Num0", KeyCode.KEY_0),
        ("Return", "Return", KeyCode.KEY_ENTER),
        ("Left", "LeftArrow", KeyCode.KEY_LEFT),
        ("LeftCtrl", "ControlLeft", KeyCode.KEY_LEFTCTRL),
        ("RightAlt", "AltGr", KeyCode.KEY_RIGHTALT),
        ("Shift", "ShiftLeft", KeyCode.KEY_LEFTSHIFT),
        ("BackTick", "BackQuote", KeyCode.KEY_GRAVE),
        ("FullStop", "Dot", KeyCode.KEY_DOT),
        ("ForwardSlash", "Slash", KeyCode.KEY_SLASH),
        ("Minus", "Minus", KeyCode.KEY_MINUS),
        ("LeftSquareBracket", "LeftBracket", KeyCode.KEY_LEFTBRACE),
        ("Apostrophe", "Quote", KeyCode.KEY_APOSTROPHE),
        ("Add", "KpPlus", KeyCode.KEY_KPPLUS),
        ("Decimal", "KpDelete", KeyCode.KEY_KPDOT),
        ("PrintScreen", "PrintScreen", KeyCode.KEY_SYSRQ),
        ("Numlock", "NumLock", KeyCode.KEY_NUMLOCK),
        ("F12", "F12", KeyCode.KEY_F12),
    ),
)
def test_both_vocabularies_agree(desktop, rdev, expected):
    assert normalize(desktop) is expected
    assert normalize(rdev) is expected


def test_bare_letters_in_either_case():
    assert normalize("q") is KeyCode.KEY_Q
    assert normalize("Q") is KeyCode.KEY_Q


@pytest.mark.parametrize("raw", ("Function", "Unknown(255)", "VolumeUp", "Separator", "é"))
def test_unknown_keys_pass_through(raw):
    assert normalize(raw) == raw
    assert combo_name(raw) == raw
    assert character(raw, shift=False) == raw.lower()


def test_tables_only_name_canonical_keys():
    for table in (DESKTOP_KEY_NAMES, RDEV_KEY_NAMES):
        for code in table.values():
            assert isinstance(code, KeyCode)


def test_key_classes_do_not_overlap():
    assert not (MODIFIER_KEYS & SPECIAL_KEYS)
    assert not (MODIFIER_KEYS & set(KEYMAPS))
    assert not (SPECIAL_KEYS & set(KEYMAPS))
    assert set(KeyCode) == MODIFIER_KEYS | SPECIAL_KEYS | set(KEYMAPS)


@pytest.mark.parametrize(
    "key,modifier,combo_only,shift,special",
    (
        (KeyCode.KEY_LEFTSHIFT, True, False, True, False),
        (KeyCode.KEY_RIGHTSHIFT, True, False, True, False),
        (KeyCode.KEY_LEFTCTRL, True, True, False, False),
        (KeyCode.KEY_RIGHTMETA, True, True, False, False),
        (KeyCode.KEY_ENTER, False, False, False, True),
        (KeyCode.KEY_F5, False, False, False, True),
        (KeyCode.KEY_CAPSLOCK, False, False, False, True),
        (KeyCode.KEY_A, False, False, False, False),
        (KeyCode.KEY_SPACE, False, False, False, False),
        ("Function", False, False, False, False),
    ),
)
def test_classification(key, modifier, combo_only, shift, special):
    assert is_modifier(key) is modifier
    assert is_combo_only(key) is combo_only
    assert is_shift(key) is shift
    assert is_special(key) is special


@pytest.mark.parametrize(
    "key,unshifted,shifted",
    (
        (KeyCode.KEY_1, "1", "!"),
        (KeyCode.KEY_0, "0", ")"),
        (KeyCode.KEY_GRAVE, "`", "~"),
        (KeyCode.KEY_MINUS, "-", "_"),
        (KeyCode.KEY_EQUAL, "=", "+"),
        (KeyCode.KEY_PLUS, "+", "+"),
        (KeyCode.KEY_LEFTBRACE, "[", "{"),
        (KeyCode.KEY_BACKSLASH, "\\", "|"),
        (KeyCode.KEY_SEMICOLON, ";", ":"),
        (KeyCode.KEY_APOSTROPHE, "'", '"'),
        (KeyCode.KEY_COMMA, ",", "<"),
        (KeyCode.KEY_DOT, ".", ">"),
        (KeyCode.KEY_SLASH, "/", "?"),
        (KeyCode.KEY_SPACE, " ", " "),
        (KeyCode.KEY_NUMERIC_POUND, "#", "#"),
        (KeyCode.KEY_KPASTERISK, "*", "*"),
        (KeyCode.KEY_KP7, "7", "7"),
    ),
)
def test_symbols(key, unshifted, shifted):
    assert symbol(key, shift=False) == unshifted
    assert symbol(key, shift=True) == shifted
    assert letter(key, shift=False) is None


@pytest.mark.parametrize("raw", ("A", "KeyA", "a"))
def test_letters_are_cased_by_shift_alone(raw):
    key = normalize(raw)
    assert is_letter(key)
    assert symbol(key, shift=False) is None
    assert letter(key, shift=False) == "a"
    assert letter(key, shift=True) == "A"
    assert character(key, shift=False) == "a"
    assert character(key, shift=True) == "A"


def test_non_printables_have_no_character():
    assert character(KeyCode.KEY_ENTER, shift=False) is None
    assert character(KeyCode.KEY_LEFTCTRL, shift=True) is None


@pytest.mark.parametrize(
    "key,expected",
    (
        (KeyCode.KEY_LEFTCTRL, "LeftCtrl"),
        (KeyCode.KEY_LEFTSHIFT, "Shift"),
        (KeyCode.KEY_RIGHTSHIFT, "ShiftRight"),
        (KeyCode.KEY_LEFTMETA, "MetaLeft"),
        (KeyCode.KEY_ENTER, "Return"),
        (KeyCode.KEY_C, "C"),
        (KeyCode.KEY_1, "One"),
        (KeyCode.KEY_EQUAL, "Equal"),
        (KeyCode.KEY_PLUS, "Plus"),
        (KeyCode.KEY_SCROLLLOCK, "ScrollLock"),
    ),
)
def test_combo_names(key, expected):
    assert combo_name(key) == expected


def test_plus_and_equal_are_different_keys():
    assert normalize("Plus") is KeyCode.KEY_PLUS
    assert normalize("Equal") is KeyCode.KEY_EQUAL
    assert character(normalize("Plus"), shift=False) == "+"
    assert character(normalize("Equal"), shift=False) == "="
