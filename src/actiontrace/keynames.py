# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Resolve raw key identifiers from the supported recorders into canonical keys.

Two naming schemes show up in input logs: the desktop recorder's names (``A``, ``One``,
``LeftCtrl``, ``FullStop``) and rdev-style names (``KeyA``, ``Num1``, ``ControlLeft``, ``Dot``).
Both are resolved once, here, into :class:`KeyCode`. Identifiers found in neither table are
returned unchanged and travel through the engine as literal text.
"""
from __future__ import annotations

import string
import typing
import unicodedata

from .keyboard_consts import COMBO_ONLY_KEYS, KEYMAPS, MODIFIER_KEYS, SHIFT_KEYS, SPECIAL_KEYS, KeyCode

AnyKey = typing.Union[KeyCode, str]

DESKTOP_KEY_NAMES: dict[str, KeyCode] = {
    "Escape": KeyCode.KEY_ESC,
    "Return": KeyCode.KEY_ENTER,
    "Backspace": KeyCode.KEY_BACKSPACE,
    "Left": KeyCode.KEY_LEFT,
    "Right": KeyCode.KEY_RIGHT,
    "Up": KeyCode.KEY_UP,
    "Down": KeyCode.KEY_DOWN,
    "Space": KeyCode.KEY_SPACE,
    **{letter: KeyCode[f"KEY_{letter}"] for letter in string.ascii_uppercase},
    **{f"F{n}": KeyCode[f"KEY_F{n}"] for n in range(1, 13)},
    "Zero": KeyCode.KEY_0,
    "One": KeyCode.KEY_1,
    "Two": KeyCode.KEY_2,
    "Three": KeyCode.KEY_3,
    "Four": KeyCode.KEY_4,
    "Five": KeyCode.KEY_5,
    "Six": KeyCode.KEY_6,
    "Seven": KeyCode.KEY_7,
    "Eight": KeyCode.KEY_8,
    "Nine": KeyCode.KEY_9,
    "Shift": KeyCode.KEY_LEFTSHIFT,
    "LeftCtrl": KeyCode.KEY_LEFTCTRL,
    "RightCtrl": KeyCode.KEY_RIGHTCTRL,
    "LeftAlt": KeyCode.KEY_LEFTALT,
    "RightAlt": KeyCode.KEY_RIGHTALT,
    "CapsLock": KeyCode.KEY_CAPSLOCK,
    "Pause": KeyCode.KEY_PAUSE,
    "PageUp": KeyCode.KEY_PAGEUP,
    "PageDown": KeyCode.KEY_PAGEDOWN,
    "PrintScreen": KeyCode.KEY_SYSRQ,
    "Insert": KeyCode.KEY_INSERT,
    "End": KeyCode.KEY_END,
    "Home": KeyCode.KEY_HOME,
    "Delete": KeyCode.KEY_DELETE,
    "Add": KeyCode.KEY_KPPLUS,
    "Subtract": KeyCode.KEY_KPMINUS,
    "Multiply": KeyCode.KEY_KPASTERISK,
    "Decimal": KeyCode.KEY_KPDOT,
    "Divide": KeyCode.KEY_KPSLASH,
    "BackTick": KeyCode.KEY_GRAVE,
    "BackSlash": KeyCode.KEY_BACKSLASH,
    "ForwardSlash": KeyCode.KEY_SLASH,
    "Plus": KeyCode.KEY_PLUS,
    "Minus": KeyCode.KEY_MINUS,
    "FullStop": KeyCode.KEY_DOT,
    "Comma": KeyCode.KEY_COMMA,
    "Tab": KeyCode.KEY_TAB,
    "Numlock": KeyCode.KEY_NUMLOCK,
    "LeftSquareBracket": KeyCode.KEY_LEFTBRACE,
    "RightSquareBracket": KeyCode.KEY_RIGHTBRACE,
    "SemiColon": KeyCode.KEY_SEMICOLON,
    "Apostrophe": KeyCode.KEY_APOSTROPHE,
    "Hash": KeyCode.KEY_NUMERIC_POUND,
}

RDEV_KEY_NAMES: dict[str, KeyCode] = {
    "Alt": KeyCode.KEY_LEFTALT,
    "AltGr": KeyCode.KEY_RIGHTALT,
    "Backspace": KeyCode.KEY_BACKSPACE,
    "CapsLock": KeyCode.KEY_CAPSLOCK,
    "ControlLeft": KeyCode.KEY_LEFTCTRL,
    "ControlRight": KeyCode.KEY_RIGHTCTRL,
    "Delete": KeyCode.KEY_DELETE,
    "DownArrow": KeyCode.KEY_DOWN,
    "End": KeyCode.KEY_END,
    "Escape": KeyCode.KEY_ESC,
    **{f"F{n}": KeyCode[f"KEY_F{n}"] for n in range(1, 13)},
    "Home": KeyCode.KEY_HOME,
    "LeftArrow": KeyCode.KEY_LEFT,
    "MetaLeft": KeyCode.KEY_LEFTMETA,
    "MetaRight": KeyCode.KEY_RIGHTMETA,
    "PageDown": KeyCode.KEY_PAGEDOWN,
    "PageUp": KeyCode.KEY_PAGEUP,
    "Return": KeyCode.KEY_ENTER,
    "RightArrow": KeyCode.KEY_RIGHT,
    "ShiftLeft": KeyCode.KEY_LEFTSHIFT,
    "ShiftRight": KeyCode.KEY_RIGHTSHIFT,
    "Space": KeyCode.KEY_SPACE,
    "Tab": KeyCode.KEY_TAB,
    "UpArrow": KeyCode.KEY_UP,
    "PrintScreen": KeyCode.KEY_SYSRQ,
    "ScrollLock": KeyCode.KEY_SCROLLLOCK,
    "Pause": KeyCode.KEY_PAUSE,
    "NumLock": KeyCode.KEY_NUMLOCK,
    "BackQuote": KeyCode.KEY_GRAVE,
    **{f"Num{n}": KeyCode[f"KEY_{n}"] for n in range(10)},
    "Minus": KeyCode.KEY_MINUS,
    "Equal": KeyCode.KEY_EQUAL,
    **{f"Key{letter}": KeyCode[f"KEY_{letter}"] for letter in string.ascii_uppercase},
    "LeftBracket": KeyCode.KEY_LEFTBRACE,
    "RightBracket": KeyCode.KEY_RIGHTBRACE,
    "SemiColon": KeyCode.KEY_SEMICOLON,
    "Quote": KeyCode.KEY_APOSTROPHE,
    "BackSlash": KeyCode.KEY_BACKSLASH,
    "IntlBackslash": KeyCode.KEY_102ND,
    "Comma": KeyCode.KEY_COMMA,
    "Dot": KeyCode.KEY_DOT,
    "Slash": KeyCode.KEY_SLASH,
    "Insert": KeyCode.KEY_INSERT,
    "KpReturn": KeyCode.KEY_KPENTER,
    "KpMinus": KeyCode.KEY_KPMINUS,
    "KpPlus": KeyCode.KEY_KPPLUS,
    "KpMultiply": KeyCode.KEY_KPASTERISK,
    "KpDivide": KeyCode.KEY_KPSLASH,
    **{f"Kp{n}": KeyCode[f"KEY_KP{n}"] for n in range(10)},
    "KpDelete": KeyCode.KEY_KPDOT,
}

# Hotkey combos name keys the way the desktop recorder does; keys it cannot report fall back to rdev names.
KEY_LABELS: dict[KeyCode, str] = {
    **{code: name for name, code in RDEV_KEY_NAMES.items()},
    **{code: name for name, code in DESKTOP_KEY_NAMES.items()},
}


def normalize(raw: str) -> AnyKey:
    if raw in DESKTOP_KEY_NAMES:
        return DESKTOP_KEY_NAMES[raw]
    if raw in RDEV_KEY_NAMES:
        return RDEV_KEY_NAMES[raw]
    # some recorders report bare characters for letter keys, in either case
    if len(raw) == 1 and raw.upper() in DESKTOP_KEY_NAMES:
        return DESKTOP_KEY_NAMES[raw.upper()]
    return raw


def is_modifier(key: AnyKey) -> bool:
    return key in MODIFIER_KEYS


def is_combo_only(key: AnyKey) -> bool:
    return key in COMBO_ONLY_KEYS


def is_shift(key: AnyKey) -> bool:
    return key in SHIFT_KEYS


def is_special(key: AnyKey) -> bool:
    return key in SPECIAL_KEYS


def is_letter(key: AnyKey) -> bool:
    if key not in KEYMAPS:
        return False
    return unicodedata.category(KEYMAPS[key][0]).startswith("L")


def symbol(key: AnyKey, shift: bool) -> typing.Optional[str]:
    "The character a digit, punctuation or keypad key produces at the given shift level."
    if key not in KEYMAPS or is_letter(key):
        return None
    return KEYMAPS[key][1 if shift else 0]


def letter(key: AnyKey, shift: bool) -> typing.Optional[str]:
    if not is_letter(key):
        return None
    return KEYMAPS[key][1 if shift else 0]


def character(key: AnyKey, shift: bool) -> typing.Optional[str]:
    if isinstance(key, KeyCode):
        return symbol(key, shift) or letter(key, shift)
    return key.lower()


def combo_name(key: AnyKey) -> str:
    if isinstance(key, KeyCode):
        return KEY_LABELS.get(key, key.name)
    return key
