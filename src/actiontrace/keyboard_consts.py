# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from enum import IntEnum

# Canonical keys use the Linux input-event key codes, so that a key keeps the
# same identity no matter which recorder (and which naming scheme) produced it.
# Only keys that either recorder can report are listed.


class KeyCode(IntEnum):
    KEY_ESC = 1
    KEY_1 = 2
    KEY_2 = 3
    KEY_3 = 4
    KEY_4 = 5
    KEY_5 = 6
    KEY_6 = 7
    KEY_7 = 8
    KEY_8 = 9
    KEY_9 = 10
    KEY_0 = 11
    KEY_MINUS = 12
    KEY_EQUAL = 13
    KEY_BACKSPACE = 14
    KEY_TAB = 15
    KEY_Q = 16
    KEY_W = 17
    KEY_E = 18
    KEY_R = 19
    KEY_T = 20
    KEY_Y = 21
    KEY_U = 22
    KEY_I = 23
    KEY_O = 24
    KEY_P = 25
    KEY_LEFTBRACE = 26
    KEY_RIGHTBRACE = 27
    KEY_ENTER = 28
    KEY_LEFTCTRL = 29
    KEY_A = 30
    KEY_S = 31
    KEY_D = 32
    KEY_F = 33
    KEY_G = 34
    KEY_H = 35
    KEY_J = 36
    KEY_K = 37
    KEY_L = 38
    KEY_SEMICOLON = 39
    KEY_APOSTROPHE = 40
    KEY_GRAVE = 41
    KEY_LEFTSHIFT = 42
    KEY_BACKSLASH = 43
    KEY_Z = 44
    KEY_X = 45
    KEY_C = 46
    KEY_V = 47
    KEY_B = 48
    KEY_N = 49
    KEY_M = 50
    KEY_COMMA = 51
    KEY_DOT = 52
    KEY_SLASH = 53
    KEY_RIGHTSHIFT = 54
    KEY_KPASTERISK = 55
    KEY_LEFTALT = 56
    KEY_SPACE = 57
    KEY_CAPSLOCK = 58
    KEY_F1 = 59
    KEY_F2 = 60
    KEY_F3 = 61
    KEY_F4 = 62
    KEY_F5 = 63
    KEY_F6 = 64
    KEY_F7 = 65
    KEY_F8 = 66
    KEY_F9 = 67
    KEY_F10 = 68
    KEY_NUMLOCK = 69
    KEY_SCROLLLOCK = 70
    KEY_KP7 = 71
    KEY_KP8 = 72
    KEY_KP9 = 73
    KEY_KPMINUS = 74
    KEY_KP4 = 75
    KEY_KP5 = 76
    KEY_KP6 = 77
    KEY_KPPLUS = 78
    KEY_KP1 = 79
    KEY_KP2 = 80
    KEY_KP3 = 81
    KEY_KP0 = 82
    KEY_KPDOT = 83
    # the extra key left of Z on ISO keyboards
    KEY_102ND = 86
    KEY_F11 = 87
    KEY_F12 = 88
    KEY_KPENTER = 96
    KEY_RIGHTCTRL = 97
    KEY_KPSLASH = 98
    KEY_SYSRQ = 99
    KEY_RIGHTALT = 100
    KEY_HOME = 102
    KEY_UP = 103
    KEY_PAGEUP = 104
    KEY_LEFT = 105
    KEY_RIGHT = 106
    KEY_END = 107
    KEY_DOWN = 108
    KEY_PAGEDOWN = 109
    KEY_INSERT = 110
    KEY_DELETE = 111
    KEY_PAUSE = 119
    KEY_LEFTMETA = 125
    KEY_RIGHTMETA = 126
    KEY_NUMERIC_POUND = 0x20B
    # no input-event code exists for the desktop recorder's dedicated Plus key
    KEY_PLUS = 0x1000


SHIFT_KEYS = frozenset({KeyCode.KEY_LEFTSHIFT, KeyCode.KEY_RIGHTSHIFT})

# Modifiers other than shift never change the typed character; they only form combos.
COMBO_ONLY_KEYS = frozenset(
    {
        KeyCode.KEY_LEFTCTRL,
        KeyCode.KEY_RIGHTCTRL,
        KeyCode.KEY_LEFTALT,
        KeyCode.KEY_RIGHTALT,
        KeyCode.KEY_LEFTMETA,
        KeyCode.KEY_RIGHTMETA,
    }
)

MODIFIER_KEYS = SHIFT_KEYS | COMBO_ONLY_KEYS

# level 0 is unshifted, level 1 is shifted
KEYMAPS: dict[KeyCode, tuple[str, str]] = {
    KeyCode.KEY_GRAVE: ("`", "~"),
    KeyCode.KEY_1: ("1", "!"),
    KeyCode.KEY_2: ("2", "@"),
    KeyCode.KEY_3: ("3", "#"),
    KeyCode.KEY_4: ("4", "$"),
    KeyCode.KEY_5: ("5", "%"),
    KeyCode.KEY_6: ("6", "^"),
    KeyCode.KEY_7: ("7", "&"),
    KeyCode.KEY_8: ("8", "*"),
    KeyCode.KEY_9: ("9", "("),
    KeyCode.KEY_0: ("0", ")"),
    KeyCode.KEY_MINUS: ("-", "_"),
    KeyCode.KEY_EQUAL: ("=", "+"),
    KeyCode.KEY_Q: ("q", "Q"),
    KeyCode.KEY_W: ("w", "W"),
    KeyCode.KEY_E: ("e", "E"),
    KeyCode.KEY_R: ("r", "R"),
    KeyCode.KEY_T: ("t", "T"),
    KeyCode.KEY_Y: ("y", "Y"),
    KeyCode.KEY_U: ("u", "U"),
    KeyCode.KEY_I: ("i", "I"),
    KeyCode.KEY_O: ("o", "O"),
    KeyCode.KEY_P: ("p", "P"),
    KeyCode.KEY_LEFTBRACE: ("[", "{"),
    KeyCode.KEY_RIGHTBRACE: ("]", "}"),
    KeyCode.KEY_BACKSLASH: ("\\", "|"),
    KeyCode.KEY_A: ("a", "A"),
    KeyCode.KEY_S: ("s", "S"),
    KeyCode.KEY_D: ("d", "D"),
    KeyCode.KEY_F: ("f", "F"),
    KeyCode.KEY_G: ("g", "G"),
    KeyCode.KEY_H: ("h", "H"),
    KeyCode.KEY_J: ("j", "J"),
    KeyCode.KEY_K: ("k", "K"),
    KeyCode.KEY_L: ("l", "L"),
    KeyCode.KEY_SEMICOLON: (";", ":"),
    KeyCode.KEY_APOSTROPHE: ("'", '"'),
    KeyCode.KEY_Z: ("z", "Z"),
    KeyCode.KEY_X: ("x", "X"),
    KeyCode.KEY_C: ("c", "C"),
    KeyCode.KEY_V: ("v", "V"),
    KeyCode.KEY_B: ("b", "B"),
    KeyCode.KEY_N: ("n", "N"),
    KeyCode.KEY_M: ("m", "M"),
    KeyCode.KEY_COMMA: (",", "<"),
    KeyCode.KEY_DOT: (".", ">"),
    KeyCode.KEY_SLASH: ("/", "?"),
    KeyCode.KEY_SPACE: (" ", " "),
    KeyCode.KEY_102ND: ("\\", "|"),
    KeyCode.KEY_NUMERIC_POUND: ("#", "#"),
    KeyCode.KEY_KP0: ("0", "0"),
    KeyCode.KEY_KP1: ("1", "1"),
    KeyCode.KEY_KP2: ("2", "2"),
    KeyCode.KEY_KP3: ("3", "3"),
    KeyCode.KEY_KP4: ("4", "4"),
    KeyCode.KEY_KP5: ("5", "5"),
    KeyCode.KEY_KP6: ("6", "6"),
    KeyCode.KEY_KP7: ("7", "7"),
    KeyCode.KEY_KP8: ("8", "8"),
    KeyCode.KEY_KP9: ("9", "9"),
    KeyCode.KEY_KPPLUS: ("+", "+"),
    KeyCode.KEY_KPMINUS: ("-", "-"),
    KeyCode.KEY_KPASTERISK: ("*", "*"),
    KeyCode.KEY_KPSLASH: ("/", "/"),
    KeyCode.KEY_KPDOT: (".", "."),
    KeyCode.KEY_PLUS: ("+", "+"),
}

# Everything that is neither a modifier nor printable: Enter, arrows, function keys and so on.
SPECIAL_KEYS = frozenset(k for k in KeyCode if k not in MODIFIER_KEYS and k not in KEYMAPS)
