# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging

from msgspec.structs import replace

from ..eventtypes import Hotkey
from ..keynames import AnyKey, character, combo_name, is_modifier, is_shift, is_special
from .state import EngineState, Transition, emitted, flush_text

logger = logging.getLogger(__name__)


def _including(keys: tuple, key: AnyKey) -> tuple:
    if key in keys:
        return keys
    return keys + (key,)


def _combo(*keys: AnyKey) -> str:
    return "-".join(combo_name(k) for k in keys)


# typing: buffer printable characters until something interrupts them
def append_character(state: EngineState, char: str, now: int) -> EngineState:
    return replace(
        state,
        pending_text=state.pending_text + char,
        text_start_time=now if state.text_start_time is None else state.text_start_time,
        last_key_time=now,
    )


def expire_text(state: EngineState, now: int, idle_timeout_ms: int) -> Transition:
    if state.pending_text and state.last_key_time is not None and now - state.last_key_time > idle_timeout_ms:
        typed, state = flush_text(state)
        return emitted(typed), state
    return [], state


# modifiers: track what is held and turn chords into hotkeys
def press_key(state: EngineState, key: AnyKey, now: int) -> Transition:
    if is_modifier(key):
        return [], replace(
            state,
            held_modifiers=_including(state.held_modifiers, key),
            sequence_modifiers=_including(state.sequence_modifiers, key),
        )

    if any(not is_shift(m) for m in state.held_modifiers):
        typed, state = flush_text(state)
        hotkey = Hotkey.pressed(f"{_combo(*state.held_modifiers)}-{combo_name(key).lower()}", now)
        logger.debug("chord %s at %d", hotkey.data.text, now)
        return emitted(typed, hotkey), replace(state, held_modifiers=(), sequence_modifiers=())

    if is_special(key):
        typed, state = flush_text(state)
        return emitted(typed, Hotkey.pressed(combo_name(key), now)), state

    char = character(key, shift=any(is_shift(m) for m in state.held_modifiers))
    if not char:
        return [], state
    return [], append_character(state, char, now)


def release_key(state: EngineState, key: AnyKey, now: int) -> Transition:
    if not is_modifier(key):
        return [], state
    held = tuple(m for m in state.held_modifiers if m != key)
    if held:
        return [], replace(state, held_modifiers=held)
    # a chord released without ever getting a final key
    hotkey = None
    if state.sequence_modifiers and not state.pending_text:
        hotkey = Hotkey.pressed(_combo(*state.sequence_modifiers), now)
    return emitted(hotkey), replace(state, held_modifiers=(), sequence_modifiers=())
