# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

import msgspec

from ..commontypes import Point, TimedPoint
from ..eventtypes import Action, TypeText
from ..keyboard_consts import KeyCode
from ..resampling import DEFAULT_CONTROL_POINTS

CLICK_DISTANCE_PX = 5
CLICK_DURATION_MS = 500
TYPING_IDLE_TIMEOUT_MS = 1000


class Thresholds(msgspec.Struct, frozen=True, kw_only=True):
    click_distance_px: float = CLICK_DISTANCE_PX
    click_duration_ms: int = CLICK_DURATION_MS
    typing_idle_timeout_ms: int = TYPING_IDLE_TIMEOUT_MS
    drag_control_points: int = DEFAULT_CONTROL_POINTS


class EngineState(msgspec.Struct, frozen=True, kw_only=True):
    """Everything the extractor remembers between events of one session.

    Modifier tuples keep the order in which the keys went down, so combos are named
    in the order the user pressed them.
    """

    held_modifiers: tuple[KeyCode, ...] = ()
    sequence_modifiers: tuple[KeyCode, ...] = ()
    pending_text: str = ""
    text_start_time: typing.Optional[int] = None
    last_key_time: typing.Optional[int] = None
    pointer_down: bool = False
    pointer_down_time: typing.Optional[int] = None
    pointer_down_pos: typing.Optional[Point] = None
    accumulated_points: tuple[TimedPoint, ...] = ()
    last_known_pos: typing.Optional[Point] = None


Transition = tuple[list[Action], EngineState]


def emitted(*actions: typing.Optional[Action]) -> list[Action]:
    return [action for action in actions if action is not None]


def flush_text(state: EngineState) -> tuple[typing.Optional[TypeText], EngineState]:
    if not state.pending_text:
        return None, state
    typed = TypeText.typed(state.pending_text, state.text_start_time)
    return typed, msgspec.structs.replace(state, pending_text="", text_start_time=None, sequence_modifiers=())
