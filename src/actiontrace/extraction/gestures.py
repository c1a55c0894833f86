# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

from msgspec.structs import replace

from ..commontypes import TimedPoint
from ..eventtypes import Action, EventData, MouseClick, MouseDrag, MouseWheel
from ..resampling import resample
from .state import EngineState, Thresholds, Transition, emitted, flush_text

PRIMARY_BUTTON = "left"


def is_primary(button: typing.Optional[str]) -> bool:
    return button is not None and button.lower() == PRIMARY_BUTTON


def _track(state: EngineState, data: EventData, now: int) -> EngineState:
    point = data.point
    if point is None:
        return state
    state = replace(state, last_known_pos=point)
    if state.pointer_down:
        sample = TimedPoint(time=now - state.pointer_down_time, x=point.x, y=point.y)
        state = replace(state, accumulated_points=state.accumulated_points + (sample,))
    return state


def move_pointer(state: EngineState, now: int, data: EventData) -> Transition:
    return [], _track(state, data, now)


def press_button(state: EngineState, now: int, data: EventData) -> Transition:
    typed, state = flush_text(state)
    if data.point is not None:
        state = replace(state, last_known_pos=data.point)
    if is_primary(data.button) and state.last_known_pos is not None:
        pos = state.last_known_pos
        state = replace(
            state,
            pointer_down=True,
            pointer_down_time=now,
            pointer_down_pos=pos,
            accumulated_points=(TimedPoint(time=0, x=pos.x, y=pos.y),),
        )
    return emitted(typed), state


def classify(state: EngineState, now: int, thresholds: Thresholds) -> typing.Optional[Action]:
    "Decide whether a finished press was a click, a drag, or too small to be either."
    duration = now - state.pointer_down_time
    distance = abs(state.last_known_pos - state.pointer_down_pos)
    if distance <= thresholds.click_distance_px and duration <= thresholds.click_duration_ms:
        return MouseClick.at(state.pointer_down_pos, state.pointer_down_time)
    if len(state.accumulated_points) > 1:
        coordinates = resample(state.accumulated_points, thresholds.drag_control_points)
        if len(coordinates) > 1:
            return MouseDrag.along(coordinates, state.pointer_down_time)
    return None


def release_button(state: EngineState, now: int, data: EventData, thresholds: Thresholds) -> Transition:
    gesture = None
    if is_primary(data.button) and state.pointer_down:
        point = data.point
        if point is not None and point != state.accumulated_points[-1].point:
            state = _track(state, data, now)
        gesture = classify(state, now, thresholds)
        state = replace(
            state,
            pointer_down=False,
            pointer_down_time=None,
            pointer_down_pos=None,
            accumulated_points=(),
        )
    elif data.point is not None:
        state = replace(state, last_known_pos=data.point)
    # anything typed while the button was held began after the press
    typed, state = flush_text(state)
    return emitted(gesture, typed), state


def scroll(state: EngineState, now: int, data: EventData) -> Transition:
    typed, state = flush_text(state)
    if data.delta is None:
        return emitted(typed), state
    return emitted(typed, MouseWheel.scrolled(data.delta, now)), state
