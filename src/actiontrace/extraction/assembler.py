# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections
import collections.abc
import logging
import operator

from ..eventtypes import Action, EventKind, RawEvent
from ..keynames import normalize
from .gestures import move_pointer, press_button, release_button, scroll
from .keystreams import expire_text, press_key, release_key
from .state import EngineState, Thresholds, Transition, flush_text

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS = Thresholds()


def step(state: EngineState, event: RawEvent, now: int, thresholds: Thresholds) -> Transition:
    "Route one epoch-normalized event to the component that owns its kind."
    expired, state = expire_text(state, now, thresholds.typing_idle_timeout_ms)
    data = event.data
    match event.kind:
        case EventKind.MOUSEMOVE:
            actions, state = move_pointer(state, now, data)
        case EventKind.MOUSEDOWN:
            actions, state = press_button(state, now, data)
        case EventKind.MOUSEUP:
            actions, state = release_button(state, now, data, thresholds)
        case EventKind.MOUSEWHEEL:
            actions, state = scroll(state, now, data)
        case EventKind.KEYDOWN if data.key:
            actions, state = press_key(state, normalize(data.key), now)
        case EventKind.KEYUP if data.key:
            actions, state = release_key(state, normalize(data.key), now)
        case _:
            actions = []
    return expired + actions, state


def extract_actions(events: collections.abc.Sequence[RawEvent], thresholds: Thresholds = DEFAULT_THRESHOLDS) -> list[Action]:
    """Reconstruct semantic actions from one session's time-ordered raw events.

    Timestamps in the result are relative to the first event. Actions come back in
    chronological order of when each action started.
    """
    if not events:
        return []

    epoch = events[0].time
    state = EngineState()
    actions: list[Action] = []
    for event in events:
        emitted, state = step(state, event, event.time - epoch, thresholds)
        actions.extend(emitted)
    typed, state = flush_text(state)
    if typed is not None:
        actions.append(typed)

    # A chord or a burst of typing can finish while the mouse button is still held; the
    # drag it interrupted started earlier, so restore start-time order.
    actions.sort(key=operator.attrgetter("timestamp"))

    if logger.isEnabledFor(logging.DEBUG):
        counts = collections.Counter(type(action).__name__ for action in actions)
        logger.debug("extracted %d actions from %d events: %r", len(actions), len(events), dict(counts))
    return actions
