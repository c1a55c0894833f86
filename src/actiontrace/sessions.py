# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import dataclasses
import logging
import pathlib

import trio

from .commontypes import ActionTraceError, SessionNotFoundError, SessionReadError
from .eventtypes import Action, RawEvent, decode_records, encode_actions
from .extraction import extract_actions
from .settings import Settings

logger = logging.getLogger(__name__)


def input_log_path(data_dir: pathlib.Path, session_id: str, settings: Settings) -> pathlib.Path:
    return data_dir / session_id / settings.input_log_name


def actions_path(out_dir: pathlib.Path, session_id: str) -> pathlib.Path:
    return out_dir / f"{session_id}.actions.json"


def read_events(path: pathlib.Path) -> list[RawEvent]:
    with path.open("rb") as infile:
        return decode_records(infile)


def extract_session(data_dir: pathlib.Path, session_id: str, settings: Settings) -> list[Action]:
    path = input_log_path(data_dir, session_id, settings)
    if not path.is_file():
        raise SessionNotFoundError(f"No input log for session {session_id!r} at {path}")
    try:
        events = read_events(path)
    except OSError as exc:
        raise SessionReadError(f"Unable to read input log for session {session_id!r}: {exc}") from exc
    actions = extract_actions(events, settings.thresholds())
    logger.info("[%s] %d events became %d actions", session_id, len(events), len(actions))
    return actions


def write_actions(out_dir: pathlib.Path, session_id: str, actions: collections.abc.Sequence[Action]) -> pathlib.Path:
    dest = actions_path(out_dir, session_id)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(encode_actions(actions))
    return dest


@dataclasses.dataclass
class BatchResult:
    actions: dict[str, list[Action]] = dataclasses.field(default_factory=dict)
    failures: dict[str, ActionTraceError] = dataclasses.field(default_factory=dict)

    @property
    def ok(self):
        return not self.failures


async def extract_sessions(data_dir: pathlib.Path, session_ids: collections.abc.Iterable[str], settings: Settings) -> BatchResult:
    """Extract several sessions concurrently, each in its own worker thread.

    Sessions share nothing, so a session that fails is recorded in the result and the
    others carry on.
    """
    limiter = trio.CapacityLimiter(settings.max_parallel_sessions)
    result = BatchResult()

    async def run_one(session_id: str):
        try:
            actions = await trio.to_thread.run_sync(extract_session, data_dir, session_id, settings, limiter=limiter)
        except SessionNotFoundError as exc:
            logger.warning("[%s] %s", session_id, exc)
            result.failures[session_id] = exc
        except ActionTraceError as exc:
            logger.exception("[%s] extraction failed", session_id)
            result.failures[session_id] = exc
        else:
            result.actions[session_id] = actions

    async with trio.open_nursery() as nursery:
        for session_id in session_ids:
            nursery.start_soon(run_one, session_id)
    return result


def run_batch(data_dir: pathlib.Path, session_ids: collections.abc.Iterable[str], settings: Settings) -> BatchResult:
    return trio.run(extract_sessions, data_dir, list(session_ids), settings)
