# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import enum
import typing

import msgspec

from .commontypes import MalformedRecordError, Point, TimedPoint

Number = typing.Union[int, float]


@enum.unique
class EventKind(enum.Enum):
    MOUSEMOVE = "mousemove"
    MOUSEDOWN = "mousedown"
    MOUSEUP = "mouseup"
    KEYDOWN = "keydown"
    KEYUP = "keyup"
    MOUSEWHEEL = "mousewheel"


EVENT_KINDS = {kind.value: kind for kind in EventKind}


### Input records


class EventData(msgspec.Struct, frozen=True):
    x: typing.Optional[Number] = None
    y: typing.Optional[Number] = None
    key: typing.Optional[str] = None
    button: typing.Optional[str] = None
    delta: typing.Optional[Number] = None

    @property
    def point(self) -> typing.Optional[Point]:
        if self.x is None or self.y is None:
            return None
        return Point(x=self.x, y=self.y)


class RawEvent(msgspec.Struct, frozen=True):
    event: str
    time: int
    data: EventData = msgspec.field(default_factory=EventData)

    @property
    def kind(self) -> typing.Optional[EventKind]:
        return EVENT_KINDS.get(self.event)


_record_decoder = msgspec.json.Decoder(RawEvent)


def decode_records(lines: collections.abc.Iterable[str | bytes]) -> list[RawEvent]:
    """Decode newline-delimited JSON records. Blank lines are skipped.

    Any record that fails to decode aborts the whole batch with MalformedRecordError.
    """
    events = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            events.append(_record_decoder.decode(line))
        except msgspec.DecodeError as exc:
            raise MalformedRecordError(line_number, str(exc)) from exc
    return events


### Output records


class ClickData(msgspec.Struct, frozen=True):
    x: Number
    y: Number


class DragData(msgspec.Struct, frozen=True):
    coordinates: list[TimedPoint]


class TextData(msgspec.Struct, frozen=True):
    text: str


class WheelData(msgspec.Struct, frozen=True):
    delta: Number


class MouseClick(msgspec.Struct, frozen=True, tag_field="type", tag="mouseclick"):
    timestamp: int
    data: ClickData

    @classmethod
    def at(cls, point: Point, timestamp: int):
        return cls(timestamp=timestamp, data=ClickData(x=point.x, y=point.y))


class MouseDrag(msgspec.Struct, frozen=True, tag_field="type", tag="mousedrag"):
    timestamp: int
    data: DragData

    @classmethod
    def along(cls, coordinates: collections.abc.Sequence[TimedPoint], timestamp: int):
        return cls(timestamp=timestamp, data=DragData(coordinates=list(coordinates)))


class TypeText(msgspec.Struct, frozen=True, tag_field="type", tag="type"):
    timestamp: int
    data: TextData

    @classmethod
    def typed(cls, text: str, timestamp: int):
        return cls(timestamp=timestamp, data=TextData(text=text))


class Hotkey(msgspec.Struct, frozen=True, tag_field="type", tag="hotkey"):
    timestamp: int
    data: TextData

    @classmethod
    def pressed(cls, combo: str, timestamp: int):
        return cls(timestamp=timestamp, data=TextData(text=combo))


class MouseWheel(msgspec.Struct, frozen=True, tag_field="type", tag="mousewheel"):
    timestamp: int
    data: WheelData

    @classmethod
    def scrolled(cls, delta: Number, timestamp: int):
        return cls(timestamp=timestamp, data=WheelData(delta=delta))


Action = MouseClick | MouseDrag | TypeText | Hotkey | MouseWheel


def encode_actions(actions: collections.abc.Sequence[Action], indent: int = 2) -> bytes:
    encoded = msgspec.json.encode(list(actions))
    if indent:
        return msgspec.json.format(encoded, indent=indent)
    return encoded


def decode_actions(buf: str | bytes) -> list[Action]:
    return msgspec.json.decode(buf, type=list[Action])
