# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import msgspec


class Point(msgspec.Struct, frozen=True):
    x: int | float
    y: int | float

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(x=self.x - other.x, y=self.y - other.y)

    def __abs__(self):
        return (self.x**2 + self.y**2) ** 0.5


class TimedPoint(msgspec.Struct, frozen=True):
    """A pointer sample; `time` is milliseconds since the gesture began."""

    time: int
    x: int | float
    y: int | float

    @property
    def point(self):
        return Point(x=self.x, y=self.y)


class ActionTraceError(Exception):
    pass


class MalformedRecordError(ActionTraceError):
    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed input record on line {line_number}: {reason}")


class SessionNotFoundError(ActionTraceError):
    pass


class SessionReadError(ActionTraceError):
    pass


class SettingsError(ActionTraceError):
    pass
