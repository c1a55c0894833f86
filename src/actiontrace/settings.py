# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import datetime
import json
import pathlib
import typing

import cattrs

from .commontypes import SettingsError
from .durations import format_duration, parse_duration, to_milliseconds
from .extraction.state import CLICK_DISTANCE_PX, CLICK_DURATION_MS, TYPING_IDLE_TIMEOUT_MS, Thresholds
from .resampling import DEFAULT_CONTROL_POINTS

INPUT_LOG_NAME = "input_log.jsonl"

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(datetime.timedelta, format_duration)
settings_converter.register_structure_hook(datetime.timedelta, lambda d, _: parse_duration(d))


@dataclasses.dataclass(kw_only=True)
class Settings:
    click_distance_px: float = CLICK_DISTANCE_PX
    click_duration: datetime.timedelta = datetime.timedelta(milliseconds=CLICK_DURATION_MS)
    typing_idle_timeout: datetime.timedelta = datetime.timedelta(milliseconds=TYPING_IDLE_TIMEOUT_MS)
    drag_control_points: int = DEFAULT_CONTROL_POINTS
    input_log_name: str = INPUT_LOG_NAME
    max_parallel_sessions: int = 4

    def __post_init__(self):
        if self.drag_control_points < 2:
            raise ValueError(f"drag_control_points must be at least 2, not {self.drag_control_points}")
        if self.max_parallel_sessions < 1:
            raise ValueError(f"max_parallel_sessions must be at least 1, not {self.max_parallel_sessions}")

    def thresholds(self) -> Thresholds:
        return Thresholds(
            click_distance_px=self.click_distance_px,
            click_duration_ms=to_milliseconds(self.click_duration),
            typing_idle_timeout_ms=to_milliseconds(self.typing_idle_timeout),
            drag_control_points=self.drag_control_points,
        )

    def save(self, dest: pathlib.Path):
        raw = settings_converter.unstructure(self)
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as infile:
                raw = json.load(infile)
            return settings_converter.structure(raw, cls)
        except (cattrs.BaseValidationError, ValueError) as exc:
            raise SettingsError(f"Unable to load settings from {src}: {exc}") from exc

    @classmethod
    def default(cls, **overrides: typing.Any):
        return cls(**overrides)
