# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc

import numpy as np
import numpy.typing as npt

from .commontypes import TimedPoint

DEFAULT_CONTROL_POINTS = 8


def arc_lengths(points: collections.abc.Sequence[TimedPoint]) -> npt.NDArray[np.float64]:
    "Cumulative path length at each sample; the first entry is always 0."
    xy = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    steps = np.hypot(*np.diff(xy, axis=0).T)
    return np.concatenate(([0.0], np.cumsum(steps)))


def resample(points: collections.abc.Sequence[TimedPoint], count: int = DEFAULT_CONTROL_POINTS) -> list[TimedPoint]:
    """Resample a pointer path into `count` points spaced evenly along its length.

    Time and coordinates are linearly interpolated inside the segment containing each
    target length, then floored to integers. The first and last outputs are the path's
    own endpoints. Paths of zero or one sample are returned as-is, and a path that never
    moves resamples to copies of its first point.
    """
    if len(points) <= 1:
        return list(points)

    lengths = arc_lengths(points)
    samples = np.array([(p.time, p.x, p.y) for p in points], dtype=np.float64)
    targets = np.linspace(0.0, lengths[-1], count)

    # the segment ending at the first cumulative length reaching the target
    ends = np.clip(np.searchsorted(lengths, targets, side="left"), 1, len(points) - 1)
    starts = ends - 1
    spans = lengths[ends] - lengths[starts]
    fractions = np.divide(targets - lengths[starts], spans, out=np.zeros_like(targets), where=spans > 0)

    interpolated = samples[starts] + (samples[ends] - samples[starts]) * fractions[:, np.newaxis]
    if lengths[-1] > 0:
        # trailing stationary samples still end the path at its final timestamp
        interpolated[-1] = samples[-1]
    floored = np.floor(interpolated).astype(np.int64)

    return [TimedPoint(time=int(t), x=int(x), y=int(y)) for t, x, y in floored]
