# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Extraction stages, one pass over a session's events:
# pointer events: track button presses and classify them as clicks or drags (drags are resampled)
# key events: track held modifiers and turn chords into hotkeys
# key events: buffer printable characters into typed text
# the assembler routes each event to one of these and collects the actions in order
from .assembler import extract_actions, step
from .state import EngineState, Thresholds, flush_text

__all__ = ["EngineState", "Thresholds", "extract_actions", "flush_text", "step"]
