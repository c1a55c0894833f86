# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from actiontrace.commontypes import Point, TimedPoint
from actiontrace.eventtypes import EventData, Hotkey, MouseClick, MouseDrag, MouseWheel, RawEvent, TypeText
from actiontrace.extraction import EngineState, Thresholds, extract_actions, step

EPOCH = 1738000000000


def ev(kind: str, time: int, **data):
    return RawEvent(event=kind, time=EPOCH + time, data=EventData(**data))


def test_empty_session():
    assert extract_actions([]) == []


def test_single_click():
    events = [
        ev("mousedown", 0, button="Left", x=10, y=10),
        ev("mouseup", 100, button="Left", x=10, y=10),
    ]
    assert extract_actions(events) == [MouseClick.at(Point(x=10, y=10), 0)]


def test_timestamps_are_relative_to_the_first_event():
    events = [
        ev("mousemove", 0, x=10, y=10),
        ev("mousedown", 2500, button="Left"),
        ev("mouseup", 2600, button="Left"),
    ]
    assert extract_actions(events) == [MouseClick.at(Point(x=10, y=10), 2500)]


def test_straight_drag():
    events = [
        ev("mousedown", 0, button="Left", x=0, y=0),
        ev("mousemove", 50, x=50, y=0),
        ev("mousemove", 100, x=100, y=0),
        ev("mouseup", 150, button="Left", x=100, y=0),
    ]
    (drag,) = extract_actions(events)
    assert isinstance(drag, MouseDrag)
    assert drag.timestamp == 0
    assert len(drag.data.coordinates) == 8
    assert drag.data.coordinates[0] == TimedPoint(time=0, x=0, y=0)
    assert (drag.data.coordinates[-1].x, drag.data.coordinates[-1].y) == (100, 0)


def test_idle_gap_ends_typing():
    events = [
        ev("keydown", 0, key="A"),
        ev("keyup", 20, key="A"),
        ev("keydown", 50, key="B"),
        ev("keyup", 70, key="B"),
        ev("mousemove", 1200, x=5, y=5),
        ev("keydown", 1300, key="C"),
    ]
    assert extract_actions(events) == [TypeText.typed("ab", 0), TypeText.typed("c", 1300)]


def test_idle_gap_flushes_before_later_actions():
    events = [
        ev("keydown", 0, key="A"),
        ev("keydown", 50, key="B"),
        ev("mousemove", 1100, x=20, y=20),
        ev("mousedown", 1200, button="Left"),
        ev("mouseup", 1250, button="Left"),
    ]
    assert extract_actions(events) == [TypeText.typed("ab", 0), MouseClick.at(Point(x=20, y=20), 1200)]


def test_chord_fires_once():
    events = [
        ev("keydown", 0, key="LeftCtrl"),
        ev("keydown", 10, key="C"),
        ev("keyup", 20, key="C"),
        ev("keyup", 30, key="LeftCtrl"),
    ]
    assert extract_actions(events) == [Hotkey.pressed("LeftCtrl-c", 10)]


def test_rdev_names_give_the_same_actions():
    desktop = [
        ev("keydown", 0, key="Shift"),
        ev("keydown", 10, key="H"),
        ev("keyup", 20, key="Shift"),
        ev("keydown", 30, key="One"),
        ev("keydown", 40, key="Return"),
        ev("keydown", 50, key="LeftCtrl"),
        ev("keydown", 60, key="V"),
        ev("keyup", 70, key="LeftCtrl"),
    ]
    rdev = [
        ev("keydown", 0, key="ShiftLeft"),
        ev("keydown", 10, key="KeyH"),
        ev("keyup", 20, key="ShiftLeft"),
        ev("keydown", 30, key="Num1"),
        ev("keydown", 40, key="Return"),
        ev("keydown", 50, key="ControlLeft"),
        ev("keydown", 60, key="KeyV"),
        ev("keyup", 70, key="ControlLeft"),
    ]
    expected = [TypeText.typed("H1", 10), Hotkey.pressed("Return", 40), Hotkey.pressed("LeftCtrl-v", 60)]
    assert extract_actions(desktop) == expected
    assert extract_actions(rdev) == expected


def test_text_is_flushed_at_the_end():
    events = [ev("keydown", 0, key="Space"), ev("keydown", 10, key="FullStop")]
    assert extract_actions(events) == [TypeText.typed(" .", 0)]


def test_incomplete_events_are_ignored():
    events = [
        ev("mousemove", 0, x=1),
        ev("keydown", 10),
        ev("keyup", 20),
        ev("mousedown", 30, button="Left"),
        ev("mouseup", 40, button="Left"),
        ev("mousewheel", 50),
        ev("joystick", 60, x=1, y=1),
    ]
    assert extract_actions(events) == []


def test_mixed_session():
    events = [
        ev("mousemove", 0, x=200, y=300),
        ev("mousedown", 100, button="Left"),
        ev("mouseup", 180, button="Left"),
        ev("keydown", 400, key="KeyH"),
        ev("keydown", 450, key="KeyI"),
        ev("mousewheel", 600, delta=-120),
        ev("keydown", 700, key="MetaLeft"),
        ev("keyup", 760, key="MetaLeft"),
    ]
    assert extract_actions(events) == [
        MouseClick.at(Point(x=200, y=300), 100),
        TypeText.typed("hi", 400),
        MouseWheel.scrolled(-120, 600),
        Hotkey.pressed("MetaLeft", 760),
    ]


def test_chord_during_drag_keeps_start_order():
    events = [
        ev("mousedown", 0, button="Left", x=0, y=0),
        ev("mousemove", 100, x=50, y=0),
        ev("keydown", 150, key="LeftCtrl"),
        ev("keydown", 160, key="C"),
        ev("keyup", 170, key="LeftCtrl"),
        ev("mousemove", 200, x=100, y=0),
        ev("mouseup", 300, button="Left"),
    ]
    actions = extract_actions(events)
    assert [type(a) for a in actions] == [MouseDrag, Hotkey]
    assert [a.timestamp for a in actions] == [0, 160]


def test_custom_thresholds():
    events = [
        ev("mousedown", 0, button="Left", x=0, y=0),
        ev("mousemove", 100, x=8, y=0),
        ev("mouseup", 700, button="Left"),
    ]
    assert isinstance(extract_actions(events)[0], MouseDrag)
    relaxed = Thresholds(click_distance_px=10, click_duration_ms=1000)
    assert extract_actions(events, relaxed) == [MouseClick.at(Point(x=0, y=0), 0)]


def test_step_applies_idle_flush_before_routing():
    state = EngineState(pending_text="ok", text_start_time=0, last_key_time=0)
    actions, state = step(state, RawEvent(event="keydown", time=5000, data=EventData(key="Return")), 5000, Thresholds())
    assert actions == [TypeText.typed("ok", 0), Hotkey.pressed("Return", 5000)]


def test_desktop_plus_types_a_plus_sign():
    events = [
        ev("keydown", 0, key="Plus"),
        ev("keydown", 10, key="Shift"),
        ev("keydown", 20, key="Plus"),
        ev("keyup", 30, key="Shift"),
        ev("keydown", 40, key="Equal"),
        ev("keydown", 50, key="Separator"),
        ev("keydown", 60, key="LeftCtrl"),
        ev("keydown", 70, key="Plus"),
    ]
    assert extract_actions(events) == [TypeText.typed("++=separator", 0), Hotkey.pressed("LeftCtrl-plus", 70)]
