import pytest

from eco2d.debug_draw import DebugDrawQueue, DrawKind, Vec2
from eco2d.game import GameKind


def test_disabled_queue_ignores_pushes():
    queue = DebugDrawQueue()
    queue.push_line(Vec2(0, 0), Vec2(1, 1), 0xFF)
    assert len(queue) == 0


def test_headless_queue_ignores_pushes():
    queue = DebugDrawQueue(enabled=True, kind=GameKind.HEADLESS)
    queue.push_circle(Vec2(0, 0), 3.0, 1)
    assert list(queue) == []


def test_enabled_queue_records_in_order():
    queue = DebugDrawQueue(enabled=True)
    queue.push_line(Vec2(0, 0), Vec2(1, 2), 7)
    queue.push_circle(Vec2(5, 6), 2.5, 8)
    queue.push_rect(Vec2(-1, -1), Vec2(3, 4), 9)
    kinds = [entry.kind for entry in queue]
    assert kinds == [DrawKind.LINE, DrawKind.CIRCLE, DrawKind.RECT]
    assert [entry.color for entry in queue] == [7, 8, 9]


def test_entry_fields():
    queue = DebugDrawQueue(enabled=True)
    queue.push_circle(Vec2(5, 6), 2.5, 8)
    queue.push_rect(Vec2(-1, -1), Vec2(3, 4), 9)
    circle, rect = queue.entries
    assert circle.pos == Vec2(5, 6)
    assert circle.radius == 2.5
    assert rect.bmin == Vec2(-1, -1)
    assert rect.bmax == Vec2(3, 4)


def test_flush_empties_queue():
    queue = DebugDrawQueue(enabled=True)
    queue.push_line(Vec2(0, 0), Vec2(1, 1), 1)
    queue.flush()
    assert len(queue) == 0


def test_overflow_raises():
    queue = DebugDrawQueue(enabled=True, capacity=2)
    queue.push_line(Vec2(0, 0), Vec2(1, 1), 1)
    queue.push_line(Vec2(0, 0), Vec2(1, 1), 1)
    with pytest.raises(OverflowError):
        queue.push_line(Vec2(0, 0), Vec2(1, 1), 1)
    assert len(queue) == 2


def test_toggling_enabled():
    queue = DebugDrawQueue()
    queue.enabled = True
    queue.push_rect(Vec2(0, 0), Vec2(2, 2), 3)
    queue.enabled = False
    queue.push_rect(Vec2(0, 0), Vec2(2, 2), 3)
    assert len(queue) == 1