import pytest

from eco2d.notifications import (
    MAX_NOTIFICATIONS_ON_SCREEN,
    Notification,
    NotificationCenter,
)


def _filled(titles):
    center = NotificationCenter()
    for title in titles:
        center.push(title, f"body of {title}")
    return center


def test_push_appends_in_order():
    center = NotificationCenter()
    first = center.push("Hello", "World")
    center.push("Second", "Message")
    assert first == Notification("Hello", "World")
    assert [n.title for n in center] == ["Hello", "Second"]
    assert len(center) == 2


def test_clear_removes_everything():
    center = _filled(["a", "b", "c"])
    center.clear()
    assert len(center) == 0
    assert center.on_screen() == []


def test_dismiss_removes_given_index():
    center = _filled(["a", "b", "c"])
    removed = center.dismiss(1)
    assert removed.title == "b"
    assert [n.title for n in center] == ["a", "c"]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_dismiss_out_of_range_raises(index):
    center = _filled(["a", "b", "c"])
    with pytest.raises(IndexError):
        center.dismiss(index)
    assert len(center) == 3


def test_dismiss_on_empty_raises():
    with pytest.raises(IndexError):
        NotificationCenter().dismiss(0)


def test_on_screen_is_capped_and_reversed():
    titles = ["a", "b", "c", "d", "e", "f", "g"]
    center = _filled(titles)
    shown = center.on_screen()
    assert len(shown) == MAX_NOTIFICATIONS_ON_SCREEN
    assert [n.title for n in shown] == ["e", "d", "c", "b", "a"]


def test_on_screen_with_few_notifications():
    center = _filled(["x", "y"])
    assert [n.title for n in center.on_screen()] == ["y", "x"]


def test_dismissing_shows_next_waiting_notification():
    titles = ["a", "b", "c", "d", "e", "f"]
    center = _filled(titles)
    assert "f" not in [n.title for n in center.on_screen()]
    center.dismiss(0)
    assert "f" in [n.title for n in center.on_screen()]
    assert "a" not in [n.title for n in center.on_screen()]


def test_on_screen_does_not_modify_queue():
    center = _filled(["a", "b"])
    center.on_screen()
    assert [n.title for n in center] == ["a", "b"]


def test_show_list_starts_hidden():
    assert NotificationCenter().show_list is False