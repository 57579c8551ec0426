"""A queue of titled messages, the oldest few of which are shown on screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

MAX_NOTIFICATIONS_ON_SCREEN = 5


@dataclass(frozen=True)
class Notification:
    title: str
    text: str


@dataclass
class NotificationCenter:
    """Pending notifications in the order they were pushed."""

    notifications: List[Notification] = field(default_factory=list)
    show_list: bool = False

    def __len__(self) -> int:
        return len(self.notifications)

    def __iter__(self) -> Iterator[Notification]:
        return iter(self.notifications)

    def push(self, title: str, text: str) -> Notification:
        """Queue a new notification and return it."""
        notification = Notification(title, text)
        self.notifications.append(notification)
        return notification

    def clear(self) -> None:
        self.notifications.clear()

    def dismiss(self, index: int) -> Notification:
        """Remove and return the notification at ``index``."""
        if not 0 <= index < len(self.notifications):
            raise IndexError(f"notification index {index} out of range")
        return self.notifications.pop(index)

    def on_screen(self) -> List[Notification]:
        """The oldest notifications that fit on screen, in drawing order.

        They are drawn from the last of them back to the first.
        """
        return list(reversed(self.notifications[:MAX_NOTIFICATIONS_ON_SCREEN]))