from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NotificationKind
    details: str | None = None


Subscriber = Callable[[Notification], None]


@dataclass
class NotificationCenter:
    items: list[Notification] = field(default_factory=list)
    subscribers: list[Subscriber] = field(default_factory=list)

    def subscribe(self, subscriber: Subscriber) -> None:
        self.subscribers.append(subscriber)

    def toast(self, *, kind: NotificationKind, message: str, details: str | None = None) -> Notification:
        notification = Notification(message=message, kind=kind, details=details)
        self.items.append(notification)
        for subscriber in self.subscribers:
            subscriber(notification)
        return notification

    def success(self, message: str) -> Notification:
        return self.toast(kind=NotificationKind.SUCCESS, message=message)

    def error(self, message: str, *, details: str | None = None) -> Notification:
        return self.toast(kind=NotificationKind.ERROR, message=message, details=details)

    @property
    def last(self) -> Notification | None:
        return self.items[-1] if self.items else None

    def render(self) -> dict[str, Any]:
        return {
            "count": len(self.items),
            "messages": [
                {"message": item.message, "kind": item.kind.value, "details": item.details}
                for item in self.items
            ],
        }

    def clear(self) -> None:
        self.items.clear()
