"""In-process notification queue surfaced to the admin dashboard.

Admin operations push short success/error messages here; the dashboard
polls them and they expire on their own.
"""
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional

NotificationType = Literal["success", "error", "warning", "info"]

DEFAULT_DURATION_MS = 5000
# Oldest entries are dropped past this many, sticky ones included
MAX_NOTIFICATIONS = 100


@dataclass
class Notification:
    id: str
    type: NotificationType
    message: str
    # milliseconds; 0 keeps the notification until removed
    duration: int = DEFAULT_DURATION_MS
    created_at: float = field(default=0.0, repr=False)

    def expired(self, now: float) -> bool:
        return self.duration > 0 and (now - self.created_at) * 1000 >= self.duration

    def to_dict(self) -> dict:
        return {"id": self.id, "type": self.type, "message": self.message, "duration": self.duration}


class NotificationCenter:
    def __init__(self, clock: Callable[[], float] = time.monotonic, max_items: int = MAX_NOTIFICATIONS):
        self._clock = clock
        self._max_items = max_items
        self._items: List[Notification] = []
        self._lock = threading.Lock()

    def add(self, type: NotificationType, message: str, duration: Optional[int] = None) -> str:
        notification = Notification(
            id=uuid.uuid4().hex[:7],
            type=type,
            message=message,
            duration=DEFAULT_DURATION_MS if duration is None else duration,
            created_at=self._clock(),
        )
        with self._lock:
            self._items = [n for n in self._items if not n.expired(notification.created_at)]
            self._items.append(notification)
            del self._items[:-self._max_items]
        return notification.id

    def remove(self, notification_id: str) -> None:
        with self._lock:
            self._items = [n for n in self._items if n.id != notification_id]

    def clear(self) -> None:
        with self._lock:
            self._items = []

    def active(self) -> List[Notification]:
        """Current notifications, dropping the expired ones."""
        now = self._clock()
        with self._lock:
            self._items = [n for n in self._items if not n.expired(now)]
            return list(self._items)

    # Convenience methods
    def success(self, message: str, duration: Optional[int] = None) -> str:
        return self.add("success", message, duration)

    def error(self, message: str, duration: Optional[int] = None) -> str:
        return self.add("error", message, duration)

    def warning(self, message: str, duration: Optional[int] = None) -> str:
        return self.add("warning", message, duration)

    def info(self, message: str, duration: Optional[int] = None) -> str:
        return self.add("info", message, duration)
