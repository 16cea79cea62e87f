"""Storage for pending and received notifications."""

from __future__ import annotations

from dataclasses import replace

from .notification import Notification

MAX_NOTIFICATIONS = 32


class NotificationQueue:
    """A bounded store of notifications plus a slot for an incoming call.

    New notifications first go onto a pending stack until their details are
    fetched; then they are stored keyed by uuid.
    """

    def __init__(self) -> None:
        self._notifications: dict[int, Notification] = {}
        self._pending: list[Notification] = []
        self._calling = Notification()

    def add_pending(self, pending: Notification) -> None:
        """Push a notification whose details still need fetching."""
        self._pending.append(replace(pending))

    def has_pending(self) -> bool:
        """Return True if any pending notification is waiting."""
        return bool(self._pending)

    def next_pending(self) -> Notification:
        """Pop the most recently added pending notification."""
        if not self._pending:
            raise IndexError("no pending notification")
        return self._pending.pop()

    def add(self, uuid: int, notification: Notification, is_calling: bool) -> None:
        """Store a copy of the notification under the given uuid."""
        stored = replace(notification, uuid=uuid)
        if is_calling:
            self._calling = stored
            return
        if len(self._notifications) >= MAX_NOTIFICATIONS:
            del self._notifications[min(self._notifications)]
        self._notifications.setdefault(uuid, stored)

    def remove(self, uuid: int) -> None:
        """Remove a stored notification, if present."""
        self._notifications.pop(uuid, None)

    def remove_call(self) -> None:
        """Clear the incoming-call slot."""
        self._calling.uuid = 0

    def contains(self, uuid: int) -> bool:
        """Return True if uuid is stored or a call is in progress."""
        return uuid in self._notifications or self._calling.uuid != 0

    def has_calling(self) -> bool:
        """Return True if an incoming call notification is held."""
        return self._calling.uuid != 0

    def calling(self) -> Notification:
        """Return the incoming-call notification slot."""
        return self._calling

    def get(self, uuid: int) -> Notification:
        """Return the notification for uuid, or a fresh unstored one."""
        if self._calling.uuid == uuid:
            return self._calling
        found = self._notifications.get(uuid)
        return found if found is not None else Notification()

    def notifications(self) -> dict[int, Notification]:
        """Return the stored notifications keyed by uuid."""
        return self._notifications