"""Client side of the Apple Notification Center Service protocol."""

from __future__ import annotations

import logging
import uuid as _uuid
from typing import Callable, Optional

from .notification import (
    CommandID,
    EventID,
    Notification,
    NotificationAttributeID,
    NotificationCategory,
)
from .queue import NotificationQueue

logger = logging.getLogger(__name__)

ANCS_SERVICE_UUID = _uuid.UUID("7905F431-B5CE-4E99-A40F-4B1E122D00D0")
NOTIFICATION_SOURCE_UUID = _uuid.UUID("9FBF120D-6301-42D9-8C58-25E699A21DBD")
CONTROL_POINT_UUID = _uuid.UUID("69D1D8F3-45E1-49A8-9821-9BBDFDAAD9D9")
DATA_SOURCE_UUID = _uuid.UUID("22EAC6E9-24D6-4BB5-BE44-B36ACE7C7BFB")

# Maximum length requested for variable-length attributes, little endian.
_MAX_ATTRIBUTE_LENGTH = (0x1000).to_bytes(2, "little")

NotificationCallback = Callable[[Notification], None]


def _uuid_bytes(uuid: int) -> bytes:
    return (uuid & 0xFFFFFFFF).to_bytes(4, "little")


def attribute_requests(uuid: int) -> list[bytes]:
    """Return the control-point commands that fetch a notification's details."""
    head = bytes([CommandID.GET_NOTIFICATION_ATTRIBUTES]) + _uuid_bytes(uuid)
    return [
        head + bytes([NotificationAttributeID.APP_IDENTIFIER]),
        head + bytes([NotificationAttributeID.TITLE]) + _MAX_ATTRIBUTE_LENGTH,
        head + bytes([NotificationAttributeID.MESSAGE]) + _MAX_ATTRIBUTE_LENGTH,
        head + bytes([NotificationAttributeID.DATE]),
    ]


def action_request(uuid: int, action_id: int) -> bytes:
    """Return the control-point command performing an action on a notification."""
    return (
        bytes([CommandID.PERFORM_NOTIFICATION_ACTION])
        + _uuid_bytes(uuid)
        + bytes([action_id & 0xFF])
    )


def _category(value: int) -> int:
    try:
        return NotificationCategory(value)
    except ValueError:
        return value


class ANCSClient:
    """Tracks notifications announced by the phone and fetches their details.

    ``write_control_point`` is called with each command to send to the
    phone's control point characteristic.
    """

    def __init__(self, write_control_point: Callable[[bytes], None]) -> None:
        self._write = write_control_point
        self.queue = NotificationQueue()
        self.notification_arrived: Optional[NotificationCallback] = None
        self.notification_removed: Optional[NotificationCallback] = None

    def is_incoming_call(self, notification: Notification) -> bool:
        """Return True if the notification announces an incoming call."""
        return notification.category == NotificationCategory.INCOMING_CALL

    def retrieve_notification_data(self, pending: Notification) -> None:
        """Store the notification and request its title, message and more."""
        if not self.queue.contains(pending.uuid):
            self.queue.add(pending.uuid, pending, self.is_incoming_call(pending))
        for request in attribute_requests(pending.uuid):
            self._write(request)

    def process_pending(self) -> Optional[Notification]:
        """Fetch details for the next pending notification, if there is one."""
        if not self.queue.has_pending():
            return None
        pending = self.queue.next_pending()
        logger.debug("retrieveNotificationData: %d", pending.uuid)
        self.retrieve_notification_data(pending)
        return pending

    def on_data_source_notify(self, data: bytes) -> None:
        """Handle an attribute reply from the data source characteristic."""
        if len(data) < 8:
            raise ValueError(f"data source packet too short: {len(data)} bytes")
        message_id = int.from_bytes(data[1:5], "little")
        attribute = data[5]
        text = bytes(data[8:]).decode("utf-8", errors="replace")
        logger.debug("ID: %d raw message: %s type==%d", message_id, text, attribute)

        notification = self.queue.get(message_id)
        if attribute == NotificationAttributeID.APP_IDENTIFIER:
            notification.type = text
        elif attribute == NotificationAttributeID.TITLE:
            notification.title = text
        elif attribute == NotificationAttributeID.MESSAGE:
            notification.message = text

        if notification.title and notification.message:
            if self.notification_arrived and not notification.is_complete:
                logger.info(
                    "got a full notification: %s - %s",
                    notification.title,
                    notification.message,
                )
                self.notification_arrived(notification)
            notification.is_complete = True

    def on_notification_source_notify(self, data: bytes) -> None:
        """Handle an event from the notification source characteristic."""
        if len(data) < 8:
            raise ValueError(
                f"notification source packet too short: {len(data)} bytes"
            )
        event = data[0]
        message_id = int.from_bytes(data[4:8], "little")

        if event == EventID.NOTIFICATION_REMOVED:
            logger.info("notification removed: %d", message_id)
            notification = self.queue.get(message_id)
            if self.is_incoming_call(notification):
                self.queue.add(message_id, notification, False)
                self.queue.remove_call()
                notification = self.queue.get(message_id)
            if self.notification_removed:
                self.notification_removed(notification)
        elif event == EventID.NOTIFICATION_ADDED:
            logger.info("notification added, type: %d", data[2])
            self.queue.add_pending(
                Notification(
                    uuid=message_id,
                    event_flags=data[1],
                    category=_category(data[2]),
                    category_count=data[3],
                )
            )

    def perform_action(self, uuid: int, action_id: int) -> None:
        """Ask the phone to perform an action on a notification."""
        self._write(action_request(uuid, action_id))