"""Notification data model and ANCS protocol enumerations."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag


class NotificationCategory(IntEnum):
    """Notification category as reported by ANCS."""

    OTHER = 0
    INCOMING_CALL = 1
    MISSED_CALL = 2
    VOICEMAIL = 3
    SOCIAL = 4
    SCHEDULE = 5
    EMAIL = 6
    NEWS = 7
    HEALTH_AND_FITNESS = 8
    BUSINESS_AND_FINANCE = 9
    LOCATION = 10
    ENTERTAINMENT = 11


class EventID(IntEnum):
    """Event carried by a notification-source packet."""

    NOTIFICATION_ADDED = 0
    NOTIFICATION_MODIFIED = 1
    NOTIFICATION_REMOVED = 2


class NotificationAction(IntEnum):
    """Action that can be performed on a notification."""

    POSITIVE = 0
    NEGATIVE = 1


class EventFlags(IntFlag):
    """Bit flags attached to a notification event."""

    SILENT = 1 << 0
    IMPORTANT = 1 << 1
    PRE_EXISTING = 1 << 2
    POSITIVE_ACTION = 1 << 3
    NEGATIVE_ACTION = 1 << 4


class CommandID(IntEnum):
    """Command identifiers written to the control point."""

    GET_NOTIFICATION_ATTRIBUTES = 0
    GET_APP_ATTRIBUTES = 1
    PERFORM_NOTIFICATION_ACTION = 2


class NotificationAttributeID(IntEnum):
    """Attribute identifiers that can be requested for a notification."""

    APP_IDENTIFIER = 0
    TITLE = 1
    SUBTITLE = 2
    MESSAGE = 3
    MESSAGE_SIZE = 4
    DATE = 5
    POSITIVE_ACTION_LABEL = 6
    NEGATIVE_ACTION_LABEL = 7


@dataclass
class Notification:
    """A notification received from the remote device."""

    title: str = ""
    message: str = ""
    type: str = ""
    event_flags: int = 0
    time: float = field(default_factory=_time.time)
    uuid: int = 0
    showed: bool = False
    is_complete: bool = False
    category: int = NotificationCategory.OTHER
    category_count: int = 0


_DESCRIPTIONS = {
    NotificationCategory.OTHER: "other",
    NotificationCategory.INCOMING_CALL: "incoming call",
    NotificationCategory.MISSED_CALL: "missed call",
    NotificationCategory.VOICEMAIL: "voicemail",
    NotificationCategory.SOCIAL: "social",
    NotificationCategory.SCHEDULE: "schedule",
    NotificationCategory.EMAIL: "email",
    NotificationCategory.NEWS: "news",
    NotificationCategory.HEALTH_AND_FITNESS: "health and fitness",
    NotificationCategory.BUSINESS_AND_FINANCE: "business and finance",
    NotificationCategory.LOCATION: "location",
    NotificationCategory.ENTERTAINMENT: "entertainment",
}


def category_description(category: int) -> str:
    """Return an English description of a notification category."""
    try:
        return _DESCRIPTIONS[NotificationCategory(category)]
    except ValueError:
        return "unknown"