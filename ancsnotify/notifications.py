"""High-level entry point for receiving notifications from a phone."""

from __future__ import annotations

import enum
import logging
import uuid as _uuid
from typing import Callable, Optional, Union

from .client import ANCS_SERVICE_UUID, ANCSClient, NotificationCallback
from .notification import NotificationAction

logger = logging.getLogger(__name__)

_AD_TYPE_FLAGS = 0x01
_AD_TYPE_SOL_SRV_UUID = 0x14
_AD_TYPE_128SOL_SRV_UUID = 0x15
_ADVERTISING_FLAGS = 0x01


class ConnectionState(enum.Enum):
    """State of the connection to the phone."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


def service_solicitation_data(uuid: Union[int, _uuid.UUID]) -> bytes:
    """Return the advertising record soliciting a service.

    16-bit UUIDs are given as int, 128-bit ones as uuid.UUID. A 32-bit UUID
    has no solicitation record and yields empty bytes.
    """
    if isinstance(uuid, _uuid.UUID):
        return bytes([17, _AD_TYPE_128SOL_SRV_UUID]) + uuid.bytes[::-1]
    if isinstance(uuid, int) and not isinstance(uuid, bool):
        if 0 <= uuid <= 0xFFFF:
            return bytes([3, _AD_TYPE_SOL_SRV_UUID]) + uuid.to_bytes(2, "little")
        if 0 <= uuid <= 0xFFFFFFFF:
            return b""
    raise ValueError(f"not a valid service UUID: {uuid!r}")


class BLENotifications:
    """Receives notifications from a connected phone and reports them."""

    def __init__(self) -> None:
        self.on_state_changed: Optional[Callable[[ConnectionState], None]] = None
        self.on_notification: Optional[NotificationCallback] = None
        self.on_removed: Optional[NotificationCallback] = None
        self.client: Optional[ANCSClient] = None

    def on_connect(self, write_control_point: Callable[[bytes], None]) -> ANCSClient:
        """Set up a client for a newly connected phone and return it."""
        logger.info("Device connected")
        client = ANCSClient(write_control_point)
        client.notification_arrived = self.on_notification
        client.notification_removed = self.on_removed
        self.client = client
        if self.on_state_changed:
            self.on_state_changed(ConnectionState.CONNECTED)
        return client

    def on_disconnect(self) -> None:
        """Drop the client of the phone that disconnected."""
        logger.info("Device disconnected")
        if self.on_state_changed:
            self.on_state_changed(ConnectionState.DISCONNECTED)
        self.client = None

    def _require_client(self) -> ANCSClient:
        if self.client is None:
            raise RuntimeError("no device connected")
        return self.client

    def action_positive(self, uuid: int) -> None:
        """Perform the positive action (e.g. accept) on a notification."""
        logger.info("actionPositive()")
        self._require_client().perform_action(uuid, NotificationAction.POSITIVE)

    def action_negative(self, uuid: int) -> None:
        """Perform the negative action (e.g. dismiss) on a notification."""
        logger.info("actionNegative()")
        self._require_client().perform_action(uuid, NotificationAction.NEGATIVE)

    def advertisement_data(self) -> bytes:
        """Return the advertising payload that solicits the ANCS service."""
        flags = bytes([2, _AD_TYPE_FLAGS, _ADVERTISING_FLAGS])
        return flags + service_solicitation_data(ANCS_SERVICE_UUID)