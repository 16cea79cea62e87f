"""Pairing and bonding callbacks."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

PASSKEY = 123456


class SecurityCallbacks:
    """Answers the security requests raised while pairing."""

    def on_pass_key_request(self) -> int:
        """Return the fixed passkey."""
        logger.info("PassKeyRequest")
        return PASSKEY

    def on_pass_key_notify(self, pass_key: int) -> None:
        """Log the passkey shown by the peer."""
        logger.info("On passkey Notify number:%d", pass_key)

    def on_security_request(self) -> bool:
        """Accept any security request."""
        logger.info("On Security Request")
        return True

    def on_confirm_pin(self, pin: int) -> bool:
        """Log the PIN to confirm and accept it."""
        logger.info("On Confirmed Pin Request: %d", pin)
        return True

    def on_authentication_complete(self, success: bool) -> None:
        """Log the end of authentication."""
        logger.info("Starting BLE work!")
        if success:
            logger.debug("Authentication succeeded")