"""Apple Notification Center Service client logic, independent of the BLE transport."""

__version__ = "0.1.0"
__all__ = ["notification", "queue", "security", "client", "notifications"]