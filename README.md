# ancsnotify

Transport-independent logic for receiving notifications from an iOS device
through the Apple Notification Center Service (ANCS).

The package handles the ANCS side of the conversation. It decodes
Notification Source and Data Source packets and builds Control Point
requests. It also keeps a bounded store of received notifications and tracks
an incoming call. Your own BLE stack carries the bytes. You supply a function
that writes to the Control Point characteristic. You pass the raw bytes of
incoming characteristic notifications to the client.

## Installation

```
pip install ancsnotify
```

## Modules

- `ancsnotify.notification` holds the ANCS enumerations and the
  `Notification` dataclass. The enumerations are `NotificationCategory`,
  `EventID`, `EventFlags`, `CommandID`, `NotificationAttributeID` and
  `NotificationAction`. The `Notification` dataclass has the fields `title`,
  `message`, `type`, `event_flags`, `time`, `uuid`, `showed`, `is_complete`,
  `category` and `category_count`. The function `category_description()`
  returns an English name for a category, or `"unknown"` if it does not
  recognise the category.
- `ancsnotify.queue` holds `NotificationQueue`. It keeps:
  - a stack of pending notifications (`add_pending`, `has_pending`,
    `next_pending`);
  - received notifications keyed by uuid, at most 32 of them. When the store
    is full, the entry with the lowest uuid is dropped (`add`, `get`,
    `remove`, `contains`, `notifications`);
  - a slot for the current incoming call (`has_calling`, `calling`,
    `remove_call`).
- `ancsnotify.security` holds `SecurityCallbacks`, which answers pairing
  requests:
  - it returns the fixed passkey `123456`;
  - it accepts every security request and every PIN confirmation;
  - it logs the other pairing events.
- `ancsnotify.client` holds `ANCSClient`, which handles the notifications of
  one connected phone. Two encoders sit next to it:
  - `attribute_requests(uuid)` returns the commands that request the app
    identifier, title, message and date;
  - `action_request(uuid, action_id)` returns the command that performs an
    action on a notification.

  The module also defines the ANCS service and characteristic UUIDs:
  `ANCS_SERVICE_UUID`, `NOTIFICATION_SOURCE_UUID`, `CONTROL_POINT_UUID` and
  `DATA_SOURCE_UUID`.
- `ancsnotify.notifications` holds `BLENotifications`, the connection-level
  front end, together with `ConnectionState`. Its function
  `service_solicitation_data()` builds the advertising record that solicits a
  16-bit or 128-bit service UUID.

## Usage

```python
from ancsnotify.notifications import BLENotifications


def write_control_point(payload: bytes) -> None:
    ...  # write payload to the ANCS Control Point characteristic


notifications = BLENotifications()
notifications.on_state_changed = lambda state: print("state:", state)
notifications.on_notification = lambda n: print(n.title, "-", n.message)
notifications.on_removed = lambda n: print("removed", n.uuid)

client = notifications.on_connect(write_control_point)

# Route characteristic updates from your BLE stack:
#   Notification Source -> client.on_notification_source_notify(data)
#   Data Source         -> client.on_data_source_notify(data)
# Call client.process_pending() periodically to request attribute data.

notifications.action_positive(1234)  # e.g. accept an incoming call
notifications.on_disconnect()
```

How the callbacks are called:

- The notification callback is called once per notification, when both its
  title and its message have arrived.
- The removed callback is called when the phone reports that a notification
  was removed.
- `action_positive()` and `action_negative()` raise `RuntimeError` while no
  device is connected.
- `on_data_source_notify()` and `on_notification_source_notify()` raise
  `ValueError` for packets shorter than 8 bytes.

`advertisement_data()` returns an advertising payload made of a flags record
followed by the solicitation record for the ANCS service.

## What this package does not do

- It contains no Bluetooth transport. It does not scan, connect, pair,
  advertise or subscribe to characteristics. Your BLE stack must do those
  things and feed this package the bytes.
- It runs no background task. You call `process_pending()` yourself.
- Each Data Source packet is handled as one complete attribute reply.
  Replies split over several packets are not reassembled.
- Date replies are requested but not stored on the notification.

## Tests

```
pip install -e .[test]
pytest
```