import pytest

from ancsnotify.client import (
    ANCSClient,
    action_request,
    attribute_requests,
)
from ancsnotify.notification import (
    CommandID,
    EventID,
    Notification,
    NotificationAction,
    NotificationAttributeID,
    NotificationCategory,
)


def ns_packet(event, uuid, flags=0, category=0, count=1):
    return bytes([event, flags, category, count]) + uuid.to_bytes(4, "little")


def ds_packet(uuid, attribute, text):
    raw = text.encode()
    return (
        bytes([CommandID.GET_NOTIFICATION_ATTRIBUTES])
        + uuid.to_bytes(4, "little")
        + bytes([attribute])
        + len(raw).to_bytes(2, "little")
        + raw
    )


@pytest.fixture
def setup():
    writes = []
    client = ANCSClient(writes.append)
    arrived = []
    removed = []
    client.notification_arrived = arrived.append
    client.notification_removed = removed.append
    return client, writes, arrived, removed


def test_attribute_requests_layout():
    uuid = 0x04030201
    requests = attribute_requests(uuid)
    assert len(requests) == 4
    for req in requests:
        assert req[0] == CommandID.GET_NOTIFICATION_ATTRIBUTES
        assert int.from_bytes(req[1:5], "little") == uuid
    assert [r[5] for r in requests] == [
        NotificationAttributeID.APP_IDENTIFIER,
        NotificationAttributeID.TITLE,
        NotificationAttributeID.MESSAGE,
        NotificationAttributeID.DATE,
    ]
    assert requests[1][6:] == bytes([0x00, 0x10])
    assert len(requests[0]) == 6 and len(requests[3]) == 6


def test_action_request_layout():
    req = action_request(77, NotificationAction.NEGATIVE)
    assert req == bytes([CommandID.PERFORM_NOTIFICATION_ACTION]) + (77).to_bytes(
        4, "little"
    ) + bytes([NotificationAction.NEGATIVE])


def test_added_event_becomes_pending(setup):
    client, writes, _, _ = setup
    client.on_notification_source_notify(
        ns_packet(EventID.NOTIFICATION_ADDED, 42, flags=2, category=4, count=3)
    )
    assert client.queue.has_pending()
    pending = client.process_pending()
    assert pending.uuid == 42
    assert pending.event_flags == 2
    assert pending.category == NotificationCategory.SOCIAL
    assert pending.category_count == 3
    assert writes == attribute_requests(42)
    assert 42 in client.queue.notifications()


def test_process_pending_empty(setup):
    client, writes, _, _ = setup
    assert client.process_pending() is None
    assert writes == []


def test_full_notification_fires_once(setup):
    client, _, arrived, _ = setup
    client.on_notification_source_notify(ns_packet(EventID.NOTIFICATION_ADDED, 9))
    client.process_pending()
    client.on_data_source_notify(
        ds_packet(9, NotificationAttributeID.APP_IDENTIFIER, "com.example.app")
    )
    client.on_data_source_notify(ds_packet(9, NotificationAttributeID.TITLE, "Hi"))
    assert arrived == []
    client.on_data_source_notify(ds_packet(9, NotificationAttributeID.MESSAGE, "Body"))
    assert len(arrived) == 1
    note = arrived[0]
    assert (note.uuid, note.type, note.title, note.message) == (
        9,
        "com.example.app",
        "Hi",
        "Body",
    )
    assert note.is_complete
    client.on_data_source_notify(ds_packet(9, NotificationAttributeID.MESSAGE, "Body"))
    assert len(arrived) == 1


def test_incoming_call_lifecycle(setup):
    client, _, _, removed = setup
    client.on_notification_source_notify(
        ns_packet(
            EventID.NOTIFICATION_ADDED, 5, category=NotificationCategory.INCOMING_CALL
        )
    )
    client.process_pending()
    assert client.queue.has_calling()
    assert client.queue.calling().uuid == 5
    client.on_notification_source_notify(ns_packet(EventID.NOTIFICATION_REMOVED, 5))
    assert not client.queue.has_calling()
    assert 5 in client.queue.notifications()
    assert len(removed) == 1
    assert removed[0].uuid == 5


def test_removed_regular_notification(setup):
    client, _, _, removed = setup
    client.on_notification_source_notify(ns_packet(EventID.NOTIFICATION_ADDED, 3))
    client.process_pending()
    client.on_notification_source_notify(ns_packet(EventID.NOTIFICATION_REMOVED, 3))
    assert [n.uuid for n in removed] == [3]


def test_modified_event_ignored(setup):
    client, _, _, removed = setup
    client.on_notification_source_notify(ns_packet(EventID.NOTIFICATION_MODIFIED, 3))
    assert not client.queue.has_pending()
    assert removed == []


def test_perform_action_writes(setup):
    client, writes, _, _ = setup
    client.perform_action(11, NotificationAction.POSITIVE)
    assert writes == [action_request(11, NotificationAction.POSITIVE)]


def test_is_incoming_call():
    client = ANCSClient(lambda data: None)
    assert client.is_incoming_call(
        Notification(category=NotificationCategory.INCOMING_CALL)
    )
    assert not client.is_incoming_call(Notification(category=NotificationCategory.EMAIL))


def test_short_notification_source_packet_rejected(setup):
    client, writes, _, removed = setup
    with pytest.raises(ValueError):
        client.on_notification_source_notify(b"\x00\x01")
    assert not client.queue.has_pending()
    assert client.process_pending() is None
    assert writes == []
    assert removed == []


def test_short_data_source_packet_rejected(setup):
    client, writes, arrived, _ = setup
    with pytest.raises(ValueError):
        client.on_data_source_notify(b"\x00\x01")
    assert arrived == []
    assert writes == []
    assert client.queue.notifications() == {}