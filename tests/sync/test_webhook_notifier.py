from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import httpx

from src.frontdesk.frontdesk.core.enums import DatasetKind, VolunteerAction
from src.frontdesk.frontdesk.guests.model import Guest
from src.frontdesk.frontdesk.sync.notifier import WebhookSyncNotifier
from src.frontdesk.frontdesk.volunteers.model import Volunteer, VolunteerLog

WEBHOOK = "https://script.example.com/macros/s/abc/exec"


class CapturingTransport:
    def __init__(self, status_code: int = 200, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error:
            raise self._error
        return httpx.Response(self._status_code, json={"ok": True})

    def client_factory(self):
        return lambda: httpx.Client(transport=httpx.MockTransport(self))


def _volunteer_snapshot():
    created = datetime(2026, 2, 2, 9, 0)
    volunteers = [
        Volunteer(id=1, name="Sarah", role="Regular Volunteer", created_at=created, is_checked_in=True, last_check_in=created),
        Volunteer(id=2, name="Mike", role="Team Leader", created_at=created),
    ]
    logs = [VolunteerLog(id=1, volunteer_id=1, action=VolunteerAction.CHECK_IN, timestamp=created)]
    return volunteers, logs


def test_no_url_means_no_calls():
    transport = CapturingTransport()
    notifier = WebhookSyncNotifier(None, client_factory=transport.client_factory())

    notifier.notify(DatasetKind.VOLUNTEERS, *_volunteer_snapshot())

    assert notifier.enabled is False
    assert transport.requests == []


def test_blank_url_is_disabled():
    assert WebhookSyncNotifier("   ").enabled is False


def test_posts_volunteer_snapshot():
    transport = CapturingTransport()
    notifier = WebhookSyncNotifier(WEBHOOK, client_factory=transport.client_factory())

    notifier.notify(DatasetKind.VOLUNTEERS, *_volunteer_snapshot())

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK
    body = json.loads(request.content)
    assert body["type"] == "volunteers"
    assert [v["status"] for v in body["volunteers"]] == ["Checked In", "Available"]
    assert body["volunteers"][0]["lastCheckIn"] == "2026-02-02T09:00:00"
    assert body["volunteers"][1]["lastCheckOut"] == ""
    assert body["logs"] == [
        {
            "id": 1,
            "volunteerId": 1,
            "action": "check_in",
            "timestamp": "2026-02-02T09:00:00",
            "activity": "",
            "hoursWorked": 0,
        }
    ]


def test_guest_payload_labels_newsletter():
    transport = CapturingTransport()
    notifier = WebhookSyncNotifier(WEBHOOK, client_factory=transport.client_factory())
    guests = [
        Guest(id=1, first_name="Ada", last_name="Lovelace", visited_at=datetime(2026, 2, 2, 9, 0), wants_newsletter=True),
    ]

    notifier.notify(DatasetKind.GUESTS, guests)

    body = json.loads(transport.requests[0].content)
    assert body["type"] == "guests"
    assert body["guests"][0]["wantsNewsletter"] == "Yes"
    assert body["guests"][0]["email"] == ""


def test_transport_error_is_swallowed():
    transport = CapturingTransport(error=httpx.ConnectError("refused"))
    notifier = WebhookSyncNotifier(WEBHOOK, client_factory=transport.client_factory())

    notifier.notify(DatasetKind.VOLUNTEERS, *_volunteer_snapshot())

    assert len(transport.requests) == 1


def test_error_status_is_swallowed():
    transport = CapturingTransport(status_code=500)
    notifier = WebhookSyncNotifier(WEBHOOK, client_factory=transport.client_factory())

    notifier.notify(DatasetKind.VOLUNTEERS, *_volunteer_snapshot())

    assert len(transport.requests) == 1


def test_executor_sends_in_background():
    transport = CapturingTransport()
    with ThreadPoolExecutor(max_workers=1) as executor:
        notifier = WebhookSyncNotifier(WEBHOOK, executor=executor, client_factory=transport.client_factory())
        notifier.notify(DatasetKind.VOLUNTEERS, *_volunteer_snapshot())

    assert len(transport.requests) == 1
