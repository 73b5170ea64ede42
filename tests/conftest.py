import itertools
import json

import httpx
import pytest

from webex_poster.controller import WebexController
from webex_poster.session import Session

BASE = "https://webexapis.com/v1"


class FakeWebex:
    """In-memory stand-in for the messages and rooms endpoints."""

    def __init__(self, room_pages=None):
        self.requests = []
        self.messages = {}
        self.room_pages = room_pages or []
        self.failures = {}
        self.network_down = False
        self._ids = itertools.count(1)

    @property
    def transport(self):
        return httpx.MockTransport(self.handle)

    def fail(self, method, path, status, body=None):
        self.failures[(method, path)] = (status, body)

    def handle(self, request):
        self.requests.append(request)
        if self.network_down:
            raise httpx.ConnectError("connection refused", request=request)
        key = (request.method, request.url.path)
        if key in self.failures:
            status, body = self.failures[key]
            if isinstance(body, (dict, list)):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=body or "")
        path = request.url.path
        if path == "/v1/messages" and request.method == "POST":
            return self._create(json.loads(request.content))
        if path == "/v1/messages" and request.method == "GET":
            room = request.url.params["roomId"]
            limit = int(request.url.params.get("max", 50))
            items = list(reversed(self.messages.get(room, [])))[:limit]
            return httpx.Response(200, json={"items": items})
        if path.startswith("/v1/messages/") and request.method == "DELETE":
            return self._delete(path.rsplit("/", 1)[1])
        if path == "/v1/rooms" and request.method == "GET":
            return self._rooms_page(int(request.url.params.get("cursor", 0)))
        return httpx.Response(404, json={"message": "Not found"})

    def _create(self, payload):
        message = {
            "id": f"msg-{next(self._ids)}",
            "roomId": payload["roomId"],
            "text": payload.get("text"),
            "attachments": payload.get("attachments", []),
            "created": "2026-10-17T09:00:00.000Z",
        }
        self.messages.setdefault(payload["roomId"], []).append(message)
        return httpx.Response(200, json=message)

    def _delete(self, message_id):
        for items in self.messages.values():
            for item in items:
                if item["id"] == message_id:
                    items.remove(item)
                    return httpx.Response(204)
        return httpx.Response(404, json={"message": "Message not found"})

    def _rooms_page(self, index):
        headers = {}
        if index + 1 < len(self.room_pages):
            headers["Link"] = (
                f'<{BASE}/rooms?max=100&sortBy=lastactivity&cursor={index + 1}>; '
                'rel="next"'
            )
        return httpx.Response(
            200, json={"items": self.room_pages[index]}, headers=headers
        )


def make_room_pages(count, per_page=2):
    return [
        [
            {
                "id": f"room-{page}-{n}",
                "title": f"Room {page}.{n}",
                "type": "group",
                "lastActivity": "2026-10-17T08:00:00.000Z",
            }
            for n in range(per_page)
        ]
        for page in range(count)
    ]


@pytest.fixture
def fake_webex():
    return FakeWebex(room_pages=make_room_pages(5))


@pytest.fixture
def session():
    return Session(token="  bot-token  ", room_id="R1")


@pytest.fixture
def controller(session, fake_webex):
    return WebexController(session, transport=fake_webex.transport)
