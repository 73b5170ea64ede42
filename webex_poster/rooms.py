from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from webex_poster.base import Operations
from webex_poster.config import settings
from webex_poster.errors import ValidationError
from webex_poster.pagination import PageCursor
from webex_poster.schemas import OperationResult, Room
from webex_poster.transport import decode_json

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 1000


def filter_rooms(rooms: Iterable[Room], query: str | None) -> List[Room]:
    needle = (query or "").strip().lower()
    return [room for room in rooms if needle in (room.title or "").lower()]


class RoomPaginator(Operations):
    async def list_all_rooms(self, max_pages: int | None = None) -> OperationResult:
        """Collect the rooms the caller belongs to, most recently active first.

        Pages are fetched one after another by following ``rel="next"``
        links, stopping after ``max_pages`` even if more remain. Any failed
        page aborts the walk and the previous room list is kept.
        """
        pages = max_pages or settings.ROOMS_MAX_PAGES
        page_size = min(settings.ROOMS_PAGE_SIZE, MAX_PAGE_SIZE)
        self.session.begin_operation()
        try:
            self.require_token()
            client = self.client()
            collected: List[Room] = []
            cursor: Optional[PageCursor] = None
            for page in range(pages):
                if cursor is None:
                    resp = await client.send(
                        "GET",
                        "rooms",
                        params={"max": page_size, "sortBy": "lastactivity"},
                    )
                else:
                    resp = await client.send("GET", cursor.url)
                data = decode_json(resp)
                items = data.get("items") if isinstance(data, dict) else None
                if isinstance(items, list):
                    collected.extend(Room.model_validate(item) for item in items)
                cursor = PageCursor.from_response(resp)
                logger.debug(
                    "rooms page fetched",
                    extra={"page": page + 1, "has_next": cursor is not None},
                )
                if cursor is None:
                    break
            self.session.rooms = collected
            self.session.log.info(f"Loaded {len(collected)} rooms.")
            return OperationResult(ok=True, rooms=collected)
        except Exception as exc:
            return self.failed(exc, "Rooms load failed: ")
        finally:
            self.session.end_operation()

    def select_room(self, room_id: str) -> OperationResult:
        room = (room_id or "").strip()
        if not room:
            return self.failed(ValidationError("Missing room id."))
        self.session.update(room_id=room)
        self.session.log.success(f"Selected room: {room}")
        return OperationResult(ok=True)
