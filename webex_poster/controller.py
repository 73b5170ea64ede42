from __future__ import annotations

from typing import List, Optional

import httpx

from webex_poster.base import default_client_factory
from webex_poster.messages import MessageOperations
from webex_poster.rooms import RoomPaginator, filter_rooms
from webex_poster.schemas import OperationResult, Room
from webex_poster.session import Session


class WebexController:
    """Caller-facing surface: every operation reports through the session log."""

    def __init__(
        self,
        session: Session,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.session = session
        factory = default_client_factory(transport)
        self.messages = MessageOperations(session, factory)
        self.rooms = RoomPaginator(session, factory)

    async def post_text(self, room_id: Optional[str], text: str) -> OperationResult:
        return await self.messages.post_text(room_id, text)

    async def post_card(
        self, room_id: Optional[str], text: str, card_json: str
    ) -> OperationResult:
        return await self.messages.post_card(room_id, text, card_json)

    async def list_messages(
        self,
        room_id: Optional[str] = None,
        max_items: int | None = None,
        silent: bool = False,
    ) -> OperationResult:
        return await self.messages.list_messages(room_id, max_items, silent)

    async def delete_message(self, message_id: Optional[str] = None) -> OperationResult:
        return await self.messages.delete_message(message_id)

    async def list_all_rooms(self, max_pages: int | None = None) -> OperationResult:
        return await self.rooms.list_all_rooms(max_pages)

    def filter_rooms(self, query: str | None) -> List[Room]:
        return filter_rooms(self.session.rooms, query)

    def select_room(self, room_id: str) -> OperationResult:
        return self.rooms.select_room(room_id)
