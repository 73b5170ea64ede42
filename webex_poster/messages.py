from __future__ import annotations

from typing import Optional

from webex_poster.activity import DELETED
from webex_poster.base import Operations
from webex_poster.cards import card_attachment, normalize_card
from webex_poster.config import settings
from webex_poster.errors import ValidationError
from webex_poster.schemas import Message, OperationResult

TEXT_PLACEHOLDER = "(no text)"
# Webex rejects a message that has no text, file or meeting id.
CARD_TEXT_PLACEHOLDER = "Adaptive card"


class MessageOperations(Operations):
    async def post_text(
        self, room_id: Optional[str] = None, text: str = ""
    ) -> OperationResult:
        self.session.begin_operation()
        try:
            self.require_token()
            room = self.require_room(room_id)
            data = await self.client().post(
                "messages", {"roomId": room, "text": text or TEXT_PLACEHOLDER}
            )
            return await self._posted(room, data, "Text message sent")
        except Exception as exc:
            return self.failed(exc)
        finally:
            self.session.end_operation()

    async def post_card(
        self, room_id: Optional[str] = None, text: str = "", card_json: str = ""
    ) -> OperationResult:
        self.session.begin_operation()
        try:
            self.require_token()
            room = self.require_room(room_id)
            card = normalize_card(card_json)
            payload = {
                "roomId": room,
                "text": text if text and text.strip() else CARD_TEXT_PLACEHOLDER,
                "attachments": [card_attachment(card)],
            }
            data = await self.client().post("messages", payload)
            return await self._posted(room, data, "Card posted")
        except Exception as exc:
            return self.failed(exc)
        finally:
            self.session.end_operation()

    async def _posted(self, room: str, data: dict, what: str) -> OperationResult:
        message_id = data.get("id") if isinstance(data, dict) else None
        self.session.last_posted_id = message_id
        self.session.log.success(f"{what} ({message_id})")
        refreshed = await self.list_messages(room, silent=True)
        messages = refreshed.messages if refreshed.ok else self.session.messages
        return OperationResult(ok=True, message_id=message_id, messages=messages)

    async def list_messages(
        self,
        room_id: Optional[str] = None,
        max_items: int | None = None,
        silent: bool = False,
    ) -> OperationResult:
        self.session.begin_operation()
        try:
            self.require_token()
            room = self.require_room(room_id)
            data = await self.client().get(
                "messages",
                params={"roomId": room, "max": max_items or settings.MESSAGES_MAX},
            )
            items = data.get("items") if isinstance(data, dict) else None
            messages = [Message.model_validate(item) for item in items or []]
            self.session.messages = messages
            if not silent:
                self.session.log.info(f"Loaded {len(messages)} recent messages.")
            return OperationResult(ok=True, messages=messages)
        except Exception as exc:
            label = "Silent refresh failed: " if silent else "Refresh failed: "
            return self.failed(exc, label)
        finally:
            self.session.end_operation()

    async def delete_message(self, message_id: Optional[str] = None) -> OperationResult:
        target = (message_id or self.session.last_posted_id or "").strip()
        if not target:
            return self.failed(ValidationError("no target id"))
        self.session.begin_operation()
        try:
            self.require_token()
            await self.client().delete(f"messages/{target}")
            if target == self.session.last_posted_id:
                self.session.last_posted_id = None
            self.session.log.append(f"{DELETED} Deleted message {target}")
            messages = self.session.messages
            if self.session.room_id.strip():
                refreshed = await self.list_messages(silent=True)
                messages = refreshed.messages if refreshed.ok else messages
            return OperationResult(ok=True, message_id=target, messages=messages)
        except Exception as exc:
            return self.failed(exc)
        finally:
            self.session.end_operation()
