from __future__ import annotations

import json
from typing import Any, Optional

from webex_poster.config import settings
from webex_poster.errors import ValidationError

CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
CARD_TYPE = "AdaptiveCard"

# Keys that only appear on a full message payload, never on a bare card.
ENVELOPE_KEYS = ("attachments", "roomId", "markdown")

SAMPLE_CARD = {
    "type": "AdaptiveCard",
    "version": "1.4",
    "body": [
        {
            "type": "TextBlock",
            "size": "Large",
            "weight": "Bolder",
            "text": "Hello from Adaptive Card",
        },
        {
            "type": "TextBlock",
            "wrap": True,
            "text": "This was posted by a Webex bot.",
        },
    ],
}


def _is_envelope(value: dict) -> bool:
    if value.get("type") == CARD_TYPE:
        return False
    return any(value.get(key) for key in ENVELOPE_KEYS)


def _first_attachment_content(value: dict) -> Any:
    attachments = value.get("attachments")
    if isinstance(attachments, list) and attachments:
        first = attachments[0]
        if isinstance(first, dict):
            return first.get("content")
    return None


def _extract_card(envelope: dict) -> Optional[dict]:
    candidates = (
        _first_attachment_content(envelope),
        envelope.get("content"),
        envelope.get("card"),
    )
    for candidate in candidates:
        if isinstance(candidate, dict) and candidate:
            return candidate
    return None


def normalize_card(raw_json: str) -> dict:
    """Turn user supplied JSON into a postable Adaptive Card root.

    Users often paste a complete sample message (room id, text, attachments)
    from a card designer instead of the bare card, so the card is pulled out
    of such envelopes. When nothing card-like is found the value is used as
    is.
    """
    try:
        card = json.loads(raw_json)
    except (TypeError, ValueError) as exc:
        raise ValidationError("malformed JSON") from exc
    if not isinstance(card, dict):
        raise ValidationError("card must be a JSON object")

    if _is_envelope(card):
        card = _extract_card(card) or card

    if not card.get("type"):
        card["type"] = CARD_TYPE
    if card["type"] != CARD_TYPE:
        raise ValidationError("root type must be AdaptiveCard")
    if not card.get("version"):
        card["version"] = settings.CARD_DEFAULT_VERSION
    return card


def card_attachment(card: dict) -> dict:
    return {"contentType": CARD_CONTENT_TYPE, "content": card}
