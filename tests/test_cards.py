import json

import pytest

from webex_poster.cards import (
    CARD_CONTENT_TYPE,
    SAMPLE_CARD,
    card_attachment,
    normalize_card,
)
from webex_poster.errors import ValidationError


def test_bare_object_gets_type_and_version_defaults():
    card = normalize_card('{"body": [{"type": "TextBlock", "text": "hi"}]}')

    assert card["type"] == "AdaptiveCard"
    assert card["version"] == "1.4"
    assert card["body"][0]["text"] == "hi"


def test_existing_version_is_kept():
    card = normalize_card('{"type": "AdaptiveCard", "version": "1.2"}')

    assert card == {"type": "AdaptiveCard", "version": "1.2"}


def test_envelope_attachment_content_is_extracted():
    envelope = {
        "roomId": "X",
        "attachments": [
            {"content": {"type": "AdaptiveCard", "version": "1.0", "body": []}}
        ],
    }

    card = normalize_card(json.dumps(envelope))

    assert card == {"type": "AdaptiveCard", "version": "1.0", "body": []}


def test_envelope_falls_back_to_content_then_card():
    from_content = normalize_card(
        json.dumps({"markdown": "**hi**", "content": {"body": ["a"]}})
    )
    from_card = normalize_card(json.dumps({"roomId": "X", "card": {"body": ["b"]}}))

    assert from_content["body"] == ["a"]
    assert from_card["body"] == ["b"]
    assert from_card["type"] == "AdaptiveCard"


def test_envelope_without_card_is_used_as_is():
    card = normalize_card('{"roomId": "X", "body": []}')

    assert card == {"roomId": "X", "body": [], "type": "AdaptiveCard", "version": "1.4"}


def test_adaptive_card_with_envelope_like_keys_is_not_unwrapped():
    raw = {
        "type": "AdaptiveCard",
        "version": "1.3",
        "markdown": "yes",
        "content": {"body": []},
    }

    assert normalize_card(json.dumps(raw)) == raw


@pytest.mark.parametrize(
    "raw",
    [
        "{}",
        '{"body": []}',
        '{"roomId": "X", "attachments": [{"content": {"body": [1]}}]}',
        json.dumps(SAMPLE_CARD),
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize_card(raw)

    assert normalize_card(json.dumps(once)) == once


def test_malformed_json_is_rejected():
    with pytest.raises(ValidationError, match="malformed JSON"):
        normalize_card('{"type": "AdaptiveCard",')


def test_non_object_is_rejected():
    with pytest.raises(ValidationError):
        normalize_card("[1, 2, 3]")


def test_wrong_root_type_is_rejected():
    with pytest.raises(ValidationError, match="root type must be AdaptiveCard"):
        normalize_card('{"type": "MessageCard"}')


def test_card_attachment_wraps_content():
    card = normalize_card("{}")

    attachment = card_attachment(card)

    assert attachment == {"contentType": CARD_CONTENT_TYPE, "content": card}
    assert CARD_CONTENT_TYPE == "application/vnd.microsoft.card.adaptive"
