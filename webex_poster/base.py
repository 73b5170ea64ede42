from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from webex_poster.errors import ValidationError, WebexError
from webex_poster.schemas import OperationResult
from webex_poster.session import Session
from webex_poster.transport import WebexClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], WebexClient]


def default_client_factory(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ClientFactory:
    def factory(token: str) -> WebexClient:
        return WebexClient(token, transport=transport)

    return factory


class Operations:
    """Shared plumbing for operations that run against one session."""

    def __init__(
        self, session: Session, client_factory: Optional[ClientFactory] = None
    ) -> None:
        self.session = session
        self._client_factory = client_factory or default_client_factory()

    def client(self) -> WebexClient:
        return self._client_factory(self.session.token)

    def require_token(self) -> None:
        if not self.session.token.strip():
            raise ValidationError("Missing bot access token.")

    def require_room(self, room_id: Optional[str]) -> str:
        resolved = (room_id if room_id is not None else self.session.room_id).strip()
        if not resolved:
            raise ValidationError("Missing room id.")
        return resolved

    def failed(self, exc: Exception, label: str = "") -> OperationResult:
        if isinstance(exc, WebexError):
            message, kind = str(exc), exc.kind
        else:
            logger.exception("unexpected failure in operation")
            message, kind = str(exc) or exc.__class__.__name__, "internal"
        self.session.log.failure(f"{label}{message}")
        return OperationResult(ok=False, error=message, error_kind=kind)
