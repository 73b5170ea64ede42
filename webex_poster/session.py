from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from webex_poster.activity import ActivityLog
from webex_poster.config import settings
from webex_poster.schemas import Message, Room, SavedPreferences
from webex_poster.store import PreferenceStore


@dataclass
class Session:
    """Everything one user's controller knows between operations.

    Collections are replaced wholesale at the end of a successful operation
    and never edited in place. ``busy`` is advisory only; it does not stop a
    second operation from starting.
    """

    token: str = ""
    room_id: str = ""
    save_locally: bool = True
    messages: List[Message] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    last_posted_id: Optional[str] = None
    _busy_depth: int = field(default=0, init=False, repr=False)
    log: ActivityLog = field(default_factory=ActivityLog)
    store: Optional[PreferenceStore] = None

    @property
    def busy(self) -> bool:
        return self._busy_depth > 0

    def begin_operation(self) -> None:
        self._busy_depth += 1

    def end_operation(self) -> None:
        # nested silent refreshes must not clear the flag of the outer operation
        self._busy_depth = max(0, self._busy_depth - 1)

    @classmethod
    def restore(cls, store: Optional[PreferenceStore] = None) -> "Session":
        session = cls(
            token=settings.WEBEX_BOT_TOKEN or "",
            room_id=settings.WEBEX_ROOM_ID or "",
            store=store,
        )
        if store is not None:
            saved = store.load()
            session.token = saved.token or session.token
            session.room_id = saved.room_id or session.room_id
            session.save_locally = saved.save_locally
        return session

    def update(
        self,
        *,
        token: Optional[str] = None,
        room_id: Optional[str] = None,
        save_locally: Optional[bool] = None,
    ) -> None:
        if token is not None:
            self.token = token
        if room_id is not None:
            self.room_id = room_id
        if save_locally is not None:
            self.save_locally = save_locally
        self.persist()

    def persist(self) -> None:
        if self.store is None or not self.save_locally:
            return
        self.store.save(
            SavedPreferences(
                token=self.token, room_id=self.room_id, save_locally=self.save_locally
            )
        )
