from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterator, List, Optional

from webex_poster.schemas import ActivityEntry

logger = logging.getLogger(__name__)

OK = "✅"
INFO = "ℹ️"
FAIL = "❌"
DELETED = "🗑️"


def _local_time() -> str:
    return datetime.now().strftime("%H:%M:%S")


class ActivityLog:
    """Newest-first record of operation outcomes shown to the user."""

    def __init__(self, clock: Optional[Callable[[], str]] = None) -> None:
        self._clock = clock or _local_time
        self._entries: List[ActivityEntry] = []

    def append(self, message: str) -> ActivityEntry:
        entry = ActivityEntry(timestamp=self._clock(), message=message)
        self._entries.insert(0, entry)
        level = logging.WARNING if message.startswith(FAIL) else logging.INFO
        logger.log(level, message, extra={"activity_ts": entry.timestamp})
        return entry

    def success(self, message: str) -> ActivityEntry:
        return self.append(f"{OK} {message}")

    def info(self, message: str) -> ActivityEntry:
        return self.append(f"{INFO} {message}")

    def failure(self, message: str) -> ActivityEntry:
        return self.append(f"{FAIL} {message}")

    @property
    def latest(self) -> Optional[ActivityEntry]:
        return self._entries[0] if self._entries else None

    @property
    def entries(self) -> List[ActivityEntry]:
        return list(self._entries)

    def lines(self) -> List[str]:
        return [str(entry) for entry in self._entries]

    def __iter__(self) -> Iterator[ActivityEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
