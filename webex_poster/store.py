from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError as SchemaError

from webex_poster.config import settings
from webex_poster.schemas import SavedPreferences

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Key-value JSON file holding the remembered token and room id."""

    def __init__(self, path: str | Path | None = None, key: str | None = None):
        self.path = Path(path or settings.STATE_FILE).expanduser()
        self.key = key or settings.STATE_KEY

    def _read_all(self) -> Dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.debug("ignoring unreadable state file", extra={"error": str(exc)})
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> SavedPreferences:
        record = self._read_all().get(self.key)
        if not isinstance(record, dict):
            return SavedPreferences()
        try:
            return SavedPreferences.model_validate(record)
        except SchemaError as exc:
            logger.debug("ignoring malformed saved record", extra={"error": str(exc)})
            return SavedPreferences()

    def save(self, prefs: SavedPreferences) -> None:
        data = self._read_all()
        data[self.key] = prefs.model_dump(by_alias=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # the record holds a bearer token: owner read/write only
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
        os.chmod(self.path, 0o600)
