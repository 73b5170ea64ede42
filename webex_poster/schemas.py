from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    created: Optional[str] = None
    text: Optional[str] = None
    attachments: List[Dict[str, Any]] = []
    room_id: Optional[str] = Field(default=None, alias="roomId")
    room_type: Optional[str] = Field(default=None, alias="roomType")
    person_id: Optional[str] = Field(default=None, alias="personId")
    person_email: Optional[str] = Field(default=None, alias="personEmail")
    markdown: Optional[str] = None
    html: Optional[str] = None
    files: List[str] = []


class Room(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: Optional[str] = None
    type: str = "group"
    last_activity: Optional[str] = Field(default=None, alias="lastActivity")
    is_locked: Optional[bool] = Field(default=None, alias="isLocked")
    team_id: Optional[str] = Field(default=None, alias="teamId")
    creator_id: Optional[str] = Field(default=None, alias="creatorId")
    created: Optional[str] = None


class ActivityEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    message: str

    def __str__(self) -> str:
        return f"{self.timestamp}  {self.message}"


class SavedPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = ""
    room_id: str = Field(default="", alias="roomId")
    save_locally: bool = Field(default=True, alias="saveLocally")


class OperationResult(BaseModel):
    ok: bool
    error: Optional[str] = None
    error_kind: Optional[str] = None
    message_id: Optional[str] = None
    messages: Optional[List[Message]] = None
    rooms: Optional[List[Room]] = None
