from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from webex_poster.cards import SAMPLE_CARD
from webex_poster.controller import WebexController
from webex_poster.deps import get_controller
from webex_poster.schemas import ActivityEntry, OperationResult, Room

router = APIRouter(prefix="/v1")


class SessionView(BaseModel):
    has_token: bool
    room_id: str
    save_locally: bool
    busy: bool
    last_posted_id: Optional[str] = None


class SessionUpdate(BaseModel):
    token: Optional[str] = None
    room_id: Optional[str] = Field(default=None, alias="roomId")
    save_locally: Optional[bool] = Field(default=None, alias="saveLocally")

    model_config = ConfigDict(populate_by_name=True)


class TextMessageRequest(BaseModel):
    room_id: Optional[str] = Field(default=None, alias="roomId")
    text: str = ""

    model_config = ConfigDict(populate_by_name=True)


class CardMessageRequest(BaseModel):
    room_id: Optional[str] = Field(default=None, alias="roomId")
    text: str = ""
    card_json: str = Field(alias="cardJson")

    model_config = ConfigDict(populate_by_name=True)


def _session_view(ctl: WebexController) -> SessionView:
    session = ctl.session
    return SessionView(
        has_token=bool(session.token.strip()),
        room_id=session.room_id,
        save_locally=session.save_locally,
        busy=session.busy,
        last_posted_id=session.last_posted_id,
    )


@router.get("/session", response_model=SessionView)
def read_session(ctl: WebexController = Depends(get_controller)):
    return _session_view(ctl)


@router.put("/session", response_model=SessionView)
def update_session(
    req: SessionUpdate, ctl: WebexController = Depends(get_controller)
):
    ctl.session.update(
        token=req.token, room_id=req.room_id, save_locally=req.save_locally
    )
    return _session_view(ctl)


@router.get("/cards/sample")
def sample_card() -> dict:
    return SAMPLE_CARD


@router.post("/messages/text", response_model=OperationResult)
async def post_text(
    req: TextMessageRequest, ctl: WebexController = Depends(get_controller)
):
    return await ctl.post_text(req.room_id, req.text)


@router.post("/messages/card", response_model=OperationResult)
async def post_card(
    req: CardMessageRequest, ctl: WebexController = Depends(get_controller)
):
    return await ctl.post_card(req.room_id, req.text, req.card_json)


@router.get("/messages", response_model=OperationResult)
async def list_messages(
    room_id: Optional[str] = None,
    max_items: Optional[int] = Query(default=None, alias="max", ge=1, le=1000),
    silent: bool = False,
    ctl: WebexController = Depends(get_controller),
):
    return await ctl.list_messages(room_id, max_items, silent)


@router.delete("/messages", response_model=OperationResult)
async def delete_last_message(ctl: WebexController = Depends(get_controller)):
    return await ctl.delete_message()


@router.delete("/messages/{message_id}", response_model=OperationResult)
async def delete_message(
    message_id: str, ctl: WebexController = Depends(get_controller)
):
    return await ctl.delete_message(message_id)


@router.get("/rooms", response_model=OperationResult)
async def list_rooms(
    q: Optional[str] = None,
    max_pages: Optional[int] = Query(default=None, ge=1),
    ctl: WebexController = Depends(get_controller),
):
    result = await ctl.list_all_rooms(max_pages)
    if result.ok and q:
        result.rooms = ctl.filter_rooms(q)
    return result


@router.get("/rooms/cached", response_model=List[Room])
def cached_rooms(
    q: Optional[str] = None, ctl: WebexController = Depends(get_controller)
):
    return ctl.filter_rooms(q)


@router.post("/rooms/{room_id}/select", response_model=OperationResult)
def select_room(room_id: str, ctl: WebexController = Depends(get_controller)):
    return ctl.select_room(room_id)


@router.get("/activity", response_model=List[ActivityEntry])
def activity(ctl: WebexController = Depends(get_controller)):
    return ctl.session.log.entries
