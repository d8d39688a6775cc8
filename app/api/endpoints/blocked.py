from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from app.api.deps import parse_record_id
from app.core.logging import console_logger
from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.records import BlockedCreateRequest, BlockedResponse, CreatedResponse, MessageResponse

router = APIRouter(tags=["blocked"])


@router.get("", response_model=List[BlockedResponse])
async def list_blocked(store: DataStore = Depends(get_store)):
    return await store.blocked.list()


@router.post("", response_model=CreatedResponse)
async def block_number(
    payload: Optional[BlockedCreateRequest] = Body(None),
    store: DataStore = Depends(get_store),
):
    payload = payload or BlockedCreateRequest()
    # attempts starts at 1 and nothing increments it yet
    blocked = await store.blocked.create({**payload.model_dump(), "attempts": 1})
    console_logger.info(f"Blocked {blocked.phone_number} ({blocked.reason}) id={blocked.id}")
    return CreatedResponse(id=blocked.id, message="Number blocked successfully")


@router.delete("/{blocked_id}", response_model=MessageResponse)
async def unblock_number(blocked_id: str, store: DataStore = Depends(get_store)):
    record_id = parse_record_id(blocked_id)
    removed = record_id is not None and await store.blocked.delete(record_id)
    console_logger.info(f"Blocked delete id={blocked_id} removed={removed}")
    return MessageResponse(message="Number unblocked successfully")
