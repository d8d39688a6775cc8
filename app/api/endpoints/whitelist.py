from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from app.api.deps import parse_record_id
from app.core.logging import console_logger
from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.records import ContactCreateRequest, ContactResponse, CreatedResponse, MessageResponse

router = APIRouter(tags=["whitelist"])


@router.get("", response_model=List[ContactResponse])
async def list_whitelist(store: DataStore = Depends(get_store)):
    return await store.whitelist.list()


@router.post("", response_model=CreatedResponse)
async def add_to_whitelist(
    payload: Optional[ContactCreateRequest] = Body(None),
    store: DataStore = Depends(get_store),
):
    payload = payload or ContactCreateRequest()
    contact = await store.whitelist.create(payload.model_dump())
    console_logger.info(f"Whitelisted {contact.phone_number} as {contact.contact_name} (id={contact.id})")
    return CreatedResponse(id=contact.id, message="Contact added to whitelist")


@router.delete("/{contact_id}", response_model=MessageResponse)
async def remove_from_whitelist(contact_id: str, store: DataStore = Depends(get_store)):
    # Unknown ids are not an error
    record_id = parse_record_id(contact_id)
    removed = record_id is not None and await store.whitelist.delete(record_id)
    console_logger.info(f"Whitelist delete id={contact_id} removed={removed}")
    return MessageResponse(message="Contact removed from whitelist")
