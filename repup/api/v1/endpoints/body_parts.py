"""Body part CRUD endpoints."""

from fastapi import APIRouter, Depends

from repup.api.deps import get_body_part_store
from repup.models import BodyPart
from repup.schemas.body_part import BodyPartCreate, BodyPartRead, BodyPartUpdate
from repup.schemas.common import Envelope
from repup.stores import BodyPartStore

router = APIRouter()


@router.get("", response_model=Envelope[list[BodyPartRead]])
async def list_body_parts(store: BodyPartStore = Depends(get_body_part_store)):
    """List all body parts, ordered by name."""
    body_parts = await store.get_all()
    return {"data": [BodyPartRead.model_validate(bp) for bp in body_parts]}


@router.post("", response_model=Envelope[BodyPartRead], status_code=201)
async def create_body_part(
    payload: BodyPartCreate,
    store: BodyPartStore = Depends(get_body_part_store),
):
    """Create a body part (name must be unique)."""
    body_part = await store.create(BodyPart(**payload.model_dump()))
    return {"data": BodyPartRead.model_validate(body_part)}


@router.get("/{body_part_id}", response_model=Envelope[BodyPartRead])
async def get_body_part(
    body_part_id: int,
    store: BodyPartStore = Depends(get_body_part_store),
):
    body_part = await store.get_by_id(body_part_id)
    return {"data": BodyPartRead.model_validate(body_part)}


@router.put("/{body_part_id}", response_model=Envelope[BodyPartRead])
async def update_body_part(
    body_part_id: int,
    payload: BodyPartUpdate,
    store: BodyPartStore = Depends(get_body_part_store),
):
    """Rename a body part."""
    body_part = await store.update(BodyPart(id=body_part_id, **payload.model_dump()))
    return {"data": BodyPartRead.model_validate(body_part)}


@router.delete("/{body_part_id}", status_code=204)
async def delete_body_part(
    body_part_id: int,
    store: BodyPartStore = Depends(get_body_part_store),
):
    """Delete a body part (409 while exercises still use it)."""
    await store.delete(body_part_id)
    return None
