"""BodyPartStore: CRUD, uniqueness and the delete guard."""

import pytest
from sqlalchemy.exc import IntegrityError

from repup.core.errors import (
    DuplicateRecordError,
    InvalidInputError,
    RecordNotFoundError,
    ReferentialIntegrityError,
)
from repup.models import BodyPart, Exercise
from repup.stores import BodyPartStore
from repup.stores import body_parts as body_parts_module


async def test_create_then_get_returns_same_name(body_parts):
    created = await body_parts.create(BodyPart(name="Back"))
    assert created.id >= 1

    fetched = await body_parts.get_by_id(created.id)
    assert fetched.name == "Back"
    assert fetched.created_at is not None


async def test_create_assigns_id_onto_input(body_parts):
    body_part = BodyPart(name="Legs")
    await body_parts.create(body_part)
    assert body_part.id >= 1


async def test_get_all_ordered_by_name(body_parts):
    for name in ["Legs", "Back", "Chest"]:
        await body_parts.create(BodyPart(name=name))
    assert [bp.name for bp in await body_parts.get_all()] == ["Back", "Chest", "Legs"]


async def test_get_all_empty_is_not_an_error(body_parts):
    assert await body_parts.get_all() == []


async def test_duplicate_name_rejected_and_existing_untouched(body_parts, chest):
    with pytest.raises(DuplicateRecordError):
        await body_parts.create(BodyPart(name="Chest"))

    all_parts = await body_parts.get_all()
    assert len(all_parts) == 1
    assert all_parts[0].id == chest.id


async def test_name_uniqueness_is_case_sensitive(body_parts, chest):
    other = await body_parts.create(BodyPart(name="chest"))
    assert other.id != chest.id


@pytest.mark.parametrize("bad_id", [0, -1, None])
async def test_get_by_id_rejects_non_positive_id(body_parts, bad_id):
    with pytest.raises(InvalidInputError):
        await body_parts.get_by_id(bad_id)


async def test_get_by_id_missing(body_parts):
    with pytest.raises(RecordNotFoundError):
        await body_parts.get_by_id(404)


async def test_create_requires_name(body_parts):
    with pytest.raises(InvalidInputError):
        await body_parts.create(BodyPart(name="  "))


async def test_update_renames(body_parts, chest):
    updated = await body_parts.update(BodyPart(id=chest.id, name="Pecs"))
    assert updated.name == "Pecs"
    assert (await body_parts.get_by_id(chest.id)).name == "Pecs"


async def test_update_to_own_name_is_allowed(body_parts, chest):
    updated = await body_parts.update(BodyPart(id=chest.id, name="Chest"))
    assert updated.id == chest.id


async def test_update_collision_with_other_record(body_parts, chest):
    back = await body_parts.create(BodyPart(name="Back"))
    with pytest.raises(DuplicateRecordError):
        await body_parts.update(BodyPart(id=back.id, name="Chest"))
    assert (await body_parts.get_by_id(back.id)).name == "Back"


async def test_update_missing_id(body_parts):
    with pytest.raises(RecordNotFoundError):
        await body_parts.update(BodyPart(id=99, name="Nowhere"))


async def test_delete_unreferenced(body_parts, chest):
    await body_parts.delete(chest.id)
    with pytest.raises(RecordNotFoundError):
        await body_parts.get_by_id(chest.id)


async def test_delete_missing(body_parts):
    with pytest.raises(RecordNotFoundError):
        await body_parts.delete(12)


async def test_delete_refused_while_exercise_refers_to_it(body_parts, exercises, chest):
    await exercises.create(Exercise(name="Push Up", body_part_id=chest.id))
    with pytest.raises(ReferentialIntegrityError):
        await body_parts.delete(chest.id)
    assert (await body_parts.get_by_id(chest.id)).name == "Chest"


async def never_taken(session, name, exclude_id=None):
    return False


async def never_referenced(session, column, value):
    return False


async def test_unique_index_rejects_duplicate_create_when_precheck_misses(body_parts, chest, monkeypatch):
    monkeypatch.setattr(BodyPartStore, "_name_taken", staticmethod(never_taken))
    with pytest.raises(DuplicateRecordError) as exc_info:
        await body_parts.create(BodyPart(name="Chest"))

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert [(bp.id, bp.name) for bp in await body_parts.get_all()] == [(chest.id, "Chest")]


async def test_unique_index_rejects_duplicate_rename_when_precheck_misses(body_parts, chest, monkeypatch):
    back = await body_parts.create(BodyPart(name="Back"))
    monkeypatch.setattr(BodyPartStore, "_name_taken", staticmethod(never_taken))

    with pytest.raises(DuplicateRecordError):
        await body_parts.update(BodyPart(id=back.id, name="Chest"))

    assert (await body_parts.get_by_id(back.id)).name == "Back"
    assert (await body_parts.get_by_id(chest.id)).name == "Chest"


async def test_foreign_key_rejects_delete_when_guard_misses(body_parts, exercises, chest, monkeypatch):
    push_up = await exercises.create(Exercise(name="Push Up", body_part_id=chest.id))
    monkeypatch.setattr(body_parts_module, "is_referenced", never_referenced)

    with pytest.raises(ReferentialIntegrityError) as exc_info:
        await body_parts.delete(chest.id)

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert (await body_parts.get_by_id(chest.id)).name == "Chest"
    assert (await exercises.get_by_id(push_up.id)).body_part_id == chest.id
