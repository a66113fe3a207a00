"""ExerciseStore: parent checks, by-parent listing and the delete guard."""

import pytest
from sqlalchemy.exc import IntegrityError

from repup.core.errors import InvalidInputError, RecordNotFoundError, ReferentialIntegrityError
from repup.models import BodyPart, Exercise
from repup.stores import exercises as exercises_module

from conftest import make_workout


async def test_create_and_get(exercises, bench_press, chest):
    fetched = await exercises.get_by_id(bench_press.id)
    assert fetched.name == "Bench Press"
    assert fetched.description == "Flat barbell press"
    assert fetched.body_part_id == chest.id


async def test_missing_description_stored_as_empty(exercises, chest):
    created = await exercises.create(Exercise(name="Dip", description=None, body_part_id=chest.id))
    assert (await exercises.get_by_id(created.id)).description == ""


async def test_create_with_unknown_body_part(exercises):
    with pytest.raises(InvalidInputError, match="body part 42"):
        await exercises.create(Exercise(name="Curl", body_part_id=42))


async def test_create_requires_body_part(exercises):
    with pytest.raises(InvalidInputError):
        await exercises.create(Exercise(name="Curl", body_part_id=0))


async def test_get_all_ordered_by_name(exercises, incline_press, bench_press):
    assert [e.name for e in await exercises.get_all()] == ["Bench Press", "Incline Press"]


async def test_get_by_body_part(body_parts, exercises, bench_press, chest):
    legs = await body_parts.create(BodyPart(name="Legs"))
    squat = await exercises.create(Exercise(name="Squat", body_part_id=legs.id))

    assert [e.id for e in await exercises.get_by_body_part(chest.id)] == [bench_press.id]
    assert [e.id for e in await exercises.get_by_body_part(legs.id)] == [squat.id]
    assert await exercises.get_by_body_part(999) == []


async def test_get_by_body_part_rejects_bad_id(exercises):
    with pytest.raises(InvalidInputError):
        await exercises.get_by_body_part(-3)


async def test_update_moves_to_other_body_part(body_parts, exercises, bench_press):
    arms = await body_parts.create(BodyPart(name="Arms"))
    updated = await exercises.update(
        Exercise(id=bench_press.id, name="Close Grip Bench", description="", body_part_id=arms.id)
    )
    assert updated.name == "Close Grip Bench"
    assert updated.body_part_id == arms.id


async def test_update_missing(exercises, chest):
    with pytest.raises(RecordNotFoundError):
        await exercises.update(Exercise(id=77, name="Ghost", body_part_id=chest.id))


async def test_update_to_unknown_body_part(exercises, bench_press):
    with pytest.raises(InvalidInputError):
        await exercises.update(Exercise(id=bench_press.id, name="Bench Press", body_part_id=55))


async def test_delete_unused(exercises, bench_press):
    await exercises.delete(bench_press.id)
    with pytest.raises(RecordNotFoundError):
        await exercises.get_by_id(bench_press.id)


async def test_delete_missing(exercises):
    with pytest.raises(RecordNotFoundError):
        await exercises.delete(31)


async def test_delete_refused_while_used_in_workout(exercises, workouts, bench_press):
    await workouts.create(make_workout((bench_press.id, 3, 10, 135.5)))
    with pytest.raises(ReferentialIntegrityError):
        await exercises.delete(bench_press.id)


async def test_foreign_key_rejects_delete_when_guard_misses(exercises, workouts, bench_press, monkeypatch):
    async def never_referenced(session, column, value):
        return False

    created = await workouts.create(make_workout((bench_press.id, 3, 10, 135.5)))
    monkeypatch.setattr(exercises_module, "is_referenced", never_referenced)

    with pytest.raises(ReferentialIntegrityError) as exc_info:
        await exercises.delete(bench_press.id)

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert (await exercises.get_by_id(bench_press.id)).name == "Bench Press"
    assert [entry.exercise_id for entry in (await workouts.get_by_id(created.id)).entries] == [bench_press.id]
