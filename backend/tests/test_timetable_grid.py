import asyncio
from types import SimpleNamespace

import pytest
from sqlalchemy import delete

from portal.core.exceptions import NotFoundError
from portal.models.timetable import TimetableCell
from portal.schemas.timetable import DAYS, FREE_PERIOD
from portal.services.timetable_grid import assemble_grid, build_grid, is_break_label


def _slot(slot_id, name):
    return SimpleNamespace(id=slot_id, name=name)


SLOTS = [_slot(1, "P1"), _slot(2, "tea Break"), _slot(3, "P2"), _slot(4, "LUNCH BREAK "), _slot(5, "P3")]


def test_break_labels_are_case_insensitive():
    assert is_break_label("tea Break")
    assert is_break_label("LUNCH BREAK ")
    assert is_break_label("Lunch")
    assert not is_break_label("P1 9:30am")


def test_build_grid_fills_missing_cells_with_free():
    grid = build_grid(SLOTS, {("Monday", 1): "Machine Learning"})

    assert list(grid) == list(DAYS)
    assert grid["Monday"] == ["Machine Learning", FREE_PERIOD, FREE_PERIOD, FREE_PERIOD, FREE_PERIOD]
    for day in DAYS[1:]:
        assert grid[day] == [FREE_PERIOD] * len(SLOTS)


def test_build_grid_shows_break_label_only_for_subjectless_break_slots():
    cells = {
        ("Tuesday", 1): None,
        ("Tuesday", 2): None,
        ("Tuesday", 3): "Cloud Computing",
        ("Tuesday", 4): None,
    }

    grid = build_grid(SLOTS, cells)

    assert grid["Tuesday"] == [FREE_PERIOD, "tea Break", "Cloud Computing", "LUNCH BREAK ", FREE_PERIOD]


def test_build_grid_ignores_cells_for_unknown_slots():
    grid = build_grid(SLOTS, {("Monday", 99): "Stray", ("Sunday", 1): "Stray"})

    assert all(len(row) == len(SLOTS) for row in grid.values())
    assert "Stray" not in grid["Monday"]
    assert "Sunday" not in grid


def test_cse_6_a_sample_week(seeded):
    result = asyncio.run(assemble_grid(seeded, "CSE", 6, "A"))

    assert result.grid["Monday"] == [
        "Machine Learning",
        "Software Testing Methodologies",
        "tea Break",
        "Chemistry of Polymers and Applications",
        "Cryptography & Network Security",
        "Lunch Break",
        "Cloud Computing",
        "Machine Learning Lab",
        "Machine Learning Lab",
    ]
    assert result.grid["Saturday"][-1] == "Library Hour"
    assert result.grid["Thursday"][3:5] == ["Cryptography & Network Security Lab"] * 2
    assert list(result.grid) == list(DAYS)
    assert all(len(row) == len(result.slots) == 9 for row in result.grid.values())
    assert all(row[2] == "tea Break" and row[5] == "Lunch Break" for row in result.grid.values())


def test_subject_catalog_covers_every_subject_name(seeded):
    result = asyncio.run(assemble_grid(seeded, "ECE", 3, "B"))

    # 33 subjects, "Soft Skills" is offered under two codes.
    assert len(result.subject_catalog) == 32
    assert result.subject_catalog["Soft Skills"].code == "23A11114T"
    assert result.subject_catalog["Machine Learning"].faculty == "D. Masthan Pasha"


def test_grid_without_assignments_is_all_free(seeded):
    result = asyncio.run(assemble_grid(seeded, "CSE", 1, "A"))

    assert [slot.semester_type for slot in result.slots] == ["sem1"] * 9
    assert all(row == [FREE_PERIOD] * 9 for row in result.grid.values())


def test_sparse_cells_never_shrink_the_grid(seeded):
    async def _drop_monday():
        async with seeded() as session:
            await session.execute(delete(TimetableCell).where(TimetableCell.day == "Monday"))
            await session.commit()

    asyncio.run(_drop_monday())
    result = asyncio.run(assemble_grid(seeded, "CSE", 6, "A"))

    assert result.grid["Monday"] == [FREE_PERIOD] * 9
    assert result.grid["Tuesday"][0] == "Chemistry of Polymers and Applications"


@pytest.mark.parametrize(
    ("branch", "semester", "section", "entity"),
    [
        ("XXX", 6, "A", "branch"),
        ("CSE", 9, "A", "semester"),
        ("CSE", 6, "Z", "section"),
        ("CSE", 10**20, "A", "semester"),
        ("CSE", -1, "A", "semester"),
    ],
)
def test_unknown_lookup_keys_raise_not_found(seeded, branch, semester, section, entity):
    with pytest.raises(NotFoundError) as excinfo:
        asyncio.run(assemble_grid(seeded, branch, semester, section))

    assert excinfo.value.entity == entity
    assert excinfo.value.status_code == 404
