from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from portal.schemas.catalog import SlotOut

DAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

FREE_PERIOD = "Free"


class SubjectDetail(BaseModel):
    code: str
    name: str
    faculty: str


class TimetableGrid(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    grid: dict[str, list[str]] = Field(alias="timetable")
    subject_catalog: dict[str, SubjectDetail] = Field(alias="subjectDetails")
    slots: list[SlotOut]
