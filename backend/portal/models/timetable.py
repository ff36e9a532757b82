from enum import Enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base


class SlotVariant(str, Enum):
    first_semester = "sem1"
    default = "default"


class SlotTemplate(Base):
    __tablename__ = "timetable_slots"

    # Within a variant, ascending id is chronological period order.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    time_range: Mapped[str] = mapped_column(String(100), nullable=False)
    semester_type: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default=SlotVariant.default.value, index=True
    )


class TimetableCell(Base):
    __tablename__ = "timetables"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    branch_id: Mapped[int] = mapped_column(ForeignKey("branches.id"), nullable=False)
    section_id: Mapped[int] = mapped_column(ForeignKey("sections.id"), nullable=False)
    semester_id: Mapped[int] = mapped_column(ForeignKey("semesters.id"), nullable=False)
    day: Mapped[str] = mapped_column(String(20), nullable=False)
    slot_id: Mapped[int] = mapped_column(ForeignKey("timetable_slots.id"), nullable=False)
    subject_id: Mapped[int | None] = mapped_column(ForeignKey("subjects.id"), nullable=True)
