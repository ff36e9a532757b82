from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base


class SyllabusDoc(Base):
    __tablename__ = "syllabus"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    branch_id: Mapped[int] = mapped_column(ForeignKey("branches.id"), nullable=False)
    semester_id: Mapped[int] = mapped_column(ForeignKey("semesters.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)


class SyllabusSection(Base):
    __tablename__ = "syllabus_sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    syllabus_id: Mapped[int] = mapped_column(ForeignKey("syllabus.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)


class SyllabusTopic(Base):
    __tablename__ = "syllabus_topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    section_id: Mapped[int] = mapped_column(ForeignKey("syllabus_sections.id"), nullable=False, index=True)
    topic: Mapped[str] = mapped_column(String(300), nullable=False)
