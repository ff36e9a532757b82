"""create portal tables

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "branches",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_branches_name", "branches", ["name"], unique=True)

    op.create_table(
        "sections",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=20), nullable=False),
    )

    op.create_table(
        "semesters",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("number", sa.Integer(), nullable=False),
    )

    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("faculty", sa.String(length=200), nullable=False),
    )
    op.create_index("ix_subjects_code", "subjects", ["code"], unique=True)

    op.create_table(
        "timetable_slots",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("time_range", sa.String(length=100), nullable=False),
        sa.Column("semester_type", sa.String(length=20), nullable=False, server_default="default"),
    )
    op.create_index("ix_timetable_slots_semester_type", "timetable_slots", ["semester_type"], unique=False)

    op.create_table(
        "timetables",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("branch_id", sa.Integer(), sa.ForeignKey("branches.id"), nullable=False),
        sa.Column("section_id", sa.Integer(), sa.ForeignKey("sections.id"), nullable=False),
        sa.Column("semester_id", sa.Integer(), sa.ForeignKey("semesters.id"), nullable=False),
        sa.Column("day", sa.String(length=20), nullable=False),
        sa.Column("slot_id", sa.Integer(), sa.ForeignKey("timetable_slots.id"), nullable=False),
        sa.Column("subject_id", sa.Integer(), sa.ForeignKey("subjects.id"), nullable=True),
    )

    op.create_table(
        "previous_year_papers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("branch_id", sa.Integer(), sa.ForeignKey("branches.id"), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("semester_id", sa.Integer(), sa.ForeignKey("semesters.id"), nullable=False),
        sa.Column("file_path", sa.String(length=500), nullable=True),
    )

    op.create_table(
        "syllabus",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("branch_id", sa.Integer(), sa.ForeignKey("branches.id"), nullable=False),
        sa.Column("semester_id", sa.Integer(), sa.ForeignKey("semesters.id"), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
    )

    op.create_table(
        "syllabus_sections",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("syllabus_id", sa.Integer(), sa.ForeignKey("syllabus.id"), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
    )
    op.create_index("ix_syllabus_sections_syllabus_id", "syllabus_sections", ["syllabus_id"], unique=False)

    op.create_table(
        "syllabus_topics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("section_id", sa.Integer(), sa.ForeignKey("syllabus_sections.id"), nullable=False),
        sa.Column("topic", sa.String(length=300), nullable=False),
    )
    op.create_index("ix_syllabus_topics_section_id", "syllabus_topics", ["section_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_syllabus_topics_section_id", table_name="syllabus_topics")
    op.drop_table("syllabus_topics")
    op.drop_index("ix_syllabus_sections_syllabus_id", table_name="syllabus_sections")
    op.drop_table("syllabus_sections")
    op.drop_table("syllabus")
    op.drop_table("previous_year_papers")
    op.drop_table("timetables")
    op.drop_index("ix_timetable_slots_semester_type", table_name="timetable_slots")
    op.drop_table("timetable_slots")
    op.drop_index("ix_subjects_code", table_name="subjects")
    op.drop_table("subjects")
    op.drop_table("semesters")
    op.drop_table("sections")
    op.drop_index("ix_branches_name", table_name="branches")
    op.drop_table("branches")
