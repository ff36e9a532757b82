from portal.models.academic import Branch, Section, Semester  # noqa: F401
from portal.models.paper import PastPaper  # noqa: F401
from portal.models.subject import Subject  # noqa: F401
from portal.models.syllabus import SyllabusDoc, SyllabusSection, SyllabusTopic  # noqa: F401
from portal.models.timetable import SlotTemplate, SlotVariant, TimetableCell  # noqa: F401
