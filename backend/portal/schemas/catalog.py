from pydantic import BaseModel


class BranchOut(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class SectionOut(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class SemesterOut(BaseModel):
    id: int
    number: int

    model_config = {"from_attributes": True}


class SubjectOut(BaseModel):
    id: int
    code: str
    name: str
    faculty: str

    model_config = {"from_attributes": True}


class SlotOut(BaseModel):
    id: int
    name: str
    time_range: str
    semester_type: str

    model_config = {"from_attributes": True}


class PaperOut(BaseModel):
    title: str
    year: int
    semester: int
