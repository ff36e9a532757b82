from pydantic import BaseModel, Field


class SyllabusSectionOut(BaseModel):
    title: str
    topics: list[str] = Field(default_factory=list)


class SyllabusOut(BaseModel):
    title: str
    sections: list[SyllabusSectionOut] = Field(default_factory=list)
