from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base


class Subject(Base):
    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    # Display name; not unique across codes (e.g. two "Soft Skills" offerings).
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    faculty: Mapped[str] = mapped_column(String(200), nullable=False)
