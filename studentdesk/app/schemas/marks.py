"""Marks schemas. Scores are accepted as any JSON value and coerced when graded."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class MarksUpsert(BaseModel):
    rollno: Optional[str] = None
    tamil: Any = None
    english: Any = None
    maths: Any = None
    science: Any = None
    social: Any = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class MarksRead(BaseModel):
    rollno: str
    tamil: int
    english: int
    maths: int
    science: int
    social: int
    avg: float
    grade: str

    model_config = ConfigDict(from_attributes=True)


class MarksUpsertResponse(BaseModel):
    ok: bool = True
    avg: float
    grade: str


class MarksOverview(BaseModel):
    rollno: str
    name: str
    class_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("class", "class_name"), serialization_alias="class"
    )
    section: Optional[str] = None
    tamil: Optional[int] = None
    english: Optional[int] = None
    maths: Optional[int] = None
    science: Optional[int] = None
    social: Optional[int] = None
    avg: Optional[float] = None
    grade: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
