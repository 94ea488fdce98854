"""Student schemas. Wire names follow the store columns (class, DOB)."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from studentdesk.app.schemas.marks import MarksRead
from studentdesk.app.schemas.parents import ParentsIn, ParentsRead

CLASS_ALIAS = AliasChoices("class", "class_name")
DOB_ALIAS = AliasChoices("DOB", "dob")


class StudentBase(BaseModel):
    name: Optional[str] = None
    class_name: Optional[str] = Field(default=None, validation_alias=CLASS_ALIAS, serialization_alias="class")
    section: Optional[str] = None
    dob: Optional[str] = Field(default=None, validation_alias=DOB_ALIAS, serialization_alias="DOB")
    handlingfaculty: Optional[str] = None


class StudentCreate(StudentBase):
    # rollno and name are checked by the record service so a missing value is a 400, not a 422
    rollno: Optional[str] = None
    parents: Optional[ParentsIn] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class StudentUpdate(StudentBase):
    parents: Optional[ParentsIn] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class StudentRead(StudentBase):
    rollno: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class StudentWithMarks(StudentRead):
    tamil: Optional[int] = None
    english: Optional[int] = None
    maths: Optional[int] = None
    science: Optional[int] = None
    social: Optional[int] = None
    avg: Optional[float] = None
    grade: Optional[str] = None


class StudentDetail(BaseModel):
    student: StudentRead
    marks: Optional[MarksRead] = None
    parents: Optional[ParentsRead] = None

    model_config = ConfigDict(from_attributes=True)


class OkResponse(BaseModel):
    ok: bool = True
