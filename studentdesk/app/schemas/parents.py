"""Guardian contact schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ParentsIn(BaseModel):
    parentsname: Optional[str] = None
    phonenumber: Optional[str] = None
    emailid: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class ParentsRead(BaseModel):
    rollno: str
    parentsname: Optional[str] = None
    phonenumber: Optional[str] = None
    emailid: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
