"""Messenger schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class MessageCreate(BaseModel):
    rollno: Optional[str] = None
    fromid: Optional[str] = None
    toid: Optional[str] = None
    content: Optional[str] = None
    phonenumber: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class MessageRead(BaseModel):
    id: int
    rollno: str
    fromid: str
    toid: str
    content: str
    status: str
    phonenumber: Optional[str] = None
    timestamp: str

    model_config = ConfigDict(from_attributes=True)


class MessageSendResponse(BaseModel):
    ok: bool = True
    timestamp: str
