"""Messenger endpoints. Retrieval is by polling."""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from studentdesk.app.db.session import get_db
from studentdesk.app.schemas.message import MessageCreate, MessageRead, MessageSendResponse
from studentdesk.app.services.messaging import list_messages, send_message

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.get("", response_model=list[MessageRead])
async def get_messages(rollno: Optional[str] = None, db: Session = Depends(get_db)):
    return list_messages(db, rollno=rollno)


@router.post("", response_model=MessageSendResponse, status_code=status.HTTP_201_CREATED)
async def post_message(message_in: MessageCreate, db: Session = Depends(get_db)):
    sent = send_message(
        db,
        rollno=message_in.rollno,
        fromid=message_in.fromid,
        toid=message_in.toid,
        content=message_in.content,
        phonenumber=message_in.phonenumber,
    )
    return MessageSendResponse(timestamp=sent.timestamp)
