"""CRUD operations for the messenger log. Append-only."""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from studentdesk.app.crud.crud_student import student_crud
from studentdesk.app.models.message import Message

DEFAULT_STATUS = "delivered"


class CRUDMessage:
    def append(
        self,
        db: Session,
        *,
        rollno: str,
        fromid: str,
        toid: str,
        content: str,
        timestamp: str,
        phonenumber: str = "",
        status: str = DEFAULT_STATUS,
    ) -> Message:
        student_crud.require(db, rollno=rollno)
        message = Message(
            rollno=rollno,
            fromid=fromid,
            toid=toid,
            content=content,
            status=status,
            phonenumber=phonenumber,
            timestamp=timestamp,
        )
        db.add(message)
        db.flush()
        return message

    def list_for_student(self, db: Session, *, rollno: str) -> List[Message]:
        return (
            db.query(Message)
            .filter(Message.rollno == rollno)
            .order_by(Message.timestamp.asc(), Message.id.asc())
            .all()
        )

    def latest_timestamp(self, db: Session, *, rollno: str) -> Optional[str]:
        return db.query(func.max(Message.timestamp)).filter(Message.rollno == rollno).scalar()


message_crud = CRUDMessage()
