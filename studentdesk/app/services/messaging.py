"""Append-only messenger log between students and staff."""

from typing import Any, Optional

from sqlalchemy.orm import Session

from studentdesk.app.core.exceptions import ValidationError
from studentdesk.app.core.logging import get_logger
from studentdesk.app.core.time import utc_timestamp
from studentdesk.app.crud.crud_message import message_crud
from studentdesk.app.crud.crud_student import student_crud
from studentdesk.app.db.session import unit_of_work
from studentdesk.app.schemas.message import MessageRead
from studentdesk.app.services.records import require_text

logger = get_logger("messaging")

REQUIRED_FIELDS = ("rollno", "fromid", "toid", "content")


def send_message(
    db: Session, *, rollno: Any, fromid: Any, toid: Any, content: Any, phonenumber: Optional[Any] = None
) -> MessageRead:
    values = {"rollno": rollno, "fromid": fromid, "toid": toid, "content": content}
    missing = [name for name in REQUIRED_FIELDS if values[name] is None or not str(values[name]).strip()]
    if missing:
        raise ValidationError(", ".join(REQUIRED_FIELDS) + " required", details={"missing": missing})
    rollno = str(rollno)

    with unit_of_work(db):
        student_crud.require(db, rollno=rollno)
        timestamp = utc_timestamp()
        latest = message_crud.latest_timestamp(db, rollno=rollno)
        if latest is not None and latest > timestamp:
            # Clock stepped back; keep the log non-decreasing in insert order.
            timestamp = latest
        message = message_crud.append(
            db,
            rollno=rollno,
            fromid=str(fromid),
            toid=str(toid),
            content=str(content),
            phonenumber=str(phonenumber) if phonenumber else "",
            timestamp=timestamp,
        )
        sent = MessageRead.model_validate(message)

    logger.info("Message %s from %s to %s logged for %s", sent.id, sent.fromid, sent.toid, rollno)
    return sent


def list_messages(db: Session, *, rollno: Any) -> list[MessageRead]:
    """Messages for a roll number, oldest first. Unknown roll numbers yield an empty list."""
    rollno = require_text(rollno, "rollno")
    with unit_of_work(db):
        return [MessageRead.model_validate(m) for m in message_crud.list_for_student(db, rollno=rollno)]
