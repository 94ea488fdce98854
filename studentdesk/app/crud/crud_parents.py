"""CRUD operations for guardian contact records."""

from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from studentdesk.app.crud.crud_student import student_crud
from studentdesk.app.crud.upsert import Upsert, apply_upsert
from studentdesk.app.models.parents import Parents

PARENT_FIELDS = ("parentsname", "phonenumber", "emailid", "address")


class CRUDParents:
    def get(self, db: Session, *, rollno: str) -> Optional[Parents]:
        return db.get(Parents, rollno)

    def upsert(self, db: Session, *, rollno: str, fields: Mapping[str, Any]) -> Parents:
        student_crud.require(db, rollno=rollno)
        values = {name: str(fields[name]) if fields.get(name) else "" for name in PARENT_FIELDS}
        return apply_upsert(db, Upsert(Parents, rollno, values))


parents_crud = CRUDParents()
