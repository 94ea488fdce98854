"""CRUD operations for students. Callers own the transaction."""

from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studentdesk.app.core.exceptions import Conflict, NotFound
from studentdesk.app.models.marks import StudentMarks
from studentdesk.app.models.student import Student

UPDATABLE_FIELDS = ("name", "class_name", "section", "dob", "handlingfaculty")


class CRUDStudent:
    def get(self, db: Session, *, rollno: str) -> Optional[Student]:
        return db.get(Student, rollno)

    def require(self, db: Session, *, rollno: str) -> Student:
        student = self.get(db, rollno=rollno)
        if student is None:
            raise NotFound("Student not found", details={"rollno": rollno})
        return student

    def count(self, db: Session) -> int:
        return db.query(Student).count()

    def create(self, db: Session, *, obj_in: Mapping[str, Any]) -> Student:
        rollno = obj_in["rollno"]
        if self.get(db, rollno=rollno) is not None:
            raise Conflict("Student already exists", details={"rollno": rollno})
        student = Student(**obj_in)
        db.add(student)
        try:
            db.flush()
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same roll number.
            raise Conflict("Student already exists", details={"rollno": rollno}) from exc
        return student

    def list_with_marks(self, db: Session) -> List[Tuple[Student, Optional[StudentMarks]]]:
        return (
            db.query(Student, StudentMarks)
            .outerjoin(StudentMarks, StudentMarks.rollno == Student.rollno)
            .order_by(Student.rollno.asc())
            .all()
        )

    def update_fields(self, db: Session, *, rollno: str, fields: Mapping[str, Any]) -> Student:
        student = self.require(db, rollno=rollno)
        for field, value in fields.items():
            if field in UPDATABLE_FIELDS and value is not None:
                setattr(student, field, value)
        db.flush()
        return student

    def delete(self, db: Session, *, rollno: str) -> Student:
        student = self.require(db, rollno=rollno)
        db.delete(student)
        db.flush()
        return student


student_crud = CRUDStudent()
