"""CRUD operations for student marks."""

from typing import Optional

from sqlalchemy.orm import Session

from studentdesk.app.crud.crud_student import student_crud
from studentdesk.app.crud.upsert import Upsert, apply_upsert
from studentdesk.app.models.marks import StudentMarks
from studentdesk.app.services.grading import GradedMarks


class CRUDMarks:
    def get(self, db: Session, *, rollno: str) -> Optional[StudentMarks]:
        return db.get(StudentMarks, rollno)

    def upsert(self, db: Session, *, rollno: str, graded: GradedMarks) -> StudentMarks:
        # avg/grade only ever arrive bundled with the scores they were derived from
        if not isinstance(graded, GradedMarks):
            raise TypeError("marks must be produced by grade_marks()")
        student_crud.require(db, rollno=rollno)
        return apply_upsert(db, Upsert(StudentMarks, rollno, graded.as_row()))


marks_crud = CRUDMarks()
