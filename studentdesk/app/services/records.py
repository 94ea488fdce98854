"""
Student record operations spanning students, marks and parents.

Every write runs in a single unit of work so a student is never visible
without its marks row and a failed step leaves the store untouched.
"""

from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from studentdesk.app.core.exceptions import Conflict, ValidationError
from studentdesk.app.core.logging import get_logger
from studentdesk.app.crud.crud_marks import marks_crud
from studentdesk.app.crud.crud_parents import parents_crud
from studentdesk.app.crud.crud_student import student_crud
from studentdesk.app.db.session import unit_of_work
from studentdesk.app.models.marks import StudentMarks
from studentdesk.app.models.student import Student
from studentdesk.app.schemas.marks import MarksOverview, MarksRead
from studentdesk.app.schemas.parents import ParentsIn, ParentsRead
from studentdesk.app.schemas.student import StudentCreate, StudentDetail, StudentRead, StudentUpdate, StudentWithMarks
from studentdesk.app.services.grading import SUBJECTS, ZERO_MARKS, GradedMarks, grade_marks

logger = get_logger("records")


def require_text(value: Any, field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", details={"field": field})
    return str(value)


def _student_fields(student: Student) -> dict[str, Any]:
    return {
        "rollno": student.rollno,
        "name": student.name,
        "class_name": student.class_name,
        "section": student.section,
        "dob": student.dob,
        "handlingfaculty": student.handlingfaculty,
    }


def _marks_fields(marks: Optional[StudentMarks]) -> dict[str, Any]:
    if marks is None:
        return {}
    return {column: getattr(marks, column) for column in (*SUBJECTS, "avg", "grade")}


def create_student_record(db: Session, *, student_in: StudentCreate, parents_in: Optional[ParentsIn] = None) -> StudentRead:
    rollno = require_text(student_in.rollno, "rollno")
    name = require_text(student_in.name, "name")
    if parents_in is None:
        parents_in = student_in.parents

    try:
        with unit_of_work(db):
            student = student_crud.create(
                db,
                obj_in={
                    "rollno": rollno,
                    "name": name,
                    "class_name": student_in.class_name or "",
                    "section": student_in.section or "",
                    "dob": student_in.dob or "",
                    "handlingfaculty": student_in.handlingfaculty or "",
                },
            )
            if marks_crud.get(db, rollno=rollno) is None:
                marks_crud.upsert(db, rollno=rollno, graded=ZERO_MARKS)
            if parents_in is not None:
                parents_crud.upsert(db, rollno=rollno, fields=parents_in.model_dump())
            created = StudentRead.model_validate(_student_fields(student))
    except Conflict:
        logger.warning("Rejected duplicate student %s", rollno)
        raise

    logger.info("Created student %s", rollno)
    return created


def update_student_record(
    db: Session, *, rollno: str, student_in: StudentUpdate, parents_in: Optional[ParentsIn] = None
) -> StudentRead:
    if parents_in is None:
        parents_in = student_in.parents
    fields = student_in.model_dump(exclude={"parents"}, exclude_none=True)

    with unit_of_work(db):
        student = student_crud.update_fields(db, rollno=rollno, fields=fields)
        if parents_in is not None:
            parents_crud.upsert(db, rollno=rollno, fields=parents_in.model_dump())
        updated = StudentRead.model_validate(_student_fields(student))

    logger.info("Updated student %s (%s)", rollno, ", ".join(sorted(fields)) or "no fields")
    return updated


def delete_student_record(db: Session, *, rollno: str) -> None:
    with unit_of_work(db):
        student_crud.delete(db, rollno=rollno)
    logger.info("Deleted student %s with marks, parents and messages", rollno)


def upsert_marks_record(db: Session, *, rollno: Any, raw_scores: Optional[Mapping[str, Any]] = None) -> GradedMarks:
    """Grade the raw scores and replace the student's marks row. Returns the stored result."""
    rollno = require_text(rollno, "rollno")
    graded = grade_marks(raw_scores)
    with unit_of_work(db):
        marks_crud.upsert(db, rollno=rollno, graded=graded)
    logger.info("Stored marks for %s: avg=%s grade=%s", rollno, graded.avg, graded.grade)
    return graded


def get_student_record(db: Session, *, rollno: str) -> StudentDetail:
    with unit_of_work(db):
        student = student_crud.require(db, rollno=rollno)
        marks = marks_crud.get(db, rollno=rollno)
        parents = parents_crud.get(db, rollno=rollno)
        return StudentDetail(
            student=StudentRead.model_validate(_student_fields(student)),
            marks=MarksRead.model_validate(marks) if marks else None,
            parents=ParentsRead.model_validate(parents) if parents else None,
        )


def list_student_records(db: Session) -> list[StudentWithMarks]:
    with unit_of_work(db):
        rows = student_crud.list_with_marks(db)
        return [StudentWithMarks.model_validate({**_student_fields(s), **_marks_fields(m)}) for s, m in rows]


def list_marks_overview(db: Session) -> list[MarksOverview]:
    with unit_of_work(db):
        rows = student_crud.list_with_marks(db)
        return [
            MarksOverview.model_validate(
                {
                    "rollno": s.rollno,
                    "name": s.name,
                    "class_name": s.class_name,
                    "section": s.section,
                    **_marks_fields(m),
                }
            )
            for s, m in rows
        ]
