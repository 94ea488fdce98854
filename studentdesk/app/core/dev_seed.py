import os

from sqlalchemy.orm import Session

from studentdesk.app.core.logging import get_logger
from studentdesk.app.crud.crud_student import student_crud
from studentdesk.app.schemas.parents import ParentsIn
from studentdesk.app.schemas.student import StudentCreate
from studentdesk.app.services.records import create_student_record, upsert_marks_record

logger = get_logger("seed")

SAMPLE_STUDENTS = [
    {
        "student": {
            "rollno": "S001",
            "name": "Arun Kumar",
            "class": "10",
            "section": "A",
            "DOB": "2010-05-12",
            "handlingfaculty": "Mrs. Lakshmi",
        },
        "marks": {"tamil": 85, "english": 92, "maths": 88, "science": 79, "social": 90},
        "parents": {
            "parentsname": "Kumar Family",
            "phonenumber": "9876543210",
            "emailid": "kumar.parent@example.com",
            "address": "12 Gandhi St, Chennai",
        },
    },
    {
        "student": {
            "rollno": "S002",
            "name": "Priya Sharma",
            "class": "10",
            "section": "B",
            "DOB": "2010-08-20",
            "handlingfaculty": "Mr. Rajesh",
        },
        "marks": {"tamil": 95, "english": 91, "maths": 93, "science": 89, "social": 94},
        "parents": {
            "parentsname": "Sharma Family",
            "phonenumber": "9876501234",
            "emailid": "sharma.parent@example.com",
            "address": "34 Anna Nagar, Chennai",
        },
    },
]


def ensure_sample_students(db: Session, force: bool = False) -> bool:
    """
    Insert the sample students with marks and parents when the store is empty.
    Skips execution when running under pytest unless forced.
    """
    if os.getenv("PYTEST_CURRENT_TEST") and not force:
        return False
    if student_crud.count(db) > 0:
        return False

    for sample in SAMPLE_STUDENTS:
        student_in = StudentCreate.model_validate(sample["student"])
        create_student_record(db, student_in=student_in, parents_in=ParentsIn(**sample["parents"]))
        upsert_marks_record(db, rollno=student_in.rollno, raw_scores=sample["marks"])
    logger.info("Seeded %d sample students", len(SAMPLE_STUDENTS))
    return True
