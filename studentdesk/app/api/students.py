"""Student endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from studentdesk.app.db.session import get_db
from studentdesk.app.schemas.student import OkResponse, StudentCreate, StudentDetail, StudentUpdate, StudentWithMarks
from studentdesk.app.services.records import (
    create_student_record,
    delete_student_record,
    get_student_record,
    list_student_records,
    update_student_record,
)

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("", response_model=list[StudentWithMarks])
async def list_students(db: Session = Depends(get_db)):
    return list_student_records(db)


@router.get("/{rollno}", response_model=StudentDetail)
async def get_student(rollno: str, db: Session = Depends(get_db)):
    return get_student_record(db, rollno=rollno)


@router.post("", response_model=OkResponse, status_code=status.HTTP_201_CREATED)
async def create_student(student_in: StudentCreate, db: Session = Depends(get_db)):
    create_student_record(db, student_in=student_in)
    return OkResponse()


@router.put("/{rollno}", response_model=OkResponse)
async def update_student(rollno: str, student_in: StudentUpdate, db: Session = Depends(get_db)):
    update_student_record(db, rollno=rollno, student_in=student_in)
    return OkResponse()


@router.delete("/{rollno}", response_model=OkResponse)
async def delete_student(rollno: str, db: Session = Depends(get_db)):
    delete_student_record(db, rollno=rollno)
    return OkResponse()
