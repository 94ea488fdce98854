"""Marks endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studentdesk.app.db.session import get_db
from studentdesk.app.schemas.marks import MarksOverview, MarksUpsert, MarksUpsertResponse
from studentdesk.app.services.records import list_marks_overview, upsert_marks_record

router = APIRouter(prefix="/api/marks", tags=["marks"])


@router.get("", response_model=list[MarksOverview])
async def list_marks(db: Session = Depends(get_db)):
    return list_marks_overview(db)


@router.post("", response_model=MarksUpsertResponse)
async def upsert_marks(marks_in: MarksUpsert, db: Session = Depends(get_db)):
    graded = upsert_marks_record(db, rollno=marks_in.rollno, raw_scores=marks_in.model_dump(exclude={"rollno"}))
    return MarksUpsertResponse(avg=graded.avg, grade=graded.grade)
