"""Marks model. avg and grade are written only from a GradedMarks value."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from studentdesk.app.db.base_class import Base


class StudentMarks(Base):
    __tablename__ = "StudentMarks"

    rollno = Column(String, ForeignKey("Student.rollno", ondelete="CASCADE"), primary_key=True)
    tamil = Column(Integer, nullable=False, default=0, server_default="0")
    english = Column(Integer, nullable=False, default=0, server_default="0")
    maths = Column(Integer, nullable=False, default=0, server_default="0")
    science = Column(Integer, nullable=False, default=0, server_default="0")
    social = Column(Integer, nullable=False, default=0, server_default="0")
    avg = Column(Float, nullable=False, default=0.0, server_default="0")
    grade = Column(String, nullable=False, default="C", server_default="C")

    student = relationship("Student", back_populates="marks")
