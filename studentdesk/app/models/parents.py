from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from studentdesk.app.db.base_class import Base


class Parents(Base):
    __tablename__ = "Parents"

    rollno = Column(String, ForeignKey("Student.rollno", ondelete="CASCADE"), primary_key=True)
    parentsname = Column(String, nullable=True)
    phonenumber = Column(String, nullable=True)
    emailid = Column(String, nullable=True)
    address = Column(String, nullable=True)

    student = relationship("Student", back_populates="parents")
