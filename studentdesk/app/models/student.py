"""Student model, the aggregate root for marks, parents and messages."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from studentdesk.app.db.base_class import Base


class Student(Base):
    __tablename__ = "Student"

    rollno = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    class_name = Column("class", String, nullable=True)
    section = Column(String, nullable=True)
    dob = Column("DOB", String, nullable=True)
    handlingfaculty = Column(String, nullable=True)

    # ON DELETE CASCADE removes dependents; the ORM cascade only covers rows already loaded.
    marks = relationship(
        "StudentMarks", back_populates="student", uselist=False, cascade="all", passive_deletes=True
    )
    parents = relationship(
        "Parents", back_populates="student", uselist=False, cascade="all", passive_deletes=True
    )
    messages = relationship(
        "Message",
        back_populates="student",
        cascade="all",
        passive_deletes=True,
        order_by="Message.id",
    )
