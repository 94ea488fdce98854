"""Messenger log entry between a student and staff."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from studentdesk.app.db.base_class import Base


class Message(Base):
    __tablename__ = "Messenger"

    id = Column(Integer, primary_key=True, autoincrement=True)
    rollno = Column(String, ForeignKey("Student.rollno", ondelete="CASCADE"), nullable=False)
    fromid = Column(String, nullable=False)
    toid = Column(String, nullable=False)
    content = Column(String, nullable=False)
    status = Column(String, nullable=False, default="delivered", server_default="delivered")
    phonenumber = Column(String, nullable=True)
    timestamp = Column(String, nullable=False)

    __table_args__ = (
        Index("ix_messenger_rollno_timestamp", "rollno", "timestamp"),
    )

    student = relationship("Student", back_populates="messages")
