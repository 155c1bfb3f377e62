# /qa_suite/db/models/bug_report_models.py

from sqlalchemy import Column, String, Text, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..base_class import Base

class BugReport(Base):
    __tablename__ = "bug_reports"
    id = Column(String, primary_key=True, index=True)
    session_id = Column(String(128), ForeignKey("sessions.session_id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    steps_to_reproduce = Column(JSON, nullable=False)
    page_url = Column(String, nullable=True)
    severity = Column(String, nullable=False, default="medium")
    screenshot_url = Column(String, nullable=True)
    browser = Column(String, nullable=True)
    os = Column(String, nullable=True)
    formatted_report = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    session = relationship("ClientSession", back_populates="bug_reports")
