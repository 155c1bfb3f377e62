# /qa_suite/db/models/session_models.py

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..base_class import Base

class ClientSession(Base):
    __tablename__ = "sessions" # Override automatic pluralization
    session_id = Column(String(128), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_active = Column(DateTime(timezone=True), server_default=func.now())

    preferences = relationship("UserPreferences", back_populates="session", uselist=False, cascade="all, delete-orphan")
    generations = relationship("Generation", back_populates="session", cascade="all, delete-orphan")
    bug_reports = relationship("BugReport", back_populates="session", cascade="all, delete-orphan")

class UserPreferences(Base):
    __tablename__ = "user_preferences"
    session_id = Column(String(128), ForeignKey("sessions.session_id"), primary_key=True)
    default_test_framework = Column(String, nullable=False, default="jest")
    default_component_framework = Column(String, nullable=False, default="react")
    default_backend_language = Column(String, nullable=False, default="python")
    default_testing_mode = Column(String, nullable=False, default="frontend")
    theme = Column(String, nullable=False, default="system")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    session = relationship("ClientSession", back_populates="preferences")
