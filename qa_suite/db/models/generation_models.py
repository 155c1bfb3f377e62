# /qa_suite/db/models/generation_models.py

from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..base_class import Base

class Generation(Base):
    id = Column(String, primary_key=True, index=True)
    session_id = Column(String(128), ForeignKey("sessions.session_id"), index=True, nullable=False)
    feature_type = Column(String, index=True, nullable=False)
    input_code = Column(Text, nullable=False)
    output_result = Column(Text, nullable=False)
    testing_mode = Column(String, nullable=True)
    test_framework = Column(String, nullable=True)
    component_framework = Column(String, nullable=True)
    backend_language = Column(String, nullable=True)
    input_length = Column(Integer, nullable=False, default=0)
    output_length = Column(Integer, nullable=False, default=0)
    generation_time_ms = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    session = relationship("ClientSession", back_populates="generations")
