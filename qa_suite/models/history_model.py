# /qa_suite/models/history_model.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from .tool_model import FeatureType

class GenerationRecord(BaseModel):
    """
    Defines the data contract for a single generation history record
    when it is retrieved from the database. All fields use snake_case.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    session_id: str
    feature_type: FeatureType
    input_code: str
    output_result: str
    testing_mode: Optional[str] = None
    test_framework: Optional[str] = None
    component_framework: Optional[str] = None
    backend_language: Optional[str] = None
    input_length: int
    output_length: int
    generation_time_ms: int
    created_at: Optional[datetime] = None

class HistoryResponse(BaseModel):
    """
    Defines the data contract for the GET /api/history response.
    """
    results: List[GenerationRecord]
    total: int

class GenerationCreate(BaseModel):
    """
    The payload a client sends to persist a finished generation.
    Lengths are optional; the history service derives them from the texts
    when they are omitted.
    """
    feature_type: FeatureType
    input_code: str
    output_result: str
    testing_mode: Optional[str] = None
    test_framework: Optional[str] = None
    component_framework: Optional[str] = None
    backend_language: Optional[str] = None
    input_length: Optional[int] = None
    output_length: Optional[int] = None
    generation_time_ms: int = 0

class ClearHistoryResponse(BaseModel):
    deleted: int
