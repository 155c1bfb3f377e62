# /qa_suite/models/session_model.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional

from .tool_model import TestFramework, ComponentFramework, BackendLanguage, TestingMode

class SessionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    session_id: str
    created_at: Optional[datetime] = None
    last_active: Optional[datetime] = None

class UserPreferencesRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    session_id: str
    default_test_framework: str
    default_component_framework: str
    default_backend_language: str
    default_testing_mode: str
    theme: str
    updated_at: Optional[datetime] = None

class UserPreferencesUpdate(BaseModel):
    """Partial update; fields left unset keep their stored values."""
    default_test_framework: Optional[TestFramework] = None
    default_component_framework: Optional[ComponentFramework] = None
    default_backend_language: Optional[BackendLanguage] = None
    default_testing_mode: Optional[TestingMode] = None
    theme: Optional[str] = None
