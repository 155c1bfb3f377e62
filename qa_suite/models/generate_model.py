# /qa_suite/models/generate_model.py

from pydantic import BaseModel
from typing import Optional, List

class GenerateRequest(BaseModel):
    prompt: Optional[str] = None
    input: Optional[str] = None

class GenerateResponse(BaseModel):
    response: str
    # Duplicate of `response` kept for older clients.
    result: str

class GenerateError(BaseModel):
    error: str

class ConnectionTestResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None

class PromptSelectionResponse(BaseModel):
    requested_key: str
    template_key: str
    fallback_used: bool
    prompt: str

class PromptRegistryResponse(BaseModel):
    frontend: List[str]
    backend: List[str]

class ScreenshotUploadResponse(BaseModel):
    filename: str
    url: str
