# /qa_suite/models/tool_model.py

# --- Core Imports ---
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from enum import Enum

# --- Enumerations for Tool Settings ---
class FeatureType(str, Enum):
    TEST_GENERATOR = "test-generator"
    ERROR_EXPLAINER = "error-explainer"
    BUG_FORMATTER = "bug-formatter"

class TestingMode(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"

class TestFramework(str, Enum):
    JEST = "jest"
    VITEST = "vitest"
    PYTEST = "pytest"
    GO_TESTING = "go-testing"
    JUNIT = "junit"
    RSPEC = "rspec"
    PHPUNIT = "phpunit"
    MOCHA = "mocha"

class ComponentFramework(str, Enum):
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"

class BackendLanguage(str, Enum):
    PYTHON = "python"
    NODE = "node"
    GO = "go"
    JAVA = "java"
    RUBY = "ruby"
    PHP = "php"

class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

# --- Models for the Test Generator ---
class TestGeneratorRequest(BaseModel):
    input_code: str
    testing_mode: TestingMode = TestingMode.FRONTEND
    test_framework: TestFramework = TestFramework.JEST
    component_framework: Optional[ComponentFramework] = None
    backend_language: Optional[BackendLanguage] = None
    # Reject unsupported runner/framework pairs instead of using the default template.
    strict: bool = False

# --- Models for the Error Explainer ---
class ErrorExplainerRequest(BaseModel):
    code: str
    error_message: str

# --- Models for the Bug Formatter ---
class BugFormatterRequest(BaseModel):
    feedback: str

# --- Models for the Bug Reporter ---
class BugReporterRequest(BaseModel):
    title: Optional[str] = None
    description: str
    steps: List[str] = Field(default_factory=list)
    page_url: Optional[str] = None
    severity: Severity = Severity.MEDIUM
    screenshot_url: Optional[str] = None

class BugReporterSuggestionResponse(BaseModel):
    suggestion: Optional[str] = None

class BugReportRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    steps_to_reproduce: List[str]
    page_url: Optional[str] = None
    severity: Severity
    screenshot_url: Optional[str] = None
    browser: Optional[str] = None
    os: Optional[str] = None
    formatted_report: str

class BugReporterResponse(BaseModel):
    bug_report_id: Optional[str] = None
    title: str
    browser: str
    os: str
    formatted_report: str

# --- Universal Tool Response ---
class ToolGenerationResponse(BaseModel):
    generation_id: Optional[str] = None
    feature_type: FeatureType
    content: str
    generation_time_ms: int
    template_key: Optional[str] = None
    fallback_used: bool = False

# --- Sample Inputs ---
class ToolExamples(BaseModel):
    frontend: dict
    backend: dict
    error_explainer: dict
    bug_formatter: str
