# /qa_suite/services/tool_service.py

"""
Server-side orchestration for the suite's task-specific forms.

Each handler follows the same path: validate the form (a ValueError here
means no upstream call is made), build the prompt, time a single upstream
call, then try to persist the result. Persistence failures are logged and
swallowed; the generated output is returned to the user regardless.
"""

import re
import time
import uuid
from datetime import datetime, timezone
from typing import Optional, Tuple

from ..models.tool_model import (
    FeatureType,
    TestingMode,
    TestGeneratorRequest,
    ErrorExplainerRequest,
    BugFormatterRequest,
    BugReporterRequest,
    BugReporterResponse,
    BugReportRecord,
    ToolGenerationResponse,
    ToolExamples,
)
from ..models.history_model import GenerationCreate
from . import gemini_service, history_service, prompt_builder, prompt_library, example_library
from .database_service import DatabaseService

TITLE_FALLBACK_LENGTH = 50


# --- Shared Helpers ---

async def _timed_generation(prompt: str, user_input: str) -> Tuple[str, int]:
    started = time.perf_counter()
    content = await gemini_service.generate_ai_response(prompt, user_input)
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    return content, elapsed_ms


def _persist_generation(db: DatabaseService, session_id: str, generation: GenerationCreate) -> Optional[str]:
    try:
        return history_service.save_generation(db=db, session_id=session_id, generation=generation).id
    except Exception as e:
        print(f"ERROR saving {generation.feature_type.value} generation for session {session_id}: {e}")
        db.rollback()
        return None


# --- Tool-Specific Logic Functions ---

async def generate_tests(db: DatabaseService, session_id: str, request: TestGeneratorRequest) -> ToolGenerationResponse:
    if not request.input_code.strip():
        raise ValueError("Please enter some code to generate tests for")

    selection = prompt_builder.build_test_generator_prompt(
        mode=request.testing_mode,
        test_framework=request.test_framework,
        component_framework=request.component_framework,
        backend_language=request.backend_language,
        strict=request.strict,
    )
    content, elapsed_ms = await _timed_generation(selection.prompt, request.input_code)

    is_backend = request.testing_mode == TestingMode.BACKEND
    generation_id = _persist_generation(db, session_id, GenerationCreate(
        feature_type=FeatureType.TEST_GENERATOR,
        input_code=request.input_code,
        output_result=content,
        testing_mode=request.testing_mode.value,
        test_framework=request.test_framework.value,
        component_framework=None if is_backend or not request.component_framework else request.component_framework.value,
        backend_language=request.backend_language.value if is_backend and request.backend_language else None,
        generation_time_ms=elapsed_ms,
    ))
    return ToolGenerationResponse(
        generation_id=generation_id,
        feature_type=FeatureType.TEST_GENERATOR,
        content=content,
        generation_time_ms=elapsed_ms,
        template_key=selection.template_key,
        fallback_used=selection.fallback_used,
    )


def build_error_explainer_input(code: str, error_message: str) -> str:
    return f"CODE:\n{code}\n\nERROR:\n{error_message}"


async def explain_error(db: DatabaseService, session_id: str, request: ErrorExplainerRequest) -> ToolGenerationResponse:
    if not request.code.strip() or not request.error_message.strip():
        raise ValueError("Please provide both the broken code and the error message")

    combined_input = build_error_explainer_input(request.code, request.error_message)
    content, elapsed_ms = await _timed_generation(prompt_library.ERROR_EXPLAINER_PROMPT, combined_input)

    generation_id = _persist_generation(db, session_id, GenerationCreate(
        feature_type=FeatureType.ERROR_EXPLAINER,
        input_code=combined_input,
        output_result=content,
        generation_time_ms=elapsed_ms,
    ))
    return ToolGenerationResponse(
        generation_id=generation_id,
        feature_type=FeatureType.ERROR_EXPLAINER,
        content=content,
        generation_time_ms=elapsed_ms,
    )


async def format_bug_report(db: DatabaseService, session_id: str, request: BugFormatterRequest) -> ToolGenerationResponse:
    if not request.feedback.strip():
        raise ValueError("Please enter some feedback to format")

    content, elapsed_ms = await _timed_generation(prompt_library.BUG_FORMATTER_PROMPT, request.feedback)

    generation_id = _persist_generation(db, session_id, GenerationCreate(
        feature_type=FeatureType.BUG_FORMATTER,
        input_code=request.feedback,
        output_result=content,
        generation_time_ms=elapsed_ms,
    ))
    return ToolGenerationResponse(
        generation_id=generation_id,
        feature_type=FeatureType.BUG_FORMATTER,
        content=content,
        generation_time_ms=elapsed_ms,
    )


# --- Bug Reporter ---

def detect_browser(user_agent: Optional[str]) -> str:
    ua = user_agent or ""
    # Edge and Chrome both advertise "Chrome", and Chrome advertises "Safari".
    if "Edg" in ua:
        return "Edge"
    if "Firefox" in ua:
        return "Firefox"
    if "Chrome" in ua:
        return "Chrome"
    if "Safari" in ua:
        return "Safari"
    return "Unknown"


def detect_os(user_agent: Optional[str]) -> str:
    ua = user_agent or ""
    # Android advertises "Linux"; iOS advertises "Mac OS X".
    if "Android" in ua:
        return "Android"
    if "iPhone" in ua or "iPad" in ua or "iOS" in ua:
        return "iOS"
    if "Win" in ua:
        return "Windows"
    if "Mac" in ua:
        return "macOS"
    if "Linux" in ua:
        return "Linux"
    return "Unknown"


def _fallback_title(description: str) -> str:
    return description[:TITLE_FALLBACK_LENGTH] + "..."


async def _resolve_title(title: Optional[str], description: str) -> str:
    if title and title.strip():
        return title.strip()
    try:
        generated = await gemini_service.generate_ai_response(prompt_library.BUG_TITLE_PROMPT, description)
        generated = re.sub(r"^[\"']|[\"']$", "", generated.strip())
    except (gemini_service.MissingAPIKeyError, gemini_service.UpstreamAPIError) as e:
        print(f"ERROR generating bug title, using description instead: {e}")
        generated = ""
    return generated or _fallback_title(description)


def build_bug_report_prompt(
    title: str,
    request: BugReporterRequest,
    steps: list,
    browser: str,
    os_name: str
) -> str:
    steps_formatted = "\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1))
    return prompt_library.BUG_REPORT_PROMPT_TEMPLATE.format(
        title=title,
        description=request.description,
        steps_formatted=steps_formatted,
        page_url_line=f"URL: {request.page_url}" if request.page_url else "",
        severity=request.severity.value,
        browser=browser,
        os=os_name,
        screenshot_line="Screenshot: Attached" if request.screenshot_url else "",
    )


async def build_bug_report(
    db: DatabaseService,
    session_id: str,
    request: BugReporterRequest,
    user_agent: Optional[str] = None
) -> BugReporterResponse:
    if not request.description.strip():
        raise ValueError("Please enter a description")
    steps = [step.strip() for step in request.steps if step.strip()]
    if not steps:
        raise ValueError("Please add at least one step to reproduce")

    browser = detect_browser(user_agent)
    os_name = detect_os(user_agent)
    title = await _resolve_title(request.title, request.description)

    report_prompt = build_bug_report_prompt(title, request, steps, browser, os_name)
    formatted_report = await gemini_service.generate_ai_response(report_prompt, "")

    bug_report_id = None
    try:
        db.upsert_session(session_id)
        saved = db.add_bug_report({
            "id": f"bug_{uuid.uuid4().hex[:16]}",
            "session_id": session_id,
            "title": title,
            "description": request.description,
            "steps_to_reproduce": steps,
            "page_url": request.page_url or None,
            "severity": request.severity.value,
            "screenshot_url": request.screenshot_url or None,
            "browser": browser,
            "os": os_name,
            "formatted_report": formatted_report,
            "created_at": datetime.now(timezone.utc),
        })
        bug_report_id = saved.id
    except Exception as e:
        print(f"ERROR saving bug report for session {session_id}: {e}")
        db.rollback()

    return BugReporterResponse(
        bug_report_id=bug_report_id,
        title=title,
        browser=browser,
        os=os_name,
        formatted_report=formatted_report,
    )


def suggest_bug_report_improvement(request: BugReporterRequest) -> Optional[str]:
    """Inline hint shown while the user fills in the bug reporter form."""
    if not request.description.strip():
        return None
    if len(request.description) < 20:
        return "Try adding more details to your description"
    if not any(step.strip() for step in request.steps):
        return "Add steps to reproduce to make this report more actionable"
    if not (request.title or "").strip():
        return "AI can generate a title based on your description"
    return None


def list_bug_reports(db: DatabaseService, session_id: str) -> list:
    return [BugReportRecord.model_validate(r) for r in db.get_bug_reports(session_id)]


def get_examples() -> ToolExamples:
    return ToolExamples(
        frontend=example_library.FRONTEND_EXAMPLES,
        backend=example_library.BACKEND_EXAMPLES,
        error_explainer=example_library.ERROR_EXPLAINER_EXAMPLE,
        bug_formatter=example_library.BUG_FORMATTER_EXAMPLE,
    )
