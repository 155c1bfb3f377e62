# /qa_suite/routers/tools_router.py

from fastapi import APIRouter, Depends, Header, HTTPException, status
from typing import List, Optional

from ..core.deps import get_session_id
from ..models import tool_model
from ..services import tool_service, gemini_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


async def _execute(tool_call):
    """Awaits a tool handler and translates its failures into HTTP errors."""
    try:
        return await tool_call
    except ValueError as e:
        # Form validation failed; the upstream API was never called.
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except (gemini_service.MissingAPIKeyError, gemini_service.UpstreamAPIError) as e:
        print(f"ERROR during tool generation: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        print(f"ERROR during tool generation: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An unexpected error occurred.")


@router.post(
    "/test-generator",
    response_model=tool_model.ToolGenerationResponse,
    summary="Generate Unit Tests",
    description="Generates unit tests for frontend components or backend code with the selected test framework."
)
async def generate_tests(
    request: tool_model.TestGeneratorRequest,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    return await _execute(tool_service.generate_tests(db=db, session_id=session_id, request=request))


@router.post(
    "/error-explainer",
    response_model=tool_model.ToolGenerationResponse,
    summary="Explain an Error",
    description="Explains why the code fails, proposes a fix and suggests a test that would have caught it."
)
async def explain_error(
    request: tool_model.ErrorExplainerRequest,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    return await _execute(tool_service.explain_error(db=db, session_id=session_id, request=request))


@router.post(
    "/bug-formatter",
    response_model=tool_model.ToolGenerationResponse,
    summary="Format Messy Feedback",
    description="Turns unstructured feedback into a structured bug report."
)
async def format_bug_report(
    request: tool_model.BugFormatterRequest,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    return await _execute(tool_service.format_bug_report(db=db, session_id=session_id, request=request))


@router.post(
    "/bug-reporter",
    response_model=tool_model.BugReporterResponse,
    summary="Build a Bug Report",
    description="Builds a formatted bug report from the manual reporter form, generating a title when none is given."
)
async def build_bug_report(
    request: tool_model.BugReporterRequest,
    user_agent: Optional[str] = Header(default=None),
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    return await _execute(tool_service.build_bug_report(
        db=db, session_id=session_id, request=request, user_agent=user_agent
    ))


@router.post(
    "/bug-reporter/suggestions",
    response_model=tool_model.BugReporterSuggestionResponse,
    summary="Get an Inline Hint for the Bug Reporter Form"
)
def get_bug_report_suggestion(request: tool_model.BugReporterRequest):
    return tool_model.BugReporterSuggestionResponse(
        suggestion=tool_service.suggest_bug_report_improvement(request)
    )


@router.get(
    "/bug-reports",
    response_model=List[tool_model.BugReportRecord],
    summary="List Saved Bug Reports"
)
def list_bug_reports(
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    return tool_service.list_bug_reports(db=db, session_id=session_id)


@router.get(
    "/examples",
    response_model=tool_model.ToolExamples,
    summary="Get Sample Inputs",
    description="Sample inputs for each form's 'Try Example' action."
)
def get_examples():
    return tool_service.get_examples()
