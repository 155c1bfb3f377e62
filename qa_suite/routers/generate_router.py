# /qa_suite/routers/generate_router.py

"""
The raw generation proxy.

Unlike the other routers, errors here are returned as `{"error": ...}`
bodies rather than FastAPI's `{"detail": ...}`.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..models import generate_model
from ..services import gemini_service

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/generate",
    response_model=generate_model.GenerateResponse,
    summary="Generate Text",
    description="Concatenates the prompt and optional input, forwards them to the text-generation API and relays the text.",
    responses={
        400: {"model": generate_model.GenerateError},
        500: {"model": generate_model.GenerateError},
    },
)
async def generate(request: Request):
    try:
        body = await request.json()
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")
    if not isinstance(body, dict):
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")

    try:
        payload = generate_model.GenerateRequest.model_validate(body)
    except ValidationError:
        return _error(status.HTTP_400_BAD_REQUEST, "Prompt and input must be strings")

    if not payload.prompt:
        return _error(status.HTTP_400_BAD_REQUEST, "Prompt is required")

    # Empty input is allowed for prompts that carry everything themselves.
    try:
        text = await gemini_service.generate_ai_response(payload.prompt, payload.input or "")
    except Exception as e:
        print(f"API Error: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "An error occurred")

    return generate_model.GenerateResponse(response=text, result=text)


@router.get(
    "/test",
    response_model=generate_model.ConnectionTestResponse,
    summary="Test the Generation API Connection",
    responses={500: {"model": generate_model.ConnectionTestResponse}},
)
async def check_generation_connection():
    try:
        message = await gemini_service.check_connection()
    except Exception as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e)},
        )
    return generate_model.ConnectionTestResponse(success=True, message=message)
