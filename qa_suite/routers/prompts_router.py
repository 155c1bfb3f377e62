# /qa_suite/routers/prompts_router.py

from fastapi import APIRouter, HTTPException, status
from typing import Optional

from ..models import generate_model, tool_model
from ..services import prompt_builder

router = APIRouter()


@router.get(
    "",
    response_model=generate_model.PromptRegistryResponse,
    summary="List Test Generator Templates",
    description="Returns every supported runner/framework and runner/language key.",
)
def list_templates():
    return prompt_builder.list_supported_templates()


@router.get(
    "/test-generator",
    response_model=generate_model.PromptSelectionResponse,
    summary="Resolve a Test Generator Prompt",
    description="Returns the template the builder selects for a mode and framework selection, and whether it fell back to the default.",
)
def resolve_test_generator_prompt(
    mode: tool_model.TestingMode,
    test_framework: tool_model.TestFramework,
    component_framework: Optional[tool_model.ComponentFramework] = None,
    backend_language: Optional[tool_model.BackendLanguage] = None,
    strict: bool = False,
):
    try:
        selection = prompt_builder.build_test_generator_prompt(
            mode=mode,
            test_framework=test_framework,
            component_framework=component_framework,
            backend_language=backend_language,
            strict=strict,
        )
    except prompt_builder.UnsupportedTemplateError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return generate_model.PromptSelectionResponse(
        requested_key=selection.requested_key,
        template_key=selection.template_key,
        fallback_used=selection.fallback_used,
        prompt=selection.prompt,
    )
