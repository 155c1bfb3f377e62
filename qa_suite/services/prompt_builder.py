# /qa_suite/services/prompt_builder.py

"""
Selects the test-generator instruction string for a user's current
mode / test-runner / framework-or-language selection.

The lookup key is `<test_framework>-<component_framework>` in frontend mode
and `<test_framework>-<backend_language>` in backend mode. When the key is
not in the registry the mode's default template is returned
(`jest-react` or `pytest-python`); with no framework or language selected
at all, either mode falls back to `jest-react`. The fallback is reported to the
caller through `PromptSelection.fallback_used` and logged, so an unsupported
combination never silently turns into tests for the wrong stack. Callers
that would rather fail pass `strict=True`.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.tool_model import TestingMode, TestFramework, ComponentFramework, BackendLanguage
from .prompt_library import (
    TEST_GENERATOR_PROMPTS,
    BACKEND_TEST_PROMPTS,
    FRONTEND_DEFAULT_KEY,
    BACKEND_DEFAULT_KEY,
)


class UnsupportedTemplateError(ValueError):
    """Raised in strict mode when no template matches the requested combination."""


@dataclass(frozen=True)
class PromptSelection:
    requested_key: str
    template_key: str
    prompt: str
    fallback_used: bool


def _value(option) -> Optional[str]:
    # Accept both enum members and their raw string values.
    if option is None:
        return None
    return option.value if hasattr(option, "value") else str(option)


def build_test_generator_prompt(
    mode: TestingMode,
    test_framework: TestFramework,
    component_framework: Optional[ComponentFramework] = None,
    backend_language: Optional[BackendLanguage] = None,
    strict: bool = False,
) -> PromptSelection:
    mode = TestingMode(_value(mode))
    runner = _value(test_framework)

    if mode == TestingMode.BACKEND:
        table, default_key, target = BACKEND_TEST_PROMPTS, BACKEND_DEFAULT_KEY, _value(backend_language)
    else:
        table, default_key, target = TEST_GENERATOR_PROMPTS, FRONTEND_DEFAULT_KEY, _value(component_framework)

    requested_key = f"{runner}-{target}" if target else runner
    if target and requested_key in table:
        return PromptSelection(requested_key, requested_key, table[requested_key], False)

    if strict:
        raise UnsupportedTemplateError(
            f"No {mode.value} test template for '{requested_key}'. "
            f"Supported combinations: {', '.join(sorted(table))}."
        )

    if not target:
        # No framework or language selected: both modes end on the frontend default.
        table, default_key = TEST_GENERATOR_PROMPTS, FRONTEND_DEFAULT_KEY

    print(f"WARNING: No {mode.value} test template for '{requested_key}'. Falling back to '{default_key}'.")
    return PromptSelection(requested_key, default_key, table[default_key], True)


def list_supported_templates() -> Dict[str, List[str]]:
    """Returns the registry keys grouped by testing mode."""
    return {
        TestingMode.FRONTEND.value: sorted(TEST_GENERATOR_PROMPTS),
        TestingMode.BACKEND.value: sorted(BACKEND_TEST_PROMPTS),
    }
