# /tests/test_prompt_builder.py

import pytest

from qa_suite.models import tool_model
from qa_suite.services import prompt_builder
from qa_suite.services.prompt_library import TEST_GENERATOR_PROMPTS, BACKEND_TEST_PROMPTS


@pytest.mark.parametrize("key", sorted(TEST_GENERATOR_PROMPTS))
def test_every_frontend_pair_returns_its_exact_template(key):
    runner, framework = key.split("-", 1)
    selection = prompt_builder.build_test_generator_prompt(
        mode=tool_model.TestingMode.FRONTEND,
        test_framework=tool_model.TestFramework(runner),
        component_framework=tool_model.ComponentFramework(framework),
    )
    assert selection.template_key == key
    assert selection.prompt == TEST_GENERATOR_PROMPTS[key]
    assert selection.fallback_used is False


@pytest.mark.parametrize("key", sorted(BACKEND_TEST_PROMPTS))
def test_every_backend_pair_returns_its_exact_template(key):
    # Runner names may contain a dash ("go-testing"); the language never does.
    runner, language = key.rsplit("-", 1)
    selection = prompt_builder.build_test_generator_prompt(
        mode=tool_model.TestingMode.BACKEND,
        test_framework=tool_model.TestFramework(runner),
        backend_language=tool_model.BackendLanguage(language),
    )
    assert selection.template_key == key
    assert selection.prompt == BACKEND_TEST_PROMPTS[key]
    assert selection.fallback_used is False


def test_unsupported_frontend_pair_falls_back_to_jest_react():
    selection = prompt_builder.build_test_generator_prompt(
        mode="frontend", test_framework="pytest", component_framework="svelte"
    )
    assert selection.requested_key == "pytest-svelte"
    assert selection.template_key == "jest-react"
    assert selection.prompt == TEST_GENERATOR_PROMPTS["jest-react"]
    assert selection.fallback_used is True


def test_unsupported_backend_pair_falls_back_to_pytest_python():
    selection = prompt_builder.build_test_generator_prompt(
        mode="backend", test_framework="rspec", backend_language="go"
    )
    assert selection.template_key == "pytest-python"
    assert selection.prompt == BACKEND_TEST_PROMPTS["pytest-python"]
    assert selection.fallback_used is True


def test_missing_framework_or_language_falls_back_to_jest_react():
    frontend = prompt_builder.build_test_generator_prompt(mode="frontend", test_framework="vitest")
    backend = prompt_builder.build_test_generator_prompt(mode="backend", test_framework="pytest")
    assert frontend.template_key == "jest-react" and frontend.fallback_used
    assert backend.template_key == "jest-react" and backend.fallback_used
    assert backend.requested_key == "pytest"
    assert backend.prompt == TEST_GENERATOR_PROMPTS["jest-react"]


def test_strict_mode_rejects_backend_without_language():
    with pytest.raises(prompt_builder.UnsupportedTemplateError):
        prompt_builder.build_test_generator_prompt(mode="backend", test_framework="pytest", strict=True)


def test_backend_mode_ignores_component_framework():
    selection = prompt_builder.build_test_generator_prompt(
        mode="backend", test_framework="jest", component_framework="react", backend_language="node"
    )
    assert selection.template_key == "jest-node"


def test_strict_mode_rejects_unsupported_pair():
    with pytest.raises(prompt_builder.UnsupportedTemplateError) as excinfo:
        prompt_builder.build_test_generator_prompt(
            mode="frontend", test_framework="mocha", component_framework="vue", strict=True
        )
    assert "mocha-vue" in str(excinfo.value)


def test_fallback_is_logged(capsys):
    prompt_builder.build_test_generator_prompt(mode="frontend", test_framework="junit", component_framework="react")
    assert "Falling back to 'jest-react'" in capsys.readouterr().out


def test_list_supported_templates_groups_by_mode():
    templates = prompt_builder.list_supported_templates()
    assert "vitest-svelte" in templates["frontend"]
    assert "go-testing-go" in templates["backend"]
    assert set(templates) == {"frontend", "backend"}


def test_registry_endpoint_and_lookup_endpoint(client):
    listing = client.get("/api/prompts")
    assert listing.status_code == 200
    assert "jest-react" in listing.json()["frontend"]

    lookup = client.get(
        "/api/prompts/test-generator",
        params={"mode": "frontend", "test_framework": "vitest", "component_framework": "vue"},
    )
    assert lookup.status_code == 200
    body = lookup.json()
    assert body["template_key"] == "vitest-vue"
    assert body["fallback_used"] is False

    strict = client.get(
        "/api/prompts/test-generator",
        params={"mode": "frontend", "test_framework": "phpunit", "component_framework": "react", "strict": "true"},
    )
    assert strict.status_code == 422
