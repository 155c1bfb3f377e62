# /qa_suite/services/gemini_service.py

import os
import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

# --- Local Imports ---
from ..core.config import GEMINI_API_KEY_ENV, GEMINI_MODEL
from .prompt_library import CONNECTION_TEST_PROMPT


class MissingAPIKeyError(RuntimeError):
    """The generation API credential is absent from the environment."""


class UpstreamAPIError(RuntimeError):
    """The generation API rejected the request or returned nothing usable."""


# --- CONFIGURATION ---

def _configure_client() -> None:
    # Read on every call; a missing key fails the request, not the process.
    api_key = os.getenv(GEMINI_API_KEY_ENV)
    if not api_key:
        raise MissingAPIKeyError(f"{GEMINI_API_KEY_ENV} is not configured")
    genai.configure(api_key=api_key)


def build_full_prompt(system_prompt: str, user_input: str) -> str:
    return f"{system_prompt}\n\nUser Input:\n{user_input}"


def _first_candidate_text(response) -> str:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        raise UpstreamAPIError("API request failed: the model returned no candidates.")
    parts = candidates[0].content.parts
    if not parts:
        raise UpstreamAPIError("API request failed: the first candidate has no text.")
    return parts[0].text


# --- CORE GENERATIVE FUNCTIONS ---

async def generate_ai_response(system_prompt: str, user_input: str = "") -> str:
    """
    Sends one generateContent request made of the system prompt and the user's
    input, and returns the text of the first candidate. No retries.
    """
    _configure_client()
    full_prompt = build_full_prompt(system_prompt, user_input)
    try:
        model = genai.GenerativeModel(GEMINI_MODEL)
        response = await model.generate_content_async(full_prompt)
    except google_exceptions.GoogleAPICallError as e:
        print(f"ERROR in generate_ai_response with Gemini API: {e}")
        raise UpstreamAPIError(f"API request failed: {e.message}") from e
    except google_exceptions.GoogleAPIError as e:
        print(f"ERROR in generate_ai_response with Gemini API: {e}")
        raise UpstreamAPIError(f"API request failed: {e}") from e
    return _first_candidate_text(response)


async def check_connection() -> str:
    """Round-trips a fixed greeting prompt to confirm the key and model work."""
    _configure_client()
    try:
        model = genai.GenerativeModel(GEMINI_MODEL)
        response = await model.generate_content_async(CONNECTION_TEST_PROMPT)
    except google_exceptions.GoogleAPIError as e:
        print(f"ERROR in check_connection with Gemini API: {e}")
        raise UpstreamAPIError(f"API request failed: {e}") from e
    return _first_candidate_text(response)
