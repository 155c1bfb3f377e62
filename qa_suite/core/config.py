# /qa_suite/core/config.py

"""
Central runtime configuration for the QA Suite backend.

Every value is read from the environment (a local `.env` file is loaded
first) and falls back to a sensible default for local development. The
Gemini API key is not read here; it is looked up at call time
by `gemini_service`, so a missing key surfaces as a per-request error rather
than an import-time crash.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./qa_suite.db")

# --- Text Generation ---
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

# --- Screenshot Storage ---
SCREENSHOT_UPLOADS_DIR = os.getenv("SCREENSHOT_UPLOADS_DIR", "screenshot_uploads")
SCREENSHOT_URL_PREFIX = "/uploads"
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")
MAX_SCREENSHOT_BYTES = int(os.getenv("MAX_SCREENSHOT_BYTES", str(5 * 1024 * 1024)))

# --- HTTP ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
SESSION_HEADER = "X-Session-Id"
HISTORY_DEFAULT_LIMIT = int(os.getenv("HISTORY_DEFAULT_LIMIT", "10"))
