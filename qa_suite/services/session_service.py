# /qa_suite/services/session_service.py

"""
Session identity and per-session preferences.

A session is an opaque token generated by the browser and sent on every
request. There is no authentication behind it: whoever presents the token
owns the rows stored under it.
"""

from typing import Optional

from .database_service import DatabaseService
from ..models.session_model import SessionRecord, UserPreferencesRecord, UserPreferencesUpdate

MAX_SESSION_ID_LENGTH = 128

DEFAULT_PREFERENCES = {
    "default_test_framework": "jest",
    "default_component_framework": "react",
    "default_backend_language": "python",
    "default_testing_mode": "frontend",
    "theme": "system",
}


def validate_session_id(session_id: Optional[str]) -> str:
    cleaned = (session_id or "").strip()
    if not cleaned:
        raise ValueError("A session identifier is required.")
    if len(cleaned) > MAX_SESSION_ID_LENGTH:
        raise ValueError(f"Session identifier must be at most {MAX_SESSION_ID_LENGTH} characters.")
    return cleaned


def init_session(db: DatabaseService, session_id: str) -> SessionRecord:
    """Creates the session on first sight and refreshes `last_active` afterwards."""
    return SessionRecord.model_validate(db.upsert_session(session_id))


def get_preferences(db: DatabaseService, session_id: str) -> Optional[UserPreferencesRecord]:
    preferences = db.get_preferences(session_id)
    if preferences is None:
        return None
    return UserPreferencesRecord.model_validate(preferences)


def save_preferences(
    db: DatabaseService,
    session_id: str,
    preferences_update: UserPreferencesUpdate
) -> UserPreferencesRecord:
    """
    Upserts the session's preferences. Only the fields present in the update
    change; a first save fills the remaining fields with the defaults.
    """
    updates = preferences_update.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    if not updates:
        raise ValueError("No update data provided.")

    db.upsert_session(session_id)
    if db.get_preferences(session_id) is None:
        updates = {**DEFAULT_PREFERENCES, **updates}
    return UserPreferencesRecord.model_validate(db.upsert_preferences(session_id, updates))
