# /qa_suite/services/database_helpers/session_repository_sql.py

from datetime import datetime, timezone
from typing import Dict, Optional
from sqlalchemy.orm import Session
from qa_suite.db.models.session_models import ClientSession, UserPreferences

class SessionRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Session Methods ---
    def get_session(self, session_id: str) -> Optional[ClientSession]:
        return self.db.query(ClientSession).filter(ClientSession.session_id == session_id).first()

    def upsert_session(self, session_id: str) -> ClientSession:
        """Creates the session row if needed and stamps `last_active`."""
        now = datetime.now(timezone.utc)
        session = self.get_session(session_id)
        if session is None:
            session = ClientSession(session_id=session_id, created_at=now, last_active=now)
            self.db.add(session)
        else:
            session.last_active = now
        self.db.commit()
        self.db.refresh(session)
        return session

    # --- Preferences Methods ---
    def get_preferences(self, session_id: str) -> Optional[UserPreferences]:
        return self.db.query(UserPreferences).filter(UserPreferences.session_id == session_id).first()

    def upsert_preferences(self, session_id: str, updates: Dict) -> UserPreferences:
        """Inserts or partially updates the single preferences row of a session."""
        preferences = self.get_preferences(session_id)
        if preferences is None:
            preferences = UserPreferences(session_id=session_id, **updates)
            self.db.add(preferences)
        else:
            for key, value in updates.items():
                setattr(preferences, key, value)
        preferences.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(preferences)
        return preferences
