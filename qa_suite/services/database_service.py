# /qa_suite/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from qa_suite.db.database import get_db

# --- Repository Imports ---
from .database_helpers.session_repository_sql import SessionRepositorySQL
from .database_helpers.generation_repository_sql import GenerationRepositorySQL
from .database_helpers.bug_report_repository_sql import BugReportRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over the SQL repositories. Every method that reads or writes
        session-owned rows takes the session_id explicitly.
        """
        self.db = db_session
        self.session_repo = SessionRepositorySQL(db_session)
        self.generation_repo = GenerationRepositorySQL(db_session)
        self.bug_report_repo = BugReportRepositorySQL(db_session)

    def rollback(self): self.db.rollback()

    # --- SESSION & PREFERENCES METHODS (DELEGATED) ---
    def get_session(self, session_id: str): return self.session_repo.get_session(session_id)
    def upsert_session(self, session_id: str): return self.session_repo.upsert_session(session_id)
    def get_preferences(self, session_id: str): return self.session_repo.get_preferences(session_id)
    def upsert_preferences(self, session_id: str, updates: Dict): return self.session_repo.upsert_preferences(session_id, updates)

    # --- GENERATION HISTORY METHODS (DELEGATED) ---
    def add_generation_record(self, history_record: Dict): return self.generation_repo.add_generation_record(history_record)
    def get_generations(self, session_id: str, limit: Optional[int] = None) -> List:
        return self.generation_repo.get_generations_by_session_id(session_id, limit=limit)
    def delete_generation_record(self, session_id: str, generation_id: str) -> bool:
        return self.generation_repo.delete_generation_record(session_id, generation_id)
    def delete_all_generations(self, session_id: str) -> int:
        return self.generation_repo.delete_generations_by_session_id(session_id)

    # --- BUG REPORT METHODS (DELEGATED) ---
    def add_bug_report(self, report_record: Dict): return self.bug_report_repo.add_bug_report(report_record)
    def get_bug_reports(self, session_id: str) -> List: return self.bug_report_repo.get_bug_reports_by_session_id(session_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's DB session."""
    yield DatabaseService(db_session=db)
