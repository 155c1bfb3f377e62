# /qa_suite/services/database_helpers/generation_repository_sql.py

from typing import List, Dict, Optional
from sqlalchemy.orm import Session
from qa_suite.db.models.generation_models import Generation

class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_generation_record(self, record: Dict) -> Generation:
        """Creates a new Generation record in the database from a dictionary."""
        new_generation = Generation(**record)
        self.db.add(new_generation)
        self.db.commit()
        self.db.refresh(new_generation)
        return new_generation

    def get_generations_by_session_id(self, session_id: str, limit: Optional[int] = None) -> List[Generation]:
        """Retrieves a session's generation records, most recent first."""
        query = (
            self.db.query(Generation)
            .filter(Generation.session_id == session_id)
            .order_by(Generation.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def delete_generation_record(self, session_id: str, generation_id: str) -> bool:
        """Deletes a single generation record, only if the session owns it."""
        record = (
            self.db.query(Generation)
            .filter(Generation.id == generation_id, Generation.session_id == session_id)
            .first()
        )
        if record:
            self.db.delete(record)
            self.db.commit()
            return True
        return False

    def delete_generations_by_session_id(self, session_id: str) -> int:
        deleted = (
            self.db.query(Generation)
            .filter(Generation.session_id == session_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
