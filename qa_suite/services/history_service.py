# /qa_suite/services/history_service.py

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from .database_service import DatabaseService
from ..core.config import HISTORY_DEFAULT_LIMIT
from ..models.history_model import GenerationRecord, GenerationCreate, HistoryResponse


def _to_records(record_objs) -> List[GenerationRecord]:
    processed_records = []
    for record_obj in record_objs:
        try:
            processed_records.append(GenerationRecord.model_validate(record_obj))
        except Exception as e:
            print(f"Skipping corrupted history record: {getattr(record_obj, 'id', 'N/A')}. Error: {e}")
            continue
    return processed_records


# --- PUBLIC SERVICE FUNCTIONS ---

def save_generation(
    db: DatabaseService,
    session_id: str,
    generation: GenerationCreate
) -> GenerationRecord:
    """
    Persists one finished generation for the session and returns it as a
    validated Pydantic model. The session row is upserted first so the
    record never points at a missing session.
    """
    db.upsert_session(session_id)

    record_data = generation.model_dump(mode="json")
    if record_data["input_length"] is None:
        record_data["input_length"] = len(generation.input_code)
    if record_data["output_length"] is None:
        record_data["output_length"] = len(generation.output_result)
    record_data.update({
        "id": f"gen_{uuid.uuid4().hex[:16]}",
        "session_id": session_id,
        "created_at": datetime.now(timezone.utc),
    })

    new_generation_obj = db.add_generation_record(record_data)
    return GenerationRecord.model_validate(new_generation_obj)


def delete_generation(db: DatabaseService, session_id: str, generation_id: str) -> bool:
    """
    Deletes one generation record. Records owned by another session are
    treated as not found and left untouched.
    """
    return db.delete_generation_record(session_id, generation_id)


def clear_history(db: DatabaseService, session_id: str) -> int:
    return db.delete_all_generations(session_id)


def get_history(
    db: DatabaseService,
    session_id: str,
    limit: int = HISTORY_DEFAULT_LIMIT,
    feature_type: Optional[str] = None,
    search: Optional[str] = None
) -> HistoryResponse:
    """
    Retrieves up to `limit` of the session's most recent generations, newest
    first. With a feature-type or search filter the whole history is scanned
    and the limit applies to the filtered list.
    """
    if limit < 1:
        raise ValueError("limit must be a positive integer.")

    if not feature_type and not search:
        records = _to_records(db.get_generations(session_id, limit=limit))
        return HistoryResponse(results=records, total=len(records))

    filtered_results = _to_records(db.get_generations(session_id))
    if feature_type:
        filtered_results = [r for r in filtered_results if r.feature_type.value == feature_type]
    if search:
        search_lower = search.lower()
        filtered_results = [
            r for r in filtered_results
            if search_lower in r.input_code.lower() or search_lower in r.output_result.lower()
        ]

    filtered_results = filtered_results[:limit]
    return HistoryResponse(results=filtered_results, total=len(filtered_results))
