# /qa_suite/routers/history_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, status, Response
from typing import Optional

# Import the Pydantic models that define our API contract
from ..models import history_model
from ..models.tool_model import FeatureType

# Import the services that contain our business logic
from ..core.config import HISTORY_DEFAULT_LIMIT
from ..core.deps import get_session_id
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

@router.post(
    "", # Maps to /api/history
    response_model=history_model.GenerationRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Save a Generation"
)
def save_generation_record(
    payload: history_model.GenerationCreate,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Endpoint to persist a finished generation for the calling session.
    """
    try:
        return history_service.save_generation(db=db, session_id=session_id, generation=payload)
    except Exception as e:
        print(f"ERROR saving generation record: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while saving the generation record."
        )


@router.get(
    "", # Maps to /api/history
    response_model=history_model.HistoryResponse,
    summary="Get Generation History"
)
def get_session_history(
    limit: int = Query(HISTORY_DEFAULT_LIMIT, ge=1, le=500),
    feature_type: Optional[FeatureType] = None,
    search: Optional[str] = None,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Endpoint to retrieve the session's most recent generations, newest first.
    """
    try:
        return history_service.get_history(
            db=db,
            session_id=session_id,
            limit=limit,
            feature_type=feature_type.value if feature_type else None,
            search=search,
        )
    except Exception as e:
        print(f"ERROR fetching generation history: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching the generation history."
        )


@router.delete(
    "",
    response_model=history_model.ClearHistoryResponse,
    summary="Clear Generation History",
    description="Permanently deletes every generation record owned by the calling session."
)
def clear_session_history(
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    deleted = history_service.clear_history(db=db, session_id=session_id)
    return history_model.ClearHistoryResponse(deleted=deleted)


@router.delete(
    "/{generation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Generation Record",
    description="Permanently deletes a single generation record from the session's history.",
    responses={404: {"description": "Generation record not found"}}
)
def delete_generation_record(
    generation_id: str,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Endpoint to delete a specific generation record by its ID.
    """
    was_deleted = history_service.delete_generation(db=db, session_id=session_id, generation_id=generation_id)

    if not was_deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Generation record with ID {generation_id} not found.",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
