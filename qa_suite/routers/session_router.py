# /qa_suite/routers/session_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Optional

from ..core.deps import get_session_id
from ..models import session_model
from ..services import session_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post(
    "/sessions",
    response_model=session_model.SessionRecord,
    summary="Initialize a Session",
    description="Registers the browser's session token on first use and refreshes its last-active time afterwards.",
)
def init_session(
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return session_service.init_session(db=db, session_id=session_id)
    except Exception as e:
        print(f"ERROR initializing session: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while initializing the session.",
        )


@router.get(
    "/preferences",
    response_model=Optional[session_model.UserPreferencesRecord],
    summary="Get User Preferences",
    description="Returns the session's saved selections, or null when nothing has been saved yet.",
)
def get_preferences(
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    return session_service.get_preferences(db=db, session_id=session_id)


@router.put(
    "/preferences",
    response_model=session_model.UserPreferencesRecord,
    summary="Save User Preferences",
)
def save_preferences(
    payload: session_model.UserPreferencesUpdate,
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return session_service.save_preferences(db=db, session_id=session_id, preferences_update=payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except Exception as e:
        print(f"ERROR saving preferences: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while saving preferences.",
        )
