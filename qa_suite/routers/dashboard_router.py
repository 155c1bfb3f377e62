# /qa_suite/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_session_id
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.dashboard_model import GenerationStats

router = APIRouter()

@router.get(
    "/stats",
    response_model=GenerationStats,
    summary="Get Generation Statistics",
    description="Aggregates the calling session's full history into counts, totals and achievements for the stats view."
)
def get_generation_stats(
    session_id: str = Depends(get_session_id),
    db: DatabaseService = Depends(get_db_service)
):
    # Thin router: all aggregation lives in the service layer.
    return dashboard_service.get_generation_stats(db=db, session_id=session_id)
