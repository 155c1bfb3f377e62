# /qa_suite/routers/uploads_router.py

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File

from ..core.deps import get_session_id
from ..models import generate_model
from ..services import storage_service

router = APIRouter()


@router.post(
    "/screenshots",
    response_model=generate_model.ScreenshotUploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a Bug Screenshot",
    description="Stores a PNG, JPEG or WebP screenshot and returns its public URL."
)
def upload_screenshot(
    screenshot: UploadFile = File(...),
    session_id: str = Depends(get_session_id),
):
    try:
        return storage_service.save_screenshot(screenshot)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except OSError as e:
        print(f"ERROR storing screenshot for session {session_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload screenshot. Please try again."
        )
