# /qa_suite/core/deps.py

from typing import Optional
from fastapi import Header, HTTPException, status

from .config import SESSION_HEADER
from ..services import session_service


def get_session_id(
    session_id: Optional[str] = Header(default=None, alias=SESSION_HEADER)
) -> str:
    """
    Resolves the caller's browser session from the `X-Session-Id` header.
    The token is client-generated and unauthenticated; it only scopes which
    rows a request can see.
    """
    try:
        return session_service.validate_session_id(session_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
