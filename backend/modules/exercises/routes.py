"""
Exercise HTTP routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query
from sqlalchemy.orm import Session

from backend.core.database import get_db
from backend.core.exceptions import UserNotFoundException, ValidationException
from .schemas import ExerciseResponse, LogResponse
from .service import ExerciseService

router = APIRouter(prefix="/api/users", tags=["exercises"])


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
def add_exercise(
    user_id: str,
    description: Optional[str] = Form(None),
    duration: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    body_user_id: Optional[str] = Form(None, alias=":_id"),
    db: Session = Depends(get_db)
):
    """Log an exercise. A ":_id" form field overrides the path user ID."""
    try:
        return ExerciseService(db).add_exercise(
            body_user_id or user_id, description, duration, date
        )
    except UserNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationException as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{user_id}/logs", response_model=LogResponse)
def get_logs(
    user_id: str,
    from_date: Optional[str] = Query(None, alias="from"),
    to_date: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Get a user's exercise log, optionally bounded by date and count."""
    try:
        return ExerciseService(db).get_log(user_id, from_date, to_date, limit)
    except UserNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
