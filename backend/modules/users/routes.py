"""
User HTTP routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, HTTPException
from sqlalchemy.orm import Session

from backend.core.database import get_db
from backend.core.exceptions import ValidationException
from .schemas import UserResponse
from .service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
def create_user(
    username: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    """Register a new user."""
    try:
        user = UserService(db).create_user(username)
    except ValidationException as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"username": user.username, "_id": user.id}


@router.get("", response_model=List[UserResponse])
def get_users(db: Session = Depends(get_db)):
    """Get all users."""
    return [
        {"username": user.username, "_id": user.id}
        for user in UserService(db).get_users()
    ]
