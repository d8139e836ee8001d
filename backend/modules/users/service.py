"""
User registration service.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.core.exceptions import UserNotFoundException, ValidationException
from .models import User
from .repository import UserRepository

logger = logging.getLogger("exercise_tracker.users")


class UserService:
    """Service for user registration and lookup"""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository()

    def create_user(self, username: Optional[str]) -> User:
        """
        Register a new user.

        Usernames are not unique; registering the same name twice creates
        two distinct users.

        Raises:
            ValidationException: If username is missing or empty
        """
        if not username:
            raise ValidationException("username", "username is required")

        user = self.user_repo.create(self.db, User(username=username))
        logger.info(f"user created: {user}")
        return user

    def get_users(self) -> List[User]:
        """Get all users"""
        return self.user_repo.get_all(self.db)

    def get_user(self, user_id: str) -> User:
        """
        Get user by ID.

        Raises:
            UserNotFoundException: If no user has this ID
        """
        user = self.user_repo.get_by_id(self.db, user_id)
        if not user:
            logger.warning(f"user {user_id} not found")
            raise UserNotFoundException(user_id)
        return user
