"""
Exercise logging service.
Handles adding exercises for a user and building the user's exercise log.
"""
import logging
import math
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.core.exceptions import ValidationException
from backend.modules.users import UserService
from backend.shared.date_utils import format_date, parse_bound, parse_date, to_instant, today_string
from backend.shared.number_utils import is_falsy_number, normalize_number, to_number
from .models import Exercise
from .repository import ExerciseRepository

logger = logging.getLogger("exercise_tracker.exercises")


class ExerciseService:
    """Service for exercise logging and log retrieval"""

    def __init__(self, db: Session):
        self.db = db
        self.exercise_repo = ExerciseRepository()
        self.user_service = UserService(db)

    def add_exercise(
        self,
        user_id: str,
        description: Optional[str],
        duration: Optional[str],
        date_text: Optional[str] = None
    ) -> dict:
        """
        Log an exercise for an existing user.

        Args:
            user_id: ID of the owning user
            description: What was done
            duration: Minutes, as text
            date_text: Date of the exercise; today if absent or empty

        Returns:
            Dict with the user's ID and name plus the exercise fields,
            date rendered human-readable

        Raises:
            UserNotFoundException: If the user does not exist
            ValidationException: If a required field is missing or malformed
        """
        user = self.user_service.get_user(user_id)

        raw_date = date_text if date_text else today_string()
        minutes = to_number(duration)

        if not description:
            raise ValidationException("description", "description is required")
        if math.isnan(minutes):
            raise ValidationException("duration", f"cannot convert {duration!r} to a number")
        exercise_date = parse_date(raw_date)
        if exercise_date is None:
            raise ValidationException("date", f"cannot convert {raw_date!r} to a date")

        exercise = self.exercise_repo.create(self.db, Exercise(
            user_id=user.id,
            description=description,
            duration=minutes,
            date=exercise_date
        ))
        logger.info(f"exercise added: {exercise}")

        return {
            "_id": user.id,
            "username": user.username,
            "date": format_date(exercise.date),
            "duration": normalize_number(exercise.duration),
            "description": exercise.description
        }

    def get_log(
        self,
        user_id: str,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        limit: Optional[str] = None
    ) -> dict:
        """
        Get a user's exercise log.

        Raises:
            UserNotFoundException: If the user does not exist
        """
        user = self.user_service.get_user(user_id)

        exercises = self.exercise_repo.get_by_user(self.db, user.id)
        exercises = self.apply_log_filters(exercises, from_date, to_date, limit)

        log = [
            {
                "description": exercise.description,
                "duration": normalize_number(exercise.duration),
                "date": format_date(exercise.date)
            }
            for exercise in exercises
        ]
        logger.info(f"user {user_id} logs retrieved")

        return {
            "_id": user.id,
            "username": user.username,
            "count": len(log),
            "log": log
        }

    @staticmethod
    def apply_log_filters(
        exercises: List[Exercise],
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        limit: Optional[str] = None
    ) -> List[Exercise]:
        """
        Narrow down a log: from, then to, then limit.

        Bounds are exclusive and compared as instants, each stored date
        standing for UTC midnight. A bound that is not a valid date matches
        nothing. A limit that is zero or not a number means no limit;
        a negative limit drops that many entries from the end.
        """
        if from_date:
            lower = parse_bound(from_date)
            exercises = [e for e in exercises if _is_after(e.date, lower)]
        if to_date:
            upper = parse_bound(to_date)
            exercises = [e for e in exercises if _is_before(e.date, upper)]

        count = to_number(limit)
        if not is_falsy_number(count):
            if math.isinf(count):
                exercises = exercises if count > 0 else []
            else:
                exercises = exercises[:int(count)]
        return exercises


def _is_after(value: date, bound: Optional[datetime]) -> bool:
    return bound is not None and to_instant(value) > bound


def _is_before(value: date, bound: Optional[datetime]) -> bool:
    return bound is not None and to_instant(value) < bound
