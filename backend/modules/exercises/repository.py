"""
Exercise repository - Data access layer for Exercise model.
"""
from typing import List

from sqlalchemy.orm import Session, load_only

from .models import Exercise


class ExerciseRepository:
    """Repository for Exercise data access"""

    @staticmethod
    def get_by_user(db: Session, user_id: str) -> List[Exercise]:
        """Get a user's exercises (description, duration, date only) in storage order"""
        return db.query(Exercise).options(
            load_only(Exercise.description, Exercise.duration, Exercise.date)
        ).filter(Exercise.user_id == user_id).all()

    @staticmethod
    def create(db: Session, exercise: Exercise) -> Exercise:
        """Create new exercise"""
        db.add(exercise)
        db.commit()
        db.refresh(exercise)
        return exercise
