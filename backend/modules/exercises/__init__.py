from .service import ExerciseService

__all__ = ["ExerciseService"]
