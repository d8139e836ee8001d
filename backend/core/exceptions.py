"""
Custom exceptions for the exercise tracker application.
Provides specific exception types for better error handling.
"""


class ExerciseTrackerException(Exception):
    """Base exception for exercise tracker application"""
    pass


class UserNotFoundException(ExerciseTrackerException):
    """Raised when a user is not found"""
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class ValidationException(ExerciseTrackerException):
    """Raised when data validation fails"""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error for {field}: {message}")


class ConfigurationException(ExerciseTrackerException):
    """Raised when required configuration is missing or invalid"""
    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"Invalid configuration for {setting}: {message}")
