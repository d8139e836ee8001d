"""
Tests for UserService and ExerciseService.

Tests cover:
1. User registration and lookup
2. Adding exercises (defaults, conversion, validation)
3. Log filtering order and limit handling
"""
import pytest
from datetime import date
from types import SimpleNamespace

from backend.core.exceptions import UserNotFoundException, ValidationException
from backend.modules.users import UserService
from backend.modules.exercises import ExerciseService
from backend.shared.date_utils import format_date


class TestUserService:
    """Tests for user registration"""

    def test_create_user_generates_id(self, db_session):
        user = UserService(db_session).create_user("alice")

        assert user.username == "alice"
        assert len(user.id) == 24

    def test_duplicate_usernames_are_distinct_users(self, db_session):
        """Registering the same name twice should create two users"""
        service = UserService(db_session)
        first = service.create_user("bob")
        second = service.create_user("bob")

        assert first.id != second.id
        assert len(service.get_users()) == 2

    def test_missing_username_rejected(self, db_session):
        with pytest.raises(ValidationException):
            UserService(db_session).create_user("")

    def test_unknown_user_raises(self, db_session):
        with pytest.raises(UserNotFoundException) as exc_info:
            UserService(db_session).get_user("0" * 24)
        assert exc_info.value.user_id == "0" * 24


class TestAddExercise:
    """Tests for add_exercise"""

    def test_duration_converted_to_number(self, db_session, user):
        result = ExerciseService(db_session).add_exercise(user.id, "run", "30")

        assert result["duration"] == 30
        assert isinstance(result["duration"], int)

    def test_defaults_to_today(self, db_session, user):
        result = ExerciseService(db_session).add_exercise(user.id, "run", "30", "")

        assert result["date"] == format_date(date.today())

    def test_explicit_date_rendered(self, db_session, user):
        result = ExerciseService(db_session).add_exercise(user.id, "run", "30", "2023-01-15")

        assert result["date"] == "Sun Jan 15 2023"
        assert result["_id"] == user.id
        assert result["username"] == "alice"
        assert result["description"] == "run"

    def test_fractional_duration_kept(self, db_session, user):
        result = ExerciseService(db_session).add_exercise(user.id, "walk", "12.5")

        assert result["duration"] == 12.5

    def test_unknown_user_raises(self, db_session):
        with pytest.raises(UserNotFoundException):
            ExerciseService(db_session).add_exercise("missing", "run", "30")

    def test_non_numeric_duration_rejected(self, db_session, user):
        with pytest.raises(ValidationException) as exc_info:
            ExerciseService(db_session).add_exercise(user.id, "run", "thirty")
        assert exc_info.value.field == "duration"

    def test_missing_description_rejected(self, db_session, user):
        with pytest.raises(ValidationException) as exc_info:
            ExerciseService(db_session).add_exercise(user.id, None, "30")
        assert exc_info.value.field == "description"

    def test_invalid_date_rejected(self, db_session, user):
        with pytest.raises(ValidationException) as exc_info:
            ExerciseService(db_session).add_exercise(user.id, "run", "30", "someday")
        assert exc_info.value.field == "date"


class TestGetLog:
    """Tests for get_log against stored exercises"""

    def test_full_log(self, db_session, january_user):
        log = ExerciseService(db_session).get_log(january_user.id)

        assert log["_id"] == january_user.id
        assert log["username"] == "alice"
        assert log["count"] == 3
        assert log["log"][0] == {
            "description": "run 1",
            "duration": 30,
            "date": "Sun Jan 01 2023"
        }

    def test_from_is_exclusive(self, db_session, january_user):
        log = ExerciseService(db_session).get_log(january_user.id, from_date="2023-01-10")

        assert [entry["date"] for entry in log["log"]] == ["Fri Jan 20 2023"]

    def test_from_and_to(self, db_session, january_user):
        log = ExerciseService(db_session).get_log(
            january_user.id, from_date="2023-01-05", to_date="2023-01-15"
        )

        assert log["count"] == 1
        assert log["log"][0]["date"] == "Tue Jan 10 2023"

    def test_to_with_time_keeps_that_day(self, db_session, january_user):
        """A to-bound later on the same day should keep that day's entry"""
        log = ExerciseService(db_session).get_log(january_user.id, to_date="2023-01-10T12:00:00Z")

        assert [entry["date"] for entry in log["log"]] == ["Sun Jan 01 2023", "Tue Jan 10 2023"]

    def test_from_with_offset_compares_instants(self, db_session, january_user):
        """2022-12-31T23:00-05:00 is already past Jan 01 midnight UTC"""
        log = ExerciseService(db_session).get_log(
            january_user.id, from_date="2022-12-31T23:00:00-05:00"
        )

        assert [entry["date"] for entry in log["log"]] == ["Tue Jan 10 2023", "Fri Jan 20 2023"]

    def test_unpadded_bound(self, db_session, january_user):
        log = ExerciseService(db_session).get_log(january_user.id, from_date="2023-1-5")

        assert log["count"] == 2

    def test_user_without_exercises(self, db_session, user):
        log = ExerciseService(db_session).get_log(user.id)

        assert log["count"] == 0
        assert log["log"] == []

    def test_unknown_user_raises(self, db_session):
        with pytest.raises(UserNotFoundException):
            ExerciseService(db_session).get_log("missing")


def _entries(*days):
    return [SimpleNamespace(date=date(2023, 1, day)) for day in days]


class TestApplyLogFilters:
    """Tests for the from -> to -> limit pipeline"""

    def test_no_filters_keeps_everything(self):
        entries = _entries(1, 10, 20)

        assert ExerciseService.apply_log_filters(entries) == entries

    def test_limit_applies_after_date_filters(self):
        """Limit should count only entries left after from/to"""
        entries = _entries(1, 10, 20, 25)

        result = ExerciseService.apply_log_filters(entries, "2023-01-05", None, "2")

        assert [e.date.day for e in result] == [10, 20]

    def test_limit_zero_means_no_limit(self):
        entries = _entries(1, 10, 20)

        assert len(ExerciseService.apply_log_filters(entries, limit="0")) == 3

    def test_non_numeric_limit_means_no_limit(self):
        entries = _entries(1, 10, 20)

        assert len(ExerciseService.apply_log_filters(entries, limit="abc")) == 3
        assert len(ExerciseService.apply_log_filters(entries, limit="")) == 3

    def test_fractional_limit_truncates(self):
        entries = _entries(1, 10, 20)

        assert len(ExerciseService.apply_log_filters(entries, limit="1.9")) == 1

    def test_negative_limit_drops_from_end(self):
        entries = _entries(1, 10, 20)

        result = ExerciseService.apply_log_filters(entries, limit="-1")

        assert [e.date.day for e in result] == [1, 10]

    def test_infinite_limit(self):
        entries = _entries(1, 10, 20)

        assert len(ExerciseService.apply_log_filters(entries, limit="Infinity")) == 3
        assert ExerciseService.apply_log_filters(entries, limit="-Infinity") == []

    def test_invalid_bound_matches_nothing(self):
        entries = _entries(1, 10, 20)

        assert ExerciseService.apply_log_filters(entries, "yesterday") == []
        assert ExerciseService.apply_log_filters(entries, None, "tomorrow") == []

    def test_to_is_exclusive(self):
        entries = _entries(1, 10, 20)

        result = ExerciseService.apply_log_filters(entries, None, "2023-01-10")

        assert [e.date.day for e in result] == [1]
