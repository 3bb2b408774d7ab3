"""
Tests for JSON Schema Contract Validators

Комплексное тестирование calendar_duration контракта:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений constraints (min/max/enum)
- Интеграция с Pydantic моделью
"""

import json
from datetime import date
from importlib.resources import files
from pathlib import Path

import pytest
from jsonschema import ValidationError

from calendar_duration.core.calendar import calendar_duration_between, calendar_duration_from
from calendar_duration.core.contracts import (
    CalendarDurationValidator,
    SchemaLoader,
    validate_calendar_duration,
)
from calendar_duration.core.domain import CalendarDuration, DurationOrder


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_calendar_duration():
    """Валидный calendar_duration для тестирования."""
    return {
        "years": 31,
        "months": 9,
        "days": 23,
        "order": "past",
        "text": "31 years, 9 months, 23 days ago",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("calendar_duration")
        assert schema["title"] == "calendar_duration"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("calendar_duration") is loader.load_schema("calendar_duration")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError, match="no_such_schema"):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_default_root_is_package_resource(self):
        root = files("calendar_duration.core.contracts") / "schema"
        assert (root / "calendar_duration.json").is_file()
        assert SchemaLoader(root).load_schema("calendar_duration")["title"] == "calendar_duration"

    def test_validator_with_custom_loader(self, tmp_path: Path):
        schema = {"type": "object", "required": ["years"]}
        (tmp_path / "calendar_duration.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = CalendarDurationValidator(SchemaLoader(tmp_path))
        assert validator.is_valid({"years": 1})
        assert not validator.is_valid({})


# =============================================================================
# VALIDATION
# =============================================================================


class TestCalendarDurationContract:
    """Тесты calendar_duration контракта"""

    def test_valid(self, valid_calendar_duration):
        validate_calendar_duration(valid_calendar_duration)

    def test_text_optional(self, valid_calendar_duration):
        del valid_calendar_duration["text"]
        assert CalendarDurationValidator().is_valid(valid_calendar_duration)

    def test_null_order_valid(self, valid_calendar_duration):
        valid_calendar_duration["order"] = None
        validate_calendar_duration(valid_calendar_duration)

    @pytest.mark.parametrize("field", ["years", "months", "days", "order"])
    def test_required_fields(self, valid_calendar_duration, field):
        del valid_calendar_duration[field]
        with pytest.raises(ValidationError):
            validate_calendar_duration(valid_calendar_duration)

    def test_months_above_11(self, valid_calendar_duration):
        valid_calendar_duration["months"] = 12
        with pytest.raises(ValidationError):
            validate_calendar_duration(valid_calendar_duration)

    def test_negative_days(self, valid_calendar_duration):
        valid_calendar_duration["days"] = -1
        assert not CalendarDurationValidator().is_valid(valid_calendar_duration)

    def test_unknown_order(self, valid_calendar_duration):
        valid_calendar_duration["order"] = "sideways"
        with pytest.raises(ValidationError):
            validate_calendar_duration(valid_calendar_duration)

    def test_additional_properties(self, valid_calendar_duration):
        valid_calendar_duration["weeks"] = 2
        with pytest.raises(ValidationError):
            validate_calendar_duration(valid_calendar_duration)

    def test_same_order_requires_zero(self):
        data = {"years": 0, "months": 0, "days": 1, "order": "same"}
        errors = list(CalendarDurationValidator().iter_errors(data))
        assert errors

    def test_same_order_zero_valid(self):
        validate_calendar_duration({"years": 0, "months": 0, "days": 0, "order": "same"})


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestModelIntegration:
    """Интеграция CalendarDuration.to_contract/from_contract со схемой"""

    def test_directional_to_contract_valid(self):
        payload = calendar_duration_from(date(2020, 4, 8), date(1988, 6, 16)).to_contract()
        validate_calendar_duration(payload)
        assert payload == {
            "years": 31,
            "months": 9,
            "days": 23,
            "order": "past",
            "text": "31 years, 9 months, 23 days ago",
        }

    def test_non_directional_to_contract_valid(self):
        payload = calendar_duration_between(date(1999, 12, 31), date(1999, 12, 31)).to_contract()
        validate_calendar_duration(payload)
        assert payload["order"] is None
        assert payload["text"] == "same day"

    def test_from_contract(self, valid_calendar_duration):
        duration = CalendarDuration.from_contract(valid_calendar_duration)
        assert duration == CalendarDuration(
            years=31, months=9, days=23, order=DurationOrder.PAST
        )

    def test_from_contract_ignores_text(self, valid_calendar_duration):
        valid_calendar_duration["text"] = "anything"
        assert str(CalendarDuration.from_contract(valid_calendar_duration)) == (
            "31 years, 9 months, 23 days ago"
        )
