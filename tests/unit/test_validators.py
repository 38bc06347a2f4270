"""
test_validators.py
------------------
Unit tests for folio.core.validators.DataValidator.

Tests coercion of raw header values into Entry field types.
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from folio.core.exceptions import ValidationError
from folio.core.validators import DataValidator


class TestNormalizeTimestamp:
    """Test normalize_timestamp."""

    def test_aware_datetime(self):
        value = datetime(2021, 3, 3, 13, 58, 28, tzinfo=timezone.utc)
        result = DataValidator.normalize_timestamp(value)
        assert result.instant == value
        assert not result.date_only

    def test_offset_datetime(self):
        value = datetime(2022, 5, 10, 9, 30, tzinfo=timezone(timedelta(hours=2)))
        result = DataValidator.normalize_timestamp(value)
        assert result.instant == datetime(2022, 5, 10, 7, 30, tzinfo=timezone.utc)
        assert result.offset == timedelta(hours=2)

    def test_naive_datetime_is_utc(self):
        result = DataValidator.normalize_timestamp(datetime(2021, 3, 3, 12, 0))
        assert result.instant == datetime(2021, 3, 3, 12, 0, tzinfo=timezone.utc)

    def test_date(self):
        result = DataValidator.normalize_timestamp(date(2021, 3, 3))
        assert result.date_only
        assert result.isoformat() == "2021-03-03"

    def test_string(self):
        result = DataValidator.normalize_timestamp("2021-03-03T13:58:28Z")
        assert result.isoformat() == "2021-03-03T13:58:28Z"

    def test_invalid_string(self):
        with pytest.raises(ValidationError, match="Invalid timestamp"):
            DataValidator.normalize_timestamp("2021-13-45")

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_timestamp(20210303)


class TestNormalizeString:
    """Test normalize_string."""

    def test_stripped(self):
        assert DataValidator.normalize_string("  X  ") == "X"

    def test_numbers_accepted(self):
        assert DataValidator.normalize_string(2021) == "2021"

    @pytest.mark.parametrize("value", ["", "   ", True, None, ["a"], {"a": 1}])
    def test_rejected(self, value):
        with pytest.raises(ValidationError):
            DataValidator.normalize_string(value)


class TestNormalizeBool:
    """Test normalize_bool."""

    @pytest.mark.parametrize("value", [True, 1, "true", "Yes", "on", "1"])
    def test_true(self, value):
        assert DataValidator.normalize_bool(value) is True

    @pytest.mark.parametrize("value", [False, 0, "false", "NO", "off", "0"])
    def test_false(self, value):
        assert DataValidator.normalize_bool(value) is False

    @pytest.mark.parametrize("value", ["maybe", 2, [], None])
    def test_rejected(self, value):
        with pytest.raises(ValidationError):
            DataValidator.normalize_bool(value)


class TestNormalizeSeries:
    """Test normalize_series."""

    def test_absent(self):
        assert DataValidator.normalize_series(None) is None

    def test_string(self):
        assert DataValidator.normalize_series("Design Architectures") == "Design Architectures"

    def test_single_item_list(self):
        assert DataValidator.normalize_series(["Design Architectures"]) == "Design Architectures"

    def test_empty_list(self):
        assert DataValidator.normalize_series([]) is None

    def test_several_series_rejected(self):
        with pytest.raises(ValidationError, match="at most one series"):
            DataValidator.normalize_series(["A", "B"])

    def test_mapping_rejected(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_series({"name": "A"})


class TestNormalizeTags:
    """Test normalize_tags."""

    def test_absent_is_empty(self):
        assert DataValidator.normalize_tags(None) == ()

    def test_order_and_duplicates_kept(self):
        assert DataValidator.normalize_tags(["go", "design", "go"]) == ("go", "design", "go")

    def test_single_string(self):
        assert DataValidator.normalize_tags("go") == ("go",)

    def test_empty_list(self):
        assert DataValidator.normalize_tags([]) == ()

    def test_mapping_rejected(self):
        with pytest.raises(ValidationError, match="list of strings"):
            DataValidator.normalize_tags({"go": 1})

    def test_bad_item_position_reported(self):
        with pytest.raises(ValidationError, match="position 1"):
            DataValidator.normalize_tags(["go", ["nested"]])
