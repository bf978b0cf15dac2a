"""Tests for the exception hierarchy."""

from training_zones.exceptions import (
    DataSourceError,
    DataSourceTimeoutError,
    ErrorCode,
    InvalidInputError,
    MissingInputError,
    TrainingZonesError,
)


class TestTrainingZonesError:
    """Tests for the base exception."""

    def test_defaults(self):
        error = TrainingZonesError("Something broke")
        assert str(error) == "Something broke"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}

    def test_to_dict(self):
        """Details are included only when present."""
        assert TrainingZonesError("Oops").to_dict() == {
            "error": {"code": "INTERNAL_ERROR", "message": "Oops"}
        }
        error = TrainingZonesError("Oops", details={"key": "value"})
        assert error.to_dict()["error"]["details"] == {"key": "value"}

    def test_repr(self):
        assert repr(TrainingZonesError("Oops")) == "TrainingZonesError(code=INTERNAL_ERROR, message='Oops')"


class TestInputErrors:
    """Tests for input errors."""

    def test_invalid_input(self):
        error = InvalidInputError("FTP must be positive", field="ftp", value=0)
        assert isinstance(error, TrainingZonesError)
        assert error.code == ErrorCode.INVALID_INPUT
        assert error.field == "ftp"
        assert error.details == {"field": "ftp", "value": 0}

    def test_missing_input(self):
        error = MissingInputError("Need max HR or age", fields=["max_hr", "age_years"])
        assert error.code == ErrorCode.MISSING_INPUT
        assert error.fields == ["max_hr", "age_years"]
        assert error.details["fields"] == ["max_hr", "age_years"]


class TestDataSourceErrors:
    """Tests for data source errors."""

    def test_data_source_error(self):
        error = DataSourceError("Read failed", source="static")
        assert error.code == ErrorCode.DATA_SOURCE_ERROR
        assert error.source == "static"
        assert error.details == {"source": "static"}

    def test_timeout_error(self):
        error = DataSourceTimeoutError("static", 2.5)
        assert isinstance(error, DataSourceError)
        assert error.code == ErrorCode.DATA_SOURCE_TIMEOUT
        assert error.message == "Reading inputs from 'static' timed out after 2.5s"
        assert error.details == {"timeout_sec": 2.5, "source": "static"}
