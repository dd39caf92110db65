"""Tests for configuration loading and validation."""

import logging

import pytest

from rental_booking.config import AppConfig, ValidationConfig, _validate_config


def _config_with(validation=None, log_level="INFO", app_name="test"):
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "validation", validation or ValidationConfig())
    object.__setattr__(config, "log_level", log_level)
    object.__setattr__(config, "app_name", app_name)
    return config


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_invalid_max_logged_errors(self):
        validation = ValidationConfig.__new__(ValidationConfig)
        object.__setattr__(validation, "email_allow_smtputf8", True)
        object.__setattr__(validation, "log_failures", True)
        object.__setattr__(validation, "max_logged_errors", 0)

        with pytest.raises(ValueError, match="MAX_LOGGED_ERRORS"):
            _validate_config(_config_with(validation=validation))

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            _validate_config(_config_with(log_level="CHATTY"))

    def test_lowercase_log_level_accepted(self):
        _validate_config(_config_with(log_level="debug"))

    def test_blank_app_name(self):
        with pytest.raises(ValueError, match="APP_NAME"):
            _validate_config(_config_with(app_name="  "))


class TestLogHandler:
    def test_handler_prints_form_session_id(self):
        from rental_booking.config import _build_log_handler
        from rental_booking.logging_context import set_form_session_id

        set_form_session_id("FORM-LOG-1")
        handler = _build_log_handler()
        record = logging.LogRecord(
            "rental_booking.other", logging.INFO, __file__, 1, "step validated", None, None
        )
        assert handler.filter(record)
        line = handler.format(record)
        assert "[FORM-LOG-1]" in line
        assert "step validated" in line

    def test_format_includes_session_field(self):
        from rental_booking.config import LOG_FORMAT

        assert "%(form_session_id)s" in LOG_FORMAT


class TestEnvParsing:
    def test_safe_int_parsing(self):
        from rental_booking.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_int_bad_value(self, monkeypatch):
        from rental_booking.config import _safe_int

        monkeypatch.setenv("RB_TEST_INT", "many")
        with pytest.raises(ValueError, match="RB_TEST_INT"):
            _safe_int("RB_TEST_INT", "1")

    @pytest.mark.parametrize("raw", ["1", "true", "Yes", " on "])
    def test_safe_bool_true(self, monkeypatch, raw):
        from rental_booking.config import _safe_bool

        monkeypatch.setenv("RB_TEST_FLAG", raw)
        assert _safe_bool("RB_TEST_FLAG", "false") is True

    @pytest.mark.parametrize("raw", ["0", "false", "NO", "off"])
    def test_safe_bool_false(self, monkeypatch, raw):
        from rental_booking.config import _safe_bool

        monkeypatch.setenv("RB_TEST_FLAG", raw)
        assert _safe_bool("RB_TEST_FLAG", "true") is False

    def test_safe_bool_bad_value(self, monkeypatch):
        from rental_booking.config import _safe_bool

        monkeypatch.setenv("RB_TEST_FLAG", "maybe")
        with pytest.raises(ValueError, match="RB_TEST_FLAG"):
            _safe_bool("RB_TEST_FLAG", "true")
