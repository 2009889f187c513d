import pytest
import structlog
from structlog.testing import capture_logs

from core.config import Settings, get_settings, load_settings
from core.errors import ConfigValidationError, SchemaValidationError
from core.logging import get_logger, setup_logging
from guards.entities import parse_queue_item


def test_defaults(tmp_path):
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.log_format == "console"
    assert settings.log_rejections is True
    assert settings.effective_log_level == "INFO"


def test_yaml_overrides(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("log_rejections: false\nlog_level: warning\n")

    settings = load_settings(path)
    assert settings.log_rejections is False
    assert settings.effective_log_level == "WARNING"


def test_empty_yaml_means_defaults(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("")
    assert load_settings(path).log_level == "INFO"


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigValidationError):
        load_settings(path)


def test_invalid_values_are_reported(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("log_format: xml\nlog_rejections: sometimes\n")

    with pytest.raises(ConfigValidationError) as exc_info:
        load_settings(path)

    fields = {e["loc"][0] for e in exc_info.value.errors}
    assert fields == {"log_format", "log_rejections"}


@pytest.mark.parametrize(
    "raw, expected",
    [(True, 2), (False, 0), ("3", 3), ("yes", 2), ("no", 0), ("", 0), (1, 1)],
)
def test_verbose_coercion(raw, expected):
    assert Settings(verbose=raw).verbose == expected


def test_verbose_forces_debug():
    assert Settings(verbose=2, log_level="ERROR").effective_log_level == "DEBUG"


def test_environment_prefix(monkeypatch):
    monkeypatch.setenv("JOB_SCHEMA_LOG_REJECTIONS", "false")
    get_settings.cache_clear()
    assert get_settings().log_rejections is False


def test_rejections_are_logged(queue_item):
    queue_item["status"] = "archived"

    with capture_logs() as logs:
        with pytest.raises(SchemaValidationError):
            parse_queue_item(queue_item)

    assert logs == [
        {"event": "schema_rejected", "schema": "QueueItem", "error_count": 1, "log_level": "debug"}
    ]


def test_rejection_logging_can_be_disabled(queue_item, monkeypatch):
    monkeypatch.setenv("JOB_SCHEMA_LOG_REJECTIONS", "0")
    get_settings.cache_clear()
    queue_item["status"] = "archived"

    with capture_logs() as logs:
        with pytest.raises(SchemaValidationError):
            parse_queue_item(queue_item)

    assert logs == []


def test_setup_logging_configures_structlog():
    setup_logging("WARNING", fmt="json")
    assert structlog.is_configured()
    get_logger(__name__).warning("configured", renderer="json")


def test_setup_logging_defaults_to_settings(monkeypatch):
    monkeypatch.setenv("JOB_SCHEMA_LOG_FORMAT", "json")
    get_settings.cache_clear()
    setup_logging()
    assert structlog.is_configured()
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
