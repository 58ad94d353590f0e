import pytest

from vrs.config import runtime_config
from vrs.config.runtime_config import InvalidConfiguration, MissingConfiguration


def test_require_database_url_has_no_fallback(monkeypatch):
    monkeypatch.delenv("VRS_DATABASE_URL", raising=False)
    assert runtime_config.get_database_url() is None
    with pytest.raises(MissingConfiguration):
        runtime_config.require_database_url()


def test_blank_database_url_counts_as_missing(monkeypatch):
    monkeypatch.setenv("VRS_DATABASE_URL", "   ")
    with pytest.raises(MissingConfiguration):
        runtime_config.require_database_url()


def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("VRS_DATABASE_URL", "firestore://vrs-prod")
    assert runtime_config.require_database_url() == "firestore://vrs-prod"


def test_mock_latency(monkeypatch):
    monkeypatch.delenv("VRS_MOCK_LATENCY_MS", raising=False)
    assert runtime_config.get_mock_latency_seconds() == 1.0
    monkeypatch.setenv("VRS_MOCK_LATENCY_MS", "250")
    assert runtime_config.get_mock_latency_seconds() == 0.25
    monkeypatch.setenv("VRS_MOCK_LATENCY_MS", "-5")
    assert runtime_config.get_mock_latency_seconds() == 0.0


@pytest.mark.parametrize("raw", ["soon", "1.5", "10ms"])
def test_malformed_mock_latency_is_invalid_not_missing(monkeypatch, raw):
    monkeypatch.setenv("VRS_MOCK_LATENCY_MS", raw)
    with pytest.raises(InvalidConfiguration) as excinfo:
        runtime_config.get_mock_latency_seconds()
    assert isinstance(excinfo.value, ValueError)
    assert not isinstance(excinfo.value, MissingConfiguration)


def test_collection_and_log_level_defaults(monkeypatch):
    monkeypatch.delenv("VRS_RESOURCES_COLLECTION", raising=False)
    monkeypatch.setenv("VRS_LOG_LEVEL", "debug")
    assert runtime_config.get_resources_collection() == "resources"
    assert runtime_config.get_log_level() == "DEBUG"
