from distance_matrix.config import DEFAULT_BASE_URL, load_settings
from distance_matrix.models import Units


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("DISTANCE_MATRIX_API_KEY", "env-key")
    monkeypatch.setenv("DISTANCE_MATRIX_UNITS", "metric")
    settings = load_settings()

    assert settings.DISTANCE_MATRIX_API_KEY == "env-key"
    assert settings.DISTANCE_MATRIX_UNITS is Units.METRIC
    assert settings.DISTANCE_MATRIX_BASE_URL == DEFAULT_BASE_URL


def test_load_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DISTANCE_MATRIX_API_KEY", raising=False)
    monkeypatch.delenv("DISTANCE_MATRIX_UNITS", raising=False)
    settings = load_settings()

    assert settings.DISTANCE_MATRIX_API_KEY == ""
    assert settings.DISTANCE_MATRIX_UNITS is Units.IMPERIAL
    assert settings.DISTANCE_MATRIX_TIMEOUT_SECONDS == 10.0


def test_load_settings_overrides_env(monkeypatch) -> None:
    monkeypatch.setenv("DISTANCE_MATRIX_API_KEY", "env-key")
    settings = load_settings(DISTANCE_MATRIX_API_KEY="explicit-key")

    assert settings.DISTANCE_MATRIX_API_KEY == "explicit-key"
