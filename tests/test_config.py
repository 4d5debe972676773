import pytest
from pydantic import ValidationError

from loan_portal.config import ClientSettings, load_client_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOAN_API_BASE_URL", raising=False)
    monkeypatch.delenv("LOAN_API_ENDPOINT", raising=False)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOAN_API_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("LOAN_API_ENDPOINT", "/api/loan-applications/apply")

    settings = load_client_settings()

    assert settings.base_url == "http://localhost:8080/"
    assert settings.endpoint_path == "/api/loan-applications/apply"


def test_settings_from_yaml_with_env_override(monkeypatch, tmp_path):
    config = tmp_path / "client.yml"
    config.write_text(
        "loan_api:\n  base_url: http://decisions.internal\n  endpoint_path: v2/apply\n",
        encoding="utf-8",
    )
    settings = load_client_settings(config)
    assert settings.base_url == "http://decisions.internal"
    assert settings.endpoint_path == "v2/apply"

    monkeypatch.setenv("LOAN_API_BASE_URL", "http://localhost:9000")
    settings = load_client_settings(config)
    assert settings.base_url == "http://localhost:9000"
    assert settings.endpoint_path == "v2/apply"


def test_endpoint_defaults(monkeypatch):
    monkeypatch.setenv("LOAN_API_BASE_URL", "http://localhost:8080")
    assert load_client_settings().endpoint_path == "api/loan-applications/apply"


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_client_settings(tmp_path / "missing.yml")


def test_missing_base_url_fails_validation():
    with pytest.raises(ValidationError):
        load_client_settings()


def test_blank_base_url_rejected():
    with pytest.raises(ValidationError):
        ClientSettings(base_url="   ")
