import pytest

from idm_client.config import settings
from idm_client.net import ProxyCredentials

ENV_VARS = [
    "IDM_DOMAIN",
    "IDM_API_TOKEN",
    "IDM_TELEMETRY",
    "IDM_HTTP_LOGGING",
    "IDM_PROXY_URL",
    "IDM_PROXY_USERNAME",
    "IDM_PROXY_PASSWORD",
    "IDM_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    # Point /run/secrets at an empty temp directory
    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return tmp_path


def test_loads_minimal_settings(monkeypatch):
    monkeypatch.setenv("IDM_DOMAIN", "tenant.example.com")
    monkeypatch.setenv("IDM_API_TOKEN", "env-token")

    cfg = settings.load_settings()

    assert cfg.domain == "tenant.example.com"
    assert cfg.api_token == "env-token"
    assert cfg.telemetry_enabled is True
    assert cfg.logging_enabled is False
    assert cfg.proxy_url is None
    assert cfg.proxy_credentials is None
    assert cfg.timeout == 10


def test_api_token_prefers_run_secrets(monkeypatch, clean_env):
    (clean_env / "idm_api_token").write_text("file-token\n")
    monkeypatch.setenv("IDM_DOMAIN", "tenant.example.com")
    monkeypatch.setenv("IDM_API_TOKEN", "env-token")

    assert settings.load_settings().api_token == "file-token"


def test_empty_secret_file_falls_back_to_env(monkeypatch, clean_env):
    (clean_env / "idm_api_token").write_text("   ")
    monkeypatch.setenv("IDM_DOMAIN", "tenant.example.com")
    monkeypatch.setenv("IDM_API_TOKEN", "env-token")

    assert settings.load_settings().api_token == "env-token"


def test_reads_every_option(monkeypatch, clean_env):
    (clean_env / "idm_proxy_password").write_text("s3cret")
    monkeypatch.setenv("IDM_DOMAIN", "https://tenant.example.com")
    monkeypatch.setenv("IDM_API_TOKEN", "env-token")
    monkeypatch.setenv("IDM_TELEMETRY", "false")
    monkeypatch.setenv("IDM_HTTP_LOGGING", "yes")
    monkeypatch.setenv("IDM_PROXY_URL", "http://proxy.local:3128")
    monkeypatch.setenv("IDM_PROXY_USERNAME", "svc")
    monkeypatch.setenv("IDM_TIMEOUT", "2.5")

    cfg = settings.load_settings()

    assert cfg.telemetry_enabled is False
    assert cfg.logging_enabled is True
    assert cfg.proxy_url == "http://proxy.local:3128"
    assert cfg.proxy_credentials == ProxyCredentials("svc", "s3cret")
    assert cfg.timeout == 2.5


def test_missing_domain(monkeypatch):
    monkeypatch.setenv("IDM_API_TOKEN", "env-token")
    with pytest.raises(RuntimeError, match="IDM_DOMAIN"):
        settings.load_settings()


def test_missing_token(monkeypatch):
    monkeypatch.setenv("IDM_DOMAIN", "tenant.example.com")
    with pytest.raises(RuntimeError, match="IDM_API_TOKEN"):
        settings.load_settings()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("IDM_DOMAIN", "tenant.example.com")
    monkeypatch.setenv("IDM_API_TOKEN", "env-token")
    monkeypatch.setenv("IDM_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="IDM_TIMEOUT must be a number"):
        settings.load_settings()


def test_proxy_credentials_without_password():
    cfg = settings.ClientSettings(domain="d", api_token="t", proxy_username="svc")
    assert cfg.proxy_credentials == ProxyCredentials("svc", "")
