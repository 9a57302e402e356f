import pytest
from gerrit_rest.core.config import create_client_from_env, load_env_config
from gerrit_rest.core.errors import GerritConfigurationError

ENV_VARS = ("GERRIT_BASE_URL", "GERRIT_USERNAME", "GERRIT_PASSWORD", "GERRIT_AUTH_TYPE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Prevent load_dotenv from repopulating values from .env
    monkeypatch.setattr("gerrit_rest.core.config.load_dotenv", lambda *a, **k: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_env_config_defaults(monkeypatch):
    monkeypatch.setenv("GERRIT_BASE_URL", " https://review.example.com/ ")
    config = load_env_config(use_dotenv=False)
    assert config.base_url == "https://review.example.com/"
    assert config.username is None
    assert config.auth_type == "none"


def test_load_env_config_defaults_to_basic_with_username(monkeypatch):
    monkeypatch.setenv("GERRIT_BASE_URL", "https://review.example.com/")
    monkeypatch.setenv("GERRIT_USERNAME", "john")
    monkeypatch.setenv("GERRIT_PASSWORD", "secret")
    config = load_env_config(use_dotenv=False)
    assert config.auth_type == "basic"
    assert config.password == "secret"


def test_create_client_from_env_requires_base_url():
    with pytest.raises(GerritConfigurationError) as exc:
        create_client_from_env()
    assert "GERRIT_BASE_URL" in str(exc.value)


def test_create_client_from_env_rejects_unknown_auth_type(monkeypatch):
    monkeypatch.setenv("GERRIT_BASE_URL", "https://review.example.com/")
    monkeypatch.setenv("GERRIT_AUTH_TYPE", "kerberos")
    with pytest.raises(GerritConfigurationError):
        create_client_from_env()


def test_create_client_from_env_requires_credentials(monkeypatch):
    monkeypatch.setenv("GERRIT_BASE_URL", "https://review.example.com/")
    monkeypatch.setenv("GERRIT_AUTH_TYPE", "digest")
    monkeypatch.setenv("GERRIT_USERNAME", "john")
    with pytest.raises(GerritConfigurationError):
        create_client_from_env()


@pytest.mark.parametrize(
    "auth_type, predicate",
    [
        ("basic", "has_basic_auth"),
        ("Digest", "has_digest_auth"),
        ("cookie", "has_cookie_auth"),
    ],
)
def test_create_client_from_env_applies_auth(monkeypatch, auth_type, predicate):
    monkeypatch.setenv("GERRIT_BASE_URL", "https://review.example.com")
    monkeypatch.setenv("GERRIT_USERNAME", "john")
    monkeypatch.setenv("GERRIT_PASSWORD", "secret")
    monkeypatch.setenv("GERRIT_AUTH_TYPE", auth_type)

    client = create_client_from_env(timeout_seconds=5.0)

    assert client.base_url == "https://review.example.com/"
    assert getattr(client.authentication, predicate)()
    assert client.build_url("changes/") == "https://review.example.com/a/changes/"


def test_create_client_from_env_anonymous(monkeypatch):
    monkeypatch.setenv("GERRIT_BASE_URL", "https://review.example.com/")
    client = create_client_from_env()
    assert not client.authentication.has_auth()
    assert client.build_url("changes/") == "https://review.example.com/changes/"
