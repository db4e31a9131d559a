from __future__ import annotations

import pytest

from task_api import __version__
from task_api.core.config import Settings


def test_test_profile_quiets_logging() -> None:
    settings = Settings(environment="testing")

    assert settings.environment == "test"
    assert settings.log_level == "WARNING"
    assert settings.log_errors is False
    assert settings.reload is False


def test_explicit_values_override_profile() -> None:
    settings = Settings(environment="development", log_level="error", reload=False)

    assert settings.log_level == "ERROR"
    assert settings.reload is False
    assert settings.log_errors is True


def test_unknown_environment_falls_back_to_development() -> None:
    assert Settings(environment="staging").environment == "development"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(1, 4), (4, 4), (12, 12), (99, 31), ("11", 11), ("many", 10)],
)
def test_hash_rounds_are_clamped(raw: object, expected: int) -> None:
    assert Settings(password_hash_rounds=raw).password_hash_rounds == expected


@pytest.mark.parametrize(
    ("prefix", "expected"),
    [("", ""), ("/", ""), ("api", "/api"), ("/api/v1/", "/api/v1")],
)
def test_router_prefix_is_normalised(prefix: str, expected: str) -> None:
    assert Settings(api_prefix=prefix).router_prefix == expected


def test_cors_lists_accept_comma_separated_values() -> None:
    settings = Settings(cors_allow_origins="http://a.test, http://b.test,")

    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]


def test_defaults() -> None:
    settings = Settings(environment="production")

    assert settings.app_port == 3000
    assert settings.auth_realm == "TaskAPI"
    assert settings.version == __version__


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("mongodb://db.internal:27017/tracker", "tracker"),
        ("mongodb://u:p@h1:1,h2:2/tracker?replicaSet=rs0", "tracker"),
        ("mongodb://localhost:27017/", "fallback"),
        ("mongodb://localhost:27017/?retryWrites=true", "fallback"),
        ("mongodb://localhost:27017", "fallback"),
    ],
)
def test_database_name_prefers_connection_url(url: str, expected: str) -> None:
    settings = Settings(mongo_url=url, mongo_database="fallback")
    assert settings.database_name == expected
