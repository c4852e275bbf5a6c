"""
Tests for configuration parsing.
"""

from user_directory_api.app.core.config import Settings, parse_seed_users


def test_parse_seed_users():
    assert parse_seed_users("admin=Administrator, ops = Operations Team") == {
        "admin": "Administrator",
        "ops": "Operations Team",
    }


def test_parse_seed_users_skips_malformed():
    assert parse_seed_users("admin=Administrator,broken,,") == {"admin": "Administrator"}


def test_parse_seed_users_keeps_equals_in_name():
    assert parse_seed_users("eq=a=b") == {"eq": "a=b"}


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("SEED_USERS", raising=False)
    assert Settings().seed_users == {"admin": "Administrator"}


def test_seed_users_from_environment(monkeypatch):
    monkeypatch.setenv("SEED_USERS", "root=Root")
    assert Settings().seed_users == {"root": "Root"}
