"""
Compiler settings and environment loading tests.
"""

import os

import pytest
from pydantic import ValidationError

from luis_compiler.config.env_loader import load_env
from luis_compiler.config.settings import CompilerSettings, load_settings


def test_packaged_settings():
    settings = load_settings(environ={})

    assert settings.luis_schema_version == "1.3.0"
    assert settings.default_culture == "en-us"
    assert settings.max_intent_name_length == 50
    assert settings.conflict_policy == "override"
    assert settings.is_supported_culture("en-us")
    assert settings.is_supported_culture("ES-ES")


def test_environment_overrides():
    settings = load_settings(
        environ={"LUIS_MODEL_NAME": "mybot", "LUIS_CULTURE": "es-es", "LUIS_OTHER": "x"}
    )

    assert settings.model_name == "mybot"
    assert settings.default_culture == "es-es"


def test_custom_settings_file(tmp_path):
    path = tmp_path / "model_config.yaml"
    path.write_text(
        "model_name: custom\nsupported_cultures: [fr-fr]\nmax_intent_name_length: 10\n",
        encoding="utf-8",
    )

    settings = load_settings(path, environ={})

    assert settings.model_name == "custom"
    assert settings.max_intent_name_length == 10
    assert not settings.is_supported_culture("en-us")
    # Unset keys fall back to defaults
    assert settings.luis_schema_version == "1.3.0"


def test_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_invalid_conflict_policy():
    with pytest.raises(ValidationError):
        CompilerSettings(conflict_policy="merge")


# --------------------------------------------------
# .env loading
# --------------------------------------------------

def test_load_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LUIS_TEST_MODEL_NAME", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LUIS_TEST_MODEL_NAME=from-dotenv\n", encoding="utf-8")

    assert load_env(env_file) is True
    assert os.environ["LUIS_TEST_MODEL_NAME"] == "from-dotenv"


def test_missing_env_file_is_optional(tmp_path):
    assert load_env(tmp_path / ".env") is False


def test_missing_env_file_when_required(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_env(tmp_path / ".env", required=True)
