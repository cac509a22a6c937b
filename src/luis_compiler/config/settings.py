"""
Compiler Settings
=================

Typed view over the YAML compilation settings, with environment
variable overrides.

Resolution order (last wins):

1. `config/compiler/model_config.yaml`
2. Process environment (optionally populated from `.env`)

Supported environment overrides
-------------------------------
- LUIS_SCHEMA_VERSION
- LUIS_MODEL_NAME
- LUIS_MODEL_DESCRIPTION
- LUIS_CULTURE
- LUIS_CONFLICT_POLICY
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict

from luis_compiler.config.paths import MODEL_CONFIG_PATH


ENV_OVERRIDES = {
    "LUIS_SCHEMA_VERSION": "luis_schema_version",
    "LUIS_MODEL_NAME": "model_name",
    "LUIS_MODEL_DESCRIPTION": "model_description",
    "LUIS_CULTURE": "default_culture",
    "LUIS_CONFLICT_POLICY": "conflict_policy",
}


class CompilerSettings(BaseModel):
    """
    Settings shared by the document loader, the model compiler
    and the command-line runner.
    """

    model_config = ConfigDict(protected_namespaces=())

    luis_schema_version: str = "1.3.0"
    model_name: str = "tef"
    model_description: str = "Bot Model"
    default_culture: str = "en-us"
    supported_cultures: List[str] = ["en-us"]
    max_intent_name_length: int = 50
    conflict_policy: Literal["override", "error"] = "override"

    def is_supported_culture(self, culture: str) -> bool:
        return culture.lower() in {c.lower() for c in self.supported_cultures}


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> CompilerSettings:
    """
    Load compiler settings from YAML and apply environment overrides.

    Parameters
    ----------
    config_path : Optional[Path]
        YAML settings file. Defaults to `MODEL_CONFIG_PATH`.
    environ : Optional[Dict[str, str]]
        Environment mapping. Defaults to `os.environ`.

    Returns
    -------
    CompilerSettings
        Validated settings.

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist.
    """
    path = Path(config_path) if config_path is not None else MODEL_CONFIG_PATH
    environ = os.environ if environ is None else environ

    if not path.exists():
        raise FileNotFoundError(f"Compiler config not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        cfg: Dict[str, Any] = yaml.safe_load(f) or {}

    for env_key, field in ENV_OVERRIDES.items():
        value = environ.get(env_key)
        if value:
            cfg[field] = value

    return CompilerSettings(**cfg)
