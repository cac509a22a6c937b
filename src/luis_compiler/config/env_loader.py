"""
Environment Loader Utility
==========================

This module provides a utility function for loading environment variables
from a `.env` file into the system environment.

It is used as an explicit initialization step before the compiler
settings are resolved, so that values such as the model name or the
target culture can be overridden per deployment without editing the
YAML configuration.

Dependencies
------------
- python-dotenv
- config.paths (ENV_PATH)

Example
-------
>>> from luis_compiler.config.env_loader import load_env
>>> load_env()
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from luis_compiler.config.paths import ENV_PATH


# ==================================================
# Environment loading
# ==================================================

def load_env(env_path: Optional[Path] = None, required: bool = False) -> bool:
    """
    Load environment variables from a `.env` file into the system environment.

    Parameters
    ----------
    env_path : Optional[Path]
        Location of the `.env` file. Defaults to `ENV_PATH`.
    required : bool
        If True, a missing file is an error instead of a no-op.

    Returns
    -------
    bool
        True if a file was found and loaded.

    Raises
    ------
    FileNotFoundError
        If `required` is set and the `.env` file does not exist.
    """
    path = Path(env_path) if env_path is not None else ENV_PATH

    if not os.path.exists(path):
        if required:
            raise FileNotFoundError(
                f".env file not found at expected path: {path}"
            )
        return False

    # Variables already present in the process environment win
    return load_dotenv(path, override=False)
