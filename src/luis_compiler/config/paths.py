"""
Project Directory Constants
===========================

Defines and centralizes all filesystem paths used throughout the
LUIS Model Compiler project.

All paths are implemented using `pathlib.Path` to guarantee
cross-platform compatibility and improved readability.

The constants defined here are used by the settings loader,
the environment setup and the command-line runner.
"""

from pathlib import Path


# =============================================================================
# Root Directory
# =============================================================================

# Absolute path to the project root directory.
# It is computed relative to this file to ensure portability.
ROOT_DIR = Path(__file__).resolve().parents[3]


# =============================================================================
# Package Directories
# =============================================================================

PACKAGE_DIR = Path(__file__).resolve().parents[1]   # luis_compiler package root
CONFIG_DIR = PACKAGE_DIR / "config"                 # General configuration folder
COMPILER_CONFIG_DIR = CONFIG_DIR / "compiler"       # Model compilation settings


# =============================================================================
# Configuration Files
# =============================================================================

MODEL_CONFIG_PATH = COMPILER_CONFIG_DIR / "model_config.yaml"


# =============================================================================
# Output
# =============================================================================

MODELS_DIR = ROOT_DIR / "models"                    # Default output directory
DEFAULT_OUTPUT_PATH = MODELS_DIR / "luis_model.json"


# =============================================================================
# Environment File
# =============================================================================

ENV_PATH = ROOT_DIR / ".env"  # Environment variables file
