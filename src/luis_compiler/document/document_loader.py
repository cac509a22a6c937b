"""
Document Loader
===============

Utility module responsible for loading training corpora from disk.

One or more YAML files are read with `yaml.safe_load` and merged into
a single mapping. Duplicate top-level keys across files are handled by
an explicit conflict policy instead of silent dictionary overwrite.

Conflict policies
-----------------
- "override" : the later file's value replaces the earlier one
- "error"    : abort with `DuplicateDocumentKeyError`

Usage
-----
    from luis_compiler.document.document_loader import load_document
    document = load_document(["data/greetings.yml", "data/flights.yml"])
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Union

import yaml

from luis_compiler.compiler.errors import (
    DocumentReadError,
    DocumentShapeError,
    DuplicateDocumentKeyError,
)
from luis_compiler.document.document_models import Document


PathLike = Union[str, Path]

CONFLICT_POLICIES = ("override", "error")


# --------------------------------------------------
# Single file loading
# --------------------------------------------------

def load_yaml_file(path: PathLike) -> Dict[str, Any]:
    """
    Load one YAML corpus file.

    Parameters
    ----------
    path : PathLike
        YAML file path.

    Returns
    -------
    Dict[str, Any]
        Parsed mapping (empty for an empty file).

    Raises
    ------
    DocumentReadError
        If the file cannot be read or parsed.
    DocumentShapeError
        If the top level is not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise DocumentReadError(f"Training file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as file:
            content = yaml.safe_load(file)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise DocumentReadError(
            f"Not able to parse language model {path}: {e}"
        ) from e

    if content is None:
        return {}

    if not isinstance(content, dict):
        raise DocumentShapeError(
            f"Top level of {path} must be a mapping, got {type(content).__name__}"
        )

    return content


# --------------------------------------------------
# Multi-file merging
# --------------------------------------------------

def merge_documents(
    sources: Iterable[PathLike],
    conflict_policy: str = "override",
) -> Dict[str, Any]:
    """
    Load and merge several YAML files into one raw mapping.

    Parameters
    ----------
    sources : Iterable[PathLike]
        Files to merge, in order.
    conflict_policy : str
        "override" or "error".

    Returns
    -------
    Dict[str, Any]
        Merged mapping. Keys keep the order of their first appearance.
    """
    if conflict_policy not in CONFLICT_POLICIES:
        raise ValueError(
            f"Unknown conflict policy '{conflict_policy}', "
            f"expected one of {CONFLICT_POLICIES}"
        )

    merged: Dict[str, Any] = {}
    origin: Dict[str, str] = {}

    for source in sources:
        content = load_yaml_file(source)

        for key, value in content.items():
            if key in merged and conflict_policy == "error":
                raise DuplicateDocumentKeyError(str(key), origin[key], str(source))

            merged[key] = value
            origin[key] = str(source)

    return merged


def load_document(
    sources: Iterable[PathLike],
    conflict_policy: str = "override",
) -> Document:
    """Load, merge and partition training files into a `Document`."""
    return Document.from_mapping(merge_documents(sources, conflict_policy))
