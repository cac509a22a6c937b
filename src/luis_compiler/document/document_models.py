"""
Training Document Models
========================

Canonical data models describing a merged training corpus, as handed
to the model compiler.

A raw corpus is a single mapping whose top-level keys are partitioned
purely by naming convention:

- `list.<name>`  : replacement values for `${<name>}` placeholders
- `phraselist`   : phraselist feature definitions
- `builtin`      : builtin ("bing") entities, passed through untouched
- anything else  : an intent name mapped to its sentence templates

Example
-------
    greeting:
      - hello
      - good ${daytime}
    book_flight:
      - fly to [${city}:city] on [monday:date::weekday]
    list.daytime: [morning, evening]
    list.city: [Madrid, Burgos]
    phraselist:
      - name: cities
        words: madrid, burgos, santiago
    builtin:
      - number

Dependencies
------------
- typing
- pydantic

Notes
-----
- Partitioning happens once, in `Document.from_mapping`.
- Unrecognized shapes are rejected here, so downstream stages never
  deal with untyped values.
"""

from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ValidationError

from luis_compiler.compiler.errors import DocumentShapeError


LIST_PREFIX = "list."
PHRASELIST_KEY = "phraselist"
BUILTIN_KEY = "builtin"

SCALAR_TYPES = (str, int, float, bool)


# --------------------------------------------------
# Partition models
# --------------------------------------------------

class IntentDefinition(BaseModel):
    """
    An intent and its ordered sentence templates.

    Attributes
    ----------
    name : str
        Intent name as authored.
    sentences : List[str]
        Templates, possibly with `${list}` placeholders and
        `[value:type]` entity tags.
    """

    name: str
    sentences: List[str] = []


class ListDefinition(BaseModel):
    """Named list of literal replacement values, in declared order."""

    name: str
    values: List[str] = []


class PhraselistDefinition(BaseModel):
    """
    Phraselist feature as authored.

    Attributes
    ----------
    name : str
        Feature name.
    words : List[str]
        Related words or phrases, not yet normalized.
    activated : bool
        Whether the feature is active (default: True).
    mode : bool
        Interchangeable flag of the target service (default: True).
    """

    name: str
    words: List[str] = []
    activated: bool = True
    mode: bool = True


# --------------------------------------------------
# Document model
# --------------------------------------------------

class Document(BaseModel):
    """
    Strongly-typed view of a merged training corpus.
    """

    intents: List[IntentDefinition] = []
    lists: Dict[str, List[str]] = {}
    phraselists: List[PhraselistDefinition] = []
    builtin_entities: List[Dict[str, Any]] = []

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Document":
        """
        Partition a raw key/value corpus into intents, lists,
        phraselists and builtin entities.

        Parameters
        ----------
        raw : Mapping[str, Any]
            Merged corpus, as produced by the document loader.

        Returns
        -------
        Document
            Typed document.

        Raises
        ------
        DocumentShapeError
            If the corpus or any of its sections has an unexpected shape.
        """
        if raw is None:
            return cls()

        if not isinstance(raw, Mapping):
            raise DocumentShapeError(
                f"Training document must be a mapping, got {type(raw).__name__}"
            )

        intents: List[IntentDefinition] = []
        lists: Dict[str, List[str]] = {}
        phraselists: List[PhraselistDefinition] = []
        builtin_entities: List[Dict[str, Any]] = []

        for key, value in raw.items():
            key = str(key)

            if key.startswith(LIST_PREFIX):
                name = _list_name(key)
                lists[name] = _string_items(value, key)
            elif key == PHRASELIST_KEY:
                phraselists = _parse_phraselists(value)
            elif key == BUILTIN_KEY:
                builtin_entities = _parse_builtin(value)
            else:
                intents.append(
                    IntentDefinition(name=key, sentences=_string_items(value, key))
                )

        return cls(
            intents=intents,
            lists=lists,
            phraselists=phraselists,
            builtin_entities=builtin_entities,
        )


# --------------------------------------------------
# Section parsing helpers
# --------------------------------------------------

def _list_name(key: str) -> str:
    """
    Strip the `list.` prefix. Legacy corpora write the key as
    `list.${name}`, which is accepted as `name`.
    """
    name = key[len(LIST_PREFIX):]
    if name.startswith("${") and name.endswith("}"):
        name = name[2:-1]
    return name


def _string_items(value: Any, key: str) -> List[str]:
    """Coerce a YAML sequence of scalars into a list of strings."""
    if value is None:
        return []

    if not isinstance(value, list):
        raise DocumentShapeError(
            f"'{key}' must be a list of sentences, got {type(value).__name__}"
        )

    items = []
    for item in value:
        if not isinstance(item, SCALAR_TYPES):
            raise DocumentShapeError(
                f"'{key}' contains a non-text item: {item!r}"
            )
        items.append(str(item))
    return items


def _parse_phraselists(value: Any) -> List[PhraselistDefinition]:
    if value is None:
        return []

    if not isinstance(value, list):
        raise DocumentShapeError("'phraselist' must be a list of features")

    phraselists = []
    for item in value:
        if not isinstance(item, Mapping) or "name" not in item:
            raise DocumentShapeError(
                f"Phraselist entries need at least a name: {item!r}"
            )

        words = item.get("words") or []
        if isinstance(words, str):
            words = [w.strip() for w in words.split(",") if w.strip()]
        else:
            words = _string_items(words, f"phraselist.{item['name']}")

        try:
            phraselist = PhraselistDefinition(
                name=str(item["name"]),
                words=words,
                activated=item.get("activated", True),
                mode=item.get("mode", True),
            )
        except ValidationError as e:
            raise DocumentShapeError(
                f"Invalid phraselist '{item['name']}': {e}"
            ) from e

        phraselists.append(phraselist)

    return phraselists


def _parse_builtin(value: Any) -> List[Dict[str, Any]]:
    if value is None:
        return []

    if not isinstance(value, list):
        raise DocumentShapeError("'builtin' must be a list of entities")

    entities = []
    for item in value:
        if isinstance(item, str):
            entities.append({"name": item})
        elif isinstance(item, Mapping):
            entities.append(dict(item))
        else:
            raise DocumentShapeError(f"Unrecognized builtin entity: {item!r}")
    return entities
