"""
LUIS Model Schema
=================

Pydantic models for the compiled LUIS model document
(`luis_schema_version` 1.3.0 layout).

These models act as the output contract of the compiler: field names
and field order match the JSON document imported by the service.

Output layout
-------------
{
    "luis_schema_version": "1.3.0",
    "name": "...",
    "desc": "...",
    "culture": "en-us",
    "intents": [{"name": ...}],
    "entities": [{"name": ..., "children": [...]}],
    "composites": [],
    "bing_entities": [...],
    "actions": [],
    "model_features": [{"name", "mode", "words", "activated"}],
    "regex_features": [],
    "utterances": [{"text", "intent", "entities": [{"entity", "startPos", "endPos"}]}]
}
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# --------------------------------------------------
# Intents and entities
# --------------------------------------------------

class LuisIntent(BaseModel):
    name: str


class LuisEntity(BaseModel):
    """
    Entity type, with optional subtypes (`parent::child` in source).

    Attributes
    ----------
    name : str
        Parent entity type.
    children : Optional[List[str]]
        Subtypes in registration order, None when the entity has none.
    """

    name: str
    children: Optional[List[str]] = None


# --------------------------------------------------
# Utterances
# --------------------------------------------------

class UtteranceEntity(BaseModel):
    """
    Entity annotation over utterance tokens.

    Positions are token indexes, both inclusive.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    entity: str
    start_pos: int = Field(alias="startPos")
    end_pos: int = Field(alias="endPos")


class Utterance(BaseModel):
    """
    Training example: tokenized text, owning intent and entity spans.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    intent: str
    entities: Tuple[UtteranceEntity, ...] = ()

    def structural_key(self) -> Tuple[str, str, Tuple[Tuple[str, int, int], ...]]:
        """Value identity used for deduplication."""
        return (
            self.text,
            self.intent,
            tuple((e.entity, e.start_pos, e.end_pos) for e in self.entities),
        )


# --------------------------------------------------
# Features
# --------------------------------------------------

class ModelFeature(BaseModel):
    """
    Phraselist feature.

    `words` holds the normalized phrases joined with commas.
    """

    name: str
    mode: bool = True
    words: str = ""
    activated: bool = True


# --------------------------------------------------
# Full model
# --------------------------------------------------

class LuisModel(BaseModel):
    """
    Compiled LUIS model document.

    Composites, actions and regex features are always emitted empty.
    """

    model_config = ConfigDict(protected_namespaces=())

    luis_schema_version: str
    name: str
    desc: str
    culture: str
    intents: List[LuisIntent] = []
    entities: List[LuisEntity] = []
    composites: List[Dict[str, Any]] = []
    bing_entities: List[Dict[str, Any]] = []
    actions: List[Dict[str, Any]] = []
    model_features: List[ModelFeature] = []
    regex_features: List[Dict[str, Any]] = []
    utterances: List[Utterance] = []

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the service's JSON layout.

        Entities without subtypes carry no `children` key.
        """
        data = self.model_dump(by_alias=True)

        data["entities"] = [
            {k: v for k, v in entity.items() if not (k == "children" and v is None)}
            for entity in data["entities"]
        ]
        data["utterances"] = [
            {**utterance, "entities": list(utterance["entities"])}
            for utterance in data["utterances"]
        ]

        return data
