"""
Model Assembler
===============

Final aggregation stage: collects intents, registered entities,
phraselist features, builtin entities and utterances into a
`LuisModel`.

This stage performs no validation of its own; every input has already
been checked by the earlier stages.
"""

from typing import Any, Dict, Iterable, List, Sequence

from luis_compiler.compiler.luis_models import (
    LuisEntity,
    LuisIntent,
    LuisModel,
    ModelFeature,
    Utterance,
)
from luis_compiler.compiler.normalization.normalizer import TextNormalizer
from luis_compiler.document.document_models import PhraselistDefinition


WORDS_SEPARATOR = ","


def build_model_feature(
    phraselist: PhraselistDefinition,
    culture: str,
) -> ModelFeature:
    """
    Convert a phraselist definition into a model feature.

    Each phrase is normalized for the culture, tokenized and re-joined
    with single spaces; phrases are joined with commas.

    Examples
    --------
    >>> pl = PhraselistDefinition(name="drinks", words=["Café con Leche", "Coca-Cola"])
    >>> build_model_feature(pl, "en-us").words
    'café con leche,coca - cola'
    """
    words = [
        TextNormalizer.join_tokens(TextNormalizer.normalize(word, culture))
        for word in phraselist.words
    ]

    return ModelFeature(
        name=phraselist.name,
        mode=phraselist.mode,
        words=WORDS_SEPARATOR.join(word for word in words if word),
        activated=phraselist.activated,
    )


def assemble_model(
    *,
    schema_version: str,
    name: str,
    desc: str,
    culture: str,
    intents: Sequence[str],
    entities: Iterable[LuisEntity],
    phraselists: Iterable[PhraselistDefinition],
    builtin_entities: Iterable[Dict[str, Any]],
    utterances: Iterable[Utterance],
) -> LuisModel:
    """
    Aggregate all compilation results into the output model.

    Parameters
    ----------
    schema_version : str
        `luis_schema_version` value.
    name, desc : str
        Application name and description.
    culture : str
        Culture code of the model.
    intents : Sequence[str]
        Intent names, in document order.
    entities : Iterable[LuisEntity]
        Registered entities, in registration order.
    phraselists : Iterable[PhraselistDefinition]
        Phraselist definitions from the document.
    builtin_entities : Iterable[Dict[str, Any]]
        Builtin entities, passed through as-is.
    utterances : Iterable[Utterance]
        Deduplicated utterances.

    Returns
    -------
    LuisModel
        Complete model document.
    """
    model_features: List[ModelFeature] = [
        build_model_feature(phraselist, culture) for phraselist in phraselists
    ]

    return LuisModel(
        luis_schema_version=schema_version,
        name=name,
        desc=desc,
        culture=culture,
        intents=[LuisIntent(name=intent) for intent in intents],
        entities=list(entities),
        composites=[],
        bing_entities=[dict(entity) for entity in builtin_entities],
        actions=[],
        model_features=model_features,
        regex_features=[],
        utterances=list(utterances),
    )
