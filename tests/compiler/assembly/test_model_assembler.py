"""
Model Assembler tests.
"""

from luis_compiler.compiler.assembly.model_assembler import (
    assemble_model,
    build_model_feature,
)
from luis_compiler.compiler.luis_models import LuisEntity
from luis_compiler.compiler.utterances.utterance_builder import build_utterance
from luis_compiler.document.document_models import PhraselistDefinition


def test_model_feature_words_are_normalized_and_comma_joined():
    phraselist = PhraselistDefinition(
        name="drinks", words=["Café con Leche", "Coca-Cola", "  "]
    )

    feature = build_model_feature(phraselist, "en-us")

    assert feature.model_dump() == {
        "name": "drinks",
        "mode": True,
        "words": "café con leche,coca - cola",
        "activated": True,
    }


def test_model_feature_keeps_flags_and_folds_for_culture():
    phraselist = PhraselistDefinition(
        name="cities", words=["ÁVILA"], activated=False, mode=False
    )

    feature = build_model_feature(phraselist, "es-es")

    assert feature.words == "ávila"
    assert feature.activated is False
    assert feature.mode is False


def test_assembled_model_layout():
    model = assemble_model(
        schema_version="1.3.0",
        name="bot",
        desc="Bot Model",
        culture="en-us",
        intents=["travel"],
        entities=[LuisEntity(name="city"), LuisEntity(name="date", children=["weekday"])],
        phraselists=[],
        builtin_entities=[{"name": "number"}],
        utterances=[build_utterance("go to [Burgos:city]", "travel")],
    )

    data = model.to_dict()

    assert list(data.keys()) == [
        "luis_schema_version",
        "name",
        "desc",
        "culture",
        "intents",
        "entities",
        "composites",
        "bing_entities",
        "actions",
        "model_features",
        "regex_features",
        "utterances",
    ]
    assert data["entities"] == [
        {"name": "city"},
        {"name": "date", "children": ["weekday"]},
    ]
    assert data["composites"] == [] and data["actions"] == [] and data["regex_features"] == []
    assert data["bing_entities"] == [{"name": "number"}]
    assert data["utterances"] == [
        {
            "text": "go to Burgos",
            "intent": "travel",
            "entities": [{"entity": "city", "startPos": 2, "endPos": 2}],
        }
    ]
