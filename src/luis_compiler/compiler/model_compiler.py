"""
LUIS Model Compiler
===================

Orchestrates the full compilation pipeline from a training document
to a LUIS model document.

This pipeline handles:

1. Validation of the culture and of intent names.
2. Expansion of `${list}` placeholders into concrete sentences.
3. Extraction of inline `[value:type]` entity tags.
4. Registration of entity types and subtypes.
5. Construction of tokenized utterances with entity positions.
6. Assembly of the final model.

Input
-----
document : Document
    Merged and partitioned training corpus.

culture : str, optional
    Culture code (defaults to the configured culture).

Output
------
LuisModel
    Complete model, or an exception. A partial model is never returned.
"""

from datetime import datetime
from typing import Optional

from luis_compiler.compiler.assembly.model_assembler import assemble_model
from luis_compiler.compiler.errors import (
    IntentNameTooLongError,
    UnsupportedCultureError,
)
from luis_compiler.compiler.expansion.variable_expander import expand_variables
from luis_compiler.compiler.extraction.entity_extractor import extract_entities
from luis_compiler.compiler.luis_models import LuisModel
from luis_compiler.compiler.registry.entity_registry import EntityRegistry
from luis_compiler.compiler.utterances.utterance_builder import (
    UtteranceCollection,
    build_utterance,
)
from luis_compiler.config.settings import CompilerSettings
from luis_compiler.document.document_models import Document


class ModelCompiler:
    """
    Full orchestration of the model compilation pipeline.

    Each call to `compile` is independent: registries are created
    fresh for every run, so compiling the same document twice yields
    identical output.
    """

    def __init__(self, settings: Optional[CompilerSettings] = None):
        """
        Parameters
        ----------
        settings : Optional[CompilerSettings]
            Compilation settings. Defaults are used if omitted.
        """
        self.settings = settings or CompilerSettings()

    def compile(
        self,
        document: Document,
        culture: Optional[str] = None,
        generated_at: Optional[datetime] = None,
    ) -> LuisModel:
        """
        Compile a document into a LUIS model.

        Parameters
        ----------
        document : Document
            Training corpus.
        culture : Optional[str]
            Target culture. Defaults to `settings.default_culture`.
        generated_at : Optional[datetime]
            If given, appended to the model description.

        Returns
        -------
        LuisModel
            Compiled model.

        Raises
        ------
        UnsupportedCultureError
            If the culture is not supported.
        IntentNameTooLongError
            If an intent name exceeds the configured maximum length.
        UnresolvedListReferenceError
            If a template references an unknown list.
        CyclicListReferenceError
            If a list references itself.
        """
        culture = (culture or self.settings.default_culture).lower()

        # -----------------------------
        # 1 — Input validation
        # -----------------------------
        if not self.settings.is_supported_culture(culture):
            raise UnsupportedCultureError(
                f"Culture '{culture}' is not supported. "
                f"Supported cultures: {', '.join(self.settings.supported_cultures)}"
            )

        self.validate_intent_names(document)

        # -----------------------------
        # 2 — Sentence processing
        # -----------------------------
        registry = EntityRegistry()
        utterances = UtteranceCollection()

        for intent in document.intents:
            for template in intent.sentences:
                for sentence in expand_variables(template, document.lists):
                    spans = extract_entities(sentence)
                    registry.register(spans)
                    utterances.add(build_utterance(sentence, intent.name, spans))

        # -----------------------------
        # 3 — Model assembly
        # -----------------------------
        desc = self.settings.model_description
        if generated_at is not None:
            desc = f"{desc} {generated_at.isoformat()}"

        return assemble_model(
            schema_version=self.settings.luis_schema_version,
            name=self.settings.model_name,
            desc=desc,
            culture=culture,
            intents=[intent.name for intent in document.intents],
            entities=registry.entities(),
            phraselists=document.phraselists,
            builtin_entities=document.builtin_entities,
            utterances=utterances,
        )

    def validate_intent_names(self, document: Document) -> None:
        max_length = self.settings.max_intent_name_length
        for intent in document.intents:
            if len(intent.name) > max_length:
                raise IntentNameTooLongError(intent.name, max_length)
