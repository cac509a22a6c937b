"""
Compilation Errors
==================

Exception hierarchy raised by the model compilation pipeline.

Every error is fail-fast: the pipeline never produces a partial model.
The command-line runner is the only place where these errors are
turned into a console message and a non-zero exit status.
"""


class ModelCompilationError(ValueError):
    """Base class for all model compilation failures."""


# --------------------------------------------------
# Input document errors
# --------------------------------------------------

class DocumentReadError(ModelCompilationError):
    """Source document is unreadable or is not valid YAML."""


class DocumentShapeError(DocumentReadError):
    """Source document parsed, but its structure is not recognized."""


class DuplicateDocumentKeyError(DocumentReadError):
    """The same top-level key appears in more than one merged file."""

    def __init__(self, key: str, first_source: str, second_source: str):
        self.key = key
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"Key '{key}' defined in both {first_source} and {second_source}"
        )


# --------------------------------------------------
# Compilation errors
# --------------------------------------------------

class IntentNameTooLongError(ModelCompilationError):
    """Intent name exceeds the maximum length accepted by the service."""

    def __init__(self, intent: str, max_length: int):
        self.intent = intent
        self.max_length = max_length
        super().__init__(
            f"Not able to process intents longer than {max_length} characters: "
            f"'{intent}' ({len(intent)} characters)"
        )


class UnresolvedListReferenceError(ModelCompilationError):
    """A `${name}` placeholder refers to a list that is not defined."""

    def __init__(self, list_name: str, sentence: str):
        self.list_name = list_name
        self.sentence = sentence
        super().__init__(
            f"Unknown list '{list_name}' referenced in sentence: {sentence}"
        )


class CyclicListReferenceError(ModelCompilationError):
    """A list value (directly or transitively) references its own list."""

    def __init__(self, list_name: str, sentence: str):
        self.list_name = list_name
        self.sentence = sentence
        super().__init__(
            f"List '{list_name}' references itself while expanding: {sentence}"
        )


class UnsupportedCultureError(ModelCompilationError):
    """Culture is not in the configured set of supported cultures."""


class EmptyEntityValueError(DocumentShapeError):
    """An entity tag whose value contains no tokens, e.g. `[ :city]`."""

    def __init__(self, tag: str, sentence: str):
        self.tag = tag
        self.sentence = sentence
        super().__init__(f"Entity tag {tag} has an empty value in sentence: {sentence}")
