"""
Utterance Builder
=================

Turns a tagged sentence into a training utterance: plain tokenized
text plus token-indexed entity spans.

Positions are computed incrementally while the plain text is being
rebuilt, instead of searching for entity values in the final text.
Searching breaks as soon as an entity's first word also appears
earlier in the sentence, e.g.

    Santiago went to [Santiago Bernabeu:place]

Algorithm
---------
For each tag, left to right:

1. append the literal text before the tag to the buffer
2. append the tag value to the buffer
3. startPos = number of tokens before the value, minus one if the
   value was glued onto the last of them
4. endPos = number of tokens in the buffer - 1
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from luis_compiler.compiler.errors import EmptyEntityValueError
from luis_compiler.compiler.extraction.entity_extractor import (
    EntitySpan,
    extract_entities,
)
from luis_compiler.compiler.luis_models import Utterance, UtteranceEntity
from luis_compiler.compiler.normalization.normalizer import TextNormalizer


def build_utterance(
    sentence: str,
    intent: str,
    spans: Optional[Sequence[EntitySpan]] = None,
) -> Utterance:
    """
    Build an utterance from a concrete (expanded) sentence.

    Parameters
    ----------
    sentence : str
        Sentence with inline `[value:type]` tags.
    intent : str
        Owning intent name.
    spans : Optional[Sequence[EntitySpan]]
        Spans already extracted from `sentence`; extracted here if omitted.

    Returns
    -------
    Utterance
        Tokenized plain text and entity spans.

    Raises
    ------
    EmptyEntityValueError
        If a tag value has no tokens (e.g. `[ :city]`).

    Examples
    --------
    >>> u = build_utterance("go to [Burgos:city]", "travel")
    >>> u.text, u.entities[0].start_pos, u.entities[0].end_pos
    ('go to Burgos', 2, 2)
    """
    if spans is None:
        spans = extract_entities(sentence)

    buffer = ""
    cursor = 0
    entities: List[UtteranceEntity] = []

    for span in spans:
        buffer += sentence[cursor:span.start]

        if not TextNormalizer.tokenize(span.value):
            raise EmptyEntityValueError(span.tag, sentence)

        before = TextNormalizer.tokenize(buffer)
        buffer += span.value
        after = TextNormalizer.tokenize(buffer)

        # A value glued to the previous token changes that token
        start_pos = len(before)
        if after[:len(before)] != before:
            start_pos -= 1
        end_pos = len(after) - 1

        entities.append(
            UtteranceEntity(entity=span.entity_type, start_pos=start_pos, end_pos=end_pos)
        )
        cursor = span.end

    buffer += sentence[cursor:]

    return Utterance(
        text=TextNormalizer.join_tokens(buffer),
        intent=intent,
        entities=tuple(entities),
    )


class UtteranceCollection:
    """
    Insertion-ordered set of utterances.

    Two utterances are the same when text, intent and spans are equal,
    regardless of which sentence instance produced them.
    """

    def __init__(self):
        self._utterances: Dict[Tuple, Utterance] = {}

    def add(self, utterance: Utterance) -> bool:
        """
        Add an utterance.

        Returns
        -------
        bool
            False if a structurally identical utterance was already present.
        """
        key = utterance.structural_key()
        if key in self._utterances:
            return False
        self._utterances[key] = utterance
        return True

    def __len__(self) -> int:
        return len(self._utterances)

    def __iter__(self) -> Iterator[Utterance]:
        return iter(self._utterances.values())
