"""
Entity Extractor
================

Finds inline entity tags in a concrete sentence.

Entities are tagged as `[value:type]`, e.g. `go to [Burgos:city]`.
Composite entities use `parent::child` as type, e.g.
`[monday:date::weekday]`.

This stage is read-only: the sentence is never modified.
"""

import re
from dataclasses import dataclass
from typing import List


# value: anything but the tag delimiters and ':'
# type : anything but the tag delimiters ('::' allowed)
ENTITY_TAG_PATTERN = re.compile(r"\[([^\[\]:]+?):([^\[\]]+?)\]")


@dataclass(frozen=True)
class EntitySpan:
    """
    An entity tag found in a raw sentence.

    Attributes
    ----------
    value : str
        Literal tagged text.
    entity_type : str
        Entity type as written, possibly `parent::child`.
    start : int
        Character offset of the opening bracket.
    end : int
        Character offset just past the closing bracket.
    """

    value: str
    entity_type: str
    start: int
    end: int

    @property
    def tag(self) -> str:
        return f"[{self.value}:{self.entity_type}]"


def extract_entities(sentence: str) -> List[EntitySpan]:
    """
    Extract all entity tags of a sentence, left to right.

    Parameters
    ----------
    sentence : str
        Concrete sentence (placeholders already expanded).

    Returns
    -------
    List[EntitySpan]
        Non-overlapping spans in order of appearance.
    """
    return [
        EntitySpan(
            value=match.group(1),
            entity_type=match.group(2),
            start=match.start(),
            end=match.end(),
        )
        for match in ENTITY_TAG_PATTERN.finditer(sentence)
    ]


def strip_entity_tags(sentence: str) -> str:
    """Replace every `[value:type]` tag with its value."""
    return ENTITY_TAG_PATTERN.sub(lambda m: m.group(1), sentence)
