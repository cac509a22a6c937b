"""
Entity Registry
===============

Accumulates the distinct entity types found across all sentences.

Composite types written as `parent::child` register `parent` as the
entity and `child` as one of its subtypes. Names are kept exactly as
written (case-sensitive, no normalization).
"""

from typing import Dict, Iterable, List, Optional, Tuple

from luis_compiler.compiler.extraction.entity_extractor import EntitySpan
from luis_compiler.compiler.luis_models import LuisEntity


COMPOSITE_SEPARATOR = "::"


def split_entity_type(entity_type: str) -> Tuple[str, Optional[str]]:
    """
    Split a type on the first `::`.

    Examples
    --------
    >>> split_entity_type("date::weekday")
    ('date', 'weekday')
    >>> split_entity_type("city")
    ('city', None)
    """
    parent, separator, child = entity_type.partition(COMPOSITE_SEPARATOR)
    if not separator or not child:
        return parent, None
    return parent, child


class EntityRegistry:
    """
    Order-preserving, idempotent entity registry for one compilation run.
    """

    def __init__(self):
        self._entities: Dict[str, LuisEntity] = {}

    def register(self, spans: Iterable[EntitySpan]) -> None:
        """
        Register the entity types of a sentence.

        Parameters
        ----------
        spans : Iterable[EntitySpan]
            Spans extracted from one sentence.
        """
        for span in spans:
            self.register_type(span.entity_type)

    def register_type(self, entity_type: str) -> LuisEntity:
        parent, child = split_entity_type(entity_type)

        entity = self._entities.get(parent)
        if entity is None:
            entity = LuisEntity(name=parent)
            self._entities[parent] = entity

        if child is not None:
            if entity.children is None:
                entity.children = []
            if child not in entity.children:
                entity.children.append(child)

        return entity

    def entities(self) -> List[LuisEntity]:
        """Registered entities, in first-registration order (copies)."""
        return [entity.model_copy(deep=True) for entity in self._entities.values()]

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, name: str) -> bool:
        return name in self._entities
