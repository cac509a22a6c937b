"""
Variable Expander
=================

Expands `${name}` placeholders in sentence templates against the
document lists, producing every concrete sentence.

Given

    list.city: [Madrid, Burgos]
    list.day:  [monday, friday]

the template `fly to ${city} on ${day}` expands to:

    fly to Madrid on monday
    fly to Madrid on friday
    fly to Burgos on monday
    fly to Burgos on friday

Expansion rules
---------------
- Cross product over all distinct placeholders of the template.
- A placeholder repeated in the same template receives the same value.
- Placeholders are resolved in order of first appearance and values in
  their declared order, so output ordering is deterministic.
- Values containing placeholders are expanded further until no
  placeholder is left (fixed point).
"""

import re
from typing import List, Mapping, Sequence, Set

from luis_compiler.compiler.errors import (
    CyclicListReferenceError,
    UnresolvedListReferenceError,
)


PLACEHOLDER_PATTERN = re.compile(r"\$\{([^{}]+)\}")


def find_placeholders(sentence: str) -> List[str]:
    """
    Return the distinct placeholder names of a sentence,
    in order of first appearance.
    """
    names: List[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(sentence):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names


def expand_variables(
    template: str,
    lists: Mapping[str, Sequence[str]],
) -> List[str]:
    """
    Expand every `${name}` placeholder of a template.

    Parameters
    ----------
    template : str
        Sentence template.
    lists : Mapping[str, Sequence[str]]
        List name to ordered replacement values.

    Returns
    -------
    List[str]
        Concrete sentences. A template without placeholders
        expands to itself.

    Raises
    ------
    UnresolvedListReferenceError
        If a placeholder refers to an unknown list.
    CyclicListReferenceError
        If a list references itself through its own values.
    """
    return _expand(template, lists, template)


def _expand(
    sentence: str,
    lists: Mapping[str, Sequence[str]],
    template: str,
) -> List[str]:
    match = PLACEHOLDER_PATTERN.search(sentence)
    if match is None:
        return [sentence]

    name = match.group(1)
    if name not in lists:
        raise UnresolvedListReferenceError(name, template)

    if _references_itself(name, lists):
        raise CyclicListReferenceError(name, template)

    placeholder = match.group(0)
    expanded: List[str] = []
    for value in lists[name]:
        expanded.extend(
            _expand(sentence.replace(placeholder, value), lists, template)
        )

    return expanded


def _references_itself(name: str, lists: Mapping[str, Sequence[str]]) -> bool:
    """Whether any value of a list leads back to the list itself."""
    pending = [name]
    visited: Set[str] = set()

    while pending:
        current = pending.pop()
        for value in lists.get(current, ()):
            for reference in find_placeholders(value):
                if reference == name:
                    return True
                if reference not in visited:
                    visited.add(reference)
                    pending.append(reference)

    return False
