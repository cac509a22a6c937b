"""
Text Normalizer
===============

This module implements the text normalization stage of the model
compilation pipeline.

Its primary responsibility is to reproduce, token for token, the way
the target NLU service normalizes and tokenizes utterances. Entity
positions in the compiled model are token indexes, so any divergence
here shifts entity boundaries during training.

Key responsibilities:
- Collapse whitespace
- Apply culture-specific case folding
- Split text into tokens with the service's punctuation rules

Tokenization rules
------------------
1. Every character that is neither a word character nor whitespace is
   surrounded by spaces (`a,b,c` -> `a , b , c`). Word characters are
   ASCII letters, digits, underscore and the accented Latin range
   U+00C0-U+017F.
2. Underscores are split as tokens of their own.
3. The ordinal indicators `º` and `ª` stay attached to the preceding
   token (`5º` is one token).
4. Whitespace is collapsed and the result split on single spaces.

Pipeline:
Entity Extractor → TextNormalizer → UtteranceBuilder → ModelAssembler
"""

import re
from typing import List


class TextNormalizer:
    """
    Culture-aware normalizer and tokenizer matching the target service.

    Case folding is deliberately asymmetric: `en-us` lowercases ASCII
    letters only, every other culture lowercases the whole string.
    """

    ASCII_FOLDING_CULTURES = frozenset({"en-us"})

    NON_WORD_PATTERN = re.compile(r"[^A-Za-z0-9_À-ſ\s]")
    UNDERSCORE_PATTERN = re.compile(r"_")
    ORDINAL_PATTERN = re.compile(r" ([ºª]) ")
    WHITESPACE_PATTERN = re.compile(r"\s+")
    ASCII_UPPER_PATTERN = re.compile(r"[A-Z]+")

    @classmethod
    def normalize(cls, text: str, culture: str) -> str:
        """
        Collapse whitespace, then fold case for the given culture.

        Parameters
        ----------
        text : str
            Raw text.
        culture : str
            Culture code, e.g. "en-us" or "es-es" (case-insensitive).

        Returns
        -------
        str
            Normalized text.

        Examples
        --------
        >>> TextNormalizer.normalize("  Café   ABC ", "en-us")
        'café abc'
        """
        return cls.fold_case(cls.normalize_whitespace(text), culture)

    @classmethod
    def normalize_whitespace(cls, text: str) -> str:
        return cls.WHITESPACE_PATTERN.sub(" ", text).strip()

    @classmethod
    def fold_case(cls, text: str, culture: str) -> str:
        """
        Lowercase text the way the target service does for a culture.

        For `en-us` only `A`-`Z` are lowercased; accented letters
        keep their case. Other cultures use full Unicode lowercasing.
        """
        if culture.lower() in cls.ASCII_FOLDING_CULTURES:
            return cls.ASCII_UPPER_PATTERN.sub(lambda m: m.group(0).lower(), text)
        return text.lower()

    @classmethod
    def tokenize(cls, text: str) -> List[str]:
        """
        Split text into service tokens.

        Examples
        --------
        >>> TextNormalizer.tokenize("a,b,c")
        ['a', ',', 'b', ',', 'c']
        >>> TextNormalizer.tokenize("el 5º piso")
        ['el', '5º', 'piso']
        """
        spaced = cls.NON_WORD_PATTERN.sub(lambda m: f" {m.group(0)} ", text)
        spaced = cls.UNDERSCORE_PATTERN.sub(" _ ", spaced)

        # Ordinal indicators are not split by the service
        spaced = cls.ORDINAL_PATTERN.sub(r"\1 ", spaced)

        spaced = cls.normalize_whitespace(spaced)
        if not spaced:
            return []
        return spaced.split(" ")

    @classmethod
    def word_count(cls, text: str) -> int:
        return len(cls.tokenize(text))

    @classmethod
    def join_tokens(cls, text: str) -> str:
        """Tokenize and re-join with single spaces (`a,b` -> `a , b`)."""
        return " ".join(cls.tokenize(text))
