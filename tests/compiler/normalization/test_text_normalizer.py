"""
TextNormalizer Test Suite
=========================

Validates that normalization and tokenization reproduce the target
service's rules:

- whitespace collapsing
- asymmetric case folding (`en-us` ASCII only, other cultures full)
- punctuation splitting, underscore splitting and the `º` / `ª`
  exceptions
"""

import pytest

from luis_compiler.compiler.normalization.normalizer import TextNormalizer


# --------------------------------------------------
# Tokenization
# --------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("a,b,c", ["a", ",", "b", ",", "c"]),
        ("go to Burgos", ["go", "to", "Burgos"]),
        ("el 5º piso", ["el", "5º", "piso"]),
        ("la 1ª vez", ["la", "1ª", "vez"]),
        ("5º", ["5º"]),
        ("hello_world", ["hello", "_", "world"]),
        ("¿Qué tal?", ["¿", "Qué", "tal", "?"]),
        ("it's 3.5", ["it", "'", "s", "3", ".", "5"]),
        ("Coca-Cola", ["Coca", "-", "Cola"]),
        ("  spaced \t out\n", ["spaced", "out"]),
        ("camión ñandú", ["camión", "ñandú"]),
        ("", []),
        ("   ", []),
    ],
)
def test_tokenize(text, expected):
    assert TextNormalizer.tokenize(text) == expected


def test_word_count_matches_token_count():
    assert TextNormalizer.word_count("hi, i'm in Burgos!") == 8
    assert TextNormalizer.word_count("") == 0


def test_join_tokens_separates_punctuation():
    assert TextNormalizer.join_tokens("hi,  Burgos!") == "hi , Burgos !"


# --------------------------------------------------
# Normalization
# --------------------------------------------------

def test_normalize_collapses_whitespace():
    assert TextNormalizer.normalize("  a   b \t c ", "en-us") == "a b c"


def test_en_us_folds_ascii_letters_only():
    assert TextNormalizer.normalize("Café ABC", "en-us") == "café abc"
    assert TextNormalizer.normalize("CAFÉ ABC", "en-us") == "cafÉ abc"


def test_culture_code_is_case_insensitive():
    assert TextNormalizer.normalize("CAFÉ", "EN-US") == "cafÉ"


@pytest.mark.parametrize("culture", ["es-es", "fr-fr", "pt-br"])
def test_other_cultures_fold_full_string(culture):
    assert TextNormalizer.normalize("CAFÉ ABC", culture) == "café abc"

