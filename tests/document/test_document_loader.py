"""
Document loader tests: YAML parsing and explicit merge policies.
"""

import pytest

from luis_compiler.compiler.errors import (
    DocumentReadError,
    DocumentShapeError,
    DuplicateDocumentKeyError,
)
from luis_compiler.document.document_loader import (
    load_document,
    load_yaml_file,
    merge_documents,
)


@pytest.fixture
def write(tmp_path):
    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


def test_load_yaml_file(write):
    path = write("a.yml", "greeting:\n  - hello\n  - hi\n")

    assert load_yaml_file(path) == {"greeting": ["hello", "hi"]}


def test_empty_file_is_empty_mapping(write):
    assert load_yaml_file(write("empty.yml", "")) == {}


def test_missing_file(tmp_path):
    with pytest.raises(DocumentReadError):
        load_yaml_file(tmp_path / "missing.yml")


def test_malformed_yaml(write):
    path = write("bad.yml", "greeting: [hello\n  bye: :\n")

    with pytest.raises(DocumentReadError):
        load_yaml_file(path)


def test_top_level_must_be_mapping(write):
    with pytest.raises(DocumentShapeError):
        load_yaml_file(write("list.yml", "- hello\n- bye\n"))


def test_override_policy_later_file_wins(write):
    first = write("a.yml", "greeting: [hello]\nlist.city: [Madrid]\n")
    second = write("b.yml", "greeting: [hi]\nfarewell: [bye]\n")

    merged = merge_documents([first, second], conflict_policy="override")

    assert merged == {
        "greeting": ["hi"],
        "list.city": ["Madrid"],
        "farewell": ["bye"],
    }
    assert list(merged) == ["greeting", "list.city", "farewell"]


def test_error_policy_rejects_duplicate_keys(write):
    first = write("a.yml", "greeting: [hello]\n")
    second = write("b.yml", "greeting: [hi]\n")

    with pytest.raises(DuplicateDocumentKeyError) as exc_info:
        merge_documents([first, second], conflict_policy="error")

    assert exc_info.value.key == "greeting"


def test_unknown_policy(write):
    with pytest.raises(ValueError):
        merge_documents([write("a.yml", "a: [b]\n")], conflict_policy="merge")


def test_load_document(write):
    path = write(
        "corpus.yml",
        "travel:\n  - go to [${city}:city]\nlist.city: [Burgos]\n",
    )

    document = load_document([path])

    assert document.intents[0].name == "travel"
    assert document.lists == {"city": ["Burgos"]}
