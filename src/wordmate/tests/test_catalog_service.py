"""Tests for the word catalog."""
import json
import random
from pathlib import Path

import pytest

from wordmate.exceptions import CatalogError
from wordmate.services.catalog_service import WordCatalog


def test_bundled_catalog_loads(catalog: WordCatalog) -> None:
    """Test the bundled catalog is large enough for a quiz and has unique ids."""
    assert len(catalog) >= 10
    ids = [entry.id for entry in catalog]
    assert len(set(ids)) == len(ids)
    assert all(entry.meaning for entry in catalog)


def test_catalog_preserves_order(tmp_path: Path) -> None:
    path = tmp_path / "words.json"
    path.write_text(json.dumps([
        {"id": 2, "word": "beta", "partOfSpeech": "noun", "pronunciation": "b", "meaning": "second"},
        {"id": 1, "word": "alpha", "partOfSpeech": "noun", "pronunciation": "a", "meaning": "first"},
    ]), encoding="utf-8")

    catalog = WordCatalog.load(path)

    assert [entry.word for entry in catalog] == ["beta", "alpha"]
    assert catalog[0].example is None


def test_get_ignores_case(catalog: WordCatalog) -> None:
    first = catalog[0]
    assert catalog.get(first.word.upper()) == first
    assert catalog.get("not-a-catalog-word") is None


def test_missing_catalog_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogError):
        WordCatalog.load(tmp_path / "missing.json")


def test_malformed_catalog_entry(tmp_path: Path) -> None:
    """Test an entry without a meaning is rejected."""
    path = tmp_path / "words.json"
    path.write_text(json.dumps([{"id": 1, "word": "alpha"}]), encoding="utf-8")

    with pytest.raises(CatalogError):
        WordCatalog.load(path)


def test_catalog_must_be_a_list(tmp_path: Path) -> None:
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"word": "alpha"}), encoding="utf-8")

    with pytest.raises(CatalogError):
        WordCatalog.load(path)


def test_random_entry_is_reproducible(catalog: WordCatalog) -> None:
    """Test the same seed picks the same word of the day."""
    first = catalog.random_entry(random.Random(7))
    second = catalog.random_entry(random.Random(7))

    assert first == second
    assert first in catalog.entries


def test_random_entry_on_empty_catalog() -> None:
    with pytest.raises(CatalogError):
        WordCatalog([]).random_entry()
