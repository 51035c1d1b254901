from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from fishertype.paths import get_paths
from fishertype.services.content import ContentError, ContentService, MissingSourceError


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_every_fish_level_has_words() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    catalog = content.load_fish()
    bank = content.load_word_bank()
    for fish in catalog.fish.values():
        assert bank.entries(fish.level), fish.id


def _data_dir_with(tmp_path: Path, fish_doc: object) -> ContentService:
    paths = get_paths()
    schema_dir = tmp_path / "schemas"
    schema_dir.mkdir()
    shutil.copy(paths.schema_dir / "fish.schema.json", schema_dir / "fish.schema.json")
    (tmp_path / "fish.json").write_text(json.dumps(fish_doc), encoding="utf-8")
    return ContentService(tmp_path, schema_dir)


def test_schema_rejects_out_of_range_level(tmp_path: Path) -> None:
    doc = {
        "fish": [
            {"id": "koi", "name": "Koi", "hp": 10, "price": 10, "shadow_size": 1, "level": 9, "timer": 3}
        ]
    }
    content = _data_dir_with(tmp_path, doc)
    with pytest.raises(ContentError, match="level") as excinfo:
        content.load_fish()
    assert "Fish catalog" in str(excinfo.value)
    assert "- fish[0].level:" in str(excinfo.value)


def test_duplicate_fish_ids_rejected(tmp_path: Path) -> None:
    koi = {"id": "koi", "name": "Koi", "hp": 10, "price": 10, "shadow_size": 1, "level": 1, "timer": 3}
    content = _data_dir_with(tmp_path, {"fish": [koi, koi]})
    with pytest.raises(ContentError, match="Duplicate"):
        content.load_fish()


def test_missing_fish_file_is_an_error(tmp_path: Path) -> None:
    content = ContentService(tmp_path, get_paths().schema_dir)
    with pytest.raises(MissingSourceError):
        content.load_fish()


def test_malformed_fish_file_names_the_catalog(tmp_path: Path) -> None:
    paths = get_paths()
    (tmp_path / "fish.json").write_text('{"fish": [', encoding="utf-8")
    content = ContentService(tmp_path, paths.schema_dir)
    with pytest.raises(ContentError, match="Invalid JSON in fish catalog") as excinfo:
        content.load_fish()
    assert not isinstance(excinfo.value, MissingSourceError)
