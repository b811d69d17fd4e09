from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

# Make the netflex package importable when running the tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from netflex.domain.models import (  # noqa: E402
    ApiResponse,
    ContentItem,
    ContentPatch,
    ContentType,
    Country,
    Genre,
)
from netflex.domain.seed import SEED_ENTRIES, seed_items  # noqa: E402


def test_enumerations_are_closed():
    assert [c.value for c in ContentType] == ["Single", "Series"]
    assert len(Country) == 5
    assert len(Genre) == 8
    assert Genre("Sci-Fi") is Genre.SCI_FI


def test_item_uses_camel_case_on_the_wire():
    item = seed_items()[0]
    data = item.to_dict()

    assert data["posterPath"].startswith("https://")
    assert data["contentType"] == "Series"
    assert data["genre"] == "Sci-Fi"
    assert data["isPopular"] is True
    assert ContentItem.model_validate(data) == item


def test_unknown_enum_value_is_rejected():
    data = seed_items()[0].to_dict()
    data["contentType"] = "Movie"

    with pytest.raises(ValidationError):
        ContentItem.model_validate(data)


def test_patch_tracks_only_supplied_fields():
    patch = ContentPatch.model_validate({"title": "New", "isPopular": False, "description": None})

    assert patch.changes() == {"title": "New", "is_popular": False}

    original = seed_items()[1]
    merged = patch.apply_to(original)
    assert merged.title == "New"
    assert merged.is_popular is False
    assert merged.description == original.description
    assert merged.id == original.id


def test_seed_covers_every_country():
    assert {entry["country"] for entry in SEED_ENTRIES} == set(Country)
    assert [entry["id"] for entry in SEED_ENTRIES] == ["1", "2", "3", "4", "5", "6"]
    stamps = {item.created_at for item in seed_items()}
    assert len(stamps) == 1


def test_envelope_shapes():
    ok = ApiResponse[ContentItem].ok(seed_items()[2])
    assert ok.to_dict()["data"]["title"] == "RRR"
    assert "message" not in ok.to_dict()

    failed = ApiResponse[ContentItem].fail("Movie not found")
    assert failed.to_dict() == {"success": False, "message": "Movie not found"}
    assert ApiResponse[None].ok().to_dict() == {"success": True}
