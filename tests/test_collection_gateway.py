import asyncio

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from services.collection_gateway import to_object_id


def run(coro):
    return asyncio.run(coro)


def test_insert_assigns_identifier(categories):
    created = run(categories.insert({"name": "Hoodies"}))

    assert isinstance(created["_id"], ObjectId)
    assert run(categories.find_one(str(created["_id"])))["name"] == "Hoodies"


def test_insert_duplicate_name_fails_without_second_document(categories):
    run(categories.insert({"name": "Hoodies"}))

    with pytest.raises(DuplicateKeyError):
        run(categories.insert({"name": "Hoodies"}))

    assert len(run(categories.find_all())) == 1


def test_find_all_applies_equality_filter(subcategories):
    run(subcategories.insert({"name": "Zip", "categoryId": "a"}))
    run(subcategories.insert({"name": "Pullover", "categoryId": "b"}))

    names = [doc["name"] for doc in run(subcategories.find_all({"categoryId": "a"}))]

    assert names == ["Zip"]
    assert len(run(subcategories.find_all())) == 2


def test_update_fields_merges_and_refreshes_timestamp(categories):
    created = run(categories.insert({"name": "Hoodies", "description": "warm", "updatedAt": None}))

    matched = run(categories.update_fields(created["_id"], {"description": "cosy"}))

    stored = run(categories.find_one(created["_id"]))
    assert matched is True
    assert stored["name"] == "Hoodies"
    assert stored["description"] == "cosy"
    assert stored["updatedAt"] is not None


def test_update_fields_reports_missing_document(categories):
    assert run(categories.update_fields(str(ObjectId()), {"name": "x"})) is False


def test_delete_one_and_delete_many(subcategories):
    first = run(subcategories.insert({"name": "Zip", "categoryId": "a"}))
    run(subcategories.insert({"name": "Pullover", "categoryId": "a"}))

    assert run(subcategories.delete_one(first["_id"])) is True
    assert run(subcategories.delete_one(first["_id"])) is False
    assert run(subcategories.delete_many({"categoryId": "a"})) == 1
    assert run(subcategories.find_all()) == []


@pytest.mark.parametrize("bad_id", ["nope", "123", None, "z" * 24, 42])
def test_invalid_identifiers_match_nothing(categories, bad_id):
    assert to_object_id(bad_id) is None
    assert run(categories.find_one(bad_id)) is None
    assert run(categories.update_fields(bad_id, {"name": "x"})) is False
    assert run(categories.delete_one(bad_id)) is False
