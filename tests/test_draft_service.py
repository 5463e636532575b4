"""Tests for MongoDB-backed draft persistence."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter.services import draft_service  # noqa: E402


def test_save_and_get_draft(mongo_db):
    draft_id = draft_service.save_draft(
        "owner-1",
        "cv",
        {"personal": {"firstName": "Ana"}},
        title="Main CV",
        source_session_id="session_1_abc",
    )

    draft = draft_service.get_draft("owner-1", draft_id)
    assert draft["id"] == draft_id
    assert draft["ownerId"] == "owner-1"
    assert draft["type"] == "cv"
    assert draft["title"] == "Main CV"
    assert draft["data"] == {"personal": {"firstName": "Ana"}}
    assert draft["sourceSessionId"] == "session_1_abc"
    assert draft["createdAt"] == draft["updatedAt"]

    stored = mongo_db.drafts.find_one({"draft_id": draft_id})
    assert stored["owner_id"] == "owner-1"


def test_save_draft_overwrites_existing(mongo_db):
    draft_id = draft_service.save_draft("owner-1", "letter", {"body": ["v1"]}, title="Letter")
    assert draft_service.save_draft("owner-1", "letter", {"body": ["v2"]}, draft_id=draft_id) == draft_id

    draft = draft_service.get_draft("owner-1", draft_id)
    assert draft["data"] == {"body": ["v2"]}
    assert draft["title"] == "Letter"
    assert mongo_db.drafts.count_documents({}) == 1


def test_drafts_are_scoped_to_owner():
    draft_id = draft_service.save_draft("owner-1", "cv", {})

    assert draft_service.get_draft("owner-2", draft_id) is None
    assert draft_service.list_drafts("owner-2") == []
    assert draft_service.delete_draft("owner-2", draft_id) is False
    assert draft_service.get_draft("owner-1", draft_id) is not None


def test_list_drafts_filters_by_type():
    cv_id = draft_service.save_draft("owner-1", "cv", {})
    letter_id = draft_service.save_draft("owner-1", "letter", {})

    assert {draft["id"] for draft in draft_service.list_drafts("owner-1")} == {cv_id, letter_id}
    assert [draft["id"] for draft in draft_service.list_drafts("owner-1", "letter")] == [letter_id]


def test_delete_draft():
    draft_id = draft_service.save_draft("owner-1", "cv", {})

    assert draft_service.delete_draft("owner-1", draft_id) is True
    assert draft_service.get_draft("owner-1", draft_id) is None
    assert draft_service.delete_draft("owner-1", draft_id) is False


def test_save_draft_validates_input():
    with pytest.raises(ValueError):
        draft_service.save_draft("owner-1", "poster", {})
    with pytest.raises(ValueError):
        draft_service.save_draft("", "cv", {})


def test_create_indexes_enforces_unique_ids(mongo_db):
    draft_service.create_indexes()
    index_keys = [index["key"] for index in mongo_db.drafts.index_information().values()]
    assert [("owner_id", 1), ("draft_id", 1)] in index_keys
