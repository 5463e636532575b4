"""Service for durable CV and cover letter drafts in MongoDB.

Drafts are explicit snapshots saved by the user. Conversation sessions are
never written here; they stay in the in-memory session store.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from cvletter import database
from cvletter.utils.session import generate_token

DRAFT_TYPES = ("cv", "letter")


def _collection():
    return database.get_database().drafts


def _serialize_draft(document: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": document["draft_id"],
        "ownerId": document["owner_id"],
        "type": document["type"],
        "title": document.get("title") or "",
        "data": document.get("data") or {},
        "sourceSessionId": document.get("source_session_id"),
        "createdAt": document["created_at"].isoformat(),
        "updatedAt": document["updated_at"].isoformat(),
    }


def save_draft(
    owner_id: str,
    draft_type: str,
    data: Dict[str, Any],
    draft_id: Optional[str] = None,
    title: Optional[str] = None,
    source_session_id: Optional[str] = None,
) -> str:
    """
    Create or update a draft.

    Args:
        owner_id: The user that owns the draft
        draft_type: Either 'cv' or 'letter'
        data: The draft content
        draft_id: Existing draft id to overwrite; a new id is minted when omitted
        title: Optional display title
        source_session_id: Conversation the draft was copied from, if any

    Returns:
        The draft id
    """
    if draft_type not in DRAFT_TYPES:
        raise ValueError(f"Unsupported draft type: {draft_type!r}")
    if not owner_id:
        raise ValueError("owner_id is required")

    draft_id = draft_id or generate_token("draft")
    current_time = datetime.utcnow()

    update_doc: Dict[str, Any] = {
        "$set": {
            "type": draft_type,
            "data": data or {},
            "updated_at": current_time,
        },
        "$setOnInsert": {
            "owner_id": owner_id,
            "draft_id": draft_id,
            "created_at": current_time,
        },
    }
    if title is not None:
        update_doc["$set"]["title"] = title
    if source_session_id is not None:
        update_doc["$set"]["source_session_id"] = source_session_id

    _collection().update_one({"owner_id": owner_id, "draft_id": draft_id}, update_doc, upsert=True)
    return draft_id


def get_draft(owner_id: str, draft_id: str) -> Optional[Dict[str, Any]]:
    document = _collection().find_one({"owner_id": owner_id, "draft_id": draft_id})
    if not document:
        return None
    return _serialize_draft(document)


def list_drafts(owner_id: str, draft_type: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    List drafts for an owner, most recently updated first.

    Args:
        owner_id: The user that owns the drafts
        draft_type: Optional 'cv' or 'letter' filter
    """
    query: Dict[str, Any] = {"owner_id": owner_id}
    if draft_type:
        query["type"] = draft_type

    documents = _collection().find(query).sort("updated_at", DESCENDING)
    return [_serialize_draft(document) for document in documents]


def delete_draft(owner_id: str, draft_id: str) -> bool:
    result = _collection().delete_one({"owner_id": owner_id, "draft_id": draft_id})
    return result.deleted_count > 0


def create_indexes() -> None:
    """Create indexes for the drafts collection."""
    collection = _collection()
    collection.create_index([("owner_id", 1), ("draft_id", 1)], unique=True)
    collection.create_index([("owner_id", 1), ("updated_at", DESCENDING)])
