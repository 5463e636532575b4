"""Tests for session identifier and clock helpers."""

from __future__ import annotations

import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter.utils import session as session_utils  # noqa: E402


def test_session_id_embeds_millisecond_clock():
    before = session_utils.now_millis()
    session_id = session_utils.generate_session_id()
    after = session_utils.now_millis()

    match = re.fullmatch(r"session_(\d+)_([0-9a-z]{9})", session_id)
    assert match
    assert before <= int(match.group(1)) <= after


def test_tokens_are_prefixed_and_unique():
    tokens = {session_utils.generate_token("draft") for _ in range(50)}
    assert len(tokens) == 50
    assert all(token.startswith("draft_") for token in tokens)


def test_module_exposes_only_the_millisecond_clock():
    assert not hasattr(session_utils, "now_seconds")
