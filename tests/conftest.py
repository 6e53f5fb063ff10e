"""Shared test fixtures for the Luma admin API tests."""

import pytest
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

from common.auth.base import AuthProvider


ADMIN_UID = "admin-1"
USER_UID = "user-2"
ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"


def make_snapshot(data: Optional[Dict[str, Any]]):
    """Mimic a Firestore DocumentSnapshot; None means the document is missing."""
    snapshot = MagicMock()
    snapshot.exists = data is not None
    snapshot.to_dict = MagicMock(return_value=data)
    return snapshot


def make_count_result(value: int):
    """Mimic the nested result list of an aggregation query's get()."""
    result = MagicMock()
    result.value = value
    return [[result]]


class FakeAuthProvider(AuthProvider):
    """Accepts a fixed set of tokens."""

    def __init__(self, tokens: Optional[Dict[str, str]] = None):
        self.tokens = tokens or {ADMIN_TOKEN: ADMIN_UID, USER_TOKEN: USER_UID}

    async def verify_token(self, token: str) -> Dict[str, Any]:
        uid = self.tokens.get(token)
        if uid is None:
            raise ValueError("Invalid token: unknown")
        return {"uid": uid, "sub": uid}


@pytest.fixture
def auth_provider():
    return FakeAuthProvider()


@pytest.fixture
def mock_db():
    """
    Async Firestore client mock.

    document(path), collection(name) and collection_group(name) return the
    same mock for the same argument, so tests can configure a reference and
    then assert on it after the code under test looked it up.
    """
    db = MagicMock()
    documents: Dict[str, MagicMock] = {}
    collections: Dict[str, MagicMock] = {}
    groups: Dict[str, MagicMock] = {}

    def _document(path):
        if path not in documents:
            ref = MagicMock()
            ref.path = path
            ref.get = AsyncMock(return_value=make_snapshot(None))
            ref.set = AsyncMock()
            ref.update = AsyncMock()
            documents[path] = ref
        return documents[path]

    def _query(cache, name):
        if name not in cache:
            query = MagicMock()
            query.add = AsyncMock()
            query.get = AsyncMock(return_value=[])
            query.count.return_value.get = AsyncMock(return_value=make_count_result(0))
            cache[name] = query
        return cache[name]

    db.document = MagicMock(side_effect=_document)
    db.collection = MagicMock(side_effect=lambda name: _query(collections, name))
    db.collection_group = MagicMock(side_effect=lambda name: _query(groups, name))
    db.documents = documents
    return db
