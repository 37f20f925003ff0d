"""Shared fixtures for the band migration tests."""

import copy
from types import SimpleNamespace

import pytest
from pymongo.errors import OperationFailure

from db import BandStore


class FakeBandsCollection:
    """In-memory stand-in for the bands collection."""

    def __init__(self, documents=None):
        self.documents = {doc["_id"]: copy.deepcopy(doc) for doc in documents or []}
        self.failing_ids = set()
        self.update_calls = []

    def find(self, query):
        assert query == {}
        return iter([copy.deepcopy(doc) for doc in self.documents.values()])

    def update_one(self, query, update):
        band_id = query["_id"]
        self.update_calls.append((band_id, update))
        if band_id in self.failing_ids:
            raise OperationFailure(f"write rejected for {band_id}")
        if band_id not in self.documents:
            return SimpleNamespace(matched_count=0, modified_count=0)
        self.documents[band_id].update(copy.deepcopy(update["$set"]))
        return SimpleNamespace(matched_count=1, modified_count=1)


@pytest.fixture
def make_store():
    """Build a BandStore over a fake collection seeded with documents."""

    def _make(documents):
        collection = FakeBandsCollection(documents)
        return BandStore(collection), collection

    return _make


@pytest.fixture
def sample_members():
    return [
        {"uid": "u1", "role": "admin"},
        {"uid": "u2", "role": "editor"},
        {"uid": "u3", "role": "member"},
    ]
