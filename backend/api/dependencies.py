"""Shared dependencies for API routes."""

from services.store import RecordStore, get_store


def get_record_store() -> RecordStore:
    return get_store()
