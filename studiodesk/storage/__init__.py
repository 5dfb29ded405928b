"""Persistence: key-value stores, bundled fixtures and the repository."""
from studiodesk.storage.backend import JsonFileStore, KeyValueStore, MemoryStore
from studiodesk.storage.fixtures import load_fixtures
from studiodesk.storage.repository import Repository

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore", "Repository", "load_fixtures"]
