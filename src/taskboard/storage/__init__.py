"""
Taskboard Storage Backends.

    - EntityStore: abstract capability set shared by all backends
    - MemoryStore: dict-backed backend (data is lost on restart)
"""

from taskboard.storage.base import EntityStore
from taskboard.storage.memory import MemoryStore

__all__ = ["EntityStore", "MemoryStore"]
