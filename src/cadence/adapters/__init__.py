"""Adapters - I/O implementations of ports."""

from .file_store import FileEventStore
from .memory_store import MemoryEventStore

__all__ = [
    "FileEventStore",
    "MemoryEventStore",
]
