"""Testing fakes – in-memory doubles for motor collections."""
from docrepo.testing.fakes.collection import InMemoryCollection, InMemoryCursor, matches

__all__ = ["InMemoryCollection", "InMemoryCursor", "matches"]
