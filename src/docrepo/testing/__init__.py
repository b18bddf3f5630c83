"""Testing – in-memory doubles for the document store."""
from docrepo.testing.fakes import InMemoryCollection, InMemoryCursor

__all__ = ["InMemoryCollection", "InMemoryCursor"]
