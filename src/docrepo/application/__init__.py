"""Application layer – store-agnostic query primitives."""
