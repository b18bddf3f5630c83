"""MongoDB adapter – turning raw documents into domain objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class EntityFactory(Protocol[T_co]):
    """Builds entities for a repository.

    ``default()`` is what single-document lookups return when nothing
    matched; it must be a normal instance left at its zero values.
    """

    def default(self) -> T_co: ...
    def hydrate(self, record: Mapping[str, Any]) -> T_co: ...


class ConstructorEntityFactory(Generic[T]):
    """Entity factory backed by a class (or any callable).

    ``document_type()`` builds the default instance. Records are passed as
    a single positional argument, or as keyword arguments when
    ``unpack=True``.

    Usage::

        users = ConstructorEntityFactory(User)           # User(record)
        users = ConstructorEntityFactory(User, unpack=True)  # User(**record)
    """

    def __init__(self, document_type: Callable[..., T], *, unpack: bool = False) -> None:
        self._document_type = document_type
        self._unpack = unpack

    def default(self) -> T:
        return self._document_type()

    def hydrate(self, record: Mapping[str, Any]) -> T:
        if self._unpack:
            return self._document_type(**record)
        return self._document_type(record)


__all__ = ["ConstructorEntityFactory", "EntityFactory"]
