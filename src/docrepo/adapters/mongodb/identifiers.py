"""MongoDB adapter – ``_id`` coercion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from docrepo.kernel.errors import InvalidIdentifierError

ID_FIELD = "_id"


def is_structured_id(value: Any) -> bool:
    """True for values that must reach the store untouched.

    That covers ``None`` (a null id match), ``ObjectId`` itself and
    operator expressions such as ``{"$in": [...]}`` or lists of ids.
    """
    return value is None or isinstance(value, (ObjectId, Mapping, list, tuple))


def sanitize_id(filter: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *filter* whose raw ``_id`` scalar is an ``ObjectId``.

    The input mapping is never modified.

    Raises
    ------
    InvalidIdentifierError
        When the scalar is not a valid 24-hex-digit / 12-byte ObjectId.
    """
    sanitized = dict(filter)
    if ID_FIELD not in sanitized or is_structured_id(sanitized[ID_FIELD]):
        return sanitized
    raw = sanitized[ID_FIELD]
    try:
        sanitized[ID_FIELD] = ObjectId(raw)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(raw, cause=exc) from exc
    return sanitized


__all__ = ["ID_FIELD", "is_structured_id", "sanitize_id"]
