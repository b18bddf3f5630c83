"""Domain errors – caller-supplied values the store cannot accept."""

from __future__ import annotations

from typing import Any

from docrepo.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value violates a rule of the document model."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidIdentifierError(DomainError):
    """A raw identifier could not be turned into a store identifier."""

    default_code = "invalid_identifier"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(f"'{value}' is not a valid document identifier", **kwargs)
        self.value = value


class MalformedParameterError(ValidationError):
    """A query parameter (skip, limit, order) could not be coerced."""

    default_code = "malformed_parameter"

    def __init__(self, parameter: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Query parameter '{parameter}' has invalid value {value!r}: {reason}",
            errors=[{"field": parameter, "reason": reason}],
            **kwargs,
        )
        self.parameter = parameter
        self.value = value


__all__ = [
    "DomainError",
    "InvalidIdentifierError",
    "MalformedParameterError",
    "ValidationError",
]
