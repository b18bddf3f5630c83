"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvalidIdentifierError
    │   └── ValidationError
    │       └── MalformedParameterError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        ├── StoreQueryFailedError
        └── CursorConsumedError
"""

from docrepo.kernel.errors.application import ApplicationError
from docrepo.kernel.errors.base import BaseError
from docrepo.kernel.errors.domain import (
    DomainError,
    InvalidIdentifierError,
    MalformedParameterError,
    ValidationError,
)
from docrepo.kernel.errors.infrastructure import (
    CursorConsumedError,
    InfrastructureError,
    StoreQueryFailedError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CursorConsumedError",
    "DomainError",
    "InfrastructureError",
    "InvalidIdentifierError",
    "MalformedParameterError",
    "StoreQueryFailedError",
    "ValidationError",
]
