"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       ├── InvalidArgumentError
    │       └── ParseError
    └── ApplicationError     (application.py)
        └── ConfigError      (fix_commons.config.validation)
"""

from fix_commons.kernel.errors.application import ApplicationError
from fix_commons.kernel.errors.base import ERROR_CODES, BaseError
from fix_commons.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    ParseError,
    ValidationError,
)

__all__ = [
    "ERROR_CODES",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "ParseError",
    "ValidationError",
]
