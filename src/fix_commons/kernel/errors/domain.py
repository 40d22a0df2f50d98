"""Domain errors — rejected arguments and unparseable input."""

from __future__ import annotations

from typing import Any

from fix_commons.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value violates a rule of the library's domain."""

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


class InvalidArgumentError(ValidationError):
    """An argument is outside the domain accepted by the operation.

    ``argument`` names the offending parameter, ``value`` holds what was passed.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        if argument is not None:
            kwargs.setdefault("detail", {"argument": argument, "value": value})
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value


class ParseError(ValidationError):
    """A textual representation could not be parsed.

    ``source`` is the full input and ``fragment`` the part that failed.
    """

    default_code = "parse_error"

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        fragment: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"source": source, "fragment": fragment})
        super().__init__(message, **kwargs)
        self.source = source
        self.fragment = fragment


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ParseError",
    "ValidationError",
]
