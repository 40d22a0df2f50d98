"""Root error class for the fix-commons error hierarchy.

Every error carries a stable machine-readable ``code``. Codes are unique
across the hierarchy and registered in :data:`ERROR_CODES`, so a logged
``code`` (for instance ``invalid_argument`` or ``parse_error``) always maps
back to one error class.
"""

from __future__ import annotations

import json
from typing import Any

ERROR_CODES: dict[str, type["BaseError"]] = {}


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to the class ``default_code``).
        detail: Extra context, e.g. the rejected argument or the bad fragment.
        cause: Lower-level exception this error wraps.
    """

    default_code: str = "base_error"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        code = cls.__dict__.get("default_code")
        if code is None:
            return
        owner = ERROR_CODES.get(code)
        if owner is not None and owner.__qualname__ != cls.__qualname__:
            raise TypeError(f"error code {code!r} already belongs to {owner.__qualname__}")
        ERROR_CODES[code] = cls

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with ``error``, ``code``, ``message``, ``detail`` (and ``cause``)."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


ERROR_CODES[BaseError.default_code] = BaseError


__all__ = ["ERROR_CODES", "BaseError"]
