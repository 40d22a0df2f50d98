"""Config settings – SettingsValidator."""
from __future__ import annotations

from fix_commons.config.validation import InvalidSettingValueError


class SettingsValidator:
    """Field-level checks shared by settings classes."""

    @staticmethod
    def require_non_negative(name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidSettingValueError(name, value, "must be a non-negative integer")

    @staticmethod
    def require_choice(name: str, value: str, choices: tuple[str, ...]) -> None:
        if value not in choices:
            raise InvalidSettingValueError(name, value, f"must be one of {', '.join(choices)}")


__all__ = ["SettingsValidator"]
