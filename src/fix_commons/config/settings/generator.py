"""Config settings – GeneratorSettings for :class:`FieldGenerator`."""
from __future__ import annotations

import dataclasses

from fix_commons.config.settings.base import Settings
from fix_commons.config.settings.validator import SettingsValidator
from fix_commons.config.validation import InvalidSettingValueError
from fix_commons.kernel.errors import InvalidArgumentError
from fix_commons.kernel.time import resolve_zone

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class GeneratorSettings(Settings):
    """Environment-driven configuration (``FIX_COMMONS_*`` variables).

    * ``order_id_start`` – first counter value of each order-id sequence
    * ``random_seed`` – seed for the generator's own random source (``None``
      draws an unpredictable seed)
    * ``transact_time_zone`` – zone whose wall clock transact times use
    * ``log_level`` – level handed to :class:`JsonLoggerFactory`
    """

    _prefix: dataclasses.ClassVar[str] = "FIX_COMMONS"

    order_id_start: int = 1
    random_seed: int | None = None
    transact_time_zone: str = "UTC"
    log_level: str = "INFO"

    def _validate(self) -> None:
        SettingsValidator.require_non_negative("order_id_start", self.order_id_start)
        self.log_level = self.log_level.upper()
        SettingsValidator.require_choice("log_level", self.log_level, LOG_LEVELS)
        try:
            resolve_zone(self.transact_time_zone)
        except InvalidArgumentError as exc:
            raise InvalidSettingValueError("transact_time_zone", self.transact_time_zone, exc.message) from exc


__all__ = ["GeneratorSettings", "LOG_LEVELS"]
