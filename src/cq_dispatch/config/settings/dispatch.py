"""Config settings – DispatchSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from cq_dispatch.config.errors import InvalidSettingValueError
from cq_dispatch.config.settings.base import Settings
from cq_dispatch.resolution.ports import Lifetime

_LIFETIMES = [lifetime.value for lifetime in Lifetime]


@dataclasses.dataclass
class DispatchSettings(Settings):
    """Lifetimes used by the registrator and logging output.

    Environment variables: ``CQD_HANDLER_LIFETIME``, ``CQD_DISPATCHER_LIFETIME``,
    ``CQD_LOG_LEVEL``, ``CQD_JSON_LOGS``.
    """

    _prefix: ClassVar[str] = "CQD"

    handler_lifetime: str = Lifetime.TRANSIENT.value
    dispatcher_lifetime: str = Lifetime.TRANSIENT.value
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        for name in ("handler_lifetime", "dispatcher_lifetime"):
            value = getattr(self, name)
            if value.lower() not in _LIFETIMES:
                raise InvalidSettingValueError(name, value, _LIFETIMES)
        levels = list(logging.getLevelNamesMapping())
        if self.log_level.upper() not in levels:
            raise InvalidSettingValueError("log_level", self.log_level, levels)

    @property
    def handler_lifetime_value(self) -> Lifetime:
        return Lifetime(self.handler_lifetime.lower())

    @property
    def dispatcher_lifetime_value(self) -> Lifetime:
        return Lifetime(self.dispatcher_lifetime.lower())


__all__ = ["DispatchSettings"]
