"""MongoDB adapter – connection settings."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

from docrepo.config.settings import Settings
from docrepo.config.validation import InvalidSettingValueError

_SCHEMES = ("mongodb://", "mongodb+srv://")


@dataclasses.dataclass
class MongoSettings(Settings):
    """Read from ``MONGO_URL``, ``MONGO_DATABASE`` and
    ``MONGO_SERVER_SELECTION_TIMEOUT_MS`` by :class:`EnvSettingsLoader`."""

    _prefix: ClassVar[str] = "MONGO"

    url: str = "mongodb://localhost:27017"
    database: str = "docrepo"
    server_selection_timeout_ms: int = 5000

    def _validate(self) -> None:
        if not self.url.startswith(_SCHEMES):
            raise InvalidSettingValueError("url", self.url, "must start with mongodb:// or mongodb+srv://")
        if not self.database:
            raise InvalidSettingValueError("database", self.database, "must not be empty")
        if self.server_selection_timeout_ms <= 0:
            raise InvalidSettingValueError(
                "server_selection_timeout_ms", self.server_selection_timeout_ms, "must be positive"
            )


__all__ = ["MongoSettings"]
