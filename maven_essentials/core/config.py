# Standard library imports
import logging
import math
import os
import zoneinfo
from pathlib import Path
from typing import Dict, Final, List, Mapping, Optional

from dotenv import dotenv_values

from maven_essentials.core.errors import ConfigError


WEB_APPLICATION_TYPES = ("web", "none")

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class Settings:
    """
    Application settings.

    Every value is looked up in this order:
    1. Command-line properties (``--server.port=9000`` arrives as ``SERVER_PORT``)
    2. Process environment variables
    3. The ``.env`` file (``CONFIG_ENV_FILE`` overrides its path)

    The ``.env`` file is read, never exported, so ``os.environ`` is left
    untouched.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = None,
    ) -> None:
        self._overrides: Dict[str, str] = dict(overrides or {})

        env_path = env_file or self._overrides.get("CONFIG_ENV_FILE") or os.getenv(
            "CONFIG_ENV_FILE", ".env"
        )
        self.env_file: Final[str] = env_path
        self._file_values: Dict[str, Optional[str]] = (
            dict(dotenv_values(env_path)) if Path(env_path).is_file() else {}
        )

        # Application
        self.application_name: Final[Optional[str]] = self._get("APPLICATION_NAME")

        # Embedded server
        self.server_host: Final[str] = self._get("SERVER_HOST", "0.0.0.0")
        self.server_port: Final[int] = self._get_int(
            "SERVER_PORT", "8080", key="server.port", minimum=0, maximum=65535
        )
        self.server_startup_timeout_seconds: Final[float] = self._get_float(
            "SERVER_STARTUP_TIMEOUT_SECONDS", "10", key="server.startup-timeout-seconds"
        )

        # Bootstrap behaviour
        web_type = self._get("MAIN_WEB_APPLICATION_TYPE", "web").strip().lower()
        if web_type not in WEB_APPLICATION_TYPES:
            raise ConfigError(
                f"must be one of {', '.join(WEB_APPLICATION_TYPES)}, got {web_type!r}",
                key="main.web-application-type",
            )
        self.web_application_type: Final[str] = web_type
        self.register_shutdown_hook: Final[bool] = self._get_bool(
            "MAIN_REGISTER_SHUTDOWN_HOOK", "true", key="main.register-shutdown-hook"
        )

        # Logging
        log_level = self._get("LOGGING_LEVEL_ROOT", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"unknown log level {log_level!r}", key="logging.level.root")
        self.log_level: Final[str] = log_level

        # CORS
        self.cors_allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in self._get("CORS_ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Timezone used for timestamps reported by the API
        timezone = self._get("TIMEZONE", "UTC").strip()
        if timezone.upper() != "UTC":
            try:
                zoneinfo.ZoneInfo(timezone)
            except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigError(f"unknown timezone {timezone!r}", key="timezone") from e
        self.timezone: Final[str] = timezone

    @property
    def web_enabled(self) -> bool:
        return self.web_application_type == "web"

    def _get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        if name in self._overrides:
            return self._overrides[name]
        value = os.getenv(name)
        if value is not None:
            return value
        value = self._file_values.get(name)
        if value is not None:
            return value
        return default

    def _get_int(self, name: str, default: str, *, key: str, minimum: int, maximum: int) -> int:
        raw = self._get(name, default)
        try:
            value = int(raw.strip())
        except ValueError as e:
            raise ConfigError(f"must be an integer, got {raw!r}", key=key) from e
        if not minimum <= value <= maximum:
            raise ConfigError(f"must be between {minimum} and {maximum}, got {value}", key=key)
        return value

    def _get_float(self, name: str, default: str, *, key: str) -> float:
        raw = self._get(name, default)
        try:
            value = float(raw.strip())
        except ValueError as e:
            raise ConfigError(f"must be a number, got {raw!r}", key=key) from e
        if not math.isfinite(value) or value <= 0:
            raise ConfigError(f"must be a finite positive number, got {raw!r}", key=key)
        return value

    def _get_bool(self, name: str, default: str, *, key: str) -> bool:
        raw = self._get(name, default).strip().lower()
        if raw in _TRUE_VALUES:
            return True
        if raw in _FALSE_VALUES:
            return False
        raise ConfigError(f"must be a boolean, got {raw!r}", key=key)
