from __future__ import annotations

import logging
from dataclasses import dataclass
from os import environ

from pasetomint.exceptions import SettingsError

OUTPUT_FORMATS = ("plain", "pretty", "json")


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings for the command line front end.

    Attributes:
        output_format (str): One of ``plain``, ``pretty`` or ``json`` (default: plain).
        log_level (str): Standard logging level name (default: WARNING).
        key_variable (str): Environment variable holding the key when stdin
            is an interactive terminal (default: PASETOMINT_KEY).

    Example:
    ```
        settings = Settings(
            output_format="json",
            log_level="DEBUG",
        )
    ```
    """

    output_format: str = "plain"
    log_level: str = "WARNING"
    key_variable: str = "PASETOMINT_KEY"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise SettingsError(
                f"Unsupported output format '{self.output_format}'. "
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise SettingsError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_environ(cls) -> Settings:
        """
        Build settings from the environment:
        - PASETOMINT_FORMAT = "pretty"
        - PASETOMINT_LOG_LEVEL = "INFO"
        - PASETOMINT_KEY_VARIABLE = "MY_SERVICE_PASETO_KEY"
        """
        return cls(
            output_format=environ.get("PASETOMINT_FORMAT", cls.output_format).lower(),
            log_level=environ.get("PASETOMINT_LOG_LEVEL", cls.log_level).upper(),
            key_variable=environ.get("PASETOMINT_KEY_VARIABLE", cls.key_variable),
        )
