from __future__ import annotations

import os
from dataclasses import dataclass

from selectorkit.errors import ConfigurationError

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    json_sort_keys: bool = False
    json_indent: int | None = None  # None keeps the compact form

    @classmethod
    def from_env(cls) -> SelectorKitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables.

        Raises ``ConfigurationError`` if ``SELECTORKIT_JSON_INDENT`` is not an
        integer.
        """
        raw_indent = os.environ.get("SELECTORKIT_JSON_INDENT", "").strip()
        try:
            indent = int(raw_indent) if raw_indent else None
        except ValueError as exc:
            raise ConfigurationError(
                f"SELECTORKIT_JSON_INDENT must be an integer, got {raw_indent!r}", cause=exc
            ) from exc
        return cls(
            log_level=os.environ.get("SELECTORKIT_LOG_LEVEL", cls.log_level).upper(),
            json_sort_keys=os.environ.get("SELECTORKIT_JSON_SORT_KEYS", "").lower() in _TRUTHY,
            json_indent=indent,
        )
