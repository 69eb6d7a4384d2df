#!/usr/bin/env python3

"""Tunables for the extraction pipeline, overridable from the environment."""

import os
from typing import Any

ENV_PREFIX = "NATIVEBINDGEN_"

DEFAULT_CONFIG: dict[str, Any] = {
    # Output
    "JSON_INDENT": 2,

    # Comma-separated substrings marking a compiler-synthesized record name
    "ANONYMOUS_MARKERS": "(anonymous,(unnamed",

    # Front-end behaviour
    "SKIP_FUNCTION_BODIES": True,
    "FAIL_ON_ERROR_DIAGNOSTICS": False,

    # Diagnostics
    "LOG_MEMORY_USAGE": True,
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Values are coerced to the type of the default; malformed numbers keep
    the default.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key, default in DEFAULT_CONFIG.items():
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is None:
            continue

        if isinstance(default, bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(default, int):
            try:
                config[key] = int(env_value)
            except ValueError:
                pass
        else:
            config[key] = env_value

    return config


def get_anonymous_markers() -> tuple[str, ...]:
    """Spelling fragments that identify anonymous records."""
    raw = str(get_config()["ANONYMOUS_MARKERS"])
    return tuple(marker.strip() for marker in raw.split(",") if marker.strip())
