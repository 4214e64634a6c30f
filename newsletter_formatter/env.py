from __future__ import annotations

import os
from dataclasses import replace

from newsletter_formatter.formatting.config import DEFAULT_FORMAT_SETTINGS, FormatSettings

ENV_PREFIX = "NEWSLETTER_FORMATTER_"


def env_truthy(name: str) -> bool:
    v = str(os.getenv(name, "")).strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    raw = str(os.getenv(name, "")).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_str(name: str, default: str) -> str:
    # Character sets may legitimately contain spaces; only unset/empty falls back.
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw


def settings_from_env(base: FormatSettings = DEFAULT_FORMAT_SETTINGS) -> FormatSettings:
    return replace(
        base,
        max_chars_per_line=env_int(ENV_PREFIX + "MAX_CHARS", base.max_chars_per_line),
        drop_chars=env_str(ENV_PREFIX + "DROP_CHARS", base.drop_chars),
        line_start_forbid_chars=env_str(ENV_PREFIX + "LINE_START_FORBID_CHARS", base.line_start_forbid_chars),
        line_end_forbid_chars=env_str(ENV_PREFIX + "LINE_END_FORBID_CHARS", base.line_end_forbid_chars),
    )
