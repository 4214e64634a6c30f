from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from newsletter_formatter.env import ENV_PREFIX, env_truthy

LOG_FILENAME = "newsletter-formatter.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HANDLER_MARK = "_newsletter_formatter_file_log"

logger = logging.getLogger(__name__)


def resolve_log_level(name: str | None) -> int | None:
    """Map a level name (CLI flag or env value) to a logging level; None if unset or unknown."""

    raw = str(name or os.getenv(ENV_PREFIX + "LOG_LEVEL", "") or "").strip().upper()
    if not raw:
        return None
    if raw not in LOG_LEVELS:
        logger.warning("ignoring unknown log level %r", raw)
        return None
    return logging.getLevelName(raw)


def _find_file_handler(root: logging.Logger) -> RotatingFileHandler | None:
    for h in root.handlers:
        if getattr(h, _HANDLER_MARK, False):
            return h  # type: ignore[return-value]
    return None


def configure_logging(*, log_dir: Path | None, level: str | None = None) -> Path | None:
    """Set the root level and, with `log_dir`, attach one rotating log file.

    Returns the log file path, or None when no file is written (no `log_dir`,
    or `NEWSLETTER_FORMATTER_DISABLE_FILE_LOG` is set). Calling it again keeps
    the first handler.
    """

    root = logging.getLogger()
    lvl = resolve_log_level(level)
    if lvl is not None:
        root.setLevel(lvl)

    if log_dir is None or env_truthy(ENV_PREFIX + "DISABLE_FILE_LOG"):
        return None

    existing = _find_file_handler(root)
    if existing is not None:
        return Path(existing.baseFilename)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / LOG_FILENAME).resolve()
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8")
    setattr(handler, _HANDLER_MARK, True)
    handler.setLevel(lvl if lvl is not None else logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
    # The root logger defaults to WARNING; let INFO run records reach the file.
    if lvl is None and root.level > logging.INFO:
        root.setLevel(logging.INFO)
    return log_file
