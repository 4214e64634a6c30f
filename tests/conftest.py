from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repo root (containing `newsletter_formatter/`) is importable when
# pytest picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

_ENV_KEYS = (
    "NEWSLETTER_FORMATTER_MAX_CHARS",
    "NEWSLETTER_FORMATTER_DROP_CHARS",
    "NEWSLETTER_FORMATTER_LINE_START_FORBID_CHARS",
    "NEWSLETTER_FORMATTER_LINE_END_FORBID_CHARS",
    "NEWSLETTER_FORMATTER_LOG_LEVEL",
    "NEWSLETTER_FORMATTER_DISABLE_FILE_LOG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Settings read from the host environment must not leak into tests.
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
