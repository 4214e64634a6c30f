from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_CHARS_PER_LINE = 75

# ぶら下げ文字: may hang past the right margin instead of wrapping.
DEFAULT_DROP_CHARS = ";・.､｡、。，．｣」』）〕］｝〉】"

# 行頭禁則文字: must never start a line.
DEFAULT_LINE_START_FORBID_CHARS = "]}):;?!ﾞﾟ”･~：；？！゛゜‐'\"）〕］｝〉」』】"

# 行末禁則文字: must never end a line.
DEFAULT_LINE_END_FORBID_CHARS = "[{('\"“（〔［｛〈「『【「"


@dataclass(frozen=True)
class FormatSettings:
    # Budget in half-width columns; wide characters count as two.
    max_chars_per_line: int = DEFAULT_MAX_CHARS_PER_LINE

    # Each string is used as a set of single characters.
    drop_chars: str = DEFAULT_DROP_CHARS
    line_start_forbid_chars: str = DEFAULT_LINE_START_FORBID_CHARS
    line_end_forbid_chars: str = DEFAULT_LINE_END_FORBID_CHARS


DEFAULT_FORMAT_SETTINGS = FormatSettings()
