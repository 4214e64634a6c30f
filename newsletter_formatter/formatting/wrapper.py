from __future__ import annotations

import logging
import re

from newsletter_formatter.formatting.config import DEFAULT_FORMAT_SETTINGS, FormatSettings
from newsletter_formatter.formatting.width import char_width, text_width

logger = logging.getLogger(__name__)

# Numbers, hyphenated and apostrophe'd English tokens are never split.
_atomic_word_re = re.compile(r"[A-Za-z0-9\-'.]+")


def _effective_budget(settings: FormatSettings) -> int:
    budget = int(settings.max_chars_per_line)
    if budget <= 0:
        logger.warning("non-positive max_chars_per_line=%s; clamping to 1", budget)
        return 1
    return budget


def wrap_line(line: str, settings: FormatSettings, *, budget: int | None = None) -> list[str]:
    """Break a single line (no newlines) into mail-width lines.

    Follows kinsoku shori: drop characters may hang past the margin,
    line-start-forbidden characters are pulled back together with their
    predecessor, and line-end-forbidden characters are pushed to the next line.
    """

    if budget is None:
        budget = _effective_budget(settings)

    drop = settings.drop_chars
    start_forbid = settings.line_start_forbid_chars
    end_forbid = settings.line_end_forbid_chars

    out: list[str] = []
    current = ""
    width = 0

    def flush(seed: str = "") -> None:
        nonlocal current, width
        if current:
            out.append(current)
        current = seed
        width = text_width(seed)

    i = 0
    n = len(line)
    while i < n:
        m = _atomic_word_re.match(line, i)
        if m:
            word = m.group(0)
            word_width = text_width(word)
            if width > 0 and width + word_width > budget:
                last = current[-1]
                if last not in end_forbid:
                    flush()
                elif len(current) > 1:
                    current = current[:-1]
                    flush(last)
                # A lone line-end-forbidden char stays glued to the word.
            current += word
            width += word_width
            i = m.end()
            continue

        ch = line[i]
        ch_width = char_width(ch)
        next_ch = line[i + 1] if i + 1 < n else ""

        if ch in drop and width + ch_width > budget:
            current += ch
            flush()
            i += 1
            continue

        if next_ch and next_ch in start_forbid and width + ch_width + char_width(next_ch) > budget:
            flush(ch + next_ch)
            i += 2
            continue

        if ch in end_forbid and width + ch_width >= budget:
            flush(ch)
            i += 1
            continue

        if width + ch_width > budget:
            flush(ch)
        else:
            current += ch
            width += ch_width
        i += 1

    flush()
    return out


def wrap_text(text: str, settings: FormatSettings = DEFAULT_FORMAT_SETTINGS) -> str:
    """Reflow `text` for plain-text mail.

    Every input line is wrapped independently; empty lines are kept as-is.
    No character is added, dropped or reordered, only newlines are inserted.
    Note that wrapping already-wrapped text is not a no-op in general.
    """

    budget = _effective_budget(settings)
    lines: list[str] = []
    for line in text.split("\n"):
        if line == "":
            lines.append("")
            continue
        lines.extend(wrap_line(line, settings, budget=budget))
    return "\n".join(lines)
