from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

# A replace callable gets the full match followed by its capture groups.
# Returning None keeps that match verbatim; "" deletes it.
ReplaceFunc = Callable[..., str | None]
DetectIssuesFunc = Callable[[list[str]], int]


@dataclass(frozen=True)
class TextRule:
    id: str
    name: str
    description: str
    pattern: re.Pattern[str]

    # None: detection only. str: re.sub template (\1, \g<name>).
    replace: ReplaceFunc | str | None = None

    # Overrides the default of one issue per match.
    detect_issues: DetectIssuesFunc | None = None

    @property
    def fixable(self) -> bool:
        return self.replace is not None


@dataclass(frozen=True)
class Issue:
    rule: TextRule
    count: int
