from __future__ import annotations

import re
from collections.abc import Iterable

from newsletter_formatter.rules.model import Issue, TextRule


def find_matches(text: str, rule: TextRule) -> list[str]:
    return [m.group(0) for m in rule.pattern.finditer(text)]


def count_issues(text: str, rule: TextRule) -> int:
    matches = find_matches(text, rule)
    if rule.detect_issues is not None:
        return int(rule.detect_issues(matches))
    return len(matches)


def scan(text: str, rules: Iterable[TextRule]) -> list[Issue]:
    """Report issue counts per rule, in the given rule order.

    Rules without issues are left out.
    """

    issues: list[Issue] = []
    for rule in rules:
        count = count_issues(text, rule)
        if count > 0:
            issues.append(Issue(rule=rule, count=count))
    return issues


def apply_fix(text: str, rule: TextRule) -> str:
    """Return `text` with every match of `rule` replaced.

    A callable replacement returning None leaves that particular match as it
    was. Rules without a replacement return the input unchanged.
    """

    replace = rule.replace
    if replace is None:
        return text
    if isinstance(replace, str):
        return rule.pattern.sub(replace, text)

    def _sub(m: re.Match[str]) -> str:
        result = replace(m.group(0), *m.groups(""))
        return m.group(0) if result is None else result

    return rule.pattern.sub(_sub, text)


def apply_fixes(text: str, rules: Iterable[TextRule]) -> str:
    for rule in rules:
        text = apply_fix(text, rule)
    return text
