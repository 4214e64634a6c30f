from __future__ import annotations

import re

from newsletter_formatter.rules.model import TextRule

_FULLWIDTH_OFFSET = 0xFEE0
_FULLWIDTH_SPACE = "\u3000"


def _to_halfwidth(match: str, *_groups: str) -> str:
    return chr(ord(match) - _FULLWIDTH_OFFSET)


def _indent_paragraph(_match: str, head: str, first: str, rest: str) -> str:
    return f"{head}{_FULLWIDTH_SPACE}{first}{rest}"


_PUNCTUATION_MAP = {"、": "，", "。": "．"}


def _unify_punctuation(match: str, *_groups: str) -> str:
    return _PUNCTUATION_MAP.get(match, match)


_INDEX_HTML = "/index.html"
_url_filename_re = re.compile(r"/[^/]+\.[^/]+$")


def fix_url(url: str, *_groups: str) -> str | None:
    """Canonicalize a URL; None when it is already canonical.

    - `/index.html` at the end is removed.
    - A trailing slash is added unless the URL has one, has a query string,
      or ends with a `name.ext` segment (a bare host like `example.com` counts).
    """

    fixed = url
    if fixed.endswith(_INDEX_HTML):
        fixed = fixed[: -len(_INDEX_HTML)]
    if not fixed.endswith("/") and "?" not in fixed and not _url_filename_re.search(fixed):
        fixed += "/"
    return None if fixed == url else fixed


def _count_url_issues(matches: list[str]) -> int:
    return sum(1 for url in matches if fix_url(url) is not None)


def _to_fullwidth_parens(match: str, *_groups: str) -> str:
    return f"（{match[1:-1]}）"


FULL_WIDTH_ALPHANUMERIC = TextRule(
    id="full-width-alphanumeric",
    name="全角英数字",
    description="全角英数字を半角英数字に変換します",
    pattern=re.compile(r"[Ａ-Ｚａ-ｚ０-９]"),
    replace=_to_halfwidth,
)

PARAGRAPH_SPACING = TextRule(
    id="paragraph-spacing",
    name="段落間の空行",
    description="段落間の空行を削除します",
    pattern=re.compile(r"\n\s*\n"),
    replace="\n",
)

# A line is a paragraph when it has terminal punctuation; leading ASCII
# whitespace is replaced by the indent, an existing U+3000 indent is kept.
PARAGRAPH_INDENT = TextRule(
    id="paragraph-indent",
    name="段落頭字下げ",
    description="句点を含む段落の先頭に全角スペースを挿入します",
    pattern=re.compile(r"(^|\n)[ \t]*([^\u3000\s])(.*?[。．.！!？?]+.*?)(?=\n|\Z)"),
    replace=_indent_paragraph,
)

PUNCTUATION = TextRule(
    id="punctuation",
    name="句読点",
    description="句読点を，．に統一します",
    pattern=re.compile(r"([、。])"),
    replace=_unify_punctuation,
)

URL_FORMAT = TextRule(
    id="url-format",
    name="URL形式",
    description="URLの末尾を適切な形式に修正します",
    pattern=re.compile(r"(https?://[^\s\"'<>()\[\]{}]+)(?=[\s,.!?;\"'<>()\[\]{}]|\Z)"),
    replace=fix_url,
    detect_issues=_count_url_issues,
)

PARENTHESES_PAIR = TextRule(
    id="parentheses-pair",
    name="括弧ペア修正",
    description="全角・半角がマッチしていない括弧のペアを全角括弧に修正します",
    pattern=re.compile(r"(?:\([^)）]*）|（[^)）]*\))"),
    replace=_to_fullwidth_parens,
)

JAPANESE_PARENTHESES = TextRule(
    id="japanese-parentheses",
    name="日本語括弧修正",
    description="括弧内に日本語が含まれている場合、半角括弧を全角括弧に修正します",
    pattern=re.compile(r"\([^)]*[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF][^)]*\)"),
    replace=_to_fullwidth_parens,
)

# Declared order is the report order of scan().
TEXT_RULES: tuple[TextRule, ...] = (
    FULL_WIDTH_ALPHANUMERIC,
    PARAGRAPH_SPACING,
    PARAGRAPH_INDENT,
    PUNCTUATION,
    URL_FORMAT,
    PARENTHESES_PAIR,
    JAPANESE_PARENTHESES,
)

RULES_BY_ID: dict[str, TextRule] = {rule.id: rule for rule in TEXT_RULES}

# Rules offered while editing report bodies.
REPORT_RULES: tuple[TextRule, ...] = TEXT_RULES[:5]


class UnknownRuleError(KeyError):
    pass


def get_rules(*ids: str) -> list[TextRule]:
    """Select rules by id, in the order given."""

    unknown = [rule_id for rule_id in ids if rule_id not in RULES_BY_ID]
    if unknown:
        raise UnknownRuleError(f"unknown rule id(s): {', '.join(unknown)}")
    return [RULES_BY_ID[rule_id] for rule_id in ids]
