from __future__ import annotations

import pytest

from newsletter_formatter.rules.catalog import (
    FULL_WIDTH_ALPHANUMERIC,
    JAPANESE_PARENTHESES,
    PARAGRAPH_INDENT,
    PARAGRAPH_SPACING,
    PARENTHESES_PAIR,
    PUNCTUATION,
    REPORT_RULES,
    TEXT_RULES,
    URL_FORMAT,
    UnknownRuleError,
    fix_url,
    get_rules,
)
from newsletter_formatter.rules.engine import apply_fix, count_issues, scan


def test_full_width_alphanumeric_to_half_width() -> None:
    assert apply_fix("ＡＢＣ１２３", FULL_WIDTH_ALPHANUMERIC) == "ABC123"
    assert apply_fix("第３回ｗｏｒｋｓｈｏｐ", FULL_WIDTH_ALPHANUMERIC) == "第3回workshop"
    assert count_issues("ＡＢＣ１２３", FULL_WIDTH_ALPHANUMERIC) == 6


def test_paragraph_spacing_collapses_blank_lines() -> None:
    assert apply_fix("これは文です\n\nこれも文です", PARAGRAPH_SPACING) == "これは文です\nこれも文です"
    assert apply_fix("一\n \n\t\n二", PARAGRAPH_SPACING) == "一\n二"
    assert apply_fix("一\n二", PARAGRAPH_SPACING) == "一\n二"


def test_paragraph_spacing_keeps_next_line_indent() -> None:
    assert apply_fix("一。\n\n　二。", PARAGRAPH_SPACING) == "一。\n　二。"


def test_paragraph_indent_indents_sentences_only() -> None:
    text = "これは文です。\nタイトル\n  次の文です。\n　既に字下げ。"
    assert count_issues(text, PARAGRAPH_INDENT) == 2
    assert apply_fix(text, PARAGRAPH_INDENT) == "　これは文です。\nタイトル\n　次の文です。\n　既に字下げ。"


def test_paragraph_indent_accepts_ascii_terminal_punctuation() -> None:
    assert apply_fix("Done! 次へ", PARAGRAPH_INDENT) == "　Done! 次へ"
    assert apply_fix("見出しのみ", PARAGRAPH_INDENT) == "見出しのみ"


def test_punctuation_unifies_to_house_style() -> None:
    assert apply_fix("はい、そうです。", PUNCTUATION) == "はい，そうです．"
    assert count_issues("はい、そうです。", PUNCTUATION) == 2


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://example.com/index.html", "http://example.com"),
        ("http://example.com/page", "http://example.com/page/"),
        ("http://example.com/page?x=1", "http://example.com/page?x=1"),
        ("https://example.com/docs/", "https://example.com/docs/"),
        ("https://example.com/docs/paper.pdf", "https://example.com/docs/paper.pdf"),
        ("https://example.com/a/index.html", "https://example.com/a/"),
        ("https://example.com", "https://example.com"),
    ],
)
def test_url_format(url: str, expected: str) -> None:
    assert apply_fix(url, URL_FORMAT) == expected


def test_fix_url_signals_no_change_with_none() -> None:
    assert fix_url("https://example.com/docs/") is None
    assert fix_url("https://example.com/docs") == "https://example.com/docs/"


def test_url_issue_count_matches_changed_urls() -> None:
    text = "案内: http://example.com/ と http://example.com/page と https://example.org/index.html を参照"
    assert count_issues(text, URL_FORMAT) == 2
    assert apply_fix(text, URL_FORMAT) == (
        "案内: http://example.com/ と http://example.com/page/ と https://example.org を参照"
    )


def test_parentheses_pair_normalizes_mismatched_pairs() -> None:
    text = "例(テスト）と（試験)と(ok)"
    assert count_issues(text, PARENTHESES_PAIR) == 2
    assert apply_fix(text, PARENTHESES_PAIR) == "例（テスト）と（試験）と(ok)"


def test_japanese_parentheses_only_touch_japanese_spans() -> None:
    text = "see (note) and 見本(サンプル)"
    assert count_issues(text, JAPANESE_PARENTHESES) == 1
    assert apply_fix(text, JAPANESE_PARENTHESES) == "see (note) and 見本（サンプル）"
    assert apply_fix("見本(サンプル)", JAPANESE_PARENTHESES) == "見本（サンプル）"
    assert apply_fix("見本（サンプル）", JAPANESE_PARENTHESES) == "見本（サンプル）"


def test_catalog_order_and_ids_are_unique() -> None:
    ids = [rule.id for rule in TEXT_RULES]
    assert ids == [
        "full-width-alphanumeric",
        "paragraph-spacing",
        "paragraph-indent",
        "punctuation",
        "url-format",
        "parentheses-pair",
        "japanese-parentheses",
    ]
    assert len(set(ids)) == len(ids)
    assert all(rule.fixable for rule in TEXT_RULES)
    assert [rule.id for rule in REPORT_RULES] == ids[:5]


def test_get_rules_keeps_requested_order() -> None:
    assert get_rules("url-format", "punctuation") == [URL_FORMAT, PUNCTUATION]
    assert get_rules() == []


def test_get_rules_rejects_unknown_ids() -> None:
    with pytest.raises(UnknownRuleError, match="no-such-rule"):
        get_rules("punctuation", "no-such-rule")
    with pytest.raises(KeyError):
        get_rules("no-such-rule")


def test_scan_full_catalog_on_mixed_text() -> None:
    text = "ＡＢ、http://example.com/page"
    found = [(issue.rule.id, issue.count) for issue in scan(text, TEXT_RULES)]
    assert found == [
        ("full-width-alphanumeric", 2),
        ("paragraph-indent", 1),
        ("punctuation", 1),
        ("url-format", 1),
    ]
