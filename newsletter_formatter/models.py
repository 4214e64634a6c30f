from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from newsletter_formatter.formatting.config import (
    DEFAULT_DROP_CHARS,
    DEFAULT_LINE_END_FORBID_CHARS,
    DEFAULT_LINE_START_FORBID_CHARS,
    DEFAULT_MAX_CHARS_PER_LINE,
    FormatSettings,
)


class FormatOptions(BaseModel):
    max_chars_per_line: int = Field(default=DEFAULT_MAX_CHARS_PER_LINE, ge=1, le=200)
    drop_chars: str = DEFAULT_DROP_CHARS
    line_start_forbid_chars: str = DEFAULT_LINE_START_FORBID_CHARS
    line_end_forbid_chars: str = DEFAULT_LINE_END_FORBID_CHARS

    def to_settings(self) -> FormatSettings:
        return FormatSettings(
            max_chars_per_line=self.max_chars_per_line,
            drop_chars=self.drop_chars,
            line_start_forbid_chars=self.line_start_forbid_chars,
            line_end_forbid_chars=self.line_end_forbid_chars,
        )


class ReportEntry(BaseModel):
    title: str = ""
    author: str = ""
    content: str = ""


class NewsletterData(BaseModel):
    # メイン
    publication_year: str = ""
    no_month: str = ""
    publication_date: str = "25"
    editor_name: str = ""

    # 参加報告
    reports: list[ReportEntry] = Field(default_factory=lambda: [ReportEntry()])

    # 行事
    shusai_kyosai_events: str = ""
    kyosan_events: str = ""
    awards: str = ""
    journal_cfps: str = ""

    # 関連情報
    international_cfps: str = ""
    international_conferences: str = ""

    @classmethod
    def initial(cls, year: str | None = None, month: str | None = None) -> NewsletterData:
        """Blank newsletter for the given (or current) year and month."""

        today = date.today()
        return cls(
            publication_year=year or str(today.year),
            no_month=month or str(today.month),
        )
