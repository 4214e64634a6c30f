"""Newsletter text assembly.

A template is plain text with `${name}` placeholders. Besides the fields of
`NewsletterData` it understands:

  ${report_title_list}  table of contents of the participation reports
  ${report_contents}    the reports themselves, each under a boxed title
  ${award_toc}/${award} award section (removed when there are no awards)
  ${vol}                volume number (publication year - 1995)
  ${chair}/${committee} organization-wide template variables
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from newsletter_formatter.formatting.config import FormatSettings
from newsletter_formatter.formatting.wrapper import wrap_text
from newsletter_formatter.models import NewsletterData, ReportEntry

logger = logging.getLogger(__name__)

FIRST_VOLUME_YEAR = 1995

_REPORT_RULE = "＋" + "-" * 70 + "＋"

# Leading ASCII digits only, so "2025年" still yields a year.
_leading_year_re = re.compile(r"\s*([+-]?[0-9]+)")

_award_toc_line_re = re.compile(r"^.*\$\{award_toc\}.*$\n?", re.MULTILINE)
# The award line plus its continuation, up to the next line starting with text.
_award_block_re = re.compile(r"^.*\$\{award\}.*$[\s\S]*?\n(?=\S)", re.MULTILINE)

_PLAIN_FIELDS = (
    "publication_year",
    "no_month",
    "editor_name",
    "shusai_kyosai_events",
    "kyosan_events",
    "journal_cfps",
    "international_cfps",
    "international_conferences",
)


class TemplateError(ValueError):
    pass


@dataclass(frozen=True)
class TemplateVariables:
    chair: str = ""
    committee: str = ""


def _placeholder(key: str) -> str:
    return "${" + key + "}"


def _replace_placeholders(template: str, replacements: dict[str, str]) -> str:
    result = template
    for key, value in replacements.items():
        result = result.replace(_placeholder(key), value.strip())
    return result


def remove_empty_award_lines(template: str) -> str:
    result = _award_toc_line_re.sub("", template)
    return _award_block_re.sub("", result)


def report_titles_for_toc(reports: list[ReportEntry]) -> str:
    return "\n".join(f"　◆ {r.title}\n　　{r.author}" for r in reports)


def report_contents(reports: list[ReportEntry]) -> str:
    blocks = [f"{_REPORT_RULE}\n｜◆ {r.title}\n{_REPORT_RULE}\n{r.author}\n{r.content}" for r in reports]
    return "\n\n".join(blocks)


def volume_number(publication_year: str) -> int | None:
    m = _leading_year_re.match(str(publication_year))
    if m is None:
        return None
    return int(m.group(1)) - FIRST_VOLUME_YEAR


class TemplateService:
    def __init__(
        self,
        template: str,
        award_toc_template: str = "",
        award_template: str = "",
        variables: TemplateVariables | None = None,
    ) -> None:
        self.template = template
        self.award_toc_template = award_toc_template
        self.award_template = award_template
        self.variables = variables or TemplateVariables()

    def _award_sections(self, awards: str) -> tuple[str, str]:
        if not awards.strip():
            return "", ""
        return self.award_toc_template, self.award_template.replace(_placeholder("content"), awards, 1)

    def _replacements(self, data: NewsletterData) -> dict[str, str]:
        award_toc, award = self._award_sections(data.awards)
        replacements = {key: getattr(data, key) for key in _PLAIN_FIELDS}
        replacements.update(
            report_title_list=report_titles_for_toc(data.reports),
            report_contents=report_contents(data.reports),
            award_toc=award_toc,
            award=award,
        )
        return replacements

    def generate(self, data: NewsletterData, settings: FormatSettings | None = None) -> str:
        """Fill the template with `data`; wrap for mail when `settings` is given."""

        if not self.template:
            raise TemplateError("template is not loaded")

        result = self.template
        if not data.awards.strip():
            result = remove_empty_award_lines(result)

        result = _replace_placeholders(result, self._replacements(data))

        vol = volume_number(data.publication_year)
        if vol is None:
            logger.warning("publication_year is not a number: %r; ${vol} left as-is", data.publication_year)
        else:
            result = result.replace(_placeholder("vol"), str(vol))

        result = _replace_placeholders(
            result,
            {"chair": self.variables.chair, "committee": self.variables.committee},
        )

        result = result.strip()
        if settings is not None:
            result = wrap_text(result, settings)
        logger.debug("generated newsletter: reports=%d chars=%d", len(data.reports), len(result))
        return result
