"""Command-line front end.

Run:
  python -m newsletter_formatter.cli wrap draft.txt --max-chars 72
  python -m newsletter_formatter.cli lint draft.txt
  python -m newsletter_formatter.cli fix draft.txt --rule punctuation --rule url-format
  python -m newsletter_formatter.cli generate data.json --template newsletter.txt --wrap
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

from pydantic import ValidationError

from newsletter_formatter.env import settings_from_env
from newsletter_formatter.formatting.config import FormatSettings
from newsletter_formatter.formatting.wrapper import wrap_text
from newsletter_formatter.logging_setup import LOG_LEVELS, configure_logging
from newsletter_formatter.models import FormatOptions, NewsletterData
from newsletter_formatter.rules.catalog import TEXT_RULES, UnknownRuleError, get_rules
from newsletter_formatter.rules.engine import apply_fixes, scan
from newsletter_formatter.template import TemplateError, TemplateService, TemplateVariables

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _read_optional(path: str | None) -> str:
    return Path(path).read_text(encoding="utf-8") if path else ""


def _settings(args: argparse.Namespace) -> FormatSettings:
    settings = settings_from_env()
    if args.max_chars is not None:
        settings = replace(settings, max_chars_per_line=args.max_chars)
    # Validate the merged values the same way user-supplied options are validated.
    return FormatOptions(**asdict(settings)).to_settings()


def _cmd_wrap(args: argparse.Namespace) -> int:
    sys.stdout.write(wrap_text(_read_input(args.file), _settings(args)) + "\n")
    return EXIT_OK


def _cmd_lint(args: argparse.Namespace) -> int:
    rules = get_rules(*args.rule) if args.rule else list(TEXT_RULES)
    issues = scan(_read_input(args.file), rules)
    for issue in issues:
        sys.stdout.write(f"{issue.rule.id}\t{issue.count}\t{issue.rule.name}\n")
    logger.info("lint: %d rule(s) reported issues", len(issues))
    return EXIT_ISSUES if issues else EXIT_OK


def _cmd_fix(args: argparse.Namespace) -> int:
    rules = get_rules(*args.rule)
    sys.stdout.write(apply_fixes(_read_input(args.file), rules) + "\n")
    return EXIT_OK


def _cmd_generate(args: argparse.Namespace) -> int:
    data = NewsletterData.model_validate_json(Path(args.data).read_text(encoding="utf-8"))
    service = TemplateService(
        _read_optional(args.template),
        award_toc_template=_read_optional(args.award_toc_template),
        award_template=_read_optional(args.award_template),
        variables=TemplateVariables(chair=args.chair, committee=args.committee),
    )
    settings = _settings(args) if args.wrap else None
    sys.stdout.write(service.generate(data, settings) + "\n")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="newsletter_formatter", add_help=True)
    parser.add_argument("--log-dir", default=None, help="Write a rotating log file into this directory")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Root log level (default: NEWSLETTER_FORMATTER_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_wrap = sub.add_parser("wrap", help="Reflow text for plain-text mail")
    p_wrap.add_argument("file", nargs="?", default=None, help="Input file (default: stdin)")
    p_wrap.add_argument("--max-chars", type=int, default=None, help="Half-width columns per line")
    p_wrap.set_defaults(func=_cmd_wrap)

    p_lint = sub.add_parser("lint", help="Report text-rule issues")
    p_lint.add_argument("file", nargs="?", default=None, help="Input file (default: stdin)")
    p_lint.add_argument("--rule", action="append", default=[], help="Rule id (repeatable; default: all)")
    p_lint.set_defaults(func=_cmd_lint)

    p_fix = sub.add_parser("fix", help="Apply text-rule fixes in the given order")
    p_fix.add_argument("file", nargs="?", default=None, help="Input file (default: stdin)")
    p_fix.add_argument("--rule", action="append", required=True, help="Rule id (repeatable)")
    p_fix.set_defaults(func=_cmd_fix)

    p_gen = sub.add_parser("generate", help="Fill a newsletter template from JSON data")
    p_gen.add_argument("data", help="Newsletter data (JSON)")
    p_gen.add_argument("--template", required=True, help="Newsletter template file")
    p_gen.add_argument("--award-toc-template", default=None)
    p_gen.add_argument("--award-template", default=None)
    p_gen.add_argument("--chair", default="")
    p_gen.add_argument("--committee", default="")
    p_gen.add_argument("--wrap", action="store_true", help="Reflow the result for plain-text mail")
    p_gen.add_argument("--max-chars", type=int, default=None, help="Half-width columns per line")
    p_gen.set_defaults(func=_cmd_generate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    log_file = configure_logging(log_dir=Path(args.log_dir) if args.log_dir else None, level=args.log_level)
    if log_file is not None:
        logger.info("file logging enabled: %s", log_file)

    try:
        return args.func(args)
    except UnknownRuleError as e:
        sys.stderr.write(f"error: {e.args[0]}\n")
        return EXIT_USAGE
    except (ValidationError, TemplateError, OSError, UnicodeDecodeError) as e:
        # Tracebacks go to the log file only; stderr gets the one-line message.
        if log_file is not None:
            logger.exception("%s failed", args.command)
        sys.stderr.write(f"error: {e}\n")
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
