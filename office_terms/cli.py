# office_terms\cli.py
"""
office_terms/cli.py

Command-line surface over the extraction use case and the date engine.

    office-terms extract PAGE.json [--locale L] [--format records|claims] [--chronological] [--strict]
    office-terms date TEXT [--locale L]
    office-terms range TEXT [--locale L]

Exit status: 0 on success, 1 on input errors (missing or malformed
page, unknown locale), 2 when a date cannot be read.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from office_terms.adapters.persistence.filesystem_source import FileSystemInfoboxSource
from office_terms.core.domain.dates.locales import get_locale_rules, supported_locales
from office_terms.core.domain.dates.normalizer import normalize
from office_terms.core.domain.dates.ranges import split
from office_terms.core.domain.exceptions import DateError, DomainError
from office_terms.core.use_cases.extract_office_terms import ExtractOfficeTerms
from office_terms.shared.config import settings
from office_terms.shared.logging_config import configure_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_DATE_ERROR = 2


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_locale_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--locale",
        "-l",
        default=None,
        help=(
            f"Date locale (default: {settings.DEFAULT_LOCALE}). "
            f"Known: {', '.join(supported_locales())}."
        ),
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-terms",
        description="Extract office terms from parsed Wikipedia infoboxes and normalize their dates.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # `extract` command
    extract = subparsers.add_parser(
        "extract",
        help="Print the office terms found in a parsed page (JSON array).",
    )
    extract.add_argument("page", metavar="PAGE.json", help="Path to a wtf_wikipedia page JSON file.")
    _add_locale_argument(extract)
    extract.add_argument(
        "--format",
        choices=["records", "claims"],
        default="records",
        help="Flat records (default) or Wikidata-qualifier claims.",
    )
    extract.add_argument(
        "--chronological",
        action="store_true",
        help="Sort terms by start date instead of document order.",
    )
    extract.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unreadable dates instead of keeping the raw text.",
    )

    # `date` command
    date = subparsers.add_parser("date", help="Normalize one date expression.")
    date.add_argument("text", help="The date text, e.g. '18. März 2004'.")
    _add_locale_argument(date)

    # `range` command
    date_range = subparsers.add_parser("range", help="Split and normalize a combined date range.")
    date_range.add_argument("text", help="The range text, e.g. '3-10 June, 2004'.")
    _add_locale_argument(date_range)

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_extract(args: argparse.Namespace) -> int:
    path = Path(args.page)
    use_case = ExtractOfficeTerms(
        source=FileSystemInfoboxSource(path.parent),
        locale=args.locale,
        raw_date_fallback=False if args.strict else None,
    )
    # The source resolves <parent>/<name>.json; "PAGE" and "PAGE.json" both work.
    name = path.stem if path.suffix == ".json" else path.name
    terms = use_case.execute(name, chronological=args.chronological)

    if args.format == "claims":
        payload = [term.to_claims() for term in terms]
    else:
        payload = [term.to_record() for term in terms]

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return EXIT_OK


def _cmd_date(args: argparse.Namespace) -> int:
    rules = get_locale_rules(args.locale or settings.DEFAULT_LOCALE)
    value = normalize(args.text, rules)
    print(value.isoformat() if value is not None else "")
    return EXIT_OK


def _cmd_range(args: argparse.Namespace) -> int:
    rules = get_locale_rules(args.locale or settings.DEFAULT_LOCALE)
    start, end = split(args.text, rules)
    print(f"{start or ''}\t{end or ''}")
    return EXIT_OK


_COMMANDS = {
    "extract": _cmd_extract,
    "date": _cmd_date,
    "range": _cmd_range,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging()

    try:
        exit_code = _COMMANDS[args.command](args)
    except DateError as e:
        logger.error("date_unreadable", raw=e.raw, locale=e.locale, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        exit_code = EXIT_DATE_ERROR
    except DomainError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        exit_code = EXIT_INPUT_ERROR

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
