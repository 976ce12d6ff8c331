#!/usr/bin/env python3
# CLI entry point for content director validation
# Checks a saved model reply or a raw user input from the command line

"""L1 validator CLI for director and content-plan replies.

Usage:
    content-director-validate director reply.json
    content-director-validate plan reply.txt --locale zh-TW
    content-director-validate input product-name "Widget"

Exit codes:
    0 = validation passed
    1 = validation failed, or the reply holds no decodable JSON

Stderr contains the aggregated report for retry feedback.
"""

import argparse
import json
import sys
from pathlib import Path

from content_director.config import settings
from content_director.logging_config import configure_logging
from content_director.messages import SUPPORTED_LOCALES
from content_director.parsing import load_model_json
from content_director.validators import (
    ValidationError,
    validate_brand_context,
    validate_content_plan,
    validate_director_output,
    validate_product_name,
    validate_ref_copy,
)

ENTITY_VALIDATORS = {
    "director": validate_director_output,
    "plan": validate_content_plan,
}

INPUT_VALIDATORS = {
    "product-name": validate_product_name,
    "brand-context": validate_brand_context,
    "ref-copy": validate_ref_copy,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content-director-validate",
        description="Validate director / content-plan replies and user input",
    )
    parser.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        default=None,
        help="Message language (default: CONTENT_DIRECTOR_LOCALE or 'en')",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name in ENTITY_VALIDATORS:
        entity_parser = subparsers.add_parser(name, help=f"Validate a {name} reply")
        entity_parser.add_argument("file", help="Reply file, or '-' for stdin")

    input_parser = subparsers.add_parser("input", help="Check a raw user input field")
    input_parser.add_argument("field", choices=sorted(INPUT_VALIDATORS))
    input_parser.add_argument("text")

    return parser


def _read_reply(file_arg: str) -> str:
    if file_arg == "-":
        return sys.stdin.read()
    return Path(file_arg).read_text(encoding="utf-8")


def run_entity(command: str, file_arg: str, locale: str | None) -> int:
    try:
        data = load_model_json(_read_reply(file_arg))
    except json.JSONDecodeError as e:
        print("INVALID_JSON", file=sys.stderr)
        print(f"  - {e}", file=sys.stderr)
        return 1

    try:
        ENTITY_VALIDATORS[command](data, locale=locale)
    except ValidationError as e:
        print("VALIDATION_FAILED", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1

    print("VALIDATION_PASSED")
    return 0


def run_input(field: str, text: str, locale: str | None) -> int:
    check = INPUT_VALIDATORS[field](text, locale=locale)
    if not check.valid:
        print("VALIDATION_FAILED", file=sys.stderr)
        print(f"  - {check.error}", file=sys.stderr)
        return 1

    print("VALIDATION_PASSED")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level)

    if args.command == "input":
        return run_input(args.field, args.text, args.locale)
    return run_entity(args.command, args.file, args.locale)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
