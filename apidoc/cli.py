"""Command line entry point: validate definitions or generate openapi.yml."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from apidoc.lib.logging import configure_logging
from apidoc.openapi.module import generate_openapi
from apidoc.settings import get_settings, load_settings
from apidoc.spec.loader import SpecValidationError, validate_definitions_cli


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        artifact = generate_openapi(args.config, args.output)
    except SpecValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Generated OpenAPI document: {artifact.document}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(args.config) if args.config else get_settings()
    except SpecValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    base_dir = args.config.parent if args.config else Path.cwd()
    ok, message = validate_definitions_cli(settings, base_dir)
    print(message)
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate OpenAPI documents from API definitions")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the settings YAML file (definition globs are relative to it)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Write openapi.yml")
    generate_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output root directory (default: build/ next to the settings file)",
    )
    generate_parser.set_defaults(func=cmd_generate)

    validate_parser = subparsers.add_parser("validate", help="Validate definition files")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
