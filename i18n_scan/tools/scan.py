#!/usr/bin/env python
"""
i18n-scan: add missing translation keys to locale JSON files.

Scans source files for ``__('key')``, ``trans('key')`` and ``@lang('key')``
calls and adds every key missing from ``<localesDir>/<locale>.json``.
Existing translations are never overwritten.

Usage:
    i18n-scan --src "resources/**/*.{js,vue}" --locales en,de,fr
    python -m i18n_scan --config i18n-scan.yaml --dry
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from i18n_scan.common.errors import I18nScanError
from i18n_scan.common.typed_config import DEFAULT_SRC, PLACEHOLDER_MODES, load_options
from i18n_scan.core.scanner import run_scan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-scan",
        description="Add missing translation keys to locale JSON files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Scan the default Laravel-style layout and update en/de
    i18n-scan

    # Custom sources and locales, leave new non-master entries empty
    i18n-scan --src "src/**/*.{ts,tsx}" --locales en,de,fr --placeholder empty

    # Show what would be written without touching any file
    i18n-scan --dry

Options given on the command line override values from the config file.
""",
    )
    parser.add_argument(
        "--src",
        default=None,
        help=f'Comma-separated globs to scan (default: "{",".join(DEFAULT_SRC)}")',
    )
    parser.add_argument(
        "--localesDir",
        "--locales-dir",
        dest="locales_dir",
        default=None,
        help='Directory of locale JSONs (default: "resources/lang")',
    )
    parser.add_argument(
        "--locales",
        default=None,
        help='Comma-separated locales to update (default: "en,de")',
    )
    parser.add_argument(
        "--master",
        default=None,
        help='Master locale for default values (default: "en")',
    )
    parser.add_argument(
        "--placeholder",
        choices=PLACEHOLDER_MODES,
        default=None,
        help='For non-master locales: copy key as value or leave empty (default: "copy")',
    )
    parser.add_argument(
        "--ignore",
        default=None,
        help="Comma-separated globs to exclude (default: node_modules, vendor, dist, build)",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Base directory for relative source globs (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (default: $I18N_SCAN_CONFIG or ./i18n-scan.yaml if present)",
    )
    parser.add_argument("--dry", action="store_true", default=None, help="Dry-run (do not write files)")
    parser.add_argument("--silent", action="store_true", default=None, help="Suppress console output")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail if the master locale is not one of the locales",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    return parser


def _overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "src": args.src,
        "locales_dir": args.locales_dir,
        "locales": args.locales,
        "master": args.master,
        "placeholder": args.placeholder,
        "ignore": args.ignore,
        "root": args.root,
        "dry": args.dry,
        "silent": args.silent,
        "strict": args.strict,
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        level = logging.DEBUG
    elif args.silent:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s")

    try:
        options = load_options(args.config, _overrides_from_args(args))
        result = run_scan(options)
    except I18nScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not options.silent:
        print("\nResult:")
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
