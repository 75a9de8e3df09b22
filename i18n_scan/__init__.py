"""
i18n-scan - sync translation keys from source code into locale JSON files.

Public API:
    extract_keys: Keys referenced by literal localization calls in a text.
    reconcile: Additive merge of keys into per-locale dictionaries.
    run_scan: Full run (list files, extract, reconcile, persist).
    ScanOptions: Immutable run options.
    ScanResult: Run summary.
    load_options: Build validated options from a YAML file and overrides.

Example:
    from i18n_scan import ScanOptions, run_scan

    result = run_scan(ScanOptions(src=("src/**/*.ts",), locales_dir="lang"))
    print(result.per_locale_counts)
"""

from i18n_scan.common.errors import ConfigError, I18nScanError, LocaleParseError, LocaleWriteError
from i18n_scan.common.typed_config import ScanOptions, load_options
from i18n_scan.core.extractor import extract_keys
from i18n_scan.core.reconciler import ReconcileResult, reconcile
from i18n_scan.core.scanner import ScanResult, run_scan

__version__ = "1.0.0"

__all__ = [
    "extract_keys",
    "reconcile",
    "ReconcileResult",
    "run_scan",
    "ScanOptions",
    "ScanResult",
    "load_options",
    "I18nScanError",
    "ConfigError",
    "LocaleParseError",
    "LocaleWriteError",
]
