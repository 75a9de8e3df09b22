from i18n_scan.core.extractor import CALL_PATTERNS, extract_keys, iter_key_matches, unescape_key
from i18n_scan.core.file_finder import expand_braces, find_source_files, is_ignored
from i18n_scan.core.reconciler import ReconcileResult, placeholder_value, reconcile
from i18n_scan.core.scanner import ScanResult, collect_keys, run_scan
from i18n_scan.core.source_reader import decode_source, read_source_text

__all__ = [
    "CALL_PATTERNS",
    "extract_keys",
    "iter_key_matches",
    "unescape_key",
    "expand_braces",
    "find_source_files",
    "is_ignored",
    "ReconcileResult",
    "placeholder_value",
    "reconcile",
    "ScanResult",
    "collect_keys",
    "run_scan",
    "decode_source",
    "read_source_text",
]
