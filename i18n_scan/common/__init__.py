# i18n_scan/common - shared building blocks
#
# Errors, the locale JSON store and typed run options. Nothing here depends
# on i18n_scan.core.

from i18n_scan.common.errors import ConfigError, I18nScanError, LocaleParseError, LocaleWriteError
from i18n_scan.common.locale_store import LocaleFileStore, serialize_locale

__all__ = [
    "I18nScanError",
    "ConfigError",
    "LocaleParseError",
    "LocaleWriteError",
    "LocaleFileStore",
    "serialize_locale",
]
