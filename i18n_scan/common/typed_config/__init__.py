# i18n_scan/common/typed_config - typed run options
#
# ScanOptions is a frozen dataclass built from loose dicts (YAML config file
# merged with command-line overrides) through safe converters.

from i18n_scan.common.typed_config.models import (
    DEFAULT_IGNORE,
    DEFAULT_LOCALES,
    DEFAULT_LOCALES_DIR,
    DEFAULT_MASTER,
    DEFAULT_PLACEHOLDER,
    DEFAULT_SRC,
    PLACEHOLDER_MODES,
    PlaceholderMode,
    ScanOptions,
    normalize_path,
    safe_bool,
    safe_str,
    safe_str_tuple,
)
from i18n_scan.common.typed_config.reader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    find_config_file,
    load_options,
    read_config_file,
)
from i18n_scan.common.typed_config.validation import (
    ValidationIssue,
    ValidationResult,
    validate_options_dict,
)

__all__ = [
    # Dataclasses
    "ScanOptions",
    "PlaceholderMode",
    # Defaults
    "DEFAULT_SRC",
    "DEFAULT_LOCALES_DIR",
    "DEFAULT_LOCALES",
    "DEFAULT_MASTER",
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_IGNORE",
    "PLACEHOLDER_MODES",
    # Reader
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_FILENAME",
    "find_config_file",
    "read_config_file",
    "load_options",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "validate_options_dict",
    # Helper functions
    "safe_bool",
    "safe_str",
    "safe_str_tuple",
    "normalize_path",
]
