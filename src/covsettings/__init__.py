# src/covsettings/__init__.py

"""CovSettings — resolve code-coverage collector settings.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use by a test host or custom tooling.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()               → CLI entrypoint
    - resolve_settings()   → Turn a configuration tree + test modules into settings
    - load_settings_file() → Read a run-settings XML or JSON file into a tree
    - split_element()      → Comma-separated text to clean tokens
"""

from .cli import main
from .config import (
    ChildLookup,
    ConfigNode,
    CoverageSettings,
    SettingsResolver,
    child_by_name,
    find_configuration_element,
    load_settings_file,
    node_from_element,
    node_from_mapping,
    parse_bool_or_default,
    parse_settings_mapping,
    parse_settings_xml,
    resolve_exclude_filters,
    resolve_report_formats,
    resolve_settings,
    resolve_test_module,
    split_element,
)
from .constants import (
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_EXCLUDE_FILTER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPORT_FORMAT,
)
from .errors import CollectorError, NoTestModuleError
from .logs import getAppLogger
from .meta import (
    DATA_COLLECTOR_NAME,
    DATA_COLLECTOR_URI,
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
    __version__,
    get_metadata,
)


__all__ = [  # noqa: RUF022
    # cli
    "main",
    # config
    "ChildLookup",
    "ConfigNode",
    "CoverageSettings",
    "SettingsResolver",
    "child_by_name",
    "find_configuration_element",
    "load_settings_file",
    "node_from_element",
    "node_from_mapping",
    "parse_bool_or_default",
    "parse_settings_mapping",
    "parse_settings_xml",
    "resolve_exclude_filters",
    "resolve_report_formats",
    "resolve_settings",
    "resolve_test_module",
    "split_element",
    # constants
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_EXCLUDE_FILTER",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REPORT_FORMAT",
    # errors
    "CollectorError",
    "NoTestModuleError",
    # logs
    "getAppLogger",
    # meta
    "DATA_COLLECTOR_NAME",
    "DATA_COLLECTOR_URI",
    "Metadata",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "__version__",
    "get_metadata",
]
