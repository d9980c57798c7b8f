# src/covsettings/config/__init__.py

"""Configuration handling for covsettings.

This module provides configuration loading, tree lookup, lenient value
parsing and settings resolution.
"""

from .config_loader import (
    find_configuration_element,
    load_settings_file,
    parse_settings_mapping,
    parse_settings_xml,
)
from .config_nodes import (
    ChildLookup,
    child_by_name,
    node_from_element,
    node_from_mapping,
)
from .config_parse import parse_bool_or_default, split_element
from .config_resolve import (
    SettingsResolver,
    resolve_exclude_filters,
    resolve_report_formats,
    resolve_settings,
    resolve_test_module,
)
from .config_types import ConfigNode, CoverageSettings


__all__ = [  # noqa: RUF022
    # config_loader
    "find_configuration_element",
    "load_settings_file",
    "parse_settings_mapping",
    "parse_settings_xml",
    # config_nodes
    "ChildLookup",
    "child_by_name",
    "node_from_element",
    "node_from_mapping",
    # config_parse
    "parse_bool_or_default",
    "split_element",
    # config_resolve
    "SettingsResolver",
    "resolve_exclude_filters",
    "resolve_report_formats",
    "resolve_settings",
    "resolve_test_module",
    # config_types
    "ConfigNode",
    "CoverageSettings",
]
