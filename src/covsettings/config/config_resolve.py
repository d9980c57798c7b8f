# src/covsettings/config/config_resolve.py


import logging
from collections.abc import Sequence

from covsettings.constants import (
    DEFAULT_EXCLUDE_FILTER,
    DEFAULT_REPORT_FORMAT,
    DETERMINISTIC_REPORT_ELEMENT_NAME,
    DOES_NOT_RETURN_ATTRIBUTES_ELEMENT_NAME,
    EXCLUDE_ATTRIBUTES_ELEMENT_NAME,
    EXCLUDE_FILTERS_ELEMENT_NAME,
    EXCLUDE_SOURCE_FILES_ELEMENT_NAME,
    INCLUDE_DIRECTORIES_ELEMENT_NAME,
    INCLUDE_FILTERS_ELEMENT_NAME,
    INCLUDE_TEST_ASSEMBLY_ELEMENT_NAME,
    INSTRUMENT_MODULES_WITHOUT_LOCAL_SOURCES_ELEMENT_NAME,
    MERGE_WITH_ELEMENT_NAME,
    REPORT_FORMAT_ELEMENT_NAME,
    SINGLE_HIT_ELEMENT_NAME,
    SKIP_AUTO_PROPS_ELEMENT_NAME,
    USE_SOURCE_LINK_ELEMENT_NAME,
)
from covsettings.errors import NoTestModuleError
from covsettings.logs import getAppLogger
from covsettings.meta import DATA_COLLECTOR_NAME

from .config_nodes import ChildLookup, child_by_name
from .config_parse import parse_bool_or_default, split_element
from .config_types import ConfigNode, CoverageSettings


# --------------------------------------------------------------------------- #
# field helpers
# --------------------------------------------------------------------------- #


def _child_text(
    configuration: ConfigNode, name: str, child_lookup: ChildLookup
) -> str | None:
    child = child_lookup(configuration, name)
    return None if child is None else child.text


def _list_field(
    configuration: ConfigNode, name: str, child_lookup: ChildLookup
) -> tuple[str, ...]:
    tokens = split_element(_child_text(configuration, name, child_lookup))
    return tuple(tokens or ())


def _bool_field(
    configuration: ConfigNode, name: str, child_lookup: ChildLookup
) -> bool:
    return parse_bool_or_default(_child_text(configuration, name, child_lookup))


def resolve_test_module(
    test_modules: Sequence[str] | None,
    *,
    collector_name: str = DATA_COLLECTOR_NAME,
) -> str:
    """Pick the test module to instrument.

    Only the first module is used: the downstream instrumentation handles a
    single module per run, extra modules are accepted and ignored.

    Raises:
        NoTestModuleError: if no (non-empty) test module was supplied.
    """
    if not test_modules or not test_modules[0]:
        xmsg = f"{collector_name}: No test modules found"
        raise NoTestModuleError(xmsg)
    return test_modules[0]


def resolve_report_formats(
    configuration: ConfigNode | None,
    *,
    child_lookup: ChildLookup = child_by_name,
) -> tuple[str, ...]:
    """Resolve report formats, falling back to the default when none remain."""
    formats: tuple[str, ...] = ()
    if configuration is not None:
        formats = _list_field(configuration, REPORT_FORMAT_ELEMENT_NAME, child_lookup)
    return formats or (DEFAULT_REPORT_FORMAT,)


def resolve_exclude_filters(
    configuration: ConfigNode | None,
    *,
    child_lookup: ChildLookup = child_by_name,
) -> tuple[str, ...]:
    """Resolve exclude filters; the default filter always comes first."""
    user_filters: tuple[str, ...] = ()
    if configuration is not None:
        user_filters = _list_field(
            configuration, EXCLUDE_FILTERS_ELEMENT_NAME, child_lookup
        )
    return (DEFAULT_EXCLUDE_FILTER, *user_filters)


# --------------------------------------------------------------------------- #
# main resolver
# --------------------------------------------------------------------------- #


def resolve_settings(
    configuration: ConfigNode | None,
    test_modules: Sequence[str] | None,
    *,
    collector_name: str = DATA_COLLECTOR_NAME,
    child_lookup: ChildLookup = child_by_name,
) -> CoverageSettings:
    """Resolve collector configuration and test modules into settings.

    Args:
        configuration: Root of the collector's configuration tree, or None
            when the host supplied no configuration.
        test_modules: Test modules handed over by the test host.
        collector_name: Name used in error and diagnostic messages.
        child_lookup: Capability used to find a named child of a node.

    Returns:
        The resolved, immutable CoverageSettings.

    Raises:
        NoTestModuleError: if ``test_modules`` is None or empty. Checked
            before any configuration field is read.
    """
    logger = getAppLogger()

    test_module = resolve_test_module(test_modules, collector_name=collector_name)

    if configuration is None:
        settings = CoverageSettings(
            test_module=test_module,
            report_formats=resolve_report_formats(None),
            exclude_filters=resolve_exclude_filters(None),
        )
    else:
        settings = CoverageSettings(
            test_module=test_module,
            report_formats=resolve_report_formats(
                configuration, child_lookup=child_lookup
            ),
            include_filters=_list_field(
                configuration, INCLUDE_FILTERS_ELEMENT_NAME, child_lookup
            ),
            include_directories=_list_field(
                configuration, INCLUDE_DIRECTORIES_ELEMENT_NAME, child_lookup
            ),
            exclude_filters=resolve_exclude_filters(
                configuration, child_lookup=child_lookup
            ),
            exclude_source_files=_list_field(
                configuration, EXCLUDE_SOURCE_FILES_ELEMENT_NAME, child_lookup
            ),
            exclude_attributes=_list_field(
                configuration, EXCLUDE_ATTRIBUTES_ELEMENT_NAME, child_lookup
            ),
            # verbatim: no trimming or splitting
            merge_with=_child_text(configuration, MERGE_WITH_ELEMENT_NAME, child_lookup),
            use_source_link=_bool_field(
                configuration, USE_SOURCE_LINK_ELEMENT_NAME, child_lookup
            ),
            single_hit=_bool_field(configuration, SINGLE_HIT_ELEMENT_NAME, child_lookup),
            include_test_assembly=_bool_field(
                configuration, INCLUDE_TEST_ASSEMBLY_ELEMENT_NAME, child_lookup
            ),
            skip_auto_props=_bool_field(
                configuration, SKIP_AUTO_PROPS_ELEMENT_NAME, child_lookup
            ),
            does_not_return_attributes=_list_field(
                configuration, DOES_NOT_RETURN_ATTRIBUTES_ELEMENT_NAME, child_lookup
            ),
            deterministic_report=_bool_field(
                configuration, DETERMINISTIC_REPORT_ELEMENT_NAME, child_lookup
            ),
            instrument_modules_without_local_sources=_bool_field(
                configuration,
                INSTRUMENT_MODULES_WITHOUT_LOCAL_SOURCES_ELEMENT_NAME,
                child_lookup,
            ),
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            '%s: Initializing coverage process with settings: "%s"',
            collector_name,
            settings,
        )

    return settings


class SettingsResolver:
    """Resolver bound to one collector name and one child-lookup capability.

    Holds no per-resolution state; one instance may serve any number of
    concurrent resolutions.
    """

    def __init__(
        self,
        collector_name: str = DATA_COLLECTOR_NAME,
        child_lookup: ChildLookup = child_by_name,
    ) -> None:
        self.collector_name = collector_name
        self.child_lookup = child_lookup

    def resolve(
        self,
        configuration: ConfigNode | None,
        test_modules: Sequence[str] | None,
    ) -> CoverageSettings:
        return resolve_settings(
            configuration,
            test_modules,
            collector_name=self.collector_name,
            child_lookup=self.child_lookup,
        )
