# src/covsettings/config/config_types.py


from dataclasses import dataclass
from typing import Any

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


@dataclass(frozen=True)
class ConfigNode:
    """A named configuration element holding text and/or child elements.

    Representation-neutral stand-in for an XML element or a JSON object.
    ``text`` is None when the element carries no text at all.
    """

    name: str
    text: str | None = None
    children: tuple["ConfigNode", ...] = ()


@dataclass(frozen=True)
class CoverageSettings:
    """Resolved settings for one instrumentation run.

    All fields are fixed at construction; list-valued settings are tuples.
    """

    test_module: str
    report_formats: tuple[str, ...] = (DEFAULT_REPORT_FORMAT,)
    include_filters: tuple[str, ...] = ()
    include_directories: tuple[str, ...] = ()
    exclude_filters: tuple[str, ...] = (DEFAULT_EXCLUDE_FILTER,)
    exclude_source_files: tuple[str, ...] = ()
    exclude_attributes: tuple[str, ...] = ()
    merge_with: str | None = None
    use_source_link: bool = False
    single_hit: bool = False
    include_test_assembly: bool = False
    skip_auto_props: bool = False
    does_not_return_attributes: tuple[str, ...] = ()
    deterministic_report: bool = False
    instrument_modules_without_local_sources: bool = False

    def __post_init__(self) -> None:
        if not self.test_module:
            xmsg = "CoverageSettings requires a non-empty test_module"
            raise ValueError(xmsg)

        # frozen: normalize list-valued fields through object.__setattr__
        for field_name in _TUPLE_FIELDS:
            object.__setattr__(self, field_name, tuple(getattr(self, field_name)))

        if not self.report_formats:
            xmsg = "CoverageSettings requires at least one report format"
            raise ValueError(xmsg)
        if self.exclude_filters[:1] != (DEFAULT_EXCLUDE_FILTER,):
            xmsg = (
                "CoverageSettings exclude_filters must start with "
                f"{DEFAULT_EXCLUDE_FILTER!r}"
            )
            raise ValueError(xmsg)

    def __str__(self) -> str:
        parts = [
            f"TestModule: '{self.test_module}'",
            f"IncludeFilters: '{','.join(self.include_filters)}'",
            f"IncludeDirectories: '{','.join(self.include_directories)}'",
            f"ExcludeFilters: '{','.join(self.exclude_filters)}'",
            f"ExcludeSourceFiles: '{','.join(self.exclude_source_files)}'",
            f"ExcludeAttributes: '{','.join(self.exclude_attributes)}'",
            f"MergeWith: '{self.merge_with or ''}'",
            f"UseSourceLink: '{self.use_source_link}'",
            f"SingleHit: '{self.single_hit}'",
            f"IncludeTestAssembly: '{self.include_test_assembly}'",
            f"SkipAutoProps: '{self.skip_auto_props}'",
            f"DoesNotReturnAttributes: '{','.join(self.does_not_return_attributes)}'",
            f"DeterministicReport: '{self.deterministic_report}'",
            "InstrumentModulesWithoutLocalSources: "
            f"'{self.instrument_modules_without_local_sources}'",
            f"ReportFormats: '{','.join(self.report_formats)}'",
        ]
        return ", ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready view keyed by configuration element names."""
        return {
            "TestModule": self.test_module,
            REPORT_FORMAT_ELEMENT_NAME: list(self.report_formats),
            INCLUDE_FILTERS_ELEMENT_NAME: list(self.include_filters),
            INCLUDE_DIRECTORIES_ELEMENT_NAME: list(self.include_directories),
            EXCLUDE_FILTERS_ELEMENT_NAME: list(self.exclude_filters),
            EXCLUDE_SOURCE_FILES_ELEMENT_NAME: list(self.exclude_source_files),
            EXCLUDE_ATTRIBUTES_ELEMENT_NAME: list(self.exclude_attributes),
            MERGE_WITH_ELEMENT_NAME: self.merge_with,
            USE_SOURCE_LINK_ELEMENT_NAME: self.use_source_link,
            SINGLE_HIT_ELEMENT_NAME: self.single_hit,
            INCLUDE_TEST_ASSEMBLY_ELEMENT_NAME: self.include_test_assembly,
            SKIP_AUTO_PROPS_ELEMENT_NAME: self.skip_auto_props,
            DOES_NOT_RETURN_ATTRIBUTES_ELEMENT_NAME: list(
                self.does_not_return_attributes
            ),
            DETERMINISTIC_REPORT_ELEMENT_NAME: self.deterministic_report,
            INSTRUMENT_MODULES_WITHOUT_LOCAL_SOURCES_ELEMENT_NAME: (
                self.instrument_modules_without_local_sources
            ),
        }


_TUPLE_FIELDS: tuple[str, ...] = (
    "report_formats",
    "include_filters",
    "include_directories",
    "exclude_filters",
    "exclude_source_files",
    "exclude_attributes",
    "does_not_return_attributes",
)
