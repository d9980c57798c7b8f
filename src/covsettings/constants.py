# src/covsettings/constants.py
"""Central constants used across the project."""


# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"

# --- settings defaults ---
DEFAULT_REPORT_FORMAT: str = "cobertura"
# keeps the coverage tool's own assemblies out of instrumentation
DEFAULT_EXCLUDE_FILTER: str = "[coverlet.*]*"

# --- configuration element names ---
CONFIGURATION_ELEMENT_NAME: str = "Configuration"
REPORT_FORMAT_ELEMENT_NAME: str = "Format"
INCLUDE_FILTERS_ELEMENT_NAME: str = "Include"
INCLUDE_DIRECTORIES_ELEMENT_NAME: str = "IncludeDirectory"
EXCLUDE_FILTERS_ELEMENT_NAME: str = "Exclude"
EXCLUDE_SOURCE_FILES_ELEMENT_NAME: str = "ExcludeByFile"
EXCLUDE_ATTRIBUTES_ELEMENT_NAME: str = "ExcludeByAttribute"
MERGE_WITH_ELEMENT_NAME: str = "MergeWith"
USE_SOURCE_LINK_ELEMENT_NAME: str = "UseSourceLink"
SINGLE_HIT_ELEMENT_NAME: str = "SingleHit"
INCLUDE_TEST_ASSEMBLY_ELEMENT_NAME: str = "IncludeTestAssembly"
SKIP_AUTO_PROPS_ELEMENT_NAME: str = "SkipAutoProps"
DOES_NOT_RETURN_ATTRIBUTES_ELEMENT_NAME: str = "DoesNotReturnAttribute"
DETERMINISTIC_REPORT_ELEMENT_NAME: str = "DeterministicReport"
INSTRUMENT_MODULES_WITHOUT_LOCAL_SOURCES_ELEMENT_NAME: str = (
    "InstrumentModulesWithoutLocalSources"
)

# --- run-settings document layout ---
RUN_SETTINGS_COLLECTORS_PATH: str = (
    "DataCollectionRunSettings/DataCollectors/DataCollector"
)
