# tests/5_core/test_coverage_settings.py

"""Tests for covsettings.config.config_types.CoverageSettings."""

import dataclasses
import json

import pytest

import covsettings.config.config_types as mod_types
import covsettings.constants as mod_constants


def test_coverage_settings_defaults() -> None:
    settings = mod_types.CoverageSettings(test_module="m.dll")
    assert settings.report_formats == (mod_constants.DEFAULT_REPORT_FORMAT,)
    assert settings.exclude_filters == (mod_constants.DEFAULT_EXCLUDE_FILTER,)
    assert settings.merge_with is None


def test_coverage_settings_is_immutable() -> None:
    # --- setup ---
    settings = mod_types.CoverageSettings(test_module="m.dll")

    # --- execute and verify ---
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.single_hit = True  # type: ignore[misc]


def test_coverage_settings_rejects_empty_test_module() -> None:
    with pytest.raises(ValueError, match="test_module"):
        mod_types.CoverageSettings(test_module="")


def test_coverage_settings_str_lists_every_field() -> None:
    # --- setup ---
    settings = mod_types.CoverageSettings(
        test_module="/tests/mod.dll",
        report_formats=("json", "lcov"),
        include_filters=("[Lib]*",),
        merge_with="coverage.json",
        single_hit=True,
    )

    # --- execute ---
    text = str(settings)

    # --- verify ---
    assert text.startswith("TestModule: '/tests/mod.dll', ")
    assert "IncludeFilters: '[Lib]*'" in text
    assert f"ExcludeFilters: '{mod_constants.DEFAULT_EXCLUDE_FILTER}'" in text
    assert "MergeWith: 'coverage.json'" in text
    assert "SingleHit: 'True'" in text
    assert "UseSourceLink: 'False'" in text
    assert "ReportFormats: 'json,lcov'" in text


def test_coverage_settings_to_dict_uses_element_names() -> None:
    # --- setup ---
    settings = mod_types.CoverageSettings(
        test_module="m.dll",
        exclude_filters=(mod_constants.DEFAULT_EXCLUDE_FILTER, "[Foo]*"),
        deterministic_report=True,
    )

    # --- execute ---
    data = settings.to_dict()

    # --- verify ---
    assert data["TestModule"] == "m.dll"
    assert data[mod_constants.REPORT_FORMAT_ELEMENT_NAME] == ["cobertura"]
    assert data[mod_constants.EXCLUDE_FILTERS_ELEMENT_NAME] == [
        mod_constants.DEFAULT_EXCLUDE_FILTER,
        "[Foo]*",
    ]
    assert data[mod_constants.DETERMINISTIC_REPORT_ELEMENT_NAME] is True
    assert data[mod_constants.MERGE_WITH_ELEMENT_NAME] is None
    # JSON-ready
    assert json.loads(json.dumps(data)) == data


def test_coverage_settings_coerces_lists_to_tuples() -> None:
    # --- setup ---
    settings = mod_types.CoverageSettings(
        test_module="m.dll",
        report_formats=["json", "lcov"],  # type: ignore[arg-type]
        exclude_filters=[mod_constants.DEFAULT_EXCLUDE_FILTER],  # type: ignore[arg-type]
        include_directories=["src"],  # type: ignore[arg-type]
    )

    # --- verify ---
    assert settings.report_formats == ("json", "lcov")
    assert settings.exclude_filters == (mod_constants.DEFAULT_EXCLUDE_FILTER,)
    assert settings.include_directories == ("src",)
    # hashable like any other frozen record
    assert hash(settings) == hash(
        mod_types.CoverageSettings(
            test_module="m.dll",
            report_formats=("json", "lcov"),
            include_directories=("src",),
        )
    )


def test_coverage_settings_rejects_empty_report_formats() -> None:
    with pytest.raises(ValueError, match="report format"):
        mod_types.CoverageSettings(test_module="m.dll", report_formats=())


@pytest.mark.parametrize(
    "exclude_filters",
    [
        (),
        ("[Foo]*",),
        ("[Foo]*", mod_constants.DEFAULT_EXCLUDE_FILTER),
    ],
)
def test_coverage_settings_requires_default_exclude_filter_first(
    exclude_filters: tuple[str, ...],
) -> None:
    with pytest.raises(ValueError, match="exclude_filters"):
        mod_types.CoverageSettings(
            test_module="m.dll", exclude_filters=exclude_filters
        )
