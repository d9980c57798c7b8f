# tests/utils/settings_nodes.py
"""Shared test helpers for constructing configuration trees."""

from pathlib import Path

import covsettings.config.config_types as mod_types


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def make_node(name: str, text: str | None = None) -> mod_types.ConfigNode:
    """Leaf node with optional text."""
    return mod_types.ConfigNode(name=name, text=text)


def make_configuration(**elements: str | None) -> mod_types.ConfigNode:
    """Build a <Configuration> node whose children are the given elements.

    make_configuration(Format="json,lcov", SingleHit="true")
    """
    children = tuple(make_node(name, text) for name, text in elements.items())
    return mod_types.ConfigNode(name="Configuration", children=children)


def make_run_settings(
    configuration_xml: str,
    *,
    friendly_name: str = "XPlat code coverage",
    uri: str | None = None,
) -> str:
    """Wrap a <Configuration> body in a full run-settings document."""
    uri_attr = f' uri="{uri}"' if uri else ""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<RunSettings>\n"
        "  <DataCollectionRunSettings>\n"
        "    <DataCollectors>\n"
        f'      <DataCollector friendlyName="{friendly_name}"{uri_attr}>\n'
        f"        <Configuration>{configuration_xml}</Configuration>\n"
        "      </DataCollector>\n"
        "    </DataCollectors>\n"
        "  </DataCollectionRunSettings>\n"
        "</RunSettings>\n"
    )


def write_settings_file(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path
