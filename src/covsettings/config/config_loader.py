# src/covsettings/config/config_loader.py


import json
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from covsettings.constants import (
    CONFIGURATION_ELEMENT_NAME,
    RUN_SETTINGS_COLLECTORS_PATH,
)
from covsettings.logs import getAppLogger
from covsettings.meta import DATA_COLLECTOR_NAME, DATA_COLLECTOR_URI

from .config_nodes import local_name, node_from_element, node_from_mapping
from .config_types import ConfigNode


def _check_settings_path(path: Path) -> Path:
    settings_path = path.expanduser().resolve()
    if not settings_path.exists():
        xmsg = f"Specified settings file not found: {settings_path}"
        raise FileNotFoundError(xmsg)
    if settings_path.is_dir():
        xmsg = f"Specified settings path is a directory, not a file: {settings_path}"
        raise ValueError(xmsg)
    return settings_path


def _children_named(element: ET.Element, name: str) -> list[ET.Element]:
    return [
        child
        for child in element
        if isinstance(child.tag, str) and local_name(child.tag) == name
    ]


def _iter_collectors(root: ET.Element) -> list[ET.Element]:
    # same walk as iterfind(RUN_SETTINGS_COLLECTORS_PATH), ignoring namespaces
    elements = [root]
    for step in RUN_SETTINGS_COLLECTORS_PATH.split("/"):
        elements = [
            child for element in elements for child in _children_named(element, step)
        ]
    return elements


def _matches_collector(collector: ET.Element, collector_name: str) -> bool:
    friendly = collector.get("friendlyName", "")
    uri = collector.get("uri", "")
    return (
        friendly.casefold() == collector_name.casefold()
        or uri.casefold() == DATA_COLLECTOR_URI.casefold()
    )


def find_configuration_element(
    root: ET.Element,
    *,
    collector_name: str = DATA_COLLECTOR_NAME,
) -> ET.Element | None:
    """Locate the collector's <Configuration> element in a run-settings tree.

    Accepts either a bare <Configuration> document or a full <RunSettings>
    document, in which case the first matching <DataCollector> is used.
    Element names are matched without their namespace.
    """
    logger = getAppLogger()

    if local_name(root.tag) == CONFIGURATION_ELEMENT_NAME:
        return root

    for collector in _iter_collectors(root):
        if not _matches_collector(collector, collector_name):
            continue
        matches = _children_named(collector, CONFIGURATION_ELEMENT_NAME)
        configuration = matches[0] if matches else None
        logger.trace(
            "[find_configuration_element] matched collector %r (configuration=%s)",
            collector.get("friendlyName"),
            configuration is not None,
        )
        return configuration

    logger.debug("No data collector named %r in run settings", collector_name)
    return None


def parse_settings_xml(
    source: str,
    *,
    collector_name: str = DATA_COLLECTOR_NAME,
) -> ConfigNode | None:
    """Parse run-settings XML text into the collector's configuration node.

    Raises:
        ValueError: if the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(source)  # noqa: S314
    except ET.ParseError as e:
        xmsg = f"Invalid run settings XML: {e}"
        raise ValueError(xmsg) from e

    element = find_configuration_element(root, collector_name=collector_name)
    return None if element is None else node_from_element(element)


def parse_settings_mapping(data: Any) -> ConfigNode | None:
    """Convert a decoded JSON document into the collector's configuration node.

    Raises:
        TypeError: if the document is not a JSON object.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        xmsg = f"Settings must be a JSON object, not {type(data).__name__}"
        raise TypeError(xmsg)
    if CONFIGURATION_ELEMENT_NAME in data:
        data = data[CONFIGURATION_ELEMENT_NAME]  # pyright: ignore[reportUnknownVariableType]
    return node_from_mapping(CONFIGURATION_ELEMENT_NAME, data)


def load_settings_file(
    path: Path | str,
    *,
    collector_name: str = DATA_COLLECTOR_NAME,
) -> ConfigNode | None:
    """Load a collector configuration tree from disk.

    Supports:
      - JSON: ``.json`` files holding the configuration object
      - XML: ``.runsettings``, ``.xml`` and anything else

    Returns:
        The configuration root, or None when the file is empty or holds no
        configuration for this collector.

    Raises:
        FileNotFoundError: if the path does not exist.
        ValueError: if the path is a directory or the content is malformed.
        TypeError: if a JSON document is not an object.
    """
    logger = getAppLogger()
    settings_path = _check_settings_path(Path(path))
    logger.trace(
        f"[load_settings_file] Loading from {settings_path} ({settings_path.suffix})"
    )

    source = settings_path.read_text(encoding="utf-8-sig")
    if not source.strip():
        logger.debug("Settings file %s is empty", settings_path.name)
        return None

    if settings_path.suffix.lower() == ".json":
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            xmsg = f"Error while loading settings file '{settings_path.name}': {e}"
            raise ValueError(xmsg) from e
        try:
            return parse_settings_mapping(data)
        except TypeError as e:
            xmsg = f"{settings_path.name}: {e}"
            raise TypeError(xmsg) from e

    try:
        return parse_settings_xml(source, collector_name=collector_name)
    except ValueError as e:
        xmsg = f"Error while loading settings file '{settings_path.name}': {e}"
        raise ValueError(xmsg) from e
