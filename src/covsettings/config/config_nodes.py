# src/covsettings/config/config_nodes.py
"""Lookup and conversion helpers for configuration trees.

The resolver only needs two capabilities from a tree: find a direct child by
exact name, and read that child's text. Everything here reduces XML
elements and JSON-style mappings to :class:`ConfigNode` so the resolver never
sees the source representation.
"""

import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from typing import Any

from .config_types import ConfigNode


ChildLookup = Callable[[ConfigNode, str], ConfigNode | None]


def child_by_name(node: ConfigNode, name: str) -> ConfigNode | None:
    """Return the first direct child named exactly ``name``, or None."""
    for child in node.children:
        if child.name == name:
            return child
    return None


def local_name(tag: str) -> str:
    # "{namespace}Format" -> "Format"
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def node_from_element(element: ET.Element) -> ConfigNode:
    """Convert an ElementTree element into a ConfigNode.

    Text is the element's inner text: every descendant text fragment
    concatenated, so a present but empty element yields ``""``.
    """
    children = tuple(
        node_from_element(child)
        for child in element
        if isinstance(child.tag, str)  # skip comments and processing instructions
    )
    return ConfigNode(
        name=local_name(element.tag),
        text="".join(element.itertext()),
        children=children,
    )


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_scalar_text(v) for v in value)  # pyright: ignore[reportUnknownVariableType]
    return str(value)


def node_from_mapping(name: str, data: Mapping[str, Any] | Any) -> ConfigNode:
    """Convert a JSON-style value into a ConfigNode.

    Nested mappings become child nodes; scalars and lists become text
    (booleans as ``"true"``/``"false"``, lists joined with ``,``).
    ``None`` produces a node without text.
    """
    if data is None:
        return ConfigNode(name=name)
    if isinstance(data, Mapping):
        children = tuple(
            node_from_mapping(str(key), value)
            for key, value in data.items()  # pyright: ignore[reportUnknownVariableType]
        )
        return ConfigNode(name=name, children=children)
    return ConfigNode(name=name, text=_scalar_text(data))
