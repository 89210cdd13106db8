"""WADL XML parsing and tree access helpers.

The converter works on a nested mapping that mirrors the WADL document:
each element is a dict, its attributes are string values and its child
elements are lists keyed by local tag name::

    {"application": [{"resources": [{"base": "https://h/v1/", "resource": [...]}]}]}
"""

import re
import xml.etree.ElementTree as ET
from typing import Any

# XML declaration and other processing instructions
PROCESSING_INSTRUCTION = re.compile(r"<\?[^<]*\?>")

TEXT_KEY = "$t"


def _local_name(name: str) -> str:
    """Drop a ``{namespace}`` or ``prefix:`` qualifier from a tag or attribute."""
    if name.startswith("{"):
        name = name.split("}", 1)[1]
    return name.rsplit(":", 1)[-1]


def element_to_dict(element: ET.Element) -> dict[str, Any]:
    """Convert an element and its descendants to the nested mapping form."""
    node: dict[str, Any] = {}

    for name, value in element.attrib.items():
        node[_local_name(name)] = value

    for child in element:
        if not isinstance(child.tag, str):
            continue
        node.setdefault(_local_name(child.tag), []).append(element_to_dict(child))

    text = (element.text or "").strip()
    if text:
        node[TEXT_KEY] = text

    return node


def parse_wadl_string(wadl_string: str) -> dict[str, Any]:
    """Parse raw WADL text into the nested mapping tree.

    Raises:
        xml.etree.ElementTree.ParseError: If the text is not well-formed XML.
    """
    wadl_string = PROCESSING_INSTRUCTION.sub("", wadl_string)
    root = ET.fromstring(wadl_string)
    return {_local_name(root.tag): [element_to_dict(root)]}


def as_list(value: Any) -> list[Any]:
    """Normalize a child collection: absent is empty, a lone mapping is wrapped."""
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def first(value: Any) -> dict[str, Any] | None:
    """First element of a child collection, or None."""
    items = as_list(value)
    return items[0] if items and isinstance(items[0], dict) else None


def get_resources(wadl_tree: dict[str, Any] | None) -> dict[str, Any] | None:
    """Return the ``<resources>`` node of a parsed WADL tree, if any."""
    if not isinstance(wadl_tree, dict):
        return None
    application = first(wadl_tree.get("application"))
    if application is None:
        return None
    return first(application.get("resources"))
