"""XML bundle files that carry a collection's content, and base64 helpers."""

from __future__ import annotations

import base64
import binascii
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Optional

XML_INDENT = "  "
_ROOT_TAG = "application"


class BundleError(ValueError):
    """A bundle or its embedded data cannot be read."""


@dataclass(frozen=True)
class BundleHeader:
    """Descriptive data at the top of a bundle."""

    type_identifier: str
    author_name: str = ""
    author_email: str = ""
    title: str = ""
    description: str = ""
    version: str = "1"


@dataclass
class Bundle:
    """A parsed bundle: its header and one mapping of field name to text per item."""

    header: BundleHeader
    items: list[dict[str, str]] = field(default_factory=list)


def _add_text(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def render_bundle(header: BundleHeader, items: Iterable[Mapping[str, str]]) -> str:
    """Render ``header`` and ``items`` as an indented XML document."""
    root = ET.Element(_ROOT_TAG, {"type": header.type_identifier})
    author = ET.SubElement(root, "author")
    _add_text(author, "name", header.author_name)
    _add_text(author, "email", header.author_email)
    _add_text(root, "title", header.title)
    _add_text(root, "description", header.description)
    _add_text(root, "version", header.version)
    data = ET.SubElement(root, "data")
    for item in items:
        item_element = ET.SubElement(data, "item")
        for tag, text in item.items():
            _add_text(item_element, tag, text)
    ET.indent(root, space=XML_INDENT)
    return ET.tostring(root, encoding="unicode") + "\n"


def _text_of(element: Optional[ET.Element]) -> str:
    if element is None:
        return ""
    return "".join(element.itertext())


def _child_text(parent: Optional[ET.Element], tag: str) -> str:
    if parent is None:
        return ""
    return _text_of(parent.find(tag))


def parse_bundle(text: str) -> Bundle:
    """Parse a bundle document.

    Every ``item`` element anywhere below the root becomes one mapping; where
    an item has several children of the same name, the first one counts.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise BundleError(f"malformed bundle: {exc}") from exc

    author = root.find("author")
    header = BundleHeader(
        type_identifier=root.get("type", ""),
        author_name=_child_text(author, "name"),
        author_email=_child_text(author, "email"),
        title=_child_text(root, "title"),
        description=_child_text(root, "description"),
        version=_child_text(root, "version"),
    )

    items = []
    for item_element in root.iter("item"):
        if item_element is root:
            continue
        fields: dict[str, str] = {}
        for child in item_element:
            fields.setdefault(child.tag, _text_of(child))
        items.append(fields)
    return Bundle(header, items)


def file_to_base64(path) -> str:
    """Return the contents of the file at ``path`` encoded as base64 text."""
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def base64_to_file(data: str, path) -> Path:
    """Decode base64 ``data`` into the file at ``path`` and return that path."""
    compact = "".join(data.split())
    try:
        raw = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise BundleError(f"invalid base64 data: {exc}") from exc
    target = Path(path)
    target.write_bytes(raw)
    return target