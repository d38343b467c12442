"""Decode AppStream metainfo XML into the Component data model.

Parsing goes through defusedxml so that entity expansion and external
entity references in untrusted documents are rejected. The decoder only
maps markup onto the model; it never evaluates rules. Absent elements and
attributes become empty strings. Elements are matched by local name, so a
document with a default namespace on <component> decodes the same way.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from appstream_lint.errors import (
    DocumentDecodeError,
    DocumentNotFoundError,
    DocumentReadError,
)
from appstream_lint.models import Component, Image, Launchable, Screenshot

logger = logging.getLogger(__name__)

ROOT_TAG = "component"
# Matches the element in any namespace, or in none.
ANY_NS = "{*}"
XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


def load_component(path: Path) -> Component:
    """Read and decode a metainfo file.

    Args:
        path: Path to the .metainfo.xml / .appdata.xml file.

    Returns:
        The decoded Component.

    Raises:
        DocumentNotFoundError: If the path does not exist or is not a file.
        DocumentReadError: If the file cannot be read.
        DocumentDecodeError: If the content is not a valid component document.
    """
    if not path.is_file():
        raise DocumentNotFoundError(str(path))

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DocumentReadError(str(path), str(e)) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return decode_component(data, path=str(path))


def decode_component(data: bytes, *, path: str | None = None) -> Component:
    """Decode raw document bytes into a Component.

    Args:
        data: Raw XML bytes.
        path: Optional source path, used only in error messages.

    Returns:
        The decoded Component.

    Raises:
        DocumentDecodeError: On malformed markup, forbidden constructs,
            an unexpected root element or non-integer image dimensions.
    """
    try:
        root = fromstring(data)
    except ParseError as e:
        raise DocumentDecodeError(str(e), path=path) from e
    except DefusedXmlException as e:
        raise DocumentDecodeError(f"forbidden XML construct ({e})", path=path) from e

    if _local_name(root.tag) != ROOT_TAG:
        raise DocumentDecodeError(
            f"expected element type <{ROOT_TAG}> but have <{root.tag}>", path=path
        )

    component = Component(
        kind=_attr(root, "type"),
        id=_text(_untranslated(root, "id")),
        name=_text(_untranslated(root, "name")),
        summary=_text(_untranslated(root, "summary")),
        metadata_license=_text(root.find(_any_ns("metadata_license"))),
        project_license=_text(root.find(_any_ns("project_license"))),
        description=_all_text(_untranslated(root, "description")),
        launchable=_decode_launchable(root.find(_any_ns("launchable"))),
        screenshots=tuple(
            _decode_screenshot(el, path=path)
            for el in root.findall(_any_ns("screenshots", "screenshot"))
        ),
    )
    logger.debug(
        "Decoded component %r with %d screenshot(s)", component.id, len(component.screenshots)
    )
    return component


def _decode_launchable(element: ET.Element | None) -> Launchable:
    if element is None:
        return Launchable()
    return Launchable(kind=_attr(element, "type"), value=_text(element))


def _decode_screenshot(element: ET.Element, *, path: str | None) -> Screenshot:
    return Screenshot(
        caption=_text(_untranslated(element, "caption")),
        environment=_attr(element, "environment"),
        image=_decode_image(element.find(_any_ns("image")), path=path),
    )


def _decode_image(element: ET.Element | None, *, path: str | None) -> Image:
    # Only the first <image> of a screenshot is modelled; later ones are
    # usually thumbnails.
    if element is None:
        return Image()
    return Image(
        kind=_attr(element, "type"),
        width=_int_attr(element, "width", path=path),
        height=_int_attr(element, "height", path=path),
        source=_text(element),
    )


def _untranslated(parent: ET.Element, tag: str) -> ET.Element | None:
    """Return the child without xml:lang, falling back to the first match."""
    candidates = parent.findall(_any_ns(tag))
    for candidate in candidates:
        if XML_LANG not in candidate.attrib:
            return candidate
    return candidates[0] if candidates else None


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _any_ns(*tags: str) -> str:
    return "/".join(ANY_NS + tag for tag in tags)


def _text(element: ET.Element | None) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def _all_text(element: ET.Element | None) -> str:
    """Text of an element and all its descendants, whitespace-collapsed."""
    if element is None:
        return ""
    return " ".join("".join(element.itertext()).split())


def _attr(element: ET.Element, name: str) -> str:
    return element.get(name, "").strip()


def _int_attr(element: ET.Element, name: str, *, path: str | None) -> int:
    raw = _attr(element, name)
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError as e:
        raise DocumentDecodeError(
            f"image attribute {name}={raw!r} is not an integer", path=path
        ) from e
