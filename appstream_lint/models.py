"""Component data model for AppStream metadata documents.

The decoder builds one Component per run. Values are immutable; the
validator only reads them. Absent tags and attributes are represented by
empty strings (and 0 for image dimensions).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Launchable:
    """The mechanism used to start the application.

    Attributes:
        kind: The ``type`` attribute (e.g. "desktop-id").
        value: Element text (e.g. "org.example.App.desktop").
    """

    kind: str = ""
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {"type": self.kind, "value": self.value}


@dataclass(frozen=True)
class Image:
    """Image reference inside a screenshot.

    Attributes:
        kind: The ``type`` attribute ("source", "video", "" or anything else).
        width: Declared width in pixels, 0 when absent.
        height: Declared height in pixels, 0 when absent.
        source: Element text, expected to be an HTTP(S) URL for source images.
    """

    kind: str = ""
    width: int = 0
    height: int = 0
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "type": self.kind,
            "width": self.width,
            "height": self.height,
            "source": self.source,
        }


@dataclass(frozen=True)
class Screenshot:
    """One entry of the ``<screenshots>`` list."""

    caption: str = ""
    environment: str = ""
    image: Image = field(default_factory=Image)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "caption": self.caption,
            "environment": self.environment,
            "image": self.image.to_dict(),
        }


@dataclass(frozen=True)
class Component:
    """Root entity of a metainfo document.

    Attributes:
        kind: Component type from the root ``type`` attribute.
        id: Reverse-DNS style identifier, also used to derive the filename.
        name: Human-readable application name.
        summary: One-line description.
        metadata_license: License of the metadata file itself.
        project_license: License of the application.
        description: Long description text.
        launchable: How the application is started.
        screenshots: Screenshots in display order.
    """

    kind: str = ""
    id: str = ""
    name: str = ""
    summary: str = ""
    metadata_license: str = ""
    project_license: str = ""
    description: str = ""
    launchable: Launchable = field(default_factory=Launchable)
    screenshots: tuple[Screenshot, ...] = ()

    def required_fields(self) -> tuple[tuple[str, str], ...]:
        """Return (label, value) pairs for every mandatory field, in declaration order."""
        return (
            ("type", self.kind),
            ("id", self.id),
            ("name", self.name),
            ("summary", self.summary),
            ("metadata_license", self.metadata_license),
            ("project_license", self.project_license),
            ("description", self.description),
            ("launchable type", self.launchable.kind),
            ("launchable", self.launchable.value),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "type": self.kind,
            "id": self.id,
            "name": self.name,
            "summary": self.summary,
            "metadata_license": self.metadata_license,
            "project_license": self.project_license,
            "description": self.description,
            "launchable": self.launchable.to_dict(),
            "screenshots": [s.to_dict() for s in self.screenshots],
        }
