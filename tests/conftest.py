"""Shared pytest fixtures for appstream-lint tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest

from appstream_lint.models import Component, Launchable

COMPONENT_ID = "org.example.App"
VALID_FILENAME = f"{COMPONENT_ID}.metainfo.xml"


# =============================================================================
# Component Builders
# =============================================================================


def build_component(**overrides: Any) -> Component:
    """Return a valid minimal component with the given fields replaced.

    The default passes every rule; with no screenshots it yields exactly
    one warning (screenshots_present).
    """
    component = Component(
        kind="desktop-application",
        id=COMPONENT_ID,
        name="Hello",
        summary="Says hello to the world",
        metadata_license="MIT",
        project_license="GPL-3.0-or-later",
        description="A small application that greets you.",
        launchable=Launchable(kind="desktop-id", value=f"{COMPONENT_ID}.desktop"),
        screenshots=(),
    )
    return replace(component, **overrides)


@pytest.fixture
def valid_component() -> Component:
    """A component that is accepted with only the no-screenshots warning."""
    return build_component()


@pytest.fixture
def make_component() -> Callable[..., Component]:
    """Factory fixture building valid components with overrides."""
    return build_component


# =============================================================================
# XML Document Fixtures
# =============================================================================

VALID_METAINFO_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<component type="desktop-application">
  <id>{COMPONENT_ID}</id>
  <name>Hello</name>
  <name xml:lang="de">Hallo</name>
  <summary>Says hello to the world</summary>
  <metadata_license>MIT</metadata_license>
  <project_license>GPL-3.0-or-later</project_license>
  <description>
    <p>A small application that greets you.</p>
    <ul>
      <li>Friendly</li>
    </ul>
  </description>
  <launchable type="desktop-id">{COMPONENT_ID}.desktop</launchable>
  <screenshots>
    <screenshot type="default" environment="gnome">
      <caption>Main window</caption>
      <image type="source" width="1600" height="900">https://example.com/main.png</image>
      <image type="thumbnail" width="224" height="126">https://example.com/main-small.png</image>
    </screenshot>
    <screenshot>
      <image type="source">https://example.com/prefs.jpeg</image>
    </screenshot>
  </screenshots>
</component>
"""


@pytest.fixture
def valid_metainfo_xml() -> str:
    """A metainfo document that passes every rule with no warnings."""
    return VALID_METAINFO_XML


@pytest.fixture
def write_metainfo(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory fixture writing XML content to tmp_path under a given filename."""

    def _write(content: str, filename: str = VALID_FILENAME) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Fixture Directory Access
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the metainfo fixtures directory."""
    return Path(__file__).parent / "fixtures" / "metainfo"
