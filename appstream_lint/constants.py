"""Shared constants for appstream-lint.

These are the fixed rule tables used by the validator. They are immutable
and read-only; nothing loads them from outside the process.
"""

from __future__ import annotations

# https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-metadata_license
# Newer AppStream releases may permit more licenses, so a miss is only a warning.
ALLOWED_METADATA_LICENSES: tuple[str, ...] = (
    "FSFAP",
    "MIT",
    "0BSD",
    "CC0-1.0",
    "CC-BY-3.0",
    "CC-BY-4.0",
    "CC-BY-SA-3.0",
    "CC-BY-SA-4.0",
    "GFDL-1.1",
    "GFDL-1.2",
    "GFDL-1.3",
    "BSL-1.0",
    "FTL",
    "FSFUL",
)

# "desktop" is the pre-2016 spelling of "desktop-application"
ALLOWED_COMPONENT_TYPES: tuple[str, ...] = ("desktop-application", "desktop")

ALLOWED_LAUNCHABLE_TYPE: str = "desktop-id"

# Screenshot image types; an untyped image is treated as "source" by AppStream
# tooling but is not checked here.
ALLOWED_IMAGE_TYPES: tuple[str, ...] = ("source", "video", "")
SOURCE_IMAGE_TYPE: str = "source"

ALLOWED_IMAGE_EXTENSIONS: tuple[str, ...] = (".png", ".jpg", ".jpeg")

ALLOWED_URL_SCHEMES: tuple[str, ...] = ("http://", "https://")

# Shortest string that can carry "http://"
MIN_URL_LENGTH: int = 7

MIN_NAME_LENGTH: int = 2
MIN_SUMMARY_LENGTH: int = 10

# .metainfo.xml is current; .appdata.xml is accepted for legacy files
METAINFO_SUFFIX: str = ".metainfo.xml"
APPDATA_SUFFIX: str = ".appdata.xml"
ACCEPTED_FILENAME_SUFFIXES: tuple[str, ...] = (APPDATA_SUFFIX, METAINFO_SUFFIX)

# Tool settings file (output preferences only, never rule tables)
CONFIG_FILENAME: str = ".appstreamlint.yaml"
