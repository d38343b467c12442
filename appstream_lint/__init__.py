"""appstream-lint - Check AppStream metainfo files for desktop-application packaging."""

from appstream_lint.cli import cli
from appstream_lint.decoder import decode_component, load_component
from appstream_lint.lint import lint_bytes, lint_file
from appstream_lint.models import Component, Image, Launchable, Screenshot
from appstream_lint.validation import ValidationReport, Verdict, validate

__all__ = [
    "Component",
    "Image",
    "Launchable",
    "Screenshot",
    "ValidationReport",
    "Verdict",
    "cli",
    "decode_component",
    "lint_bytes",
    "lint_file",
    "load_component",
    "validate",
]
