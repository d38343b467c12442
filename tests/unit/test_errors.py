"""Unit tests for appstream-lint error classes.

Tests cover:
- Base AppstreamLintError behavior
- Error codes format (ASLINT-{category}{number})
- Error to_dict serialization
- Specific error types for each category
"""

from __future__ import annotations

import re

import pytest

from appstream_lint.errors import (
    AppstreamLintError,
    ConfigError,
    ConfigInvalidStructureError,
    ConfigParseError,
    DocumentDecodeError,
    DocumentError,
    DocumentNotFoundError,
    DocumentReadError,
)

CODE_PATTERN = re.compile(r"^ASLINT-(DOC|CFG)\d{3}$")


class TestAppstreamLintError:
    """Tests for base AppstreamLintError class."""

    @pytest.mark.unit
    def test_error_str_includes_code(self) -> None:
        """Error string representation should include code."""
        error = AppstreamLintError("Test message")

        assert error.code in str(error)
        assert "Test message" in str(error)

    @pytest.mark.unit
    def test_error_to_dict(self) -> None:
        """to_dict() returns structured error data."""
        error = AppstreamLintError("Test message", extra="value")
        data = error.to_dict()

        assert data["code"] == error.code
        assert data["message"] == "Test message"
        assert data["context"]["extra"] == "value"

    @pytest.mark.unit
    def test_context_becomes_attributes(self) -> None:
        """Context keys are exposed as attributes."""
        error = AppstreamLintError("Test", path="/tmp/x")
        assert error.path == "/tmp/x"  # type: ignore[attr-defined]

    @pytest.mark.unit
    def test_reserved_context_keys_do_not_clobber(self) -> None:
        """Reserved names in context leave code and message intact."""
        error = AppstreamLintError("Real message", code="FAKE", args="x")

        assert error.code == "ASLINT-000"
        assert error.message == "Real message"


class TestDocumentErrors:
    """Tests for input document errors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error",
        [
            DocumentNotFoundError("a.xml"),
            DocumentReadError("a.xml", "permission denied"),
            DocumentDecodeError("syntax error", path="a.xml"),
        ],
    )
    def test_document_errors_share_base(self, error: DocumentError) -> None:
        """All input errors derive from DocumentError and have DOC codes."""
        assert isinstance(error, DocumentError)
        assert CODE_PATTERN.match(error.code)
        assert error.code.startswith("ASLINT-DOC")

    @pytest.mark.unit
    def test_not_found_message(self) -> None:
        """DocumentNotFoundError names the path."""
        error = DocumentNotFoundError("org.example.App.metainfo.xml")
        assert error.message == "Document not found: org.example.App.metainfo.xml"
        assert error.code == "ASLINT-DOC001"

    @pytest.mark.unit
    def test_decode_error_without_path(self) -> None:
        """DocumentDecodeError works for in-memory documents."""
        error = DocumentDecodeError("no element found")
        assert error.message == "Cannot parse XML: no element found"
        assert error.context["path"] is None


class TestConfigErrors:
    """Tests for configuration errors."""

    @pytest.mark.unit
    def test_parse_error(self) -> None:
        """ConfigParseError carries path and parse error."""
        error = ConfigParseError(".appstreamlint.yaml", "bad indent")
        assert isinstance(error, ConfigError)
        assert error.code == "ASLINT-CFG001"
        assert "bad indent" in error.message

    @pytest.mark.unit
    def test_invalid_structure_error(self) -> None:
        """ConfigInvalidStructureError carries the detail."""
        error = ConfigInvalidStructureError(".appstreamlint.yaml", "expected a mapping")
        assert error.code == "ASLINT-CFG002"
        assert error.to_dict()["context"]["detail"] == "expected a mapping"
