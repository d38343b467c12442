"""Structured error codes for appstream-lint.

All errors follow the format ASLINT-{category}{number}:
- ASLINT-DOC*: Input document errors (missing, unreadable, undecodable)
- ASLINT-CFG*: Configuration errors

Rule violations are not exceptions; they are reported as validation results
(see appstream_lint.validation).
"""

from __future__ import annotations

from typing import Any


class AppstreamLintError(Exception):
    """Base class for all appstream-lint errors.

    All errors have:
    - code: Structured error code (e.g., ASLINT-DOC001)
    - message: Human-readable error message
    """

    code: str = "ASLINT-000"

    # Reserved attribute names that cannot be overwritten by context
    _RESERVED_ATTRS = frozenset({"code", "message", "context", "args"})

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize an appstream-lint error.

        Args:
            message: Human-readable error message.
            **context: Additional context stored as error attributes.
                Reserved keys (code, message, context, args) are ignored.
        """
        self.message = message
        self.context = context
        for key, value in context.items():
            if key not in self._RESERVED_ATTRS:
                setattr(self, key, value)
        super().__init__(f"[{self.code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# Document Errors (ASLINT-DOC*)
class DocumentError(AppstreamLintError):
    """Base class for input document errors.

    These abort a run before any rule is evaluated.
    """

    code = "ASLINT-DOC000"


class DocumentNotFoundError(DocumentError):
    """Raised when the document path does not exist or is not a file.

    Error code: ASLINT-DOC001
    """

    code = "ASLINT-DOC001"

    def __init__(self, path: str) -> None:
        super().__init__(f"Document not found: {path}", path=path)


class DocumentReadError(DocumentError):
    """Raised when the document exists but cannot be read.

    Error code: ASLINT-DOC002
    """

    code = "ASLINT-DOC002"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}", path=path, reason=reason)


class DocumentDecodeError(DocumentError):
    """Raised when the document bytes cannot be decoded into a component.

    Error code: ASLINT-DOC003
    """

    code = "ASLINT-DOC003"

    def __init__(self, reason: str, path: str | None = None) -> None:
        where = f" in {path}" if path else ""
        super().__init__(f"Cannot parse XML{where}: {reason}", path=path, reason=reason)


# Configuration Errors (ASLINT-CFG*)
class ConfigError(AppstreamLintError):
    """Base class for configuration-related errors."""

    code = "ASLINT-CFG000"


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be parsed.

    Error code: ASLINT-CFG001
    """

    code = "ASLINT-CFG001"

    def __init__(self, path: str, parse_error: str) -> None:
        super().__init__(
            f"Failed to parse config file {path}: {parse_error}",
            path=path,
            parse_error=parse_error,
        )


class ConfigInvalidStructureError(ConfigError):
    """Raised when a configuration file has an invalid structure.

    Error code: ASLINT-CFG002
    """

    code = "ASLINT-CFG002"

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(
            f"Invalid config structure in {path}: {detail}",
            path=path,
            detail=detail,
        )
