"""Machine-readable lint output.

A run prints exactly one LintEnvelope. It is built either from a
ValidationReport (the document was decoded and rules ran) or from an
AppstreamLintError (the run stopped before any rule):

    {
        "success": false,
        "command": "lint",
        "data": {"filename": ..., "verdict": "rejected", ..., "summary": {...}},
        "errors": [{"type": "ValidationError", "message": "component_type: ..."}]
    }

"errors" is omitted for accepted documents. Warnings never appear there;
they stay in data["results"].
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from appstream_lint.errors import AppstreamLintError
from appstream_lint.validation import ValidationReport, ValidationResult

COMMAND_NAME = "lint"
RULE_ERROR_TYPE = "ValidationError"


@dataclass(frozen=True)
class ErrorDetail:
    """One entry of the errors array.

    type is the exception class name for input errors and "ValidationError"
    for a failed rule. code is set only for input errors.
    """

    type: str
    message: str
    code: str | None = None

    @classmethod
    def from_result(cls, result: ValidationResult) -> ErrorDetail:
        return cls(type=RULE_ERROR_TYPE, message=f"{result.rule_name}: {result.message}")

    @classmethod
    def from_exception(cls, err: AppstreamLintError) -> ErrorDetail:
        return cls(type=type(err).__name__, message=err.message, code=err.code)

    def to_dict(self) -> dict[str, str]:
        d = {"type": self.type, "message": self.message}
        if self.code is not None:
            d["code"] = self.code
        return d


def report_summary(report: ValidationReport) -> dict[str, int]:
    """Counts shown next to the report: rules evaluated, passed, errors, warnings."""
    return {
        "evaluated": len(report.results),
        "passed": sum(1 for r in report.results if r.passed),
        "errors": len(report.errors),
        "warnings": len(report.warnings),
    }


@dataclass
class LintEnvelope:
    """JSON wrapper for a single lint run."""

    success: bool
    data: dict[str, Any]
    errors: list[ErrorDetail] = field(default_factory=list)
    command: str = COMMAND_NAME

    @classmethod
    def from_report(cls, report: ValidationReport) -> LintEnvelope:
        """Wrap a finished report; the fatal error (if any) goes to errors."""
        data = report.to_dict()
        data["summary"] = report_summary(report)
        return cls(
            success=report.passed,
            data=data,
            errors=[ErrorDetail.from_result(r) for r in report.errors],
        )

    @classmethod
    def from_error(cls, err: AppstreamLintError) -> LintEnvelope:
        """Wrap an input or settings error raised before validation."""
        return cls(success=False, data={}, errors=[ErrorDetail.from_exception(err)])

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "success": self.success,
            "command": self.command,
            "data": self.data,
        }
        if not self.success:
            result["errors"] = [e.to_dict() for e in self.errors]
        return result

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
