"""Validation result data structures.

These classes capture the output of validation rules and aggregate
them into reports for CLI display and JSON export. A failed result is a
finding; the report's verdict is decided by its ERROR findings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for validation results.

    ERROR: Mandatory rule, a failure rejects the document and stops evaluation
    WARNING: Advisory, reported but the document is still accepted
    """

    ERROR = "error"
    WARNING = "warning"


class Verdict(Enum):
    """Final outcome of one validation run."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ValidationResult:
    """Result from a single validation rule.

    Attributes:
        rule_name: Identifier for the rule that produced this result.
        passed: Whether the validation passed.
        severity: How serious a failure is (ERROR rejects, WARNING doesn't).
        message: Human-readable description of the result.
        expected: Optional expected value, for diagnostics.
        actual: Optional offending value, for diagnostics.
        fix_hint: Optional suggestion for fixing the issue.
    """

    rule_name: str
    passed: bool
    severity: Severity
    message: str
    expected: str | None = None
    actual: str | None = None
    fix_hint: str | None = None

    @property
    def is_error(self) -> bool:
        """True if this result rejects the document."""
        return not self.passed and self.severity == Severity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d: dict[str, Any] = {
            "rule_name": self.rule_name,
            "passed": self.passed,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.expected is not None:
            d["expected"] = self.expected
        if self.actual is not None:
            d["actual"] = self.actual
        if self.fix_hint is not None:
            d["fix_hint"] = self.fix_hint
        return d


@dataclass
class ValidationReport:
    """Ordered results of one validation run.

    Evaluation stops at the first ERROR, so at most one ERROR result is
    present and, if present, it is the last one.

    Attributes:
        filename: Declared filename the component was checked against.
        results: Results of every rule that was evaluated, in order.
    """

    filename: str = ""
    results: list[ValidationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True if no ERROR-severity rules failed."""
        return not any(r.is_error for r in self.results)

    @property
    def verdict(self) -> Verdict:
        """ACCEPTED when no rule rejected the document."""
        return Verdict.ACCEPTED if self.passed else Verdict.REJECTED

    @property
    def errors(self) -> list[ValidationResult]:
        """Return only failed ERROR-severity results."""
        return [r for r in self.results if r.is_error]

    @property
    def error(self) -> ValidationResult | None:
        """The finding that rejected the document, if any."""
        errors = self.errors
        return errors[0] if errors else None

    @property
    def warnings(self) -> list[ValidationResult]:
        """Return only failed WARNING-severity results."""
        return [r for r in self.results if not r.passed and r.severity == Severity.WARNING]

    @property
    def findings(self) -> list[ValidationResult]:
        """All failed results, in evaluation order."""
        return [r for r in self.results if not r.passed]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict for --json output."""
        return {
            "filename": self.filename,
            "verdict": self.verdict.value,
            "passed": self.passed,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "results": [r.to_dict() for r in self.results],
        }
