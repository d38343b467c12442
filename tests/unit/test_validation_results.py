"""Tests for validation result data structures."""

from __future__ import annotations

import pytest

from appstream_lint.validation.results import (
    Severity,
    ValidationReport,
    ValidationResult,
    Verdict,
)


def _result(passed: bool, severity: Severity, rule_name: str = "test_rule") -> ValidationResult:
    return ValidationResult(
        rule_name=rule_name,
        passed=passed,
        severity=severity,
        message="msg",
    )


class TestSeverity:
    """Tests for Severity enum."""

    @pytest.mark.unit
    def test_severity_has_error_level(self) -> None:
        """Severity must have ERROR level for rejecting issues."""
        assert Severity.ERROR.value == "error"

    @pytest.mark.unit
    def test_severity_has_warning_level(self) -> None:
        """Severity must have WARNING level for advisories."""
        assert Severity.WARNING.value == "warning"


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    @pytest.mark.unit
    def test_failed_error_is_error(self) -> None:
        """A failed ERROR result rejects the document."""
        assert _result(False, Severity.ERROR).is_error is True

    @pytest.mark.unit
    def test_failed_warning_is_not_error(self) -> None:
        """A failed WARNING result never rejects."""
        assert _result(False, Severity.WARNING).is_error is False

    @pytest.mark.unit
    def test_passed_error_rule_is_not_error(self) -> None:
        """A passing ERROR-severity rule is not a finding."""
        assert _result(True, Severity.ERROR).is_error is False

    @pytest.mark.unit
    def test_result_is_immutable(self) -> None:
        """ValidationResult is frozen."""
        result = _result(True, Severity.ERROR)
        with pytest.raises(AttributeError):
            result.passed = False  # type: ignore[misc]

    @pytest.mark.unit
    def test_to_dict_omits_optional_fields(self) -> None:
        """to_dict() leaves out expected/actual/fix_hint when unset."""
        d = _result(True, Severity.ERROR).to_dict()
        assert d == {
            "rule_name": "test_rule",
            "passed": True,
            "severity": "error",
            "message": "msg",
        }

    @pytest.mark.unit
    def test_to_dict_includes_diagnostics(self) -> None:
        """to_dict() includes expected, actual and fix_hint when set."""
        result = ValidationResult(
            rule_name="filename_matches_id",
            passed=False,
            severity=Severity.ERROR,
            message="bad filename",
            expected="org.example.App.metainfo.xml",
            actual="app.xml",
            fix_hint="Rename it",
        )
        d = result.to_dict()
        assert d["expected"] == "org.example.App.metainfo.xml"
        assert d["actual"] == "app.xml"
        assert d["fix_hint"] == "Rename it"

    @pytest.mark.unit
    def test_to_dict_keeps_empty_actual(self) -> None:
        """An empty actual value is still a diagnostic and is serialized."""
        result = ValidationResult(
            rule_name="component_type",
            passed=False,
            severity=Severity.ERROR,
            message="bad type",
            actual="",
        )
        assert result.to_dict()["actual"] == ""


class TestValidationReport:
    """Tests for ValidationReport aggregation."""

    @pytest.mark.unit
    def test_empty_report_is_accepted(self) -> None:
        """A report with no results is accepted."""
        report = ValidationReport()
        assert report.passed is True
        assert report.verdict == Verdict.ACCEPTED
        assert report.error is None

    @pytest.mark.unit
    def test_warnings_do_not_reject(self) -> None:
        """Failed WARNING results keep the verdict ACCEPTED."""
        report = ValidationReport(
            results=[_result(True, Severity.ERROR), _result(False, Severity.WARNING)]
        )
        assert report.verdict == Verdict.ACCEPTED
        assert len(report.warnings) == 1
        assert report.errors == []

    @pytest.mark.unit
    def test_error_rejects(self) -> None:
        """A failed ERROR result makes the verdict REJECTED."""
        failing = _result(False, Severity.ERROR, rule_name="name_length")
        report = ValidationReport(results=[_result(False, Severity.WARNING), failing])
        assert report.passed is False
        assert report.verdict == Verdict.REJECTED
        assert report.error == failing

    @pytest.mark.unit
    def test_findings_are_failed_results_in_order(self) -> None:
        """findings lists every failed result in evaluation order."""
        warning = _result(False, Severity.WARNING, rule_name="metadata_license")
        failing = _result(False, Severity.ERROR, rule_name="name_length")
        report = ValidationReport(results=[_result(True, Severity.ERROR), warning, failing])
        assert report.findings == [warning, failing]

    @pytest.mark.unit
    def test_to_dict_summary_fields(self) -> None:
        """to_dict() carries verdict and counts."""
        report = ValidationReport(
            filename="org.example.App.metainfo.xml",
            results=[_result(False, Severity.WARNING), _result(False, Severity.ERROR)],
        )
        d = report.to_dict()
        assert d["filename"] == "org.example.App.metainfo.xml"
        assert d["verdict"] == "rejected"
        assert d["passed"] is False
        assert d["error_count"] == 1
        assert d["warning_count"] == 1
        assert len(d["results"]) == 2
