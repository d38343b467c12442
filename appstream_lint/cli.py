"""appstreamlint - Command-line interface for checking AppStream metainfo files.

The CLI is a thin wrapper around the Python API (see lint.py).
All rule logic lives in the library; the CLI handles reporting and
exit codes.
"""

from __future__ import annotations

from pathlib import Path

import click

from appstream_lint.config import get_setting, parse_bool
from appstream_lint.errors import AppstreamLintError, ConfigError
from appstream_lint.json_output import LintEnvelope
from appstream_lint.lint import lint_file
from appstream_lint.output import detail, error, info, success, warn
from appstream_lint.validation import Severity, ValidationReport, ValidationResult


def _output_input_error(err: AppstreamLintError, *, use_json: bool) -> None:
    if use_json:
        click.echo(LintEnvelope.from_error(err).to_json())
    else:
        error(err.message)


def _print_validation_result(result: ValidationResult) -> None:
    """Print a single validation result with appropriate formatting."""
    msg = f"{result.rule_name}: {result.message}"
    if result.passed:
        success(msg)
        return

    if result.severity == Severity.ERROR:
        error(msg)
    else:
        warn(msg)

    if result.expected is not None:
        detail(f"  Expected: {result.expected}")
    if result.actual is not None:
        detail(f"  Actual: {result.actual if result.actual else '(empty)'}")
    if result.fix_hint:
        detail(f"  Hint: {result.fix_hint}")


def _print_summary(report: ValidationReport) -> None:
    """Print the final verdict line."""
    if report.passed:
        warning_count = len(report.warnings)
        suffix = ""
        if warning_count:
            suffix = f" ({warning_count} warning{'s' if warning_count != 1 else ''})"
        success(f"Validation complete: {report.filename}{suffix}")
        return

    rejected_by = report.error
    rule = rejected_by.rule_name if rejected_by is not None else "unknown"
    error(f"Validation failed: {report.filename} violates rule '{rule}'")


@click.command(name="appstreamlint")
@click.version_option(package_name="appstream-lint")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Output format (json for machine parsing, text for humans).",
)
@click.option("--verbose", "-v", is_flag=True, help="Show all evaluated rules, not just failures")
def cli(path: Path, json_output: bool, output_format: str | None, verbose: bool) -> None:
    """Validate an AppStream metainfo file for desktop-application packaging.

    PATH is the .metainfo.xml (or legacy .appdata.xml) file. Its name must be
    the component ID followed by that extension.

    Exits 0 when the document is accepted (warnings allowed), 1 otherwise.
    """
    config_dir = Path.cwd()

    try:
        resolved_format = get_setting("format", cli_value=output_format, config_dir=config_dir)
        use_json = json_output or resolved_format == "json"
        verbose = verbose or parse_bool(get_setting("verbose", config_dir=config_dir))
    except ConfigError as err:
        _output_input_error(err, use_json=json_output)
        raise SystemExit(1) from err

    if verbose and not use_json:
        info(f"Checking {path}")

    try:
        report = lint_file(path)
    except AppstreamLintError as err:
        _output_input_error(err, use_json=use_json)
        raise SystemExit(1) from err

    if use_json:
        click.echo(LintEnvelope.from_report(report).to_json())
    else:
        for result in report.results:
            if verbose or not result.passed:
                _print_validation_result(result)
        _print_summary(report)

    # Exit code: 1 if any errors (not warnings)
    if report.errors:
        raise SystemExit(1)
