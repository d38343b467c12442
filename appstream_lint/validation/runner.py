"""Validation runner that evaluates rules against a component.

Rules run in a fixed order. The first failed ERROR result stops
evaluation; failed WARNING results are collected and evaluation goes on.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from appstream_lint.models import Component
from appstream_lint.validation.results import ValidationReport, ValidationResult
from appstream_lint.validation.rules import (
    DEFAULT_RULE_CONFIG,
    ComponentTypeRule,
    FilenameMatchesIdRule,
    LaunchableTypeRule,
    MetadataLicenseRule,
    NameLengthRule,
    RequiredFieldsRule,
    RuleConfig,
    ScreenshotImagesRule,
    ScreenshotsPresentRule,
    SummaryLengthRule,
    ValidationRule,
)

logger = logging.getLogger(__name__)

# Evaluation order matters: the first failing ERROR rule is the one reported.
# Immutable tuple to prevent accidental mutation
DEFAULT_RULES: tuple[ValidationRule, ...] = (
    FilenameMatchesIdRule(),
    RequiredFieldsRule(),
    ComponentTypeRule(),
    MetadataLicenseRule(),
    NameLengthRule(),
    SummaryLengthRule(),
    LaunchableTypeRule(),
    ScreenshotsPresentRule(),
    ScreenshotImagesRule(),
)


def validate(
    component: Component,
    filename: str,
    config: RuleConfig = DEFAULT_RULE_CONFIG,
    *,
    rules: Sequence[ValidationRule] | None = None,
) -> ValidationReport:
    """Run validation rules against a component.

    Args:
        component: The decoded component.
        filename: Declared filename of the document (base name, no directory).
        config: Rule tables and thresholds. Defaults to DEFAULT_RULE_CONFIG.
        rules: Optional sequence of rules to run. Defaults to DEFAULT_RULES.

    Returns:
        ValidationReport with results from every rule evaluated up to and
        including the first rejecting one.
    """
    if rules is None:
        rules = DEFAULT_RULES

    results: list[ValidationResult] = []

    for rule in rules:
        result = rule.check(component, filename, config)
        results.append(result)
        logger.debug("Rule %s: passed=%s", rule.name, result.passed)
        if result.is_error:
            logger.debug("Stopping at rejecting rule %s", rule.name)
            break

    return ValidationReport(filename=filename, results=results)
