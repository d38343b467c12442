"""Rule engine for AppStream desktop-application metadata.

This module provides the public API for validating a component:
- validate(): Run the fatal-fast rule pipeline
- ValidationReport: Ordered results and the final verdict
- ValidationRule: Base class for custom rules
- RuleConfig: Fixed allow-lists and thresholds
"""

from appstream_lint.validation.results import (
    Severity,
    ValidationReport,
    ValidationResult,
    Verdict,
)
from appstream_lint.validation.rules import DEFAULT_RULE_CONFIG, RuleConfig, ValidationRule
from appstream_lint.validation.runner import DEFAULT_RULES, validate

__all__ = [
    "DEFAULT_RULES",
    "DEFAULT_RULE_CONFIG",
    "RuleConfig",
    "Severity",
    "ValidationReport",
    "ValidationResult",
    "ValidationRule",
    "Verdict",
    "validate",
]
