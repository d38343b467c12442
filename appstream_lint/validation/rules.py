"""Validation rule base class and built-in rules.

Each rule checks one aspect of a metainfo component. Rules are pure:
they read the component, the declared filename and the fixed rule
configuration, and return a ValidationResult. The runner composes them
into a fatal-fast pipeline (see runner.py).

Only the subset of AppStream needed for desktop-application packaging is
checked. The component ID is not checked for reverse-DNS form and image
URLs only get prefix/suffix checks, not RFC 3986 parsing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from appstream_lint.constants import (
    ACCEPTED_FILENAME_SUFFIXES,
    ALLOWED_COMPONENT_TYPES,
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_TYPES,
    ALLOWED_LAUNCHABLE_TYPE,
    ALLOWED_METADATA_LICENSES,
    ALLOWED_URL_SCHEMES,
    METAINFO_SUFFIX,
    MIN_NAME_LENGTH,
    MIN_SUMMARY_LENGTH,
    MIN_URL_LENGTH,
    SOURCE_IMAGE_TYPE,
)
from appstream_lint.models import Component, Screenshot
from appstream_lint.validation.results import Severity, ValidationResult


@dataclass(frozen=True)
class RuleConfig:
    """Fixed rule tables and thresholds.

    The defaults are the packaging rules; DEFAULT_RULE_CONFIG is the only
    instance the CLI uses.
    """

    allowed_metadata_licenses: tuple[str, ...] = ALLOWED_METADATA_LICENSES
    allowed_component_types: tuple[str, ...] = ALLOWED_COMPONENT_TYPES
    allowed_launchable_type: str = ALLOWED_LAUNCHABLE_TYPE
    allowed_image_types: tuple[str, ...] = ALLOWED_IMAGE_TYPES
    allowed_image_extensions: tuple[str, ...] = ALLOWED_IMAGE_EXTENSIONS
    allowed_url_schemes: tuple[str, ...] = ALLOWED_URL_SCHEMES
    filename_suffixes: tuple[str, ...] = ACCEPTED_FILENAME_SUFFIXES
    min_name_length: int = MIN_NAME_LENGTH
    min_summary_length: int = MIN_SUMMARY_LENGTH
    min_url_length: int = MIN_URL_LENGTH


DEFAULT_RULE_CONFIG = RuleConfig()


def _format_list(values: tuple[str, ...]) -> str:
    return ", ".join(v if v else '""' for v in values)


class ValidationRule(ABC):
    """Base class for all validation rules.

    Subclasses must define:
        name: Unique identifier for the rule
        severity: ERROR (rejecting) or WARNING (advisory)
        description: Human-readable explanation for --verbose

    Subclasses must implement:
        check(): Run the validation and return a result
    """

    name: str
    severity: Severity
    description: str

    @abstractmethod
    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Run this validation rule against a component.

        Args:
            component: The decoded component.
            filename: Declared filename of the document.
            config: Rule tables and thresholds.

        Returns:
            ValidationResult indicating pass/fail with message.
        """
        ...

    def _pass(self, message: str) -> ValidationResult:
        """Helper to create a passing result."""
        return ValidationResult(
            rule_name=self.name,
            passed=True,
            severity=self.severity,
            message=message,
        )

    def _fail(
        self,
        message: str,
        *,
        expected: str | None = None,
        actual: str | None = None,
        fix_hint: str | None = None,
    ) -> ValidationResult:
        """Helper to create a failing result."""
        return ValidationResult(
            rule_name=self.name,
            passed=False,
            severity=self.severity,
            message=message,
            expected=expected,
            actual=actual,
            fix_hint=fix_hint,
        )


class FilenameMatchesIdRule(ValidationRule):
    """Check that the filename is the component ID plus a metainfo suffix.

    Metadata is installed as /usr/share/metainfo/<id>.metainfo.xml. The
    legacy .appdata.xml suffix is still accepted since AppStream stays
    backwards compatible.
    """

    name = "filename_matches_id"
    severity = Severity.ERROR
    description = "Verify the filename is <id>.metainfo.xml or <id>.appdata.xml"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Compare the declared filename with the component ID."""
        expected = f"{component.id}{METAINFO_SUFFIX}"

        if component.id and any(filename == component.id + s for s in config.filename_suffixes):
            return self._pass(f"Filename matches component ID: {filename}")

        return self._fail(
            f"Filename must be the component ID with a {' or '.join(config.filename_suffixes)} "
            "extension",
            expected=expected,
            actual=filename,
            fix_hint=f"Rename the file to {expected}"
            if component.id
            else "Set a non-empty <id> and name the file after it",
        )


class RequiredFieldsRule(ValidationRule):
    """Check that every mandatory field is non-empty.

    Fields are checked in declaration order (see Component.required_fields)
    and the first empty one is reported.
    """

    name = "required_fields"
    severity = Severity.ERROR
    description = "Verify all mandatory fields are present and non-empty"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Report the first empty mandatory field."""
        for label, value in component.required_fields():
            if value == "":
                return self._fail(
                    f"{label} must not be empty",
                    fix_hint=f"Add a non-empty {label} to the component",
                )
        return self._pass("All required fields are present")


class ComponentTypeRule(ValidationRule):
    """Check the component type.

    "desktop" is the pre-2016 name for "desktop-application" and is
    accepted for compatibility.
    """

    name = "component_type"
    severity = Severity.ERROR
    description = "Verify the component type is desktop-application"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Check kind against the allowed component types."""
        if component.kind in config.allowed_component_types:
            return self._pass(f"Component type is {component.kind}")

        return self._fail(
            f"Type must be '{config.allowed_component_types[0]}'",
            expected=_format_list(config.allowed_component_types),
            actual=component.kind,
            fix_hint=f'Use <component type="{config.allowed_component_types[0]}">',
        )


class MetadataLicenseRule(ValidationRule):
    """Check the metadata license against the permissive allow-list.

    Newer AppStream releases may allow licenses not listed here, so this
    only warns. Check the current AppStream documentation when it fires.
    """

    name = "metadata_license"
    severity = Severity.WARNING
    description = "Check the metadata license is one AppStream permits"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Check metadata_license membership in the allow-list."""
        if component.metadata_license in config.allowed_metadata_licenses:
            return self._pass(f"Metadata license {component.metadata_license} is allowed")

        return self._fail(
            "Metadata license is not allowed",
            expected=_format_list(config.allowed_metadata_licenses),
            actual=component.metadata_license,
            fix_hint="Most projects use CC0-1.0 or FSFAP for metadata",
        )


class NameLengthRule(ValidationRule):
    """Check the application name is long enough to be meaningful."""

    name = "name_length"
    severity = Severity.ERROR
    description = "Verify the name has the minimum length"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Check len(name) against the minimum."""
        if len(component.name) >= config.min_name_length:
            return self._pass("Name length is sufficient")

        return self._fail(
            f"Name must be at least {config.min_name_length} characters long",
            actual=component.name,
        )


class SummaryLengthRule(ValidationRule):
    """Check the summary is long enough to describe the application."""

    name = "summary_length"
    severity = Severity.ERROR
    description = "Verify the summary has the minimum length"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Check len(summary) against the minimum."""
        if len(component.summary) >= config.min_summary_length:
            return self._pass("Summary length is sufficient")

        return self._fail(
            f"Summary must be at least {config.min_summary_length} characters long",
            actual=component.summary,
            fix_hint="Use the Comment field of the application's .desktop file",
        )


class LaunchableTypeRule(ValidationRule):
    """Check the launchable is a desktop-id.

    Example: <launchable type="desktop-id">org.example.App.desktop</launchable>
    """

    name = "launchable_type"
    severity = Severity.ERROR
    description = "Verify the launchable type is desktop-id"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Require an exact match on the launchable type."""
        if component.launchable.kind == config.allowed_launchable_type:
            return self._pass(f"Launchable type is {config.allowed_launchable_type}")

        return self._fail(
            f"Launchable type must be '{config.allowed_launchable_type}'",
            expected=config.allowed_launchable_type,
            actual=component.launchable.kind,
        )


class ScreenshotsPresentRule(ValidationRule):
    """Recommend at least one screenshot.

    This is a WARNING-level rule - screenshots are recommended for
    software centers but not mandatory.
    """

    name = "screenshots_present"
    severity = Severity.WARNING
    description = "Check that the component has screenshots"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Warn when the screenshot list is empty."""
        if not component.screenshots:
            return self._fail(
                "No screenshots found",
                fix_hint="Add a <screenshots> block with at least one source image",
            )
        return self._pass(f"{len(component.screenshots)} screenshot(s) found")


class ScreenshotImagesRule(ValidationRule):
    """Check every screenshot image type and source URL.

    Screenshots are checked in document order. For each one the image type
    must be known, and source images need an http(s) URL ending in an
    allowed image extension. The first violation in any screenshot fails
    the rule.
    """

    name = "screenshot_images"
    severity = Severity.ERROR
    description = "Verify screenshot image types and source URLs"

    def check(self, component: Component, filename: str, config: RuleConfig) -> ValidationResult:
        """Check all screenshots, stopping at the first violation."""
        if not component.screenshots:
            return self._pass("No screenshots to check")

        for position, screenshot in enumerate(component.screenshots, start=1):
            failure = self._check_screenshot(position, screenshot, config)
            if failure is not None:
                return failure

        return self._pass(f"All {len(component.screenshots)} screenshot image(s) are valid")

    def _check_screenshot(
        self, position: int, screenshot: Screenshot, config: RuleConfig
    ) -> ValidationResult | None:
        image = screenshot.image

        if image.kind not in config.allowed_image_types:
            return self._fail(
                f"Screenshot {position}: image type must be 'source' or 'video'",
                expected=_format_list(config.allowed_image_types),
                actual=image.kind,
            )

        if image.kind != SOURCE_IMAGE_TYPE:
            return None

        if not has_url_scheme(image.source, config.allowed_url_schemes, config.min_url_length):
            return self._fail(
                f"Screenshot {position}: image source must start with "
                f"{' or '.join(config.allowed_url_schemes)}",
                expected=_format_list(config.allowed_url_schemes),
                actual=image.source,
            )

        if not has_image_extension(image.source, config.allowed_image_extensions):
            return self._fail(
                f"Screenshot {position}: image source must end with a valid image extension",
                expected=_format_list(config.allowed_image_extensions),
                actual=actual_extension(image.source),
                fix_hint="Extensions are case-sensitive; use lowercase .png, .jpg or .jpeg",
            )

        return None


def has_url_scheme(source: str, schemes: tuple[str, ...], min_length: int) -> bool:
    """True if source is at least min_length long and starts with one of schemes."""
    if len(source) < min_length:
        return False
    return any(source.startswith(scheme) for scheme in schemes)


def has_image_extension(source: str, extensions: tuple[str, ...]) -> bool:
    """True if source ends with one of extensions and has something before it.

    Matching is case-sensitive.
    """
    return any(len(source) > len(ext) and source.endswith(ext) for ext in extensions)


def actual_extension(source: str) -> str:
    """Best-effort extension of a URL for error messages.

    Returns the text from the last dot of the final path segment, or the
    whole source when the segment has no dot.
    """
    segment = source.rsplit("/", 1)[-1]
    dot = segment.rfind(".")
    if dot == -1:
        return source
    return segment[dot:]
