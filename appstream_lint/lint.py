"""Lint logic: decode a metainfo document, then validate it.

The CLI is a thin wrapper around these functions. Input errors
(DocumentError subclasses) are raised before any rule is evaluated.
"""

from __future__ import annotations

import logging
from pathlib import Path

from appstream_lint.decoder import decode_component, load_component
from appstream_lint.validation import DEFAULT_RULE_CONFIG, RuleConfig, ValidationReport, validate

logger = logging.getLogger(__name__)


def lint_file(path: Path, config: RuleConfig = DEFAULT_RULE_CONFIG) -> ValidationReport:
    """Validate a metainfo file on disk.

    The file's base name is the declared filename, so a document installed
    as /usr/share/metainfo/<id>.metainfo.xml passes the filename rule.

    Args:
        path: Path to the document.
        config: Rule tables and thresholds.

    Returns:
        ValidationReport for the document.

    Raises:
        DocumentNotFoundError: If the path does not exist or is not a file.
        DocumentReadError: If the file cannot be read.
        DocumentDecodeError: If the content cannot be decoded.
    """
    component = load_component(path)
    logger.debug("Validating %s", path)
    return validate(component, path.name, config)


def lint_bytes(
    data: bytes, filename: str, config: RuleConfig = DEFAULT_RULE_CONFIG
) -> ValidationReport:
    """Validate raw document bytes under a declared filename.

    Raises:
        DocumentDecodeError: If the content cannot be decoded.
    """
    component = decode_component(data, path=filename)
    return validate(component, filename, config)
