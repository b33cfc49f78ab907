# pyright: reportExplicitAny=false, reportAny=false
"""Configuration validation.

Each top-level section is validated against its model. Unknown keys are
ignored by default; strict validation reports them as errors.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from folio.config._models._sections import SECTIONS
from folio.exceptions import ConfigValidationError


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A problem with one configuration value.

    Attributes:
        key: Dotted key, e.g. ``logging.level``.
        message: What is wrong.
        expected: What would have been accepted, when known.
        actual: The offending value.
        source: The layer the value came from, when known.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    source: str | None


def _dotted(prefix: str, loc: tuple[int | str, ...]) -> str:
    parts = [prefix, *map(str, loc)] if prefix else [str(part) for part in loc]
    return ".".join(parts)


def _expected(ctx: Mapping[str, Any] | None) -> str | None:
    if not ctx:
        return None
    if "expected" in ctx:
        return str(ctx["expected"])
    if "min_length" in ctx:
        return f"at least {ctx['min_length']} character(s)"
    return None


def issues_from_error(
    error: ValidationError,
    *,
    source: str | None = None,
    prefix: str = "",
) -> list[ValidationIssue]:
    """Convert a pydantic ValidationError into issues, one per failing value."""
    return [
        ValidationIssue(
            key=_dotted(prefix, details["loc"]),
            message=details["msg"],
            expected=_expected(details.get("ctx")),
            actual=details.get("input"),
            source=source,
        )
        for details in error.errors()
    ]


def _unknown_keys(
    config: Mapping[str, Any], source: str | None
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for name, value in config.items():
        model = SECTIONS.get(name)
        if model is None:
            issues.append(
                ValidationIssue(name, "Unknown section", None, value, source)
            )
            continue
        if not isinstance(value, Mapping):
            continue
        issues.extend(
            ValidationIssue(f"{name}.{key}", "Unknown key", None, value[key], source)
            for key in value
            if key not in model.model_fields
        )
    return issues


def validate_config(
    config: Mapping[str, Any],
    *,
    strict: bool = False,
    source: str | None = None,
) -> list[ValidationIssue]:
    """Validate a configuration mapping.

    Args:
        config: Configuration data, complete or a single layer.
        strict: Report unknown sections and keys.
        source: Layer name attached to every issue.

    Returns:
        The issues found; empty when the configuration is valid.
    """
    issues: list[ValidationIssue] = []
    for name, model in SECTIONS.items():
        section = config.get(name, {})
        try:
            _ = model.model_validate(section)
        except ValidationError as e:
            issues.extend(issues_from_error(e, source=source, prefix=name))

    if strict:
        issues.extend(_unknown_keys(config, source))
    return issues


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise ConfigValidationError for the first issue, if any.

    Args:
        issues: Issues from `validate_config` or `issues_from_error`.
        source: Overrides the issue's own source in the exception.

    Raises:
        ConfigValidationError: If `issues` is not empty.
    """
    if not issues:
        return
    issue = issues[0]

    raise ConfigValidationError(
        f"Invalid configuration value for '{issue.key}': {issue.message}",
        key=issue.key,
        value=issue.actual,
        expected=issue.expected or issue.message,
        source=source or issue.source,
    )
