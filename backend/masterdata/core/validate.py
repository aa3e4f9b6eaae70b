"""Entity Validation - structural and business rule checks driven by rule tables.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a ValidationError value on violation, None on success; callers raise
    - Short-circuit: the first violated rule wins (field order, then required ->
      type -> length -> pattern -> email syntax); violations are never aggregated
    - CREATE checks the whitespace-trimmed raw value, before case folding
    - UPDATE checks only fields supplied with a non-null value, after normalization

Design Decisions:
    - Separated from normalize: normalization never fails, validation never rewrites
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from masterdata.core import id_number
from masterdata.core.domain_types import FieldKind, Operation
from masterdata.core.errors import ValidationError
from masterdata.core.field_rules import EntityRules, FieldRule
from masterdata.core.normalize import normalize


# ─── Single-rule checks ─────────────────────────────────────────

def check_required(rule: FieldRule, value: Any) -> ValidationError | None:
    if rule.required and value is None:
        return ValidationError(rule.name, rule.required_message)
    return None


def check_type(rule: FieldRule, value: Any) -> ValidationError | None:
    if value is not None and not isinstance(value, str):
        return ValidationError(rule.name, f"{rule.label} must be text")
    return None


def check_length(rule: FieldRule, value: str) -> ValidationError | None:
    too_short = rule.min_length is not None and len(value) < rule.min_length
    too_long = rule.max_length is not None and len(value) > rule.max_length
    if too_short or too_long:
        return ValidationError(rule.name, rule.length_message)
    return None


def check_pattern(rule: FieldRule, value: str) -> ValidationError | None:
    if not rule.matches(value):
        return ValidationError(
            rule.name, rule.pattern_message or f"{rule.label} has an invalid format",
        )
    return None


def check_email(rule: FieldRule, value: str) -> ValidationError | None:
    """Address syntax only; deliverability needs DNS and is never checked."""
    if rule.kind is not FieldKind.EMAIL:
        return None
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        return ValidationError(rule.name, f"{rule.label} must be valid: {e}")
    return None


def check_field(rule: FieldRule, value: Any) -> ValidationError | None:
    """Required -> type -> length -> pattern -> email for one already-trimmed value."""
    if value is None:
        return check_required(rule, value)
    return (
        check_type(rule, value)
        or check_length(rule, value)
        or check_pattern(rule, value)
        or check_email(rule, value)
    )


# ─── Entity-level checks ────────────────────────────────────────

def check_no_identifier(values: dict[str, Any]) -> ValidationError | None:
    """An identifier must never be supplied on create."""
    if values.get("id") is not None:
        return ValidationError("id", "ID must not be included in a create request")
    return None


def check_national_id_number(
    value: str | None, is_national_type: bool,
) -> ValidationError | None:
    """Cross-field rule: national-ID typed numbers must pass the codec."""
    if value is None or not is_national_type:
        return None
    if not id_number.is_valid(value):
        return ValidationError(
            "id_number", "ID number is not a valid national identity number",
        )
    return None


def validate_entity(rules: EntityRules, values: dict[str, Any]) -> ValidationError | None:
    """Create-mode validation of a full input record."""
    for rule in rules.fields:
        error = check_field(rule, _trimmed(values.get(rule.name)))
        if error:
            return error
    return None


def check_patch_field(rule: FieldRule, raw: Any) -> tuple[Any, ValidationError | None]:
    """Update-mode check of one supplied value: normalize first, then check.

    A blank value normalizes to None, which clears an optional field and
    fails a required one.
    """
    value = normalize(rule, raw)
    return value, check_field(rule, value)


def validate_patch(rules: EntityRules, patch: dict[str, Any]) -> ValidationError | None:
    """Update-mode validation of a whole patch; null fields mean "unchanged"."""
    for rule in rules.fields:
        raw = patch.get(rule.name)
        if raw is None:
            continue
        _, error = check_patch_field(rule, raw)
        if error:
            return error
    return None


def validate(
    rules: EntityRules, values: dict[str, Any], operation: Operation,
) -> ValidationError | None:
    """Validate in the mode of the operation in progress."""
    if operation is Operation.CREATE:
        return check_no_identifier(values) or validate_entity(rules, values)
    return validate_patch(rules, values)


def _trimmed(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value
