"""Field Normalization - canonical storage form of caller-supplied values.

Invariants:
    - All functions are PURE and never raise
    - Strings are trimmed; a blank result becomes None (required-ness is a validator concern)
    - CODE fields are uppercased, EMAIL fields lowercased, TEXT fields keep their case
    - Non-string values (ints, bools) and None pass through unchanged
    - Idempotent: normalize(rule, normalize(rule, x)) == normalize(rule, x)
"""

from typing import Any

from masterdata.core.domain_types import FieldKind
from masterdata.core.field_rules import EntityRules, FieldRule


def normalize_text(raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    value = raw.strip()
    return value or None


def normalize_code(raw: Any) -> Any:
    value = normalize_text(raw)
    return value.upper() if isinstance(value, str) else value


def normalize_email(raw: Any) -> Any:
    value = normalize_text(raw)
    return value.lower() if isinstance(value, str) else value


def normalize(rule: FieldRule, raw: Any) -> Any:
    """Apply the normalizer selected by the field's kind."""
    match rule.kind:
        case FieldKind.CODE:
            return normalize_code(raw)
        case FieldKind.EMAIL:
            return normalize_email(raw)
        case _:
            return normalize_text(raw)


def normalize_values(rules: EntityRules, values: dict[str, Any]) -> dict[str, Any]:
    """Normalize every field the table knows; other keys are copied untouched."""
    normalized = dict(values)
    for rule in rules.fields:
        if rule.name in normalized:
            normalized[rule.name] = normalize(rule, normalized[rule.name])
    return normalized
