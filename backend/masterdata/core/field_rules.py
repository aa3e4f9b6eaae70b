"""Field Rule Tables - per-entity policy objects driving the generic pipeline.

Invariants:
    - One EntityRules table per entity type; field order is the check order
    - A FieldRule fully describes one field: normalization kind, required flag,
      length bounds, pattern and uniqueness
    - Only fields named in a table are normalized, validated or assigned by the pipeline
    - Messages are derived from the bounds so a table never drifts from its text

Design Decisions:
    - Frozen dataclasses: tables are module constants shared by every request
"""

import re
from dataclasses import dataclass

from masterdata.core.domain_types import EntityType, FieldKind


@dataclass(frozen=True)
class FieldRule:
    """Constraint shape of a single text field."""
    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    pattern_message: str | None = None
    unique: bool = False

    @property
    def required_message(self) -> str:
        return f"{self.label} is required"

    @property
    def length_message(self) -> str:
        if self.min_length is not None and self.min_length == self.max_length:
            noun = "character" if self.min_length == 1 else "characters"
            return f"{self.label} must be exactly {self.min_length} {noun}"
        if self.min_length is not None and self.max_length is not None:
            return (
                f"{self.label} must be between {self.min_length} "
                f"and {self.max_length} characters"
            )
        if self.max_length is not None:
            return f"{self.label} must not exceed {self.max_length} characters"
        return f"{self.label} must be at least {self.min_length} characters"

    def matches(self, value: str) -> bool:
        """Full match against the pattern; a rule without pattern always matches."""
        return self.pattern is None or re.fullmatch(self.pattern, value) is not None


@dataclass(frozen=True)
class EntityRules:
    """Rule table for one entity type."""
    entity_type: EntityType
    fields: tuple[FieldRule, ...]
    sort_by: tuple[str, ...]
    lookup_field: str | None = None

    def field(self, name: str) -> FieldRule | None:
        for rule in self.fields:
            if rule.name == name:
                return rule
        return None

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.fields)

    @property
    def unique_fields(self) -> tuple[FieldRule, ...]:
        return tuple(rule for rule in self.fields if rule.unique)


# ─── Reference data ──────────────────────────────────────────────

COUNTRY_RULES = EntityRules(
    entity_type=EntityType.COUNTRY,
    fields=(
        FieldRule(
            "code", "Country code", FieldKind.CODE, required=True,
            min_length=2, max_length=2, pattern=r"[A-Z]{2}",
            pattern_message="Country code must be exactly 2 uppercase alphabetic characters",
            unique=True,
        ),
        FieldRule("name", "Country name", required=True, unique=True),
        FieldRule("year", "Year"),
        FieldRule("cctld", "ccTLD"),
    ),
    sort_by=("name",),
    lookup_field="code",
)

GENDER_RULES = EntityRules(
    entity_type=EntityType.GENDER,
    fields=(
        FieldRule(
            "code", "Gender code", FieldKind.CODE, required=True,
            min_length=1, max_length=1, pattern=r"[A-Z]",
            pattern_message="Gender code must be a single uppercase alphabetic character",
            unique=True,
        ),
        FieldRule("description", "Description", required=True, unique=True),
    ),
    sort_by=("code",),
    lookup_field="code",
)

TITLE_RULES = EntityRules(
    entity_type=EntityType.TITLE,
    fields=(
        FieldRule(
            "code", "Title code", FieldKind.CODE, required=True,
            min_length=1, max_length=5, pattern=r"[A-Z]{1,5}",
            pattern_message="Title code must contain only uppercase letters",
            unique=True,
        ),
        FieldRule("description", "Description", required=True, unique=True),
    ),
    sort_by=("code",),
    lookup_field="code",
)

ID_TYPE_RULES = EntityRules(
    entity_type=EntityType.ID_TYPE,
    fields=(
        FieldRule(
            "code", "ID type code", FieldKind.CODE, required=True,
            min_length=1, max_length=5, pattern=r"[A-Z]{1,5}",
            pattern_message="ID type code must contain only uppercase letters",
            unique=True,
        ),
        FieldRule("description", "Description", required=True, unique=True),
    ),
    sort_by=("description",),
    lookup_field="code",
)


# ─── Aggregates ──────────────────────────────────────────────────

PERSON_RULES = EntityRules(
    entity_type=EntityType.PERSON,
    fields=(
        FieldRule("first_name", "First name", max_length=100),
        FieldRule(
            "last_name", "Last name", required=True,
            min_length=1, max_length=100,
        ),
        FieldRule(
            "email", "Email", FieldKind.EMAIL, max_length=255, unique=True,
        ),
        FieldRule("id_number", "ID number", max_length=50),
    ),
    sort_by=("last_name", "first_name"),
    lookup_field="email",
)

USER_RULES = EntityRules(
    entity_type=EntityType.USER,
    fields=(
        FieldRule(
            "username", "Username", required=True,
            min_length=3, max_length=50, unique=True,
        ),
    ),
    sort_by=("username",),
    lookup_field="username",
)

ROLE_RULES = EntityRules(
    entity_type=EntityType.ROLE,
    fields=(
        FieldRule(
            "name", "Role name", FieldKind.CODE, required=True,
            min_length=3, max_length=50, pattern=r"[A-Z_]+",
            pattern_message="Role name must contain only uppercase letters and underscores",
            unique=True,
        ),
        FieldRule("description", "Description", required=True, unique=True),
    ),
    sort_by=("name",),
    lookup_field="name",
)
