"""Attribute descriptor registry.

Fixed catalog binding every AttributeKind to its external prefix, display
name, cardinality, requiredness, parser, validator and constraint message.
The catalog is closed: adding a kind means adding an AttributeKind member, a
value class and one descriptor below.

``validate`` is the single gate through which raw external strings become
typed attribute values.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import (
    Address,
    CcaPointRecord,
    DemeritRecord,
    Email,
    Floor,
    Gender,
    Name,
    PersonAttribute,
    Phone,
    Room,
    Tag,
    YearOfStudy,
)
from roster.people.errors import AttributeValidationError


@dataclass(frozen=True)
class AttributeDescriptor:
    """Static metadata for one attribute kind.

    Attributes:
        kind: Attribute kind described
        prefix: External token (e.g. "n/"), unique across kinds
        display_name: User-facing name
        required: Whether a complete person record must carry this kind
        multi_value: Whether a person may hold several values of this kind
        parse: Builds the typed value from a raw string (raises on invalid input)
        is_valid: Predicate agreeing exactly with ``parse``
        constraint_message: User-facing description of the validation rule
    """

    kind: AttributeKind
    prefix: str
    display_name: str
    required: bool
    multi_value: bool
    parse: Callable[[str], PersonAttribute]
    is_valid: Callable[[str], bool]
    constraint_message: str


def _describe(
    value_class: type[PersonAttribute],
    prefix: str,
    display_name: str,
    *,
    required: bool,
    multi_value: bool,
) -> AttributeDescriptor:
    return AttributeDescriptor(
        kind=value_class.kind,
        prefix=prefix,
        display_name=display_name,
        required=required,
        multi_value=multi_value,
        parse=value_class,
        is_valid=value_class.is_valid,
        constraint_message=value_class.MESSAGE_CONSTRAINTS,
    )


# Catalog order == AttributeKind declaration order
DESCRIPTORS: tuple[AttributeDescriptor, ...] = (
    _describe(Name, "n/", "Name", required=True, multi_value=False),
    _describe(Phone, "p/", "Phone", required=True, multi_value=False),
    _describe(Email, "e/", "Email", required=True, multi_value=False),
    _describe(YearOfStudy, "y/", "Year of Study", required=False, multi_value=False),
    _describe(Address, "a/", "Address", required=True, multi_value=False),
    _describe(Room, "r/", "Room", required=False, multi_value=False),
    _describe(Floor, "fl/", "Floor", required=False, multi_value=False),
    _describe(Gender, "g/", "Gender", required=False, multi_value=False),
    _describe(CcaPointRecord, "m/", "CCA Point Records", required=False, multi_value=True),
    _describe(DemeritRecord, "d/", "Demerits", required=False, multi_value=True),
    _describe(Tag, "t/", "Tag", required=False, multi_value=True),
)

_BY_KIND: dict[AttributeKind, AttributeDescriptor] = {d.kind: d for d in DESCRIPTORS}
_BY_PREFIX: dict[str, AttributeDescriptor] = {d.prefix: d for d in DESCRIPTORS}

if len(_BY_KIND) != len(AttributeKind) or list(_BY_KIND) != list(AttributeKind):
    raise RuntimeError("Attribute catalog must describe every AttributeKind exactly once, in declaration order")
if len(_BY_PREFIX) != len(DESCRIPTORS):
    raise RuntimeError("Attribute prefixes must be unique")


def descriptor_for(kind: AttributeKind) -> AttributeDescriptor:
    """Return the descriptor of a kind. Every kind has one."""
    return _BY_KIND[kind]


def lookup_by_prefix(prefix: str) -> AttributeDescriptor | None:
    """Find the descriptor whose prefix matches exactly.

    Args:
        prefix: External token, e.g. "n/"

    Returns:
        Matching descriptor, or None if no kind uses this prefix
    """
    return _BY_PREFIX.get(prefix)


def required_kinds() -> list[AttributeKind]:
    return [d.kind for d in DESCRIPTORS if d.required]


def optional_kinds() -> list[AttributeKind]:
    return [d.kind for d in DESCRIPTORS if not d.required]


def single_value_kinds() -> list[AttributeKind]:
    return [d.kind for d in DESCRIPTORS if not d.multi_value]


def multi_value_kinds() -> list[AttributeKind]:
    return [d.kind for d in DESCRIPTORS if d.multi_value]


def all_prefixes() -> list[str]:
    return [d.prefix for d in DESCRIPTORS]


def validate(kind: AttributeKind, raw_value: str) -> PersonAttribute:
    """Validate a raw string and build the typed value for ``kind``.

    Leading and trailing whitespace is trimmed before validation.

    Args:
        kind: Target attribute kind
        raw_value: Raw external string

    Returns:
        Typed, validated attribute value

    Raises:
        AttributeValidationError: If the trimmed string fails the kind's rule
    """
    descriptor = _BY_KIND[kind]
    trimmed = raw_value.strip()
    if not descriptor.is_valid(trimmed):
        raise AttributeValidationError(kind, descriptor.constraint_message)
    return descriptor.parse(trimmed)


def validate_many(kind: AttributeKind, raw_values: Iterable[str]) -> list[PersonAttribute]:
    """Validate each raw string in order.

    Fails on the first invalid element; no partial result is returned.

    Raises:
        AttributeValidationError: If any element fails the kind's rule
    """
    return [validate(kind, raw_value) for raw_value in raw_values]
