"""Build and edit persons from prefixed raw field values.

An external tokenizer splits command text into ``{prefix: [raw, ...]}``. This
module resolves prefixes through the registry, validates every raw string via
``registry.validate`` and assembles Person values. Required fields are
enforced here, not in the Person aggregate.
"""

from collections.abc import Mapping, Sequence

from loguru import logger

from roster.people.attributes import registry
from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import PersonAttribute
from roster.people.errors import MissingFieldError, PersonModelError
from roster.people.person import Person

RawFields = Mapping[str, Sequence[str]]
ResolvedFields = tuple[dict[AttributeKind, PersonAttribute], dict[AttributeKind, list[PersonAttribute]]]


class UnknownPrefixError(PersonModelError):
    """Raised when a field prefix does not belong to any attribute kind."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Unknown field prefix: {prefix}")


class DuplicatePrefixError(PersonModelError):
    """Raised when a single-valued prefix is supplied more than once."""

    def __init__(self, prefixes: list[str]):
        self.prefixes = prefixes
        super().__init__(f"Multiple values specified for the following single-valued field(s): {' '.join(prefixes)}")


def _resolve(fields: RawFields) -> ResolvedFields:
    """Resolve prefixes and validate raw values into typed attribute maps.

    Raises:
        UnknownPrefixError: If a prefix is not in the catalog
        DuplicatePrefixError: If a single-valued prefix has several values
        AttributeValidationError: If any raw value is invalid
    """
    descriptors = []
    for prefix in fields:
        descriptor = registry.lookup_by_prefix(prefix)
        if descriptor is None:
            raise UnknownPrefixError(prefix)
        descriptors.append(descriptor)

    repeated = [d.prefix for d in descriptors if not d.multi_value and len(fields[d.prefix]) > 1]
    if repeated:
        raise DuplicatePrefixError(repeated)

    single: dict[AttributeKind, PersonAttribute] = {}
    multi: dict[AttributeKind, list[PersonAttribute]] = {}
    for descriptor in descriptors:
        raw_values = fields[descriptor.prefix]
        if descriptor.multi_value:
            multi[descriptor.kind] = registry.validate_many(descriptor.kind, raw_values)
        elif raw_values:
            single[descriptor.kind] = registry.validate(descriptor.kind, raw_values[0])
    return single, multi


def build_person(fields: RawFields) -> Person:
    """Create a new person from prefixed raw values.

    Args:
        fields: Prefix (e.g. "n/") -> raw strings collected for it

    Returns:
        Validated Person

    Raises:
        UnknownPrefixError: If a prefix is not in the catalog
        DuplicatePrefixError: If a single-valued prefix has several values
        AttributeValidationError: If any raw value is invalid
        MissingFieldError: If a required field is absent
        DuplicateAttributeError: If a multi-valued field repeats a value
    """
    single, multi = _resolve(fields)
    person = Person(single, multi)

    missing = person.missing_required_kinds()
    if missing:
        display_name = registry.descriptor_for(missing[0]).display_name
        logger.warning(
            "Rejected person with missing required field",
            field=display_name,
            event="person_missing_field",
        )
        raise MissingFieldError(display_name)

    logger.debug("Built person", name=str(person.get(AttributeKind.NAME)), event="person_built")
    return person


def edit_person(person: Person, fields: RawFields) -> Person:
    """Return a copy of ``person`` with the given fields replaced.

    Single-valued fields are set; multi-valued fields replace the existing
    values wholesale (an empty list clears them).

    Raises:
        UnknownPrefixError: If a prefix is not in the catalog
        DuplicatePrefixError: If a single-valued prefix has several values
        AttributeValidationError: If any raw value is invalid
        DuplicateAttributeError: If a multi-valued field repeats a value
    """
    single, multi = _resolve(fields)

    edited = person
    for kind, value in single.items():
        edited = edited.with_attribute(kind, value)
    for kind, values in multi.items():
        edited = edited.with_multi(kind, values)

    logger.debug(
        "Edited person",
        name=str(edited.get(AttributeKind.NAME)),
        kinds=[kind.value for kind in [*single, *multi]],
        event="person_edited",
    )
    return edited
