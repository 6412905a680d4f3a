"""Person model - attribute registry, attribute values and the Person aggregate.

This module provides:
- AttributeKind: closed set of person field kinds
- registry: prefix/cardinality lookups and the ``validate`` gate for raw input
- Person: immutable aggregate with copy-on-write edits
- Error types raised by all of the above
"""

from roster.people.attributes import AttributeKind, PersonAttribute, registry
from roster.people.errors import (
    AttributeKindMismatchError,
    AttributeValidationError,
    DuplicateAttributeError,
    MissingFieldError,
    PersonModelError,
)
from roster.people.person import Person

__all__ = [
    "AttributeKind",
    "AttributeKindMismatchError",
    "AttributeValidationError",
    "DuplicateAttributeError",
    "MissingFieldError",
    "Person",
    "PersonAttribute",
    "PersonModelError",
    "registry",
]
