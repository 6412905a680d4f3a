"""Person attribute kinds, values and the descriptor registry."""

from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import (
    Address,
    CcaPointRecord,
    DatedRecord,
    DemeritRecord,
    Email,
    Floor,
    Gender,
    GenderType,
    Name,
    PersonAttribute,
    Phone,
    Room,
    Tag,
    YearOfStudy,
)
from roster.people.attributes.registry import AttributeDescriptor

__all__ = [
    "Address",
    "AttributeDescriptor",
    "AttributeKind",
    "CcaPointRecord",
    "DatedRecord",
    "DemeritRecord",
    "Email",
    "Floor",
    "Gender",
    "GenderType",
    "Name",
    "PersonAttribute",
    "Phone",
    "Room",
    "Tag",
    "YearOfStudy",
]
