"""JSON-friendly persisted forms of Person and the roster.

Persisted data is never trusted: every stored string is re-validated through
``registry.validate`` when converted back into a Person.

The persisted person keeps the original field names (name, phone, email,
address, tags) and adds the remaining kinds as optional fields.
"""

from loguru import logger
from pydantic import BaseModel, Field

from roster.people.attributes import registry
from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import PersonAttribute
from roster.people.errors import MissingFieldError, PersonModelError
from roster.people.person import Person

# Persisted field name per attribute kind, in catalog order
SINGLE_FIELDS: dict[AttributeKind, str] = {
    AttributeKind.NAME: "name",
    AttributeKind.PHONE: "phone",
    AttributeKind.EMAIL: "email",
    AttributeKind.YEAR_OF_STUDY: "year_of_study",
    AttributeKind.ADDRESS: "address",
    AttributeKind.ROOM: "room",
    AttributeKind.FLOOR: "floor",
    AttributeKind.GENDER: "gender",
}
MULTI_FIELDS: dict[AttributeKind, str] = {
    AttributeKind.CCA_POINT_RECORD: "cca_point_records",
    AttributeKind.DEMERIT_RECORD: "demerits",
    AttributeKind.TAG: "tags",
}


class DuplicatePersonError(PersonModelError):
    MESSAGE = "Persons list contains duplicate person(s)."

    def __init__(self, name: str | None = None):
        self.name = name
        super().__init__(self.MESSAGE)


class JsonAdaptedPerson(BaseModel):
    """Persisted form of a Person.

    Attributes:
        name: Name canonical string
        phone: Phone canonical string
        email: Email canonical string
        address: Address canonical string
        tags: Tag values (without brackets)
        year_of_study: Optional year of study
        room: Optional room number
        floor: Optional floor number
        gender: Optional gender
        cca_point_records: "description|YYYY-MM-DD HH:MM" strings
        demerits: "description|YYYY-MM-DD HH:MM" strings
    """

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tags: list[str] = Field(default_factory=list)
    year_of_study: str | None = None
    room: str | None = None
    floor: str | None = None
    gender: str | None = None
    cca_point_records: list[str] = Field(default_factory=list)
    demerits: list[str] = Field(default_factory=list)

    @classmethod
    def from_person(cls, person: Person) -> "JsonAdaptedPerson":
        data: dict[str, str | list[str]] = {}
        for kind, field_name in SINGLE_FIELDS.items():
            value = person.get(kind)
            if value is not None:
                data[field_name] = value.value
        for kind, field_name in MULTI_FIELDS.items():
            data[field_name] = [value.value for value in person.get_multi(kind)]
        return cls(**data)

    def to_model_type(self) -> Person:
        """Convert back into a Person, re-validating every field.

        Raises:
            MissingFieldError: If a required field is absent
            AttributeValidationError: If a stored value violates its constraint
            DuplicateAttributeError: If a stored list repeats a value
        """
        single: dict[AttributeKind, PersonAttribute] = {}
        for kind, field_name in SINGLE_FIELDS.items():
            raw = getattr(self, field_name)
            if raw is None:
                if registry.descriptor_for(kind).required:
                    raise MissingFieldError(registry.descriptor_for(kind).display_name)
                continue
            single[kind] = registry.validate(kind, raw)

        multi = {
            kind: registry.validate_many(kind, getattr(self, field_name)) for kind, field_name in MULTI_FIELDS.items()
        }
        return Person(single, multi)


class JsonSerializableRoster(BaseModel):
    """Persisted form of the whole roster."""

    persons: list[JsonAdaptedPerson] = Field(default_factory=list)

    @classmethod
    def from_persons(cls, persons: list[Person]) -> "JsonSerializableRoster":
        return cls(persons=[JsonAdaptedPerson.from_person(person) for person in persons])

    def to_model_type(self) -> list[Person]:
        """Convert into persons, rejecting entries that are the same person.

        Raises:
            DuplicatePersonError: If two entries share a name
            PersonModelError: If any entry fails validation
        """
        persons: list[Person] = []
        for adapted in self.persons:
            person = adapted.to_model_type()
            if any(existing.is_same_person(person) for existing in persons):
                logger.warning(
                    "Duplicate person in stored roster",
                    name=str(person.get(AttributeKind.NAME)),
                    event="roster_duplicate_person",
                )
                raise DuplicatePersonError(str(person.get(AttributeKind.NAME)))
            persons.append(person)
        return persons
