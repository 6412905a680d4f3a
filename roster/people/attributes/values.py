"""Typed person attribute values.

Each attribute kind has exactly one value class. Values are immutable and
self-validating: the constructor either produces a fully valid value or raises
AttributeValidationError carrying the kind's constraint message. There is no
"constructed but invalid" state.

Every value exposes its canonical string as ``value``. Equality and hashing are
structural: for most kinds the canonical string is the payload, for the dated
record kinds the payload is the (description, timestamp) pair.

Collaborators should not construct values directly from user input; they go
through ``roster.people.attributes.registry.validate``, which trims the raw
string first.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, Self

from roster.people.attributes.kinds import AttributeKind
from roster.people.errors import AttributeValidationError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class PersonAttribute:
    """Common base for all attribute values.

    Subclasses set ``kind`` and ``MESSAGE_CONSTRAINTS`` and implement
    ``is_valid``. ``canonicalize`` turns an already-validated raw string into
    the canonical form stored in ``value``.

    Attributes:
        value: Canonical string representation (used for persistence)
    """

    value: str

    kind: ClassVar[AttributeKind]
    MESSAGE_CONSTRAINTS: ClassVar[str]

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise AttributeValidationError(self.kind, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.canonicalize(self.value))

    @classmethod
    def is_valid(cls, test: str) -> bool:
        raise NotImplementedError

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return raw.strip()

    def __str__(self) -> str:
        return self.value


class Name(PersonAttribute):
    """Person's name. Free text, must not be blank."""

    kind = AttributeKind.NAME
    MESSAGE_CONSTRAINTS = "Names can take any values, and it should not be blank"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(test.strip())


class Phone(PersonAttribute):
    kind = AttributeKind.PHONE
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    VALIDATION_REGEX = re.compile(r"\d{3,}", re.ASCII)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None


_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9])*"
_DOMAIN_LAST_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9])+"


class Email(PersonAttribute):
    """Email address of the form local-part@domain, domain containing a period."""

    kind = AttributeKind.EMAIL
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - contain at least one period\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )
    VALIDATION_REGEX = re.compile(
        rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)+{_DOMAIN_LAST_LABEL}",
        re.ASCII,
    )

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None


class Address(PersonAttribute):
    kind = AttributeKind.ADDRESS
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    # First character must not be whitespace, otherwise " " would be a valid address
    VALIDATION_REGEX = re.compile(r"[^\s].*")

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None


class Room(PersonAttribute):
    """Hall room number: three digits and a block letter, stored upper-cased."""

    kind = AttributeKind.ROOM
    MESSAGE_CONSTRAINTS = "Room must be 3 digits followed by a letter (e.g., 101A, 215B)"
    VALIDATION_REGEX = re.compile(r"\d{3}[A-Za-z]", re.ASCII)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return raw.strip().upper()


_INTEGER_REGEX = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_bounded_int(test: str, minimum: int, maximum: int) -> int | None:
    """Parse a plain decimal integer and return it if within [minimum, maximum]."""
    if _INTEGER_REGEX.fullmatch(test) is None:
        return None
    number = int(test)
    if minimum <= number <= maximum:
        return number
    return None


class Floor(PersonAttribute):
    """Hall floor number in [MIN_FLOOR, MAX_FLOOR].

    The canonical string is the normalized integer, so "07" and "7" are equal.
    """

    kind = AttributeKind.FLOOR
    MIN_FLOOR: ClassVar[int] = 1
    MAX_FLOOR: ClassVar[int] = 19
    MESSAGE_CONSTRAINTS = f"Floor must be a number between {MIN_FLOOR} and {MAX_FLOOR}"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return _parse_bounded_int(test, cls.MIN_FLOOR, cls.MAX_FLOOR) is not None

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return str(int(raw))

    @property
    def floor_number(self) -> int:
        return int(self.value)


class YearOfStudy(PersonAttribute):
    kind = AttributeKind.YEAR_OF_STUDY
    MIN_YEAR: ClassVar[int] = 1
    MAX_YEAR: ClassVar[int] = 6
    MESSAGE_CONSTRAINTS = f"Year of study must be a number between {MIN_YEAR} and {MAX_YEAR}"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return _parse_bounded_int(test, cls.MIN_YEAR, cls.MAX_YEAR) is not None

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return str(int(raw))

    @property
    def year(self) -> int:
        return int(self.value)


class GenderType(StrEnum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Gender(PersonAttribute):
    """Gender, accepted case-insensitively and stored upper-cased."""

    kind = AttributeKind.GENDER
    MESSAGE_CONSTRAINTS = "Gender must be MALE, FEMALE, or OTHER (case-insensitive)"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return test.upper() in GenderType.__members__

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return raw.upper()

    @property
    def gender_type(self) -> GenderType:
        return GenderType(self.value)


class Tag(PersonAttribute):
    kind = AttributeKind.TAG
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(r"[A-Za-z0-9]+", re.ASCII)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    def __str__(self) -> str:
        return f"[{self.value}]"


_RECORD_REGEX = re.compile(r".+\|\d{4}-\d{2}-\d{2} \d{2}:\d{2}", re.ASCII)


@dataclass(frozen=True)
class DatedRecord(PersonAttribute):
    """A free-text description stamped with a minute-precision timestamp.

    Raw form is ``DESCRIPTION|YYYY-MM-DD HH:MM``, split on the last ``|`` so the
    description may itself contain pipes. Equality and hashing use the
    parsed (description, timestamp) pair, never the raw string, so
    "Event |2024-01-15 14:30" and "Event|2024-01-15 14:30" are equal.

    Attributes:
        value: Canonical ``description|YYYY-MM-DD HH:MM`` string
        description: Trimmed description text
        timestamp: Parsed timestamp
    """

    value: str = field(compare=False)
    description: str = field(init=False)
    timestamp: datetime = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        description, stamp = self.value.rsplit("|", 1)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "timestamp", datetime.strptime(stamp, TIMESTAMP_FORMAT))

    @classmethod
    def is_valid(cls, test: str) -> bool:
        if _RECORD_REGEX.fullmatch(test) is None:
            return False
        description, stamp = test.rsplit("|", 1)
        try:
            datetime.strptime(stamp.strip(), TIMESTAMP_FORMAT)
        except ValueError:
            return False
        return bool(description.strip())

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        description, stamp = raw.rsplit("|", 1)
        return f"{description.strip()}|{stamp.strip()}"

    @classmethod
    def from_parts(cls, description: str, timestamp: datetime) -> Self:
        """Build a record from its parts. Seconds and below are dropped."""
        return cls(f"{description}|{timestamp.strftime(TIMESTAMP_FORMAT)}")


class CcaPointRecord(DatedRecord):
    kind = AttributeKind.CCA_POINT_RECORD
    MESSAGE_CONSTRAINTS = (
        "CcaPoints must be in format: DESCRIPTION|YYYY-MM-DD HH:MM (e.g., Helped organize event|2024-01-15 14:30)"
    )


class DemeritRecord(DatedRecord):
    kind = AttributeKind.DEMERIT_RECORD
    MESSAGE_CONSTRAINTS = (
        "Demerit must be in format: DESCRIPTION|YYYY-MM-DD HH:MM (e.g., Late night noise|2024-01-15 23:30)"
    )
