"""Person model error types.

Every failure raised by the attribute registry, the attribute values or the
person aggregate is one of these. All of them derive from PersonModelError
(itself a ValueError) so collaborators can catch a single base type.

- AttributeValidationError: raw string rejected by its kind's rule
- DuplicateAttributeError: multi-valued kind holds two equal values
- AttributeKindMismatchError: value stored under a kind it was not built for
- MissingFieldError: required field absent from ingested/persisted data
"""

from roster.people.attributes.kinds import AttributeKind


class PersonModelError(ValueError):
    """Base class for all person model errors."""


class AttributeValidationError(PersonModelError):
    """Raised when a raw string fails its attribute kind's constraint.

    Attributes:
        kind: Attribute kind whose rule was violated
        message: The kind's user-facing constraint message
    """

    def __init__(self, kind: AttributeKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class DuplicateAttributeError(PersonModelError):
    """Raised when a multi-valued kind would contain two equal values.

    Attributes:
        kind: Multi-valued attribute kind
        value: Canonical string of the offending duplicate
    """

    def __init__(self, kind: AttributeKind, value: str, display_name: str):
        self.kind = kind
        self.value = value
        super().__init__(f"Duplicate {display_name} found: {value}")


class AttributeKindMismatchError(PersonModelError):
    """Raised when a value is stored under a kind (or map) it does not belong to."""

    def __init__(self, kind: AttributeKind, detail: str):
        self.kind = kind
        super().__init__(f"{kind.value}: {detail}")


class MissingFieldError(PersonModelError):
    """Raised by ingestion layers when a required field is absent.

    Attributes:
        field_name: Display name of the missing field
    """

    MESSAGE_FORMAT = "Person's {} field is missing!"

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(self.MESSAGE_FORMAT.format(field_name))
