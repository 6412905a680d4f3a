"""Root conftest for all tests.

Shared fixtures for building persons and capturing loguru output.
"""

import pytest
from loguru import logger

from roster.people.attributes import registry
from roster.people.attributes.kinds import AttributeKind
from roster.people.person import Person


@pytest.fixture
def log_messages():
    """Capture loguru records emitted during a test as (level, message, extra) tuples."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"], dict(message.record["extra"]))
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def alice_fields() -> dict[str, list[str]]:
    """Prefixed raw fields for a complete resident."""
    return {
        "n/": ["Alice Pauline"],
        "p/": ["94351253"],
        "e/": ["alice@example.com"],
        "a/": ["123, Jurong West Ave 6, #08-111"],
        "r/": ["101a"],
        "fl/": ["1"],
        "g/": ["female"],
        "y/": ["2"],
        "t/": ["friends", "exco"],
        "m/": ["Helped organize event|2024-01-15 14:30"],
        "d/": ["Late night noise|2024-01-15 23:30"],
    }


@pytest.fixture
def alice() -> Person:
    """Complete resident built through the validation gate."""
    single = {
        AttributeKind.NAME: registry.validate(AttributeKind.NAME, "Alice Pauline"),
        AttributeKind.PHONE: registry.validate(AttributeKind.PHONE, "94351253"),
        AttributeKind.EMAIL: registry.validate(AttributeKind.EMAIL, "alice@example.com"),
        AttributeKind.ADDRESS: registry.validate(AttributeKind.ADDRESS, "123, Jurong West Ave 6, #08-111"),
        AttributeKind.ROOM: registry.validate(AttributeKind.ROOM, "101a"),
        AttributeKind.FLOOR: registry.validate(AttributeKind.FLOOR, "1"),
        AttributeKind.GENDER: registry.validate(AttributeKind.GENDER, "female"),
        AttributeKind.YEAR_OF_STUDY: registry.validate(AttributeKind.YEAR_OF_STUDY, "2"),
    }
    multi = {
        AttributeKind.TAG: registry.validate_many(AttributeKind.TAG, ["friends", "exco"]),
        AttributeKind.CCA_POINT_RECORD: registry.validate_many(
            AttributeKind.CCA_POINT_RECORD, ["Helped organize event|2024-01-15 14:30"]
        ),
        AttributeKind.DEMERIT_RECORD: registry.validate_many(
            AttributeKind.DEMERIT_RECORD, ["Late night noise|2024-01-15 23:30"]
        ),
    }
    return Person(single, multi)
