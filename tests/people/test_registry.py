"""Tests for the attribute descriptor registry."""

import pytest

from roster.people.attributes import registry
from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import CcaPointRecord, Gender, Name, Tag
from roster.people.errors import AttributeValidationError

PREFIX_TABLE = {
    "n/": AttributeKind.NAME,
    "p/": AttributeKind.PHONE,
    "e/": AttributeKind.EMAIL,
    "y/": AttributeKind.YEAR_OF_STUDY,
    "a/": AttributeKind.ADDRESS,
    "r/": AttributeKind.ROOM,
    "fl/": AttributeKind.FLOOR,
    "g/": AttributeKind.GENDER,
    "m/": AttributeKind.CCA_POINT_RECORD,
    "d/": AttributeKind.DEMERIT_RECORD,
    "t/": AttributeKind.TAG,
}

# Mixed corpus of valid and invalid raw strings probed against every kind
PROBE_STRINGS = [
    "",
    " ",
    "Alex Yeoh",
    " Alex",
    "123",
    "12",
    "93121534",
    "alice@example.com",
    "alice@example",
    "101A",
    "101a",
    "1011A",
    "0",
    "1",
    "6",
    "7",
    "19",
    "20",
    "+3",
    "male",
    "FeMaLe",
    "other ",
    "friends",
    "best friends",
    "Helped organize event|2024-01-15 14:30",
    "Helped organize event|2024-02-30 14:30",
    "|2024-01-15 14:30",
    "Blk 30 Geylang Street 29, #06-40",
]


@pytest.mark.parametrize("prefix,kind", PREFIX_TABLE.items())
def test_lookup_by_prefix(prefix, kind):
    descriptor = registry.lookup_by_prefix(prefix)
    assert descriptor is not None
    assert descriptor.kind is kind
    assert descriptor.prefix == prefix


@pytest.mark.parametrize("prefix", ["x/", "n", "N/", "", "fl"])
def test_lookup_unknown_prefix_returns_none(prefix):
    assert registry.lookup_by_prefix(prefix) is None


def test_all_prefixes_in_catalog_order():
    assert registry.all_prefixes() == list(PREFIX_TABLE)


def test_required_and_optional_kinds_partition_catalog():
    required = registry.required_kinds()
    optional = registry.optional_kinds()
    assert required == [AttributeKind.NAME, AttributeKind.PHONE, AttributeKind.EMAIL, AttributeKind.ADDRESS]
    assert set(required).isdisjoint(optional)
    assert sorted(required + optional, key=list(AttributeKind).index) == list(AttributeKind)


def test_cardinality_filters_are_declaration_ordered():
    assert registry.single_value_kinds() == [
        AttributeKind.NAME,
        AttributeKind.PHONE,
        AttributeKind.EMAIL,
        AttributeKind.YEAR_OF_STUDY,
        AttributeKind.ADDRESS,
        AttributeKind.ROOM,
        AttributeKind.FLOOR,
        AttributeKind.GENDER,
    ]
    assert registry.multi_value_kinds() == [
        AttributeKind.CCA_POINT_RECORD,
        AttributeKind.DEMERIT_RECORD,
        AttributeKind.TAG,
    ]


def test_display_names():
    names = {d.kind: d.display_name for d in registry.DESCRIPTORS}
    assert names[AttributeKind.YEAR_OF_STUDY] == "Year of Study"
    assert names[AttributeKind.CCA_POINT_RECORD] == "CCA Point Records"
    assert names[AttributeKind.DEMERIT_RECORD] == "Demerits"


def test_validate_trims_before_checking():
    assert registry.validate(AttributeKind.NAME, "  Alex Yeoh  ") == Name("Alex Yeoh")
    assert registry.validate(AttributeKind.GENDER, "  male ") == Gender("MALE")
    assert registry.validate(AttributeKind.ADDRESS, "  Blk 30").value == "Blk 30"


def test_validate_raises_with_constraint_message():
    descriptor = registry.descriptor_for(AttributeKind.ROOM)
    with pytest.raises(AttributeValidationError) as exc_info:
        registry.validate(AttributeKind.ROOM, "room 5")
    assert str(exc_info.value) == descriptor.constraint_message
    assert exc_info.value.kind is AttributeKind.ROOM


def test_validate_returns_value_of_requested_kind():
    value = registry.validate(AttributeKind.CCA_POINT_RECORD, "Helped organize event|2024-01-15 14:30")
    assert isinstance(value, CcaPointRecord)
    assert value.kind is AttributeKind.CCA_POINT_RECORD


def test_validate_many_preserves_input_order():
    tags = registry.validate_many(AttributeKind.TAG, ["zeta", "alpha", " mid "])
    assert tags == [Tag("zeta"), Tag("alpha"), Tag("mid")]


def test_validate_many_fails_atomically():
    with pytest.raises(AttributeValidationError, match="alphanumeric"):
        registry.validate_many(AttributeKind.TAG, ["good", "not good", "also"])


def test_validate_many_empty():
    assert registry.validate_many(AttributeKind.TAG, []) == []


@pytest.mark.parametrize("kind", list(AttributeKind))
@pytest.mark.parametrize("raw", PROBE_STRINGS)
def test_is_valid_agrees_with_parse(kind, raw):
    descriptor = registry.descriptor_for(kind)
    try:
        descriptor.parse(raw)
        parsed = True
    except AttributeValidationError:
        parsed = False
    assert descriptor.is_valid(raw) == parsed


@pytest.mark.parametrize("kind", list(AttributeKind))
@pytest.mark.parametrize("raw", PROBE_STRINGS)
def test_validated_values_are_valid_for_their_kind(kind, raw):
    try:
        value = registry.validate(kind, raw)
    except AttributeValidationError:
        return
    assert value.kind is kind
    assert registry.descriptor_for(kind).is_valid(value.value)
