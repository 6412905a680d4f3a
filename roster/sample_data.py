"""Sample residents used when no roster file exists yet."""

from roster.people.attributes import registry
from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import PersonAttribute
from roster.people.person import Person

# name, phone, email, address, tags, hall fields
_SAMPLE_RESIDENTS: list[tuple[str, str, str, str, tuple[str, ...], dict[AttributeKind, str]]] = [
    (
        "Alex Yeoh",
        "87438807",
        "alexyeoh@example.com",
        "Blk 30 Geylang Street 29, #06-40",
        ("friends",),
        {
            AttributeKind.ROOM: "106A",
            AttributeKind.FLOOR: "1",
            AttributeKind.GENDER: "MALE",
            AttributeKind.YEAR_OF_STUDY: "2",
        },
    ),
    (
        "Bernice Yu",
        "99272758",
        "berniceyu@example.com",
        "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
        ("colleagues", "friends"),
        {
            AttributeKind.ROOM: "712B",
            AttributeKind.FLOOR: "7",
            AttributeKind.GENDER: "FEMALE",
            AttributeKind.YEAR_OF_STUDY: "1",
        },
    ),
    (
        "Charlotte Oliveiro",
        "93210283",
        "charlotte@example.com",
        "Blk 11 Ang Mo Kio Street 74, #11-04",
        ("neighbours",),
        {AttributeKind.YEAR_OF_STUDY: "3"},
    ),
    (
        "David Li",
        "91031282",
        "lidavid@example.com",
        "Blk 436 Serangoon Gardens Street 26, #16-43",
        ("family",),
        {AttributeKind.ROOM: "163C", AttributeKind.FLOOR: "16"},
    ),
    (
        "Irfan Ibrahim",
        "92492021",
        "irfan@example.com",
        "Blk 47 Tampines Street 20, #17-35",
        ("classmates",),
        {},
    ),
    (
        "Roy Balakrishnan",
        "92624417",
        "royb@example.com",
        "Blk 45 Aljunied Street 85, #11-31",
        ("colleagues",),
        {AttributeKind.GENDER: "MALE"},
    ),
]

_SAMPLE_RECORDS: dict[str, dict[AttributeKind, tuple[str, ...]]] = {
    "Alex Yeoh": {
        AttributeKind.CCA_POINT_RECORD: ("Hall Exco meeting|2024-01-15 14:30", "IFG Soccer|2024-02-03 18:00"),
    },
    "Roy Balakrishnan": {
        AttributeKind.DEMERIT_RECORD: ("Late night noise|2024-01-15 23:30",),
    },
}


def get_tag_list(*names: str) -> list[PersonAttribute]:
    """Return tags for the given names, in order."""
    return registry.validate_many(AttributeKind.TAG, names)


def get_sample_persons() -> list[Person]:
    persons = []
    for name, phone, email, address, tags, hall_fields in _SAMPLE_RESIDENTS:
        single = {
            AttributeKind.NAME: registry.validate(AttributeKind.NAME, name),
            AttributeKind.PHONE: registry.validate(AttributeKind.PHONE, phone),
            AttributeKind.EMAIL: registry.validate(AttributeKind.EMAIL, email),
            AttributeKind.ADDRESS: registry.validate(AttributeKind.ADDRESS, address),
        }
        single.update({kind: registry.validate(kind, raw) for kind, raw in hall_fields.items()})

        multi = {AttributeKind.TAG: get_tag_list(*tags)}
        for kind, raw_records in _SAMPLE_RECORDS.get(name, {}).items():
            multi[kind] = registry.validate_many(kind, raw_records)

        persons.append(Person(single, multi))
    return persons
