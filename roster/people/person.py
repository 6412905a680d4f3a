"""Person aggregate.

A Person is an immutable record made of two maps keyed by AttributeKind:
single-valued attributes (at most one value per kind) and multi-valued
attributes (an ordered, duplicate-free tuple of values per kind). Every edit
returns a new Person; neither map is ever mutated after construction.

Design choices:
- Required kinds are NOT enforced here. A Person may be built without NAME,
  PHONE, EMAIL or ADDRESS; required-field checks live in the ingestion and
  storage layers (see ``missing_required_kinds``).
- Multi-valued attributes participate in equality as ordered sequences, so the
  same tags given in a different order produce unequal persons. Duplicate
  detection, on the other hand, is set-like.
- An empty multi-value list is the same as an absent one.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from roster.people.attributes import registry
from roster.people.attributes.kinds import AttributeKind
from roster.people.attributes.values import PersonAttribute
from roster.people.errors import AttributeKindMismatchError, DuplicateAttributeError


def _check_kind(kind: AttributeKind, value: PersonAttribute, *, multi_value: bool) -> None:
    if registry.descriptor_for(kind).multi_value != multi_value:
        expected = "multi-valued" if multi_value else "single-valued"
        raise AttributeKindMismatchError(kind, f"is not a {expected} attribute kind")
    if not isinstance(value, PersonAttribute) or value.kind is not kind:
        raise AttributeKindMismatchError(kind, f"cannot store {value!r}")


def _check_no_duplicates(kind: AttributeKind, values: tuple[PersonAttribute, ...]) -> None:
    seen: set[PersonAttribute] = set()
    for value in values:
        if value in seen:
            raise DuplicateAttributeError(kind, value.value, registry.descriptor_for(kind).display_name)
        seen.add(value)


class Person:
    """Immutable person record.

    Args:
        single_attributes: Kind -> value for single-valued kinds
        multi_attributes: Kind -> values for multi-valued kinds

    Raises:
        AttributeKindMismatchError: If a value is stored under a kind it was not
            built for, or under the wrong cardinality map
        DuplicateAttributeError: If a multi-valued kind lists two equal values
    """

    __slots__ = ("_single", "_multi")

    def __init__(
        self,
        single_attributes: Mapping[AttributeKind, PersonAttribute] | None = None,
        multi_attributes: Mapping[AttributeKind, Iterable[PersonAttribute]] | None = None,
    ):
        single: dict[AttributeKind, PersonAttribute] = {}
        for kind, value in (single_attributes or {}).items():
            _check_kind(kind, value, multi_value=False)
            single[kind] = value

        multi: dict[AttributeKind, tuple[PersonAttribute, ...]] = {}
        for kind, values in (multi_attributes or {}).items():
            entries = tuple(values)
            for value in entries:
                _check_kind(kind, value, multi_value=True)
            _check_no_duplicates(kind, entries)
            if entries:
                multi[kind] = entries

        # Catalog order keeps iteration, repr and hashing deterministic
        self._single = {kind: single[kind] for kind in AttributeKind if kind in single}
        self._multi = {kind: multi[kind] for kind in AttributeKind if kind in multi}

    # ==================== Attribute access ====================

    def get(self, kind: AttributeKind) -> PersonAttribute | None:
        """Return the single-valued attribute of ``kind``, or None if absent."""
        return self._single.get(kind)

    def get_multi(self, kind: AttributeKind) -> tuple[PersonAttribute, ...]:
        """Return the values of a multi-valued ``kind``; empty if none."""
        return self._multi.get(kind, ())

    def has(self, kind: AttributeKind) -> bool:
        return kind in self._single or kind in self._multi

    @property
    def single_attributes(self) -> Mapping[AttributeKind, PersonAttribute]:
        return MappingProxyType(self._single)

    @property
    def multi_attributes(self) -> Mapping[AttributeKind, tuple[PersonAttribute, ...]]:
        return MappingProxyType(self._multi)

    def missing_required_kinds(self) -> list[AttributeKind]:
        """Return the required kinds this person lacks, in catalog order."""
        return [kind for kind in registry.required_kinds() if not self.has(kind)]

    # ==================== Copy-on-write edits ====================

    def with_attribute(self, kind: AttributeKind, value: PersonAttribute) -> "Person":
        """Return a copy with the single-valued ``kind`` set to ``value``."""
        single = dict(self._single)
        single[kind] = value
        return Person(single, self._multi)

    def with_multi(self, kind: AttributeKind, values: Iterable[PersonAttribute]) -> "Person":
        """Return a copy with the values of multi-valued ``kind`` replaced wholesale.

        Raises:
            DuplicateAttributeError: If ``values`` contains two equal entries
        """
        multi = dict(self._multi)
        multi[kind] = tuple(values)
        return Person(self._single, multi)

    # ==================== Identity ====================

    def is_same_person(self, other: "Person | None") -> bool:
        """Return True if both persons have equal NAME attributes.

        Weaker than equality: other fields are ignored. Two persons both lacking
        a name count as the same person.
        """
        if other is self:
            return True
        if other is None:
            return False
        return self.get(AttributeKind.NAME) == other.get(AttributeKind.NAME)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return self._single == other._single and self._multi == other._multi

    def __hash__(self) -> int:
        return hash((tuple(self._single.items()), tuple(self._multi.items())))

    def __repr__(self) -> str:
        parts = [f"{kind.value}={value.value}" for kind, value in self._single.items()]
        parts.extend(
            f"{kind.value}=[{', '.join(v.value for v in values)}]" for kind, values in self._multi.items()
        )
        return f"Person{{{', '.join(parts)}}}"

    # ==================== Display ====================

    def to_display_string(self) -> str:
        """Return one "DisplayName: value" line per present attribute.

        Single-valued kinds come first, then multi-valued kinds joined with
        ", ", both in catalog order.
        """
        lines = []
        for kind in registry.single_value_kinds():
            value = self.get(kind)
            if value is not None:
                lines.append(f"{registry.descriptor_for(kind).display_name}: {value.value}")
        for kind in registry.multi_value_kinds():
            values = self.get_multi(kind)
            if values:
                joined = ", ".join(v.value for v in values)
                lines.append(f"{registry.descriptor_for(kind).display_name}: {joined}")
        return "\n".join(lines)
