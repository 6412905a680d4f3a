"""Closed set of person attribute kinds.

The declaration order here is the catalog order used everywhere else
(registry filters, display output, persisted field order).
"""

from enum import StrEnum


class AttributeKind(StrEnum):
    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    YEAR_OF_STUDY = "year_of_study"
    ADDRESS = "address"
    ROOM = "room"
    FLOOR = "floor"
    GENDER = "gender"
    CCA_POINT_RECORD = "cca_point_record"
    DEMERIT_RECORD = "demerit_record"
    TAG = "tag"
