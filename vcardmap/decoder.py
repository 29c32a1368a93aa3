"""Decode content lines into a ContactRecord.

Each known content-line name maps to a small handler in ``FIELD_HANDLERS``.
Names missing from the table are skipped silently.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from .errors import StructuralMismatch
from .models import (
    DEFAULT_TELEPHONE_TYPES,
    Address,
    ContactRecord,
    Email,
    Telephone,
    XJabber,
    XSkype,
)
from .reader import ContentLineSource
from .types import ContentLine, param_text, param_values

logger = logging.getLogger(__name__)

TYPE_PARAM = "TYPE"

# N slot indexes
FAMILY_NAMES = 0
GIVEN_NAMES = 1
ADDITIONAL_NAMES = 2
HONORIFIC_PREFIXES = 3
HONORIFIC_SUFFIXES = 4
NAME_SIZE = HONORIFIC_SUFFIXES + 1

# ADR slot indexes
POST_OFFICE_BOX = 0
EXTENDED_ADDRESS = 1
STREET = 2
LOCALITY = 3
REGION = 4
POSTAL_CODE = 5
COUNTRY_NAME = 6
ADDRESS_SIZE = COUNTRY_NAME + 1


class FieldHandler(ABC):
    @abstractmethod
    def apply(self, line: ContentLine, record: ContactRecord) -> None:
        """Store what ``line`` carries on ``record``."""


class ScalarField(FieldHandler):
    def __init__(self, attr: str):
        self.attr = attr

    def apply(self, line, record):
        setattr(record, self.attr, line.value.text())


def _values(values: list[str]) -> list[str]:
    # a lone empty component is an empty slot
    return [] if values == [""] else list(values)


class ListField(FieldHandler):
    def __init__(self, attr: str):
        self.attr = attr

    def apply(self, line, record):
        setattr(record, self.attr, _values(line.value.text_list()))


class IgnoredField(FieldHandler):
    """Recognized name that stores nothing."""

    def apply(self, line, record):
        return None


def _check_size(line: ContentLine, expected: int) -> None:
    if len(line.value) != expected:
        raise StructuralMismatch(line.name, expected, len(line.value))


class NameField(FieldHandler):
    def apply(self, line, record):
        _check_size(line, NAME_SIZE)
        value = line.value
        record.family_names = _values(value[FAMILY_NAMES])
        record.given_names = _values(value[GIVEN_NAMES])
        record.additional_names = _values(value[ADDITIONAL_NAMES])
        record.honorific_prefixes = _values(value[HONORIFIC_PREFIXES])
        record.honorific_suffixes = _values(value[HONORIFIC_SUFFIXES])


def _slot_text(slot: list[str]) -> str:
    return slot[0] if slot else ""


class AddressField(FieldHandler):
    def apply(self, line, record):
        _check_size(line, ADDRESS_SIZE)
        value = line.value
        record.addresses.append(
            Address(
                types=param_values(line.params, TYPE_PARAM),
                label=param_text(line.params, "LABEL"),
                post_office_box=_slot_text(value[POST_OFFICE_BOX]),
                extended_address=_slot_text(value[EXTENDED_ADDRESS]),
                street=_slot_text(value[STREET]),
                locality=_slot_text(value[LOCALITY]),
                region=_slot_text(value[REGION]),
                postal_code=_slot_text(value[POSTAL_CODE]),
                country_name=_slot_text(value[COUNTRY_NAME]),
            )
        )


class TypedEntryField(FieldHandler):
    """TYPE-tagged single value appended to one of the record's lists."""

    def __init__(self, attr: str, factory: Callable, default_types=()):
        self.attr = attr
        self.factory = factory
        self.default_types = list(default_types)

    def apply(self, line, record):
        if TYPE_PARAM in line.params:
            types = list(line.params[TYPE_PARAM])
        else:
            types = list(self.default_types)
        entry = self.factory(line.value.text(), types)
        getattr(record, self.attr).append(entry)


class PhotoField(FieldHandler):
    def apply(self, line, record):
        photo = record.photo
        photo.encoding = param_text(line.params, "ENCODING")
        photo.type = param_text(line.params, TYPE_PARAM)
        photo.value = param_text(line.params, "VALUE")
        # base64 payloads may be spread over several components
        photo.data = line.value.all_text()


FIELD_HANDLERS: dict[str, FieldHandler] = {
    "VERSION": ScalarField("version"),
    "FN": ScalarField("formatted_name"),
    "N": NameField(),
    "NICKNAME": ListField("nicknames"),
    "PHOTO": PhotoField(),
    "BDAY": ScalarField("birthday"),
    "ANNIVERSARY": ScalarField("anniversary"),
    "BIRTHPLACE": ScalarField("place_of_birth"),
    "DEATHPLACE": ScalarField("place_of_death"),
    "DEATHDATE": ScalarField("date_of_death"),
    "ADR": AddressField(),
    "X-ABUID": ScalarField("x_ab_uid"),
    "TEL": TypedEntryField(
        "telephones",
        lambda value, types: Telephone(number=value, types=types),
        DEFAULT_TELEPHONE_TYPES,
    ),
    "EMAIL": TypedEntryField(
        "emails", lambda value, types: Email(address=value, types=types)
    ),
    "TITLE": ScalarField("title"),
    "ROLE": ScalarField("role"),
    "ORG": ListField("org"),
    "CATEGORIES": ListField("categories"),
    "NOTE": ScalarField("note"),
    "URL": ScalarField("url"),
    # X-JABBER and X-SKYPE are recognized but dropped; only X-GTALK and
    # X-SKYPE-USERNAME produce entries.
    "X-JABBER": IgnoredField(),
    "X-GTALK": TypedEntryField(
        "x_jabbers", lambda value, types: XJabber(address=value, types=types)
    ),
    "X-SKYPE": IgnoredField(),
    "X-SKYPE-USERNAME": TypedEntryField(
        "x_skypes", lambda value, types: XSkype(address=value, types=types)
    ),
    "X-ABShowAs": ScalarField("x_ab_show_as"),
    "PRODID": ScalarField("product_id"),
    "UID": ScalarField("uid"),
    "REV": ScalarField("revision"),
}


def is_terminator(line: ContentLine) -> bool:
    return line.name == "END" and line.value.text() == "VCARD"


def decode(source: ContentLineSource, record: ContactRecord | None = None) -> ContactRecord:
    """Read content lines from ``source`` into a record.

    Stops after an ``END:VCARD`` line, leaving later lines unread, or when
    the source is exhausted.
    """
    if record is None:
        record = ContactRecord()
    line = source.read_content_line()
    while line is not None:
        if is_terminator(line):
            break
        handler = FIELD_HANDLERS.get(line.name)
        if handler is not None:
            try:
                handler.apply(line, record)
            except StructuralMismatch as exc:
                logger.warning("Skipping %s line: %s", line.name, exc)
        line = source.read_content_line()
    logger.debug("Decoded vCard %r", record.formatted_name)
    return record


__all__ = [
    "FieldHandler",
    "ScalarField",
    "ListField",
    "IgnoredField",
    "NameField",
    "AddressField",
    "TypedEntryField",
    "PhotoField",
    "FIELD_HANDLERS",
    "StructuralMismatch",
    "is_terminator",
    "decode",
]
