from dataclasses import dataclass, field
from typing import List

DEFAULT_ADDRESS_TYPES = ["INTL", "POSTAL", "PARCEL", "WORK"]
DEFAULT_TELEPHONE_TYPES = ["VOICE"]


@dataclass
class Photo:
    encoding: str = ""
    type: str = ""
    value: str = ""
    data: str = ""


@dataclass
class Address:
    # empty means DEFAULT_ADDRESS_TYPES once written out
    types: List[str] = field(default_factory=list)
    label: str = ""
    post_office_box: str = ""
    extended_address: str = ""
    street: str = ""
    locality: str = ""  # e.g. city
    region: str = ""  # e.g. state or province
    postal_code: str = ""
    country_name: str = ""


@dataclass
class Telephone:
    number: str = ""
    types: List[str] = field(default_factory=list)


@dataclass
class Email:
    address: str = ""
    types: List[str] = field(default_factory=list)


@dataclass
class XJabber:
    address: str = ""
    types: List[str] = field(default_factory=list)


@dataclass
class XSkype:
    address: str = ""
    types: List[str] = field(default_factory=list)


@dataclass
class ContactRecord:
    uid: str = ""
    # PRODID: name and version of the software that generated the card
    product_id: str = ""
    # REV: timestamp of the last change
    revision: str = ""
    anniversary: str = ""
    version: str = ""
    formatted_name: str = ""
    family_names: List[str] = field(default_factory=list)
    given_names: List[str] = field(default_factory=list)
    additional_names: List[str] = field(default_factory=list)
    honorific_prefixes: List[str] = field(default_factory=list)
    honorific_suffixes: List[str] = field(default_factory=list)
    nicknames: List[str] = field(default_factory=list)
    photo: Photo = field(default_factory=Photo)
    birthday: str = ""
    # BIRTHPLACE, DEATHDATE and DEATHPLACE come from RFC 6474
    place_of_birth: str = ""
    date_of_death: str = ""
    place_of_death: str = ""
    addresses: List[Address] = field(default_factory=list)
    telephones: List[Telephone] = field(default_factory=list)
    emails: List[Email] = field(default_factory=list)
    title: str = ""
    role: str = ""
    org: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    note: str = ""
    url: str = ""
    x_jabbers: List[XJabber] = field(default_factory=list)
    x_skypes: List[XSkype] = field(default_factory=list)
    # Apple Address Book extensions
    x_ab_uid: str = ""
    x_ab_show_as: str = ""

    def __str__(self) -> str:
        def display(values: List[str]) -> str:
            return ", ".join(values)

        return "\n".join(
            [
                f"VCard version: {self.version}",
                f"FormattedName: {self.formatted_name}",
                f"FamilyNames: {display(self.family_names)}",
                f"GivenNames: {display(self.given_names)}",
                f"AdditionalNames: {display(self.additional_names)}",
            ]
        )
