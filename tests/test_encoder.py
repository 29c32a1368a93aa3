import copy

from vcardmap.decoder import decode
from vcardmap.encoder import encode
from vcardmap.models import (
    DEFAULT_ADDRESS_TYPES,
    Address,
    ContactRecord,
    Email,
    Photo,
    Telephone,
    XJabber,
    XSkype,
)
from vcardmap.reader import ContentLineBuffer, ContentLineReader
from vcardmap.vcards import record_to_vcard30


def _names(lines):
    return [ln.name for ln in lines]


def _by_name(lines, name):
    return [ln for ln in lines if ln.name == name]


def full_record() -> ContactRecord:
    return ContactRecord(
        uid="urn:uuid:0b5e6c1a-0000-4000-8000-000000000001",
        product_id="-//Acme//NONSGML Contacts 1.0//EN",
        revision="2024-05-01T10:00:00Z",
        anniversary="2001-09-09",
        version="3.0",
        formatted_name="Dr. John Q. Doe Jr.",
        family_names=["Doe"],
        given_names=["John"],
        additional_names=["Q."],
        honorific_prefixes=["Dr."],
        honorific_suffixes=["Jr.", "PhD"],
        nicknames=["JJ", "Johnny"],
        photo=Photo(encoding="b", type="JPEG", data="QUJDREVG" * 20),
        birthday="1970-01-01",
        addresses=[
            Address(
                types=["WORK", "POSTAL"],
                label="1 Main St, Springfield",
                extended_address="Suite 5",
                street="1 Main St",
                locality="Springfield",
                region="IL",
                postal_code="62701",
                country_name="USA",
            ),
            Address(types=["HOME"], street="2 Elm St", locality="Shelbyville"),
        ],
        telephones=[
            Telephone(number="+1 555 0100", types=["CELL"]),
            Telephone(number="+1 555 0101", types=["WORK", "FAX"]),
        ],
        emails=[
            Email(address="john@example.com", types=["HOME"]),
            Email(address="john.doe@work.example", types=["WORK", "INTERNET"]),
        ],
        title="Engineer",
        role="Lead; backend",
        org=["Acme", "Sales"],
        categories=["friends", "work"],
        note="Met at the conference.\nLikes tea, not coffee.",
        url="https://example.com/~jdoe",
        x_ab_uid="ABCD-1234:ABPerson",
        x_ab_show_as="PERSON",
    )


def test_empty_record_has_mandatory_lines_only():
    lines = encode(ContactRecord())
    assert _names(lines) == ["BEGIN", "VERSION", "FN", "N", "END"]
    assert lines[0].value == [["VCARD"]]
    assert lines[1].value == [["3.0"]]
    assert lines[2].value == [[""]]
    assert lines[3].value == [[], [], [], [], []]
    assert lines[4].value == [["VCARD"]]


def test_version_is_always_3_0():
    lines = encode(ContactRecord(version="2.1"))
    assert _by_name(lines, "VERSION")[0].value.text() == "3.0"


def test_empty_note_and_uid_are_suppressed():
    record = full_record()
    record.note = ""
    record.uid = ""
    names = _names(encode(record))
    assert "NOTE" not in names
    assert "UID" not in names
    assert names[:4] == ["BEGIN", "VERSION", "FN", "N"]


def test_canonical_order():
    record = full_record()
    record.x_jabbers = [XJabber(address="jd@jabber.example", types=["HOME"])]
    record.x_skypes = [XSkype(address="jd.skype", types=[])]
    # never written out
    record.place_of_birth = "Paris"
    assert _names(encode(record)) == [
        "BEGIN", "VERSION", "FN", "N", "NICKNAME", "PHOTO", "UID", "PRODID",
        "REV", "BDAY", "ANNIVERSARY", "ADR", "ADR", "TEL", "TEL", "EMAIL",
        "EMAIL", "TITLE", "ROLE", "ORG", "CATEGORIES", "NOTE", "URL",
        "X-JABBER", "X-SKYPE", "X-ABShowAs", "X-ABUID", "END",
    ]


def test_structured_values():
    lines = encode(full_record())
    assert _by_name(lines, "N")[0].value == [["Doe"], ["John"], ["Q."], ["Dr."], ["Jr.", "PhD"]]
    assert _by_name(lines, "NICKNAME")[0].value == [["JJ", "Johnny"]]
    assert _by_name(lines, "ORG")[0].value == [["Acme"], ["Sales"]]
    assert _by_name(lines, "CATEGORIES")[0].value == [["friends", "work"]]
    adr = _by_name(lines, "ADR")[0]
    assert adr.value == [[""], ["Suite 5"], ["1 Main St"], ["Springfield"], ["IL"], ["62701"], ["USA"]]
    assert adr.params == {"TYPE": ["WORK", "POSTAL"], "LABEL": ["1 Main St, Springfield"]}


def test_typed_entries_always_carry_type_param():
    record = ContactRecord(
        emails=[Email(address="a@example.com")],
        telephones=[Telephone(number="1")],
        x_skypes=[XSkype(address="sk")],
    )
    lines = encode(record)
    assert _by_name(lines, "EMAIL")[0].params == {"TYPE": []}
    assert _by_name(lines, "TEL")[0].params == {"TYPE": []}
    assert _by_name(lines, "X-SKYPE")[0].params == {"TYPE": []}


def test_address_without_types_gets_default_set():
    lines = encode(ContactRecord(addresses=[Address(street="1 Main St")]))
    assert _by_name(lines, "ADR")[0].params == {"TYPE": DEFAULT_ADDRESS_TYPES}


def test_photo_params():
    assert "PHOTO" not in _names(encode(ContactRecord(photo=Photo(encoding="b", type="JPEG"))))

    bare = _by_name(encode(ContactRecord(photo=Photo(data="QUJD"))), "PHOTO")[0]
    assert bare.params == {"BASE64": []}
    assert bare.value == [["QUJD"]]

    typed = _by_name(encode(ContactRecord(photo=Photo(type="PNG", data="QUJD"))), "PHOTO")[0]
    assert typed.params == {"TYPE": ["PNG"]}

    full = _by_name(
        encode(ContactRecord(photo=Photo(encoding="b", type="JPEG", value="binary", data="QUJD"))),
        "PHOTO",
    )[0]
    assert full.params == {"ENCODING": ["b"], "TYPE": ["JPEG"], "VALUE": ["binary"]}


def test_encode_does_not_mutate_record():
    record = full_record()
    before = copy.deepcopy(record)
    lines = encode(record)
    _by_name(lines, "N")[0].value[0].append("Changed")
    assert record == before


def test_emails_are_written_in_list_order():
    record = ContactRecord(emails=[Email(address=a) for a in ("a@x", "b@x", "c@x")])
    assert [ln.value.text() for ln in _by_name(encode(record), "EMAIL")] == ["a@x", "b@x", "c@x"]


def test_roundtrip_through_content_lines():
    record = full_record()
    assert decode(ContentLineBuffer(encode(record))) == record


def test_roundtrip_normalizes_version():
    record = full_record()
    record.version = "2.1"
    decoded = decode(ContentLineBuffer(encode(record)))
    assert decoded.version == "3.0"
    decoded.version = "2.1"
    assert decoded == record


def test_roundtrip_through_text():
    record = full_record()
    text = record_to_vcard30(record)
    assert decode(ContentLineReader(text)) == record


def test_jabber_and_skype_entries_do_not_survive_roundtrip():
    # written as X-JABBER / X-SKYPE, which decode drops
    record = ContactRecord(
        x_jabbers=[XJabber(address="jd@jabber.example", types=["HOME"])],
        x_skypes=[XSkype(address="jd.skype", types=["WORK"])],
    )
    decoded = decode(ContentLineBuffer(encode(record)))
    assert decoded.x_jabbers == []
    assert decoded.x_skypes == []


def test_list_of_one_empty_value_is_written_but_reads_back_empty():
    # NICKNAME: is written for [""]; a lone empty component decodes as no value
    record = ContactRecord(nicknames=[""], categories=[""])
    lines = encode(record)
    assert _by_name(lines, "NICKNAME")[0].value == [[""]]
    assert _by_name(lines, "CATEGORIES")[0].value == [[""]]
    decoded = decode(ContentLineBuffer(lines))
    assert decoded.nicknames == []
    assert decoded.categories == []
