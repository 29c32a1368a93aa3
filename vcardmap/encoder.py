from __future__ import annotations

from .models import DEFAULT_ADDRESS_TYPES, Address, ContactRecord, Photo
from .types import ContentLine, Params

ENCODED_VERSION = "3.0"


def _text(name: str, text: str) -> ContentLine:
    return ContentLine.simple(name, [text])


def _typed(name: str, types: list[str], text: str) -> ContentLine:
    return ContentLine.simple(name, [text], params={"TYPE": list(types)})


def encode_photo(photo: Photo) -> ContentLine | None:
    if not photo.data:
        return None
    params: Params = {}
    if photo.encoding:
        params["ENCODING"] = [photo.encoding]
    if photo.type:
        params["TYPE"] = [photo.type]
    if photo.value:
        params["VALUE"] = [photo.value]
    if not params:
        params["BASE64"] = []
    return ContentLine.simple("PHOTO", [photo.data], params=params)


def encode_address(addr: Address) -> ContentLine:
    params: Params = {"TYPE": list(addr.types or DEFAULT_ADDRESS_TYPES)}
    if addr.label:
        params["LABEL"] = [addr.label]
    return ContentLine.simple(
        "ADR",
        [addr.post_office_box],
        [addr.extended_address],
        [addr.street],
        [addr.locality],
        [addr.region],
        [addr.postal_code],
        [addr.country_name],
        params=params,
    )


def encode(record: ContactRecord) -> list[ContentLine]:
    """Content lines for ``record`` in canonical vCard 3.0 order.

    BEGIN, VERSION, FN, N and END are always present; every other property is
    written only when it holds a value.
    """
    r = record
    lines = [
        _text("BEGIN", "VCARD"),
        _text("VERSION", ENCODED_VERSION),
        _text("FN", r.formatted_name),
        ContentLine.simple(
            "N",
            r.family_names,
            r.given_names,
            r.additional_names,
            r.honorific_prefixes,
            r.honorific_suffixes,
        ),
    ]
    if r.nicknames:
        lines.append(ContentLine.simple("NICKNAME", r.nicknames))
    photo = encode_photo(r.photo)
    if photo is not None:
        lines.append(photo)
    for name, text in (
        ("UID", r.uid),
        ("PRODID", r.product_id),
        ("REV", r.revision),
        ("BDAY", r.birthday),
        ("ANNIVERSARY", r.anniversary),
    ):
        if text:
            lines.append(_text(name, text))
    lines.extend(encode_address(addr) for addr in r.addresses)
    lines.extend(_typed("TEL", tel.types, tel.number) for tel in r.telephones)
    lines.extend(_typed("EMAIL", email.types, email.address) for email in r.emails)
    if r.title:
        lines.append(_text("TITLE", r.title))
    if r.role:
        lines.append(_text("ROLE", r.role))
    if r.org:
        # ORG components are positional: Acme;Sales
        lines.append(ContentLine.simple("ORG", *[[comp] for comp in r.org]))
    if r.categories:
        lines.append(ContentLine.simple("CATEGORIES", r.categories))
    if r.note:
        lines.append(_text("NOTE", r.note))
    if r.url:
        lines.append(_text("URL", r.url))
    lines.extend(_typed("X-JABBER", jab.types, jab.address) for jab in r.x_jabbers)
    lines.extend(_typed("X-SKYPE", sk.types, sk.address) for sk in r.x_skypes)
    if r.x_ab_show_as:
        lines.append(_text("X-ABShowAs", r.x_ab_show_as))
    if r.x_ab_uid:
        lines.append(_text("X-ABUID", r.x_ab_uid))
    lines.append(_text("END", "VCARD"))
    return lines


def write_to(record: ContactRecord, sink) -> None:
    for line in encode(record):
        sink.write_content_line(line)


__all__ = ["ENCODED_VERSION", "encode", "encode_photo", "encode_address", "write_to"]
