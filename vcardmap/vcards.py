from __future__ import annotations

from dataclasses import asdict
from typing import Any

from .decoder import decode
from .encoder import write_to
from .models import ContactRecord
from .reader import ContentLineReader, ContentLineSource
from .writer import ContentLineWriter


def decode_all(source: ContentLineSource) -> list[ContactRecord]:
    """Decode records one after another until the source runs dry.

    Stray lines after the last END:VCARD yield an empty record, which is
    dropped.
    """
    records: list[ContactRecord] = []
    while True:
        before = source.lines_read
        record = decode(source)
        if source.lines_read == before:
            break
        if record != ContactRecord():
            records.append(record)
    return records


def parse_vcards(text: str) -> list[ContactRecord]:
    """Parse vCard text into a list of ContactRecords."""
    return decode_all(ContentLineReader(text))


def record_to_vcard30(record: ContactRecord, fold_width: int = 75) -> str:
    writer = ContentLineWriter(fold_width=fold_width)
    write_to(record, writer)
    return writer.getvalue()


def records_to_vcards30(records: list[ContactRecord], fold_width: int = 75) -> str:
    return "".join(record_to_vcard30(r, fold_width) for r in records)


def record_to_dict(record: ContactRecord) -> dict[str, Any]:
    return asdict(record)
