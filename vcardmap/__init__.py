from .decoder import decode
from .encoder import encode, write_to
from .errors import StructuralMismatch
from .models import Address, ContactRecord, Email, Photo, Telephone, XJabber, XSkype
from .reader import ContentLineBuffer, ContentLineReader
from .types import ContentLine, StructuredValue
from .vcards import parse_vcards, record_to_vcard30, records_to_vcards30
from .writer import ContentLineWriter

__all__ = [
    "decode",
    "encode",
    "write_to",
    "StructuralMismatch",
    "Address",
    "ContactRecord",
    "Email",
    "Photo",
    "Telephone",
    "XJabber",
    "XSkype",
    "ContentLineBuffer",
    "ContentLineReader",
    "ContentLine",
    "StructuredValue",
    "parse_vcards",
    "record_to_vcard30",
    "records_to_vcards30",
    "ContentLineWriter",
]
