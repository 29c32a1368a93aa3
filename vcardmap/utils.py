from __future__ import annotations

from collections.abc import Iterable

CRLF = "\r\n"


def escape_text(s: object) -> str:
    """Escape text for vCard value context according to RFC 6350 basics.

    Escapes backslashes, commas, semicolons, and newlines. Removes stray CR.
    """
    if s is None:
        return ""
    value = str(s)
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\n")
        .replace("\n", "\\n")
        .replace("\r", "")
    )


def join_structured(value: Iterable[Iterable[str]]) -> str:
    return ";".join(",".join(escape_text(comp) for comp in slot) for slot in value)


def split_types(val: object) -> list[str]:
    if not val:
        return []
    if isinstance(val, str):
        parts = [p.strip() for p in val.split(",") if p.strip()]
    elif isinstance(val, list):
        parts = []
        for x in val:
            parts.extend([p.strip() for p in str(x).split(",") if p.strip()])
    else:
        parts = [str(val).strip()]
    return parts


def fold_line(line: str, width: int = 75) -> str:
    """Fold a serialized line so no physical line exceeds ``width`` octets.

    Lengths are counted in UTF-8 octets and a character is never split.
    Continuation lines start with a single space, which counts toward width.
    """
    if width <= 1 or len(line.encode("utf-8")) <= width:
        return line
    parts: list[str] = []
    current: list[str] = []
    size = 0
    limit = width
    for ch in line:
        octets = len(ch.encode("utf-8"))
        if size + octets > limit:
            parts.append("".join(current))
            current, size, limit = [], 0, width - 1
        current.append(ch)
        size += octets
    parts.append("".join(current))
    return (CRLF + " ").join(parts)


# vCard 2.1 writes type tags as bare parameters, e.g. ``TEL;HOME;CELL:``.
BARE_TYPE_TOKENS = {
    "HOME",
    "WORK",
    "CELL",
    "VOICE",
    "FAX",
    "PAGER",
    "TEXT",
    "TEXTPHONE",
    "MAIN",
    "IPHONE",
    "MSG",
    "VIDEO",
    "BBS",
    "MODEM",
    "CAR",
    "ISDN",
    "PCS",
    "PREF",
    "INTERNET",
    "X400",
    "DOM",
    "INTL",
    "POSTAL",
    "PARCEL",
    "X-MOBILEME",
}


__all__ = [
    "CRLF",
    "escape_text",
    "join_structured",
    "split_types",
    "fold_line",
    "BARE_TYPE_TOKENS",
]
