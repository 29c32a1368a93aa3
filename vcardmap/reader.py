from __future__ import annotations

import io
import quopri
from collections.abc import Iterable, Iterator
from typing import Protocol, TextIO

from vobject.base import getLogicalLines, parseLine
from vobject.icalendar import stringToTextValues

from .types import ContentLine, Params, StructuredValue
from .utils import BARE_TYPE_TOKENS, split_types

QUOTED_PRINTABLE = "QUOTED-PRINTABLE"
_END = "\x00"


class ContentLineSource(Protocol):
    lines_read: int

    def read_content_line(self) -> ContentLine | None: ...


def _text_values(raw: str, separator: str, char_list: str | None = None) -> list[str]:
    # stringToTextValues drops an empty value after a trailing separator,
    # so a sentinel value is appended and removed again.
    values = stringToTextValues(
        raw + separator + _END, listSeparator=separator, charList=char_list
    )
    last = values.pop()
    if last != _END:
        # a dangling backslash escaped the separator
        values.append(last[: -len(separator + _END)])
    return values


def split_value(raw: str) -> StructuredValue:
    """Split a raw value into ``;`` slots of ``,`` components, unescaped."""
    return StructuredValue(
        _text_values(slot, ",") for slot in _text_values(raw or "", ";", ";")
    )


def _decode_quoted_printable(params: Params, raw: str) -> str:
    """Decode a vCard 2.1 quoted-printable value and drop its ENCODING marker."""
    encodings = [v.upper() for v in params.get("ENCODING", [])]
    if QUOTED_PRINTABLE not in encodings and QUOTED_PRINTABLE not in params:
        return raw
    params.pop(QUOTED_PRINTABLE, None)
    remaining = [v for v in params.pop("ENCODING", []) if v.upper() != QUOTED_PRINTABLE]
    if remaining:
        params["ENCODING"] = remaining
    charset = (params.get("CHARSET") or ["utf-8"])[0]
    data = quopri.decodestring(raw.encode("utf-8"))
    try:
        return data.decode(charset, errors="replace")
    except LookupError:
        return data.decode("utf-8", errors="replace")


def _build_params(raw_params: list[list[str]]) -> Params:
    params: Params = {}
    for entry in raw_params:
        if not entry:
            continue
        key = str(entry[0]).upper()
        values = [v for v in entry[1:] if v is not None]
        if not any(values):
            if key in BARE_TYPE_TOKENS:
                params.setdefault("TYPE", []).append(key)
            else:
                params.setdefault(key, [])
            continue
        if key == "TYPE":
            values = split_types(values)
        params.setdefault(key, []).extend(values)
    return params


class ContentLineReader:
    """Pull unfolded, unescaped content lines out of vCard text.

    Physical line unfolding and line tokenizing are done by vobject; the
    value is then split into slots and components.
    """

    def __init__(self, source: str | TextIO):
        stream = io.StringIO(source) if isinstance(source, str) else source
        self._lines = getLogicalLines(stream)
        self.lines_read = 0

    def read_content_line(self) -> ContentLine | None:
        for logical, line_number in self._lines:
            if not logical.strip():
                continue
            name, raw_params, raw_value, group = parseLine(logical, line_number)
            self.lines_read += 1
            params = _build_params(raw_params)
            raw_value = _decode_quoted_printable(params, raw_value)
            return ContentLine(
                name=name,
                params=params,
                value=split_value(raw_value),
                group=group or "",
            )
        return None

    def __iter__(self) -> Iterator[ContentLine]:
        while True:
            line = self.read_content_line()
            if line is None:
                return
            yield line


class ContentLineBuffer:
    """In-memory source over already decoded content lines."""

    def __init__(self, lines: Iterable[ContentLine]):
        self._lines = iter(list(lines))
        self.lines_read = 0

    def read_content_line(self) -> ContentLine | None:
        line = next(self._lines, None)
        if line is not None:
            self.lines_read += 1
        return line


__all__ = ["ContentLineSource", "split_value", "ContentLineReader", "ContentLineBuffer"]
