from __future__ import annotations

import io
from typing import TextIO

from .types import ContentLine
from .utils import CRLF, join_structured, fold_line


def _param_value(value: str) -> str:
    value = " ".join(value.splitlines())
    if any(ch in value for ch in ',;:'):
        return '"' + value.replace('"', "") + '"'
    return value


def serialize_content_line(line: ContentLine) -> str:
    head = f"{line.group}.{line.name}" if line.group else line.name
    parts = [head]
    for key, values in line.params.items():
        values = [v for v in values if v is not None]
        if not values:
            # an empty TYPE carries nothing; other empty params are markers
            if key != "TYPE":
                parts.append(key)
            continue
        parts.append(f"{key}={','.join(_param_value(v) for v in values)}")
    return ";".join(parts) + ":" + join_structured(line.value)


class ContentLineWriter:
    def __init__(self, stream: TextIO | None = None, fold_width: int = 75):
        self.stream = stream if stream is not None else io.StringIO()
        self.fold_width = fold_width

    def write_content_line(self, line: ContentLine) -> None:
        self.stream.write(fold_line(serialize_content_line(line), self.fold_width) + CRLF)

    def getvalue(self) -> str:
        return self.stream.getvalue()


__all__ = ["serialize_content_line", "ContentLineWriter"]
