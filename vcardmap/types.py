from __future__ import annotations

from dataclasses import dataclass, field

# A parameter maps its upper-cased name to its values. A missing key and a
# key holding an empty list mean the same thing to the decoder.
Params = dict[str, list[str]]


class StructuredValue(list):
    """Ordered value slots of a content line; each slot is a list of strings.

    ``N:Doe;John,Johnny;;;`` becomes ``[["Doe"], ["John", "Johnny"], [""],
    [""], [""]]`` and ``CATEGORIES:a,b`` becomes ``[["a", "b"]]``.
    """

    def text(self) -> str:
        """First component of the first slot, or an empty string."""
        if self and self[0]:
            return self[0][0]
        return ""

    def text_list(self) -> list[str]:
        """Every component of every slot, flattened in order."""
        return [comp for slot in self for comp in slot]

    def all_text(self) -> str:
        """Every component concatenated, for payloads split across slots."""
        return "".join(self.text_list())


@dataclass
class ContentLine:
    name: str
    params: Params = field(default_factory=dict)
    value: StructuredValue = field(default_factory=StructuredValue)
    group: str = ""

    @classmethod
    def simple(cls, name: str, *slots: list[str], params: Params | None = None) -> ContentLine:
        return cls(name, dict(params or {}), StructuredValue(list(s) for s in slots))


def param_values(params: Params | None, name: str) -> list[str]:
    return list((params or {}).get(name, []))


def param_text(params: Params | None, name: str) -> str:
    values = (params or {}).get(name) or []
    return values[0] if values else ""


__all__ = [
    "Params",
    "StructuredValue",
    "ContentLine",
    "param_values",
    "param_text",
]
