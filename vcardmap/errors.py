from __future__ import annotations


class StructuralMismatch(ValueError):
    """A structured property arrived with the wrong number of value slots."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{name} expects {expected} structured components, got {actual}"
        )


__all__ = ["StructuralMismatch"]
