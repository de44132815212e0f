"""Compiled dot-path accessors for table records.

A column key such as ``"parent.title"`` is split once into access steps and
reused for every comparison. Each step reads a mapping entry or, for plain
objects (dataclasses, view-model rows), an attribute. Any missing
intermediate short-circuits to ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple

__all__ = ["FieldPath", "compile_path"]


@dataclass(frozen=True)
class FieldPath:
    key: str
    steps: Tuple[str, ...]

    def resolve(self, record: Any) -> Any:
        current = record
        for step in self.steps:
            if current is None:
                return None
            if isinstance(current, Mapping):
                current = current.get(step)
            else:
                current = getattr(current, step, None)
        return current

    __call__ = resolve


def compile_path(key: str) -> FieldPath:
    if not isinstance(key, str) or not key:
        raise ValueError(f"Column key must be a non-empty string, got {key!r}")
    return FieldPath(key=key, steps=tuple(key.split(".")))
