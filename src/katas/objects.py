"""Rectangle object and JSON round-trip helpers."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

from katas.errors import KataError

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are serialised field by field.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    return json.dumps(obj, separators=(",", ":"))


def from_json(cls: type[T], source: str) -> T:
    """Create an instance of *cls* from a JSON object string.

    ``__init__`` is not called; the decoded keys are assigned as attributes
    on a bare instance, so partial payloads are accepted.
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise KataError(f"Invalid JSON for {cls.__name__}: {exc}") from exc
    if not isinstance(data, dict):
        raise KataError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    for key, value in data.items():
        setattr(instance, key, value)
    return instance
