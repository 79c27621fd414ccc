"""Rectangle value with an area computation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from selector_kit.errors import DeserializationError
from selector_kit.objects.serialization import register_decoder


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle of a given width and height."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_number(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value!r}")

    def area(self) -> float:
        return self.width * self.height

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Any) -> Rectangle:
        """Build a Rectangle from parsed JSON, checking field presence and type."""
        if not isinstance(data, dict):
            raise DeserializationError(
                f"Expected a JSON object, got {type(data).__name__}", target=cls
            )
        for name in ("width", "height"):
            if name not in data:
                raise DeserializationError(
                    f"Missing required field {name!r}", target=cls, field=name
                )
            if not _is_number(data[name]):
                raise DeserializationError(
                    f"Field {name!r} must be a finite number, got {data[name]!r}",
                    target=cls,
                    field=name,
                )
        try:
            return cls(width=data["width"], height=data["height"])
        except ValueError as exc:
            raise DeserializationError(str(exc), target=cls, cause=exc) from exc


register_decoder(Rectangle, Rectangle.from_dict)
