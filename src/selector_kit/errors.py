"""Error hierarchy for selector_kit."""
from __future__ import annotations

from typing import Any


class SelectorKitError(Exception):
    """Base error for all selector_kit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorKitError):
    """A selector part could not be appended or combined."""


class DuplicateSelectorPartError(SelectorError):
    """A singleton part (element, id, pseudo-element) was appended twice."""

    def __init__(self, category: str, **kwargs: Any) -> None:
        super().__init__(
            "element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            **kwargs,
        )
        self.category = category


class SelectorOrderError(SelectorError):
    """A part was appended after a part of a later category."""

    def __init__(self, category: str, current_rank: int, **kwargs: Any) -> None:
        super().__init__(
            "selector parts should be arranged in order: element, id, class, "
            "attribute, pseudo-class, pseudo-element",
            **kwargs,
        )
        self.category = category
        self.current_rank = current_rank


class InvalidCombinatorError(SelectorError):
    """The combinator is not one of ' ', '+', '~', '>' (strict mode only)."""

    def __init__(self, combinator: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}", **kwargs)
        self.combinator = combinator


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class DeserializationError(SelectorKitError):
    """JSON text could not be decoded into the requested type."""

    def __init__(
        self,
        message: str,
        *,
        target: type | None = None,
        field: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.target = target
        self.field = field
