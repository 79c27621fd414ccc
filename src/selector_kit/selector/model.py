"""Selector model: part categories and the immutable Fragment value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum

from selector_kit.config import SelectorKitConfig
from selector_kit.errors import DuplicateSelectorPartError, SelectorOrderError

logger = logging.getLogger(__name__)


class Category(StrEnum):
    """Kinds of parts that make up a compound selector, in required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position in the required order, 1 (element) to 6 (pseudo-element)."""
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """True if the part may occur at most once per compound selector."""
        return self in _SINGLETONS

    def render_part(self, value: str) -> str:
        """Render *value* as this kind of selector part."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[Category, int] = {
    Category.ELEMENT: 1,
    Category.ID: 2,
    Category.CLASS: 3,
    Category.ATTRIBUTE: 4,
    Category.PSEUDO_CLASS: 5,
    Category.PSEUDO_ELEMENT: 6,
}

_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """A partially or fully built selector.

    Every append returns a new Fragment, so a fragment can be used as the
    base of several different selectors.

    Attributes:
        text: The selector text accumulated so far.
        rank: Highest category rank appended, 0 when nothing was appended.
        used_singletons: Singleton categories already present.
    """

    text: str = ""
    rank: int = 0
    used_singletons: frozenset[Category] = frozenset()
    config: SelectorKitConfig = field(
        default_factory=SelectorKitConfig, compare=False, repr=False
    )

    # --- appends --------------------------------------------------------------

    def append(self, category: Category, value: str) -> Fragment:
        """Return a new fragment with *value* appended as a *category* part.

        Raises DuplicateSelectorPartError if a singleton category is already
        used, and SelectorOrderError if *category* ranks below the current rank.
        """
        if category.singleton and category in self.used_singletons:
            logger.debug("Rejected duplicate %s part %r after %r", category, value, self.text)
            raise DuplicateSelectorPartError(category)
        if category.rank < self.rank:
            logger.debug("Rejected out-of-order %s part %r after %r", category, value, self.text)
            raise SelectorOrderError(category, self.rank)

        used = self.used_singletons
        if category.singleton:
            used = used | {category}
        return replace(
            self,
            text=self.text + category.render_part(value),
            rank=category.rank,
            used_singletons=used,
        )

    def element(self, value: str) -> Fragment:
        return self.append(Category.ELEMENT, value)

    def id(self, value: str) -> Fragment:
        return self.append(Category.ID, value)

    def class_(self, value: str) -> Fragment:
        return self.append(Category.CLASS, value)

    def attr(self, value: str) -> Fragment:
        return self.append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Fragment:
        return self.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Fragment:
        return self.append(Category.PSEUDO_ELEMENT, value)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector text."""
        return self.text

    stringify = render

    def __str__(self) -> str:
        return self.text
