"""Fluent CSS selector builder.

Example:
    builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
        -> 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main"),
        ">",
        builder.element("p").class_("lead"),
    ).render()
        -> 'div#main > p.lead'
"""

from __future__ import annotations

import logging

from selector_kit.config import SelectorKitConfig
from selector_kit.errors import InvalidCombinatorError
from selector_kit.selector.model import Category, Fragment

__all__ = ["COMBINATORS", "SelectorBuilder", "builder"]

logger = logging.getLogger(__name__)

COMBINATORS = (" ", "+", "~", ">")


class SelectorBuilder:
    """Entry point for building selectors.

    Each append method starts a new lineage from an empty fragment; the
    returned Fragment carries the same append methods for chaining.
    """

    def __init__(self, config: SelectorKitConfig | None = None) -> None:
        self.config = config or SelectorKitConfig()
        self._empty = Fragment(config=self.config)

    def element(self, value: str) -> Fragment:
        return self._empty.append(Category.ELEMENT, value)

    def id(self, value: str) -> Fragment:
        return self._empty.append(Category.ID, value)

    def class_(self, value: str) -> Fragment:
        return self._empty.append(Category.CLASS, value)

    def attr(self, value: str) -> Fragment:
        return self._empty.append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Fragment:
        return self._empty.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Fragment:
        return self._empty.append(Category.PSEUDO_ELEMENT, value)

    def combine(self, left: Fragment, combinator: str, right: Fragment) -> Fragment:
        """Join two selectors as ``left <combinator> right``.

        The result starts a fresh order/singleton state (rank 0). Any
        combinator string is accepted unless ``strict_combinators`` is set.
        """
        if self.config.strict_combinators and combinator not in COMBINATORS:
            raise InvalidCombinatorError(combinator)
        logger.debug("Combining %r %r %r", left.text, combinator, right.text)
        return Fragment(
            text=f"{left.render()} {combinator} {right.render()}",
            config=self.config,
        )

    def render(self, fragment: Fragment) -> str:
        return fragment.render()


builder = SelectorBuilder()
