from selector_kit.selector.builder import COMBINATORS, SelectorBuilder, builder
from selector_kit.selector.model import Category, Fragment

__all__ = ["COMBINATORS", "Category", "Fragment", "SelectorBuilder", "builder"]
