"""selector_kit: fluent CSS selector builder and small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selector_kit.config import SelectorKitConfig
from selector_kit.errors import (
    DeserializationError,
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorError,
    SelectorKitError,
    SelectorOrderError,
)
from selector_kit.objects import Rectangle, from_json, register_decoder, to_json
from selector_kit.selector import Category, Fragment, SelectorBuilder, builder

__all__ = [
    "__version__",
    "Category",
    "DeserializationError",
    "DuplicateSelectorPartError",
    "Fragment",
    "InvalidCombinatorError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SelectorKitConfig",
    "SelectorKitError",
    "SelectorOrderError",
    "builder",
    "from_json",
    "register_decoder",
    "to_json",
]
