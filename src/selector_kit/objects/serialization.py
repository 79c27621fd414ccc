"""JSON round-trip helpers with explicit per-type decoders.

Decoding never injects parsed data into an arbitrary type: every target type
registers a decoder that validates the parsed value and builds the instance.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Callable, TypeVar

from selector_kit.config import SelectorKitConfig
from selector_kit.errors import DeserializationError

__all__ = ["decoder_for", "from_json", "register_decoder", "to_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")
Decoder = Callable[[Any], Any]

_DECODERS: dict[type, Decoder] = {}


def register_decoder(target: type[T], decoder: Callable[[Any], T]) -> None:
    """Register *decoder* as the way to build *target* from parsed JSON."""
    _DECODERS[target] = decoder


def decoder_for(target: type[T]) -> Callable[[Any], T]:
    """Return the decoder registered for *target*."""
    try:
        return _DECODERS[target]
    except KeyError:
        raise DeserializationError(
            f"No decoder registered for {target.__name__}", target=target
        ) from None


def to_json(obj: Any, config: SelectorKitConfig | None = None) -> str:
    """Serialise *obj* to JSON text.

    Dataclass instances are converted with ``asdict`` first. Output is compact
    unless the config sets ``json_indent``. NaN and infinity raise ValueError.
    """
    config = config or SelectorKitConfig()
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    separators = (",", ":") if config.json_indent is None else None
    return json.dumps(
        obj,
        indent=config.json_indent,
        sort_keys=config.json_sort_keys,
        separators=separators,
        allow_nan=False,
    )


def from_json(target: type[T], text: str) -> T:
    """Parse *text* and build an instance of *target* from it.

    Raises DeserializationError if the text is not valid JSON, if no decoder
    is registered for *target*, or if the decoder rejects the data.
    """
    decoder = decoder_for(target)
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.debug("Invalid JSON for %s: %s", target.__name__, exc)
        raise DeserializationError(
            f"Invalid JSON for {target.__name__}: {exc}", target=target, cause=exc
        ) from exc
    return decoder(data)


# ---------------------------------------------------------------------------
# Plain JSON types
# ---------------------------------------------------------------------------


def _plain_decoder(target: type) -> Decoder:
    def decode(data: Any) -> Any:
        # bool is an int subclass; only the bool decoder accepts it
        if not isinstance(data, bool) or target is bool:
            if target is float and isinstance(data, int):
                return float(data)
            if isinstance(data, target):
                return data
        raise DeserializationError(
            f"Expected {target.__name__}, got {type(data).__name__}",
            target=target,
        )

    return decode


for _plain in (dict, list, str, int, float, bool):
    register_decoder(_plain, _plain_decoder(_plain))
