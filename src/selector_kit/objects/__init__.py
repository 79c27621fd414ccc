from selector_kit.objects.rectangle import Rectangle
from selector_kit.objects.serialization import (
    decoder_for,
    from_json,
    register_decoder,
    to_json,
)

__all__ = ["Rectangle", "decoder_for", "from_json", "register_decoder", "to_json"]
