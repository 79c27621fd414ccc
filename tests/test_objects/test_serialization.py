"""Tests for the JSON round-trip helpers."""

from dataclasses import dataclass

import pytest

from selector_kit.config import SelectorKitConfig
from selector_kit.errors import DeserializationError
from selector_kit.objects import Rectangle, decoder_for, from_json, register_decoder, to_json


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self):
        assert to_json("x") == '"x"'
        assert to_json(None) == "null"

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_sort_keys(self):
        config = SelectorKitConfig(json_sort_keys=True)
        assert to_json({"width": 10, "height": 20}, config) == '{"height":20,"width":10}'

    def test_indent(self):
        config = SelectorKitConfig(json_indent=2)
        assert to_json({"a": 1}, config) == '{\n  "a": 1\n}'

    def test_unserialisable_propagates(self):
        with pytest.raises(TypeError):
            to_json(object())

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError):
            to_json({"width": float("nan")})
        with pytest.raises(ValueError):
            to_json([float("inf")])


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_rectangle(self):
        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_rectangle_extra_fields_ignored(self):
        r = from_json(Rectangle, '{"width": 1, "height": 2, "color": "red"}')
        assert r == Rectangle(1, 2)

    def test_round_trip(self):
        r = Rectangle(2.5, 4)
        assert from_json(Rectangle, to_json(r)) == r

    def test_missing_field(self):
        with pytest.raises(DeserializationError) as exc_info:
            from_json(Rectangle, '{"width": 10}')
        assert exc_info.value.field == "height"
        assert exc_info.value.target is Rectangle

    def test_mistyped_field(self):
        with pytest.raises(DeserializationError) as exc_info:
            from_json(Rectangle, '{"width": "10", "height": 20}')
        assert exc_info.value.field == "width"

    def test_negative_field(self):
        with pytest.raises(DeserializationError) as exc_info:
            from_json(Rectangle, '{"width": -1, "height": 20}')
        assert isinstance(exc_info.value.cause, ValueError)

    def test_not_an_object(self):
        with pytest.raises(DeserializationError, match="JSON object"):
            from_json(Rectangle, "[10, 20]")

    def test_invalid_json(self):
        with pytest.raises(DeserializationError) as exc_info:
            from_json(Rectangle, "{width: 10")
        assert exc_info.value.cause is not None

    def test_non_text_input(self):
        with pytest.raises(DeserializationError) as exc_info:
            from_json(Rectangle, None)  # type: ignore[arg-type]
        assert isinstance(exc_info.value.cause, TypeError)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_field(self, literal):
        with pytest.raises(DeserializationError) as exc_info:
            from_json(Rectangle, f'{{"width": {literal}, "height": 2}}')
        assert exc_info.value.field == "width"

    def test_plain_types(self):
        assert from_json(list, "[1,2,3]") == [1, 2, 3]
        assert from_json(dict, '{"a": 1}') == {"a": 1}
        assert from_json(str, '"x"') == "x"
        assert from_json(bool, "true") is True

    def test_int_widens_to_float(self):
        value = from_json(float, "3")
        assert value == 3.0
        assert isinstance(value, float)

    def test_bool_is_not_int(self):
        with pytest.raises(DeserializationError):
            from_json(int, "true")

    def test_plain_type_mismatch(self):
        with pytest.raises(DeserializationError, match="Expected list"):
            from_json(list, '{"a": 1}')


# ---------------------------------------------------------------------------
# Decoder registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Circle:
    radius: float


class TestDecoderRegistry:
    def test_unregistered_type(self):
        class Unknown:
            pass

        with pytest.raises(DeserializationError, match="No decoder registered for Unknown"):
            from_json(Unknown, "{}")

    def test_register_custom_type(self):
        register_decoder(Circle, lambda data: Circle(radius=data["radius"]))
        assert from_json(Circle, '{"radius": 10}') == Circle(radius=10)

    def test_rectangle_registered(self):
        assert decoder_for(Rectangle) == Rectangle.from_dict
