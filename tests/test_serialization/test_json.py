"""Tests for the JSON helpers."""

from dataclasses import dataclass

import pytest

from objkit.config import ObjkitConfig
from objkit.errors import ObjkitError, SerializationError
from objkit.serialization import from_json, to_json
from objkit.shapes import Rectangle


class Circle:
    def __init__(self, radius):
        raise AssertionError("__init__ must not run when decoding")

    def get_circumference(self):
        return 2 * 3 * self.radius


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ("a",)


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_sort_keys(self):
        config = ObjkitConfig(json_sort_keys=True)
        assert to_json({"width": 10, "height": 20}, config) == '{"height":20,"width":10}'

    def test_indent(self):
        config = ObjkitConfig(json_indent=2)
        assert to_json({"a": 1}, config) == '{\n  "a": 1\n}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_public_attributes(self):
        class Thing:
            def __init__(self):
                self.name = "x"
                self._hidden = 1

        assert to_json(Thing()) == '{"name":"x"}'

    def test_unencodable_raises(self):
        with pytest.raises(SerializationError) as exc_info:
            to_json({1, 2})
        assert isinstance(exc_info.value.cause, TypeError)

    def test_circular_raises(self):
        data: list = []
        data.append(data)
        with pytest.raises(SerializationError):
            to_json(data)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_rectangle(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area == 200

    def test_skips_init(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == 60

    def test_frozen_dataclass(self):
        p = from_json(Point, '{"x":1,"y":2}')
        assert p == Point(1, 2)

    def test_roundtrip_rectangle(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, to_json(r)) == r

    def test_invalid_json(self):
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json(Rectangle, "{width: 10")

    def test_non_object_payload(self):
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_json(Rectangle, "[1,2,3]")

    def test_unknown_slot(self):
        with pytest.raises(SerializationError, match="Cannot set 'b'"):
            from_json(Slotted, '{"b":1}')

    def test_dunder_key_raises(self):
        with pytest.raises(SerializationError, match="Cannot set '__class__'") as exc_info:
            from_json(Rectangle, '{"__class__": 1}')
        assert isinstance(exc_info.value.cause, TypeError)

    def test_error_base(self):
        with pytest.raises(ObjkitError):
            from_json(Rectangle, "nope")
