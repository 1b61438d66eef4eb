import pytest

from gmengine.debug import EngineError
from gmengine.serializer import SerializableObject, Serializer
from gmengine.vector import IntPoint, Vector


def test_int_is_four_little_endian_bytes():
    ser = Serializer()
    ser.write_int(1)
    assert ser.written() == b"\x01\x00\x00\x00"


@pytest.mark.parametrize("value", [0, 7, -7, 2**31 - 1, -(2**31)])
def test_int_round_trip(value):
    ser = Serializer()
    ser.write_int(value)
    assert ser.read_int() == value


def test_int_out_of_range_raises():
    with pytest.raises(OverflowError):
        Serializer().write_int(2**31)


def test_bool_round_trip():
    ser = Serializer()
    ser.write_bool(True)
    ser.write_bool(False)
    assert (ser.read_bool(), ser.read_bool()) == (True, False)


def test_vector_layout_and_round_trip():
    ser = Serializer()
    ser.write_vector(Vector(1.5, -2.0, 3.25, 0.5))
    assert len(ser.written()) == 16
    back = ser.read_vector()
    assert (back.x, back.y, back.z, back.w) == (1.5, -2.0, 3.25, 0.5)


def test_int_point_layout_and_round_trip():
    ser = Serializer()
    ser.write_int_point(IntPoint(3, -4))
    assert len(ser.written()) == 8
    assert ser.read_int_point() == IntPoint(3, -4)


def test_str_round_trip_with_length_prefix():
    ser = Serializer()
    ser.write_str("안녕 hi")
    encoded = "안녕 hi".encode("utf-8")
    assert ser.written()[4:] == encoded
    assert ser.read_int() == len(encoded)


def test_str_full_round_trip_and_empty():
    ser = Serializer()
    ser.write_str("monster")
    ser.write_str("")
    assert ser.read_str() == "monster"
    assert ser.read_str() == ""


def test_list_round_trip():
    ser = Serializer()
    ser.write_list([5, 6, 7], ser.write_int)
    assert ser.read_list(ser.read_int) == [5, 6, 7]


def test_values_read_back_in_order():
    ser = Serializer()
    ser.write_int(42)
    ser.write_str("name")
    ser.write_bool(True)
    assert ser.read_int() == 42
    assert ser.read_str() == "name"
    assert ser.read_bool() is True
    assert ser.read_offset == ser.write_offset


class _Spot(SerializableObject):
    def __init__(self, location=None):
        self.location = location or Vector()

    def serialize(self, ser):
        ser.write_vector(self.location)

    def deserialize(self, ser):
        self.location = ser.read_vector()


def test_object_round_trip():
    ser = Serializer()
    ser.write_object(_Spot(Vector(10.0, 20.0, 0.0)))
    restored = _Spot()
    ser.read_object(restored)
    assert restored.location == Vector(10.0, 20.0)


def test_default_object_writes_nothing():
    ser = Serializer()
    ser.write_object(SerializableObject())
    assert ser.written() == b""


def test_read_past_end_raises():
    ser = Serializer()
    ser.write_bool(True)
    with pytest.raises(EngineError):
        ser.read_int()


def test_negative_list_count_raises():
    ser = Serializer()
    ser.write_int(-1)
    with pytest.raises(EngineError):
        ser.read_list(ser.read_int)


def test_resize_fills_with_zeros():
    ser = Serializer()
    ser.resize(6)
    assert bytes(ser.data) == bytes(6)
    assert ser.written() == b""