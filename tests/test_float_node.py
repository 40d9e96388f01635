import io
import math

from cfgtree.constants import FLOAT_INFINITY, FLOAT_NOT_A_NUMBER
from cfgtree.float_node import FloatNode
from cfgtree.integer_node import IntegerNode
from cfgtree.node_types import NodeType


def test_default_value_is_zero():
    node = FloatNode()
    assert node.value == 0.0
    assert node.node_type is NodeType.FLOAT


def test_serialize_has_six_decimal_places():
    text = FloatNode(1.5).serialize()
    whole, _, fraction = text.partition(".")
    assert len(fraction) == 6
    assert float(text) == 1.5


def test_serialize_pinned_value():
    assert FloatNode(2.25).serialize() == "2.250000"


def test_serialize_infinity_and_nan():
    assert FloatNode(FLOAT_INFINITY[0]).serialize() == FLOAT_INFINITY[1]
    assert FloatNode(FLOAT_NOT_A_NUMBER[0]).serialize() == FLOAT_NOT_A_NUMBER[1]


def test_equality_by_value():
    assert FloatNode(3.5) == FloatNode(3.5)
    assert FloatNode(3.5) != FloatNode(4.5)


def test_nan_is_not_equal_to_itself():
    node = FloatNode(math.nan)
    assert not (node == FloatNode(math.nan))


def test_not_equal_to_other_node_type():
    assert FloatNode(1.0) != IntegerNode(1)


def test_clone_is_independent():
    original = FloatNode(7.0)
    copy = original.clone()
    assert copy == original
    copy.value = 8.0
    assert original.value == 7.0


def test_create_new_is_default():
    assert FloatNode(9.5).create_new() == FloatNode()


def test_write_and_str():
    node = FloatNode(0.5)
    out = io.StringIO()
    assert node.write(out) is out
    assert out.getvalue() == node.serialize()
    assert str(node) == node.serialize()


def test_float_conversion_and_int_input():
    node = FloatNode(4)
    assert float(node) == 4.0
    assert isinstance(node.value, float)