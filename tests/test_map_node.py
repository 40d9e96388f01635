import io

from cfgtree.array_node import ArrayNode
from cfgtree.float_node import FloatNode
from cfgtree.integer_node import IntegerNode
from cfgtree.map_node import MapNode
from cfgtree.node_types import NodeType
from cfgtree.numeral_system import HEXADECIMAL


def _root(**items):
    node = MapNode(items)
    node.is_root_map = True
    return node


def test_root_map_serializes_without_braces():
    assert _root(a=IntegerNode(1)).serialize() == "a=1;\n"


def test_non_root_map_serializes_with_braces():
    assert MapNode({"a": IntegerNode(1)}).serialize() == "{\na=1;\n}"


def test_nested_map_is_indented():
    root = _root(m=MapNode({"x": IntegerNode(2)}))
    assert root.serialize() == "m={\n  x=2;\n};\n"


def test_empty_root_map_serializes_to_nothing():
    assert len(_root().serialize()) == 0


def test_array_value_is_embedded():
    arr = ArrayNode([IntegerNode(1), IntegerNode(2)])
    root = _root(k=arr)
    assert root.serialize() == "k=" + arr.serialize() + ";\n"


def test_node_type_is_map():
    assert MapNode().node_type is NodeType.MAP


def test_create_new_is_empty_non_root():
    root = _root(a=IntegerNode(1))
    fresh = root.create_new()
    assert len(fresh) == 0
    assert fresh.is_root_map is False


def test_equality_by_value():
    assert MapNode({"a": IntegerNode(1)}) == MapNode({"a": IntegerNode(1)})
    assert not (
        MapNode({"a": IntegerNode(1)}) == MapNode({"a": IntegerNode(1, HEXADECIMAL)})
    )
    assert not (MapNode({"a": IntegerNode(1)}) == MapNode({"a": FloatNode(1.0)}))


def test_clone_is_independent():
    original = MapNode({"inner": MapNode({"x": IntegerNode(3)})})
    copy = original.clone()
    assert copy == original
    copy["inner"]["x"] = IntegerNode(4)
    assert original["inner"]["x"] == IntegerNode(3)
    assert copy["inner"] is not original["inner"]


def test_clone_keeps_root_flag():
    root = _root(a=IntegerNode(1))
    assert root.clone().is_root_map is True
    assert root.clone().serialize() == root.serialize()


def test_to_dict_returns_plain_dict_of_clones():
    child = IntegerNode(5)
    node = MapNode({"a": child})
    plain = node.to_dict()
    assert type(plain) is dict
    assert plain == {"a": IntegerNode(5)}
    assert plain["a"] is not child


def test_write_matches_serialize():
    node = MapNode({"a": IntegerNode(1), "b": FloatNode(2.5)})
    out = io.StringIO()
    returned = node.write(out, 1)
    assert returned is out
    assert out.getvalue() == node.serialize(1)


def test_str_matches_serialize():
    node = _root(a=IntegerNode(7))
    assert str(node) == node.serialize()