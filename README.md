# cfgtree

`cfgtree` holds configuration values as a tree of typed nodes and writes that
tree out as configuration text. It also provides RGB and RGBA colours with
hexadecimal text conversion.

## Nodes

Every value in the tree is a `Node` (`cfgtree.node`). Its `node_type` property
gives a `NodeType` from `cfgtree.node_types`. `node_type_to_str` returns the
lower-case name of a type, such as `"integer"`, and returns `"null"` for
anything that is not a `NodeType`.

The node classes are:

- `FloatNode` (`cfgtree.float_node`) holds a float in `value`. It serializes
  in fixed notation with six decimal places, so `FloatNode(1.5)` becomes
  `1.500000`.
- `IntegerNode` (`cfgtree.integer_node`) holds an integer in `value` and the
  `NumeralSystem` it is written in in `num_sys`. Setting a value outside the
  signed 64-bit range raises `OverflowError`, and setting a value that is not
  an int raises `TypeError`. The numeral systems are `DECIMAL`, `BINARY`,
  `OCTAL` and `HEXADECIMAL` from `cfgtree.numeral_system`. A decimal value is
  written plainly. The other systems are written with the prefix `0b`, `0o`
  or `0x`. Two integer nodes are equal when both their value and their
  numeral system match.
- `ArrayNode` (`cfgtree.array_node`) is a `list` of nodes. It serializes as
  `[a,b,c]`.
- `MapNode` (`cfgtree.map_node`) is a `dict` from names to nodes. Each entry
  is written as `key=value;` on its own line, indented two spaces for each
  level of `indent_level`. The map is wrapped in `{` and `}` unless its
  `is_root_map` attribute is true.

Every node has these methods:

- `create_new()` returns a default-valued node of the same kind.
- `clone()` returns an independent deep copy.
- `serialize(indent_level=0)` returns the node's text. `str(node)` returns the
  same text.
- `write(out, indent_level=0)` writes that text to a text stream and returns
  the stream.

Arrays and maps compare equal when the nodes they hold are equal.
`ArrayNode.to_list()` returns a plain list of cloned elements.
`MapNode.to_dict()` returns a plain dict of cloned values.

```python
from cfgtree.array_node import ArrayNode
from cfgtree.integer_node import IntegerNode
from cfgtree.map_node import MapNode
from cfgtree.numeral_system import HEXADECIMAL

root = MapNode(size=IntegerNode(255, HEXADECIMAL),
               list=ArrayNode([IntegerNode(1), IntegerNode(2)]))
root.is_root_map = True
print(root.serialize())
# size=0xff;
# list=[1,2];
```

## Colours

`cfgtree.color` provides the frozen dataclasses `Rgb` and `Rgba`. Each
channel must be an int in the range 0 to 255. The alpha channel of an `Rgba`
defaults to 255. Adding two colours of the same type adds them channel by
channel with `add_channels`, which saturates at 255.

- `from_string(text, color_type=Rgb, flags=FromStringFlags.NONE)` reads
  `rrggbb`, or `rrggbbaa` for `Rgba`. The text may start with `#`. It returns
  `None` if the text is malformed. The `FromStringFlags` options are:
  - `NO_PREFIX` does not accept the `#`.
  - `LEADING_WHITESPACE` skips leading spaces and tabs.
  - `TRAILING_CHARS` allows text after the colour.
- `to_string(color, flags=ToStringFlags.NONE)` writes lower-case hexadecimal
  with a leading `#`. The `ToStringFlags` options are:
  - `NO_PREFIX` leaves out the `#`.
  - `CAP_DIGITS` writes upper-case digits.
- `to_string_length(color_type, flags)` returns the length of the text that
  `to_string` produces.
- `convert(color, target)` converts between `Rgb` and `Rgba`. A colour
  converted to `Rgba` is fully opaque.

Passing a colour type other than `Rgb` or `Rgba` raises `TypeError`.

```python
from cfgtree.color import Rgb, Rgba, ToStringFlags, from_string, to_string

colour = from_string("#ff8000", Rgb)
print(to_string(colour))                             # #ff8000
print(to_string(Rgba(1, 2, 3), ToStringFlags.CAP_DIGITS))  # #010203FF
```

## Supporting modules

`cfgtree.error_messages` defines `ErrorMessage`, a frozen pair of a category
path and a message. It has one constant for each syntax error of the
configuration format, such as `ERR_MSG_1_9_5` ("duplicate name in scope").

`cfgtree.constants` holds the characters the configuration syntax is built
from, and the format `VERSION`.

## What it does not do

`cfgtree` does not read configuration text. It has no parser, and it does not
process `@include` or `@version` directives. Trees are built in code and can
only be written out. There is also no string node: `NodeType.STRING` exists,
but no node class holds string values.

## Tests

```
pip install .[test]
pytest
```