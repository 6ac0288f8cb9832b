"""Tree subpackage for the JSON AST.

Re-exports the public API for the tree module:
- Null, Boolean, Number, String, Object, Array: the six node classes
- Field: key/value pair inside an Object
- Node: union of the six node classes
- NodeType: StrEnum of the JSON type names
- to_python / from_python / dumps: conversion to and from plain values and text
"""

from lenient_json.tree.convert import JsonValue, dumps, from_python, to_python
from lenient_json.tree.nodes import (
    Array,
    Boolean,
    Field,
    Node,
    NodeType,
    Null,
    Number,
    Object,
    String,
)

__all__ = [
    "Array",
    "Boolean",
    "Field",
    "JsonValue",
    "Node",
    "NodeType",
    "Null",
    "Number",
    "Object",
    "String",
    "dumps",
    "from_python",
    "to_python",
]
