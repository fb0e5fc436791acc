from .core import create_graph, dependencies, define_graph, GraphError, resolver
from .representations import FieldError, Object
from .resolvers import build_result, create_object_builder, root_object_resolver
from .schema import (
    field,
    Int,
    key,
    ListType,
    NullableType,
    ObjectType,
    param,
    String,
)


__all__ = [
    "create_graph",
    "dependencies",
    "define_graph",
    "GraphError",
    "resolver",

    "build_result",
    "create_object_builder",
    "root_object_resolver",

    "FieldError",
    "Object",

    "field",
    "Int",
    "key",
    "ListType",
    "NullableType",
    "ObjectType",
    "param",
    "String",
]
