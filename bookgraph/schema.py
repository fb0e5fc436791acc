from functools import reduce

from .core import GraphError
from .representations import Object


_undefined = object()


class ScalarType(object):
    def __init__(self, name, coerce):
        self.name = name
        self._coerce = coerce

    def __call__(self):
        return ScalarQuery(self)

    def __repr__(self):
        return "ScalarType(name={!r})".format(self.name)

    def __str__(self):
        return self.name

    def coerce(self, value):
        return self._coerce(value)


def _scalar_coercer(python_type, name):
    def coerce(value):
        # bool is a subclass of int, but never a valid Int
        if isinstance(value, python_type) and not (python_type is int and isinstance(value, bool)):
            return value
        else:
            raise GraphError("cannot coerce {!r} to {}".format(value, name))

    return coerce


Boolean = ScalarType("Boolean", coerce=_scalar_coercer(bool, "Boolean"))
Int = ScalarType("Int", coerce=_scalar_coercer(int, "Int"))
String = ScalarType("String", coerce=_scalar_coercer(str, "String"))


class ScalarQuery(object):
    def __init__(self, type):
        self.type = type

    def for_type(self, target_type):
        if self.type == target_type:
            return self
        else:
            raise _query_coercion_error(self.type, target_type)

    def __add__(self, other):
        if not isinstance(other, ScalarQuery):
            return NotImplemented
        elif self.type != other.type:
            raise TypeError("cannot merge queries for scalars {} and {}".format(self.type, other.type))
        else:
            return self

    def __repr__(self):
        return "ScalarQuery(type={})".format(self.type)


class _WrapperType(object):
    _query_class = None

    def __init__(self, element_type):
        self.element_type = element_type

    def __call__(self, *args, **kwargs):
        return self._query_class(self, self.element_type(*args, **kwargs))

    def query(self, *args, **kwargs):
        return self._query_class(self, self.element_type.query(*args, **kwargs))

    def __eq__(self, other):
        if type(other) is type(self):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((type(self), self.element_type))


class _WrapperQuery(object):
    def __init__(self, type, element_query):
        self.type = type
        self.element_query = element_query

    def for_type(self, target_type):
        if type(target_type) is type(self.type):
            return type(self)(target_type, self.element_query.for_type(target_type.element_type))
        else:
            raise _query_coercion_error(self.type, target_type)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        elif self.type != other.type:
            raise TypeError("cannot merge queries for {} and {}".format(self.type, other.type))
        else:
            return type(self)(self.type, self.element_query + other.element_query)

    def __repr__(self):
        return "{}(type={}, element_query={!r})".format(type(self).__name__, self.type, self.element_query)


class ListQuery(_WrapperQuery):
    pass


class NullableQuery(_WrapperQuery):
    pass


class ListType(_WrapperType):
    _query_class = ListQuery

    def __repr__(self):
        return "ListType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "List({})".format(self.element_type)

    def coerce(self, value):
        return [self.element_type.coerce(element) for element in value]


class NullableType(_WrapperType):
    _query_class = NullableQuery

    def __repr__(self):
        return "NullableType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "Nullable({})".format(self.element_type)

    def coerce(self, value):
        if value is None:
            return None
        else:
            return self.element_type.coerce(value)


class ObjectType(object):
    """
    An object type whose fields may be given as a callable.

    The callable is evaluated the first time the fields are used, so two
    types can refer to each other regardless of declaration order.
    """

    def __init__(self, name, fields, description=None):
        self.name = name
        self.description = description
        if callable(fields):
            get_fields = fields
        else:
            get_fields = lambda: fields

        self.fields = Fields(name, lambda: tuple(
            field.with_owner_type(self)
            for field in get_fields()
        ))

    def __call__(self, *field_queries):
        return ObjectQuery(self, field_queries=field_queries)

    def query(self, *, field_queries, create_object):
        return ObjectQuery(self, field_queries=field_queries, create_object=create_object)

    def __repr__(self):
        return "ObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class Fields(object):
    def __init__(self, type_name, get_fields):
        self._type_name = type_name
        self._get_fields = get_fields
        self._fields = None

    def _all(self):
        if self._fields is None:
            self._fields = self._get_fields()
        return self._fields

    def __iter__(self):
        return iter(self._all())

    def __contains__(self, field):
        return field in self._all()

    def __getattr__(self, field_name):
        if field_name.startswith("__"):
            raise AttributeError(field_name)

        for field in self._all():
            if field.name == field_name:
                return field

        raise GraphError("{} has no field {}".format(self._type_name, field_name))


class ObjectQuery(object):
    def __init__(self, type, field_queries, *, create_object=Object):
        self.type = type
        self.field_queries = tuple(field_queries)
        self.create_object = create_object

    def __add__(self, other):
        if not isinstance(other, ObjectQuery):
            return NotImplemented

        assert self.type == other.type

        merged = {}
        for field_query in self.field_queries + other.field_queries:
            merge_key = (field_query.key, field_query.field)
            if merge_key in merged:
                merged[merge_key] = merged[merge_key] + field_query
            else:
                merged[merge_key] = field_query

        return ObjectQuery(
            self.type,
            field_queries=merged.values(),
            create_object=self.create_object,
        )

    def for_type(self, target_type):
        if self.type == target_type:
            return self
        else:
            raise _query_coercion_error(self.type, target_type)

    def __repr__(self):
        return "ObjectQuery(type={}, field_queries={!r})".format(self.type, self.field_queries)


def field(name, type, params=None, description=None):
    if params is None:
        params = ()
    return Field(owner_type=None, name=name, type=type, params=params, description=description)


class Field(object):
    def __init__(self, owner_type, name, type, params, description=None):
        self.owner_type = owner_type
        self.name = name
        self.type = type
        self.params = Params(name, params)
        self.description = description

    def with_owner_type(self, owner_type):
        return Field(
            owner_type=owner_type,
            name=self.name,
            type=self.type,
            params=tuple(self.params),
            description=self.description,
        )

    def __call__(self, *args):
        field_queries = [arg for arg in args if isinstance(arg, FieldQuery)]
        field_args = [arg for arg in args if isinstance(arg, Argument)]
        if len(field_queries) + len(field_args) != len(args):
            raise GraphError("field {} accepts only field queries and arguments".format(self.name))

        return self.query(key=self.name, type_query=self.type(*field_queries), args=field_args)

    def query(self, args, key, type_query):
        explicit_args = {
            arg.parameter.name: arg.value
            for arg in args
        }

        def get_arg(param):
            value = explicit_args.get(param.name, param.default)
            if value is _undefined:
                raise GraphError("field {} is missing required argument {}".format(self.name, param.name))
            else:
                return value

        field_args = Object({
            param.name: get_arg(param)
            for param in self.params
        })

        return FieldQuery(key=key, field=self, type_query=type_query.for_type(self.type), args=field_args)

    def __repr__(self):
        return "Field(name={!r}, type={!r})".format(self.name, self.type)


class Params(object):
    def __init__(self, field_name, params):
        self._field_name = field_name
        self._params = tuple(params)

    def __iter__(self):
        return iter(self._params)

    def __getattr__(self, param_name):
        if param_name.startswith("__"):
            raise AttributeError(param_name)

        for param in self._params:
            if param.name == param_name:
                return param

        raise GraphError("{} has no param {}".format(self._field_name, param_name))


class FieldQuery(object):
    def __init__(self, key, field, type_query, args):
        self.key = key
        self.field = field
        self.type_query = type_query
        self.args = args

    def __add__(self, other):
        if not isinstance(other, FieldQuery):
            return NotImplemented

        if self.args != other.args:
            raise GraphError("field {} is selected as {} with different arguments".format(
                self.field.name,
                self.key,
            ))

        return FieldQuery(
            key=self.key,
            field=self.field,
            type_query=self.type_query + other.type_query,
            args=self.args,
        )

    def __repr__(self):
        return "FieldQuery(key={!r}, field={!r})".format(self.key, self.field)


def key(key, field_query):
    return FieldQuery(
        key=key,
        field=field_query.field,
        type_query=field_query.type_query,
        args=field_query.args,
    )


def param(name, type, default=_undefined):
    return Parameter(name=name, type=type, default=default)


class Parameter(object):
    def __init__(self, name, type, default):
        self.name = name
        self.type = type
        self.default = default

    @property
    def has_default(self):
        return self.default is not _undefined

    def __call__(self, value):
        return Argument(parameter=self, value=self.type.coerce(value))

    def __repr__(self):
        return "Parameter(name={!r}, type={!r})".format(self.name, self.type)


class Argument(object):
    def __init__(self, parameter, value):
        self.parameter = parameter
        self.value = value


typename_field = field("type_name", type=String)


def to_element_type(graph_type):
    while isinstance(graph_type, (ListType, NullableType)):
        graph_type = graph_type.element_type
    return graph_type


def to_element_query(type_query):
    while isinstance(type_query, (ListQuery, NullableQuery)):
        type_query = type_query.element_query
    return type_query


def merge_queries(queries):
    return reduce(lambda left, right: left + right, queries)


def _query_coercion_error(source_type, target_type):
    return TypeError("cannot coerce query for {} to query for {}".format(source_type, target_type))
