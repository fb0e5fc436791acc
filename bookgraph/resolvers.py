from . import core, schema
from .logging import get_logger
from .representations import FieldError


logger = get_logger(__name__)


def create_object_builder(object_query):
    def default_field_resolver(field):
        def resolve(value):
            raise core.GraphError("Resolver missing for field {}".format(field.name))

        return resolve

    field_resolvers = [
        [field_query, default_field_resolver(field_query.field)]
        for field_query in object_query.field_queries
    ]

    def create_object(value):
        return object_query.create_object({
            field_query.key: _resolve_field(field_query, resolve_field, value)
            for field_query, resolve_field in field_resolvers
        })

    def field_resolver(field):
        def add_field_resolver(build_field_resolver):
            for entry in field_resolvers:
                field_query = entry[0]
                if field_query.field == field or field_query.field.name == field:
                    entry[1] = build_field_resolver(field_query)

            return build_field_resolver

        return add_field_resolver

    def getter(field):
        def add_field_resolver(resolve_field):
            field_resolver(field)(lambda field_query: resolve_field)
            return resolve_field

        return add_field_resolver

    def attr(field, attr_name):
        getter(field)(lambda value: getattr(value, attr_name))

    create_object.field = field_resolver
    create_object.getter = getter
    create_object.attr = attr

    if isinstance(object_query.type, schema.ObjectType):
        @getter(schema.typename_field)
        def resolve_typename(_):
            return object_query.type.name

    return create_object


def _resolve_field(field_query, resolve_field, value):
    try:
        return resolve_field(value)
    except Exception as error:
        logger.warning(
            "Field resolver failed",
            field=field_query.field.name,
            key=field_query.key,
            exc_info=True,
        )
        return FieldError(field_query.field.name, error)


def build_result(type_query, values, build_object):
    """
    Shape records into the result expected by ``type_query``.

    Lists build every value in order; nullable queries build the first value
    or return ``None``; anything else requires exactly one value.
    """
    if isinstance(type_query, schema.ListQuery):
        return [build_object(value) for value in values]

    values = list(values)
    if isinstance(type_query, schema.NullableQuery):
        if values:
            return build_object(values[0])
        else:
            return None
    elif len(values) == 1:
        return build_object(values[0])
    else:
        raise core.GraphError("expected exactly one value but got {}".format(len(values)))


def root_object_resolver(type):
    field_handlers = {}

    @core.resolver(type)
    @core.dependencies(injector=core.Injector)
    def resolve_root(graph, query, *, injector):
        build_object = create_object_builder(query)

        for field in field_handlers:
            @build_object.field(field)
            def resolve_field(field_query):
                handle = field_handlers[field_query.field]
                return lambda _: injector.call_with_dependencies(
                    handle,
                    graph,
                    field_query.type_query,
                    field_query.args,
                )

        return build_object(None)

    def field(field):
        def add_handler(handle):
            field_handlers[field] = handle
            return handle

        return add_handler

    resolve_root.field = field

    return resolve_root
