from graphql import ExecutionResult, GraphQLError
from graphql import execute as graphql_execute

from .. import schema as graph_schema
from ..core import GraphError
from ..logging import get_logger
from ..representations import FieldError
from . import parser
from .schema import create_graphql_schema


logger = get_logger(__name__)


def execute(document_text, *, graph, query_type, mutation_type=None, variables=None, operation_name=None):
    return executor(
        query_type=query_type,
        mutation_type=mutation_type,
    )(document_text, graph=graph, variables=variables, operation_name=operation_name)


def executor(*, query_type, mutation_type=None):
    graphql_schema = create_graphql_schema(query_type=query_type, mutation_type=mutation_type)

    def execute(document_text, *, graph, variables=None, operation_name=None):
        try:
            query = parser.document_text_to_query(
                document_text=document_text,
                graphql_schema=graphql_schema,
                variables=variables,
                operation_name=operation_name,
            )
        except parser.DocumentError as error:
            return _rejected(error.errors)
        except GraphQLError as error:
            return _rejected([error])
        except GraphError as error:
            return _rejected([GraphQLError(str(error), original_error=error)])

        errors = []

        if query.graph_query is None:
            data = {}
        else:
            try:
                result = graph.resolve(query.graph_query)
            except GraphError as error:
                logger.warning("Graph resolution failed", exc_info=True)
                return ExecutionResult(data=None, errors=[GraphQLError(str(error), original_error=error)])

            data = complete_result(result, query.graph_query, errors)

        if query.graphql_schema_document is not None:
            schema_result = graphql_execute(
                graphql_schema.graphql_schema,
                query.graphql_schema_document,
                variable_values=query.variables,
            )
            errors.extend(schema_result.errors or ())
            if data is not None and schema_result.data is not None:
                data = dict(data)
                data.update(schema_result.data)

        return ExecutionResult(data=data, errors=errors or None)

    return execute


def _rejected(errors):
    logger.info("Document rejected", errors=[error.message for error in errors])
    return ExecutionResult(data=None, errors=errors)


class _NullPropagation(Exception):
    pass


def complete_result(result, query, errors):
    """
    Convert a resolved result into JSON-shaped data.

    Fields that failed to resolve become ``None`` and add an error located
    at their response path to ``errors``. A ``None`` in a non-null position
    nulls the nearest nullable ancestor; if there is none, the data as a
    whole is ``None``.
    """
    try:
        return _complete_value(result, query, [], errors)
    except _NullPropagation:
        return None


def _complete_value(value, type_query, path, errors):
    if isinstance(type_query, graph_schema.NullableQuery):
        if value is None:
            return None

        try:
            return _complete_value(value, type_query.element_query, path, errors)
        except _NullPropagation:
            return None

    elif value is None:
        errors.append(GraphQLError(
            "Cannot return null for non-nullable field {}.".format(_describe_path(path)),
            path=path,
        ))
        raise _NullPropagation()

    elif isinstance(type_query, graph_schema.ListQuery):
        return [
            _complete_value(element, type_query.element_query, path + [index], errors)
            for index, element in enumerate(value)
        ]

    elif isinstance(type_query, graph_schema.ObjectQuery):
        return {
            field_query.key: _complete_field(field_query, value[field_query.key], path + [field_query.key], errors)
            for field_query in type_query.field_queries
        }

    else:
        return value


def _complete_field(field_query, value, path, errors):
    if isinstance(value, FieldError):
        errors.append(GraphQLError(value.message, path=path, original_error=value.error))
        if isinstance(field_query.type_query, graph_schema.NullableQuery):
            return None
        else:
            raise _NullPropagation()

    return _complete_value(value, field_query.type_query, path, errors)


def _describe_path(path):
    return ".".join(str(element) for element in path)
