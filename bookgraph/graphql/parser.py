from copy import copy

from graphql import GraphQLError, parse, validate
from graphql.execution.values import get_argument_values, get_variable_values
from graphql.language import ast as graphql_ast
from graphql.type.directives import GraphQLIncludeDirective, GraphQLSkipDirective

from .. import schema
from .naming import snake_case_to_camel_case


_introspection_fields = frozenset(["__schema", "__type"])


class DocumentError(Exception):
    def __init__(self, errors):
        super().__init__("; ".join(error.message for error in errors))
        self.errors = list(errors)


class GraphQLQuery(object):
    def __init__(self, graph_query, graphql_schema_document, variables):
        self.graph_query = graph_query
        self.graphql_schema_document = graphql_schema_document
        self.variables = variables


def document_text_to_query(document_text, graphql_schema, variables=None, operation_name=None):
    if variables is None:
        variables = {}

    document_ast = parse(document_text)

    validation_errors = validate(graphql_schema.graphql_schema, document_ast)
    if validation_errors:
        raise DocumentError(validation_errors)

    operation = _find_operation(document_ast, operation_name)

    root_type = graphql_schema.root_type(operation.operation)
    if root_type is None:
        raise GraphQLError(
            "unsupported operation: {}".format(operation.operation.value),
            nodes=[operation],
        )

    coerced_variables = get_variable_values(
        graphql_schema.graphql_schema,
        operation.variable_definitions or [],
        variables,
    )
    if isinstance(coerced_variables, list):
        raise DocumentError(coerced_variables)

    fragments = {
        definition.name.value: definition
        for definition in document_ast.definitions
        if isinstance(definition, graphql_ast.FragmentDefinitionNode)
    }

    introspection_selections, data_selections = _split_introspection_selections(
        operation.selection_set.selections,
        fragments=fragments,
    )

    if introspection_selections:
        introspection_operation = _copy_with(
            operation,
            selection_set=_copy_with(operation.selection_set, selections=tuple(introspection_selections)),
        )
        graphql_schema_document = _copy_with(
            document_ast,
            definitions=tuple(
                introspection_operation if definition is operation else definition
                for definition in document_ast.definitions
                if definition is operation or not isinstance(definition, graphql_ast.OperationDefinitionNode)
            ),
        )
    else:
        graphql_schema_document = None

    if data_selections:
        parser = Parser(fragments=fragments, variables=coerced_variables)
        graph_query = parser.read_selection_set(
            _copy_with(operation.selection_set, selections=tuple(data_selections)),
            graph_type=root_type,
        )
    else:
        graph_query = None

    return GraphQLQuery(
        graph_query,
        graphql_schema_document=graphql_schema_document,
        variables=coerced_variables,
    )


def _find_operation(document_ast, operation_name):
    operations = [
        definition
        for definition in document_ast.definitions
        if isinstance(definition, graphql_ast.OperationDefinitionNode)
    ]

    if operation_name is None:
        if len(operations) == 1:
            return operations[0]
        else:
            raise GraphQLError("Must provide operation name if query contains multiple operations.")

    for operation in operations:
        if operation.name is not None and operation.name.value == operation_name:
            return operation

    raise GraphQLError("Unknown operation named '{}'.".format(operation_name))


def _split_introspection_selections(selections, fragments):
    introspection_selections = []
    data_selections = []

    for selection in selections:
        if isinstance(selection, graphql_ast.FieldNode):
            if selection.name.value in _introspection_fields:
                introspection_selections.append(selection)
            else:
                data_selections.append(selection)

        else:
            if isinstance(selection, graphql_ast.FragmentSpreadNode):
                fragment = fragments[selection.name.value]
                selection = graphql_ast.InlineFragmentNode(
                    type_condition=fragment.type_condition,
                    directives=selection.directives,
                    selection_set=fragment.selection_set,
                )

            fragment_introspection_selections, fragment_data_selections = _split_introspection_selections(
                selection.selection_set.selections,
                fragments=fragments,
            )
            if fragment_introspection_selections:
                introspection_selections.append(_with_selections(selection, fragment_introspection_selections))
            if fragment_data_selections:
                data_selections.append(_with_selections(selection, fragment_data_selections))

    return introspection_selections, data_selections


def _with_selections(node, selections):
    return _copy_with(node, selection_set=_copy_with(node.selection_set, selections=tuple(selections)))


class Parser(object):
    def __init__(self, fragments, variables):
        self._fragments = fragments
        self._variables = variables

    def read_selection_set(self, selection_set, graph_type):
        if selection_set is None:
            return graph_type()
        else:
            return schema.merge_queries(
                self._read_graphql_selection(selection, graph_type=graph_type)
                for selection in selection_set.selections
            )

    def _read_graphql_selection(self, selection, graph_type):
        if not self._should_include_selection(selection):
            return graph_type.query(field_queries=(), create_object=_create_object)

        elif isinstance(selection, graphql_ast.FieldNode):
            field_query = self._read_graphql_field(selection, graph_type=graph_type)
            return graph_type.query(field_queries=(field_query, ), create_object=_create_object)

        elif isinstance(selection, graphql_ast.InlineFragmentNode):
            return self.read_selection_set(selection.selection_set, graph_type=graph_type)

        elif isinstance(selection, graphql_ast.FragmentSpreadNode):
            fragment = self._fragments[selection.name.value]
            return self.read_selection_set(fragment.selection_set, graph_type=graph_type)

        else:
            raise GraphQLError("Unhandled selection type: {}".format(type(selection).__name__), nodes=[selection])

    def _should_include_selection(self, selection):
        for directive in selection.directives:
            name = directive.name.value
            if name == "include":
                args = get_argument_values(GraphQLIncludeDirective, directive, self._variables)
                if args.get("if") is False:
                    return False

            elif name == "skip":
                args = get_argument_values(GraphQLSkipDirective, directive, self._variables)
                if args.get("if") is True:
                    return False

            else:
                raise GraphQLError("unknown directive: {}".format(name), nodes=[directive])

        return True

    def _read_graphql_field(self, graphql_field, graph_type):
        key = _field_key(graphql_field)
        field = self._get_field(graph_type, graphql_field.name.value)

        def get_arg(arg):
            param = _lookup_camel_case_name(field.params, arg.name.value)
            value = self._convert_graphql_value(self._read_graphql_value(arg.value), value_type=param.type)
            return param(value)

        args = [
            get_arg(arg)
            for arg in graphql_field.arguments
            if not self._is_missing_variable(arg.value)
        ]
        type_query = self.read_selection_set(graphql_field.selection_set, graph_type=field.type)
        return field.query(key=key, args=args, type_query=type_query)

    def _get_field(self, graph_type, field_name):
        if field_name == "__typename":
            return schema.typename_field
        else:
            return _lookup_camel_case_name(schema.to_element_type(graph_type).fields, field_name)

    def _is_missing_variable(self, value):
        return isinstance(value, graphql_ast.VariableNode) and value.name.value not in self._variables

    def _convert_graphql_value(self, graphql_value, value_type):
        if isinstance(value_type, schema.NullableType):
            if graphql_value is None:
                return None
            else:
                return self._convert_graphql_value(graphql_value, value_type=value_type.element_type)

        elif isinstance(value_type, schema.ListType):
            return [
                self._convert_graphql_value(element, value_type=value_type.element_type)
                for element in graphql_value
            ]

        else:
            return graphql_value

    def _read_graphql_value(self, value):
        if isinstance(value, (graphql_ast.BooleanValueNode, graphql_ast.StringValueNode, graphql_ast.EnumValueNode)):
            return value.value
        elif isinstance(value, graphql_ast.IntValueNode):
            return int(value.value)
        elif isinstance(value, graphql_ast.FloatValueNode):
            return float(value.value)
        elif isinstance(value, graphql_ast.NullValueNode):
            return None
        elif isinstance(value, graphql_ast.ListValueNode):
            return [
                self._read_graphql_value(element)
                for element in value.values
            ]
        elif isinstance(value, graphql_ast.VariableNode):
            return self._variables[value.name.value]
        else:
            raise GraphQLError("unhandled value: {}".format(type(value).__name__), nodes=[value])


def _lookup_camel_case_name(collection, camel_case_name):
    for element in collection:
        if snake_case_to_camel_case(element.name) == camel_case_name:
            return element

    raise GraphQLError("unknown name: {}".format(camel_case_name))


def _field_key(selection):
    if selection.alias is None:
        return selection.name.value
    else:
        return selection.alias.value


def _copy_with(obj, **kwargs):
    result = copy(obj)
    for key, value in kwargs.items():
        setattr(result, key, value)
    return result


def _create_object(value):
    return value
