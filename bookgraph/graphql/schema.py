import graphql

from .. import schema
from .naming import snake_case_to_camel_case


class Schema(object):
    def __init__(self, query_type, mutation_type, graphql_schema):
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.graphql_schema = graphql_schema

    def root_type(self, operation_type):
        if operation_type == graphql.OperationType.QUERY:
            return self.query_type
        elif operation_type == graphql.OperationType.MUTATION:
            return self.mutation_type
        else:
            return None


_scalar_types = {
    schema.Boolean: graphql.GraphQLBoolean,
    schema.Int: graphql.GraphQLInt,
    schema.String: graphql.GraphQLString,
}


def create_graphql_schema(query_type, mutation_type=None):
    graphql_types = {}

    def to_graphql_type(graph_type):
        if graph_type not in graphql_types:
            graphql_types[graph_type] = generate_graphql_type(graph_type)

        return graphql_types[graph_type]

    def generate_graphql_type(graph_type):
        if graph_type in _scalar_types:
            return graphql.GraphQLNonNull(_scalar_types[graph_type])

        elif isinstance(graph_type, schema.ListType):
            return graphql.GraphQLNonNull(graphql.GraphQLList(to_graphql_type(graph_type.element_type)))

        elif isinstance(graph_type, schema.NullableType):
            return to_graphql_type(graph_type.element_type).of_type

        elif isinstance(graph_type, schema.ObjectType):
            return graphql.GraphQLNonNull(graphql.GraphQLObjectType(
                name=graph_type.name,
                fields=lambda: {
                    snake_case_to_camel_case(field.name): to_graphql_field(field)
                    for field in graph_type.fields
                },
                description=graph_type.description,
            ))

        else:
            raise ValueError("unsupported type: {}".format(graph_type))

    def to_graphql_field(graph_field):
        return graphql.GraphQLField(
            type_=to_graphql_type(graph_field.type),
            args={
                snake_case_to_camel_case(param.name): to_graphql_argument(param)
                for param in graph_field.params
            },
            description=graph_field.description,
        )

    def to_graphql_argument(param):
        graphql_type = to_graphql_type(param.type)

        if param.has_default and isinstance(graphql_type, graphql.GraphQLNonNull):
            graphql_type = graphql_type.of_type

        return graphql.GraphQLArgument(type_=graphql_type)

    graphql_query_type = to_graphql_type(query_type).of_type
    if mutation_type is None:
        graphql_mutation_type = None
    else:
        graphql_mutation_type = to_graphql_type(mutation_type).of_type

    return Schema(
        query_type=query_type,
        mutation_type=mutation_type,
        graphql_schema=graphql.GraphQLSchema(
            query=graphql_query_type,
            mutation=graphql_mutation_type,
        ),
    )
