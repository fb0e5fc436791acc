import graphql
from precisely import all_of, anything, assert_that, equal_to, has_attrs, is_instance, is_mapping

import bookgraph as g
from bookgraph.graphql.naming import snake_case_to_camel_case
from bookgraph.graphql.schema import create_graphql_schema
from bookgraph.schema import Boolean


def test_boolean_is_converted_to_non_null_graphql_boolean():
    assert_that(to_graphql_type(Boolean), is_graphql_non_null(is_graphql_boolean))


def test_int_is_converted_to_non_null_graphql_int():
    assert_that(to_graphql_type(g.Int), is_graphql_non_null(is_graphql_int))


def test_string_is_converted_to_non_null_graphql_string():
    assert_that(to_graphql_type(g.String), is_graphql_non_null(is_graphql_string))


def test_list_type_is_converted_to_non_null_list_type():
    assert_that(to_graphql_type(g.ListType(g.Int)), is_graphql_non_null(
        is_graphql_list(is_graphql_non_null(is_graphql_int)),
    ))


def test_nullable_type_is_converted_to_graphql_type_without_non_null():
    assert_that(to_graphql_type(g.NullableType(g.Int)), is_graphql_int)


def test_object_type_is_converted_to_non_null_graphql_object_type():
    graph_type = g.ObjectType("Obj", description="An object", fields=(
        g.field("value", type=g.String, description="The value"),
    ))

    assert_that(to_graphql_type(graph_type), is_graphql_non_null(
        is_graphql_object_type(
            name="Obj",
            description="An object",
            fields=is_mapping({
                "value": is_graphql_field(type=is_graphql_non_null(is_graphql_string), description="The value"),
            }),
        ),
    ))


def test_object_types_referring_to_each_other_are_converted():
    Author = g.ObjectType("Author", fields=lambda: (
        g.field("books", type=g.ListType(Book)),
    ))
    Book = g.ObjectType("Book", fields=lambda: (
        g.field("author", type=g.NullableType(Author)),
    ))

    graphql_book = to_graphql_type(Book).of_type
    graphql_author = graphql_book.fields["author"].type

    assert_that(graphql_author, is_graphql_object_type(name="Author"))
    assert_that(graphql_author.fields["books"].type.of_type.of_type.of_type, equal_to(graphql_book))


def test_field_and_param_names_are_converted_to_camel_case():
    graph_type = g.ObjectType("Obj", fields=(
        g.field("add_book", type=g.String, params=(
            g.param("author_id", type=g.Int),
        )),
    ))

    assert_that(to_graphql_type(graph_type), is_graphql_non_null(
        is_graphql_object_type(fields=is_mapping({
            "addBook": is_graphql_field(args=is_mapping({
                "authorId": is_graphql_argument(type=is_graphql_non_null(is_graphql_int)),
            })),
        })),
    ))


def test_params_with_defaults_are_optional():
    graph_type = g.ObjectType("Obj", fields=(
        g.field("book", type=g.String, params=(
            g.param("id", type=g.Int, default=1),
        )),
    ))

    graphql_field = to_graphql_type(graph_type).of_type.fields["book"]

    assert_that(graphql_field.args["id"], is_graphql_argument(type=is_graphql_int))


def test_schema_has_query_and_mutation_types():
    Query = g.ObjectType("Query", fields=(g.field("value", type=g.Int), ))
    Mutation = g.ObjectType("Mutation", fields=(g.field("set_value", type=g.Int), ))

    schema = create_graphql_schema(query_type=Query, mutation_type=Mutation)

    assert_that(schema.graphql_schema, has_attrs(
        query_type=is_graphql_object_type(name="Query"),
        mutation_type=is_graphql_object_type(name="Mutation"),
    ))


def test_schema_without_mutation_type_has_no_graphql_mutation_type():
    Query = g.ObjectType("Query", fields=(g.field("value", type=g.Int), ))

    schema = create_graphql_schema(query_type=Query)

    assert_that(schema.graphql_schema.mutation_type, equal_to(None))


def test_snake_case_is_converted_to_camel_case():
    assert_that(snake_case_to_camel_case("author_id"), equal_to("authorId"))
    assert_that(snake_case_to_camel_case("add_book"), equal_to("addBook"))
    assert_that(snake_case_to_camel_case("name"), equal_to("name"))
    assert_that(snake_case_to_camel_case("class_"), equal_to("class"))


def to_graphql_type(graph_type):
    root_type = g.ObjectType("Root", fields=(
        g.field("value", type=graph_type),
    ))
    graphql_schema = create_graphql_schema(query_type=root_type).graphql_schema
    return graphql_schema.query_type.fields["value"].type


is_graphql_boolean = equal_to(graphql.GraphQLBoolean)

is_graphql_int = equal_to(graphql.GraphQLInt)

is_graphql_string = equal_to(graphql.GraphQLString)


def is_graphql_list(element_matcher):
    return all_of(
        is_instance(graphql.GraphQLList),
        has_attrs(of_type=element_matcher),
    )


def is_graphql_non_null(element_matcher):
    return all_of(
        is_instance(graphql.GraphQLNonNull),
        has_attrs(of_type=element_matcher),
    )


def is_graphql_object_type(name=anything, fields=anything, description=anything):
    return all_of(
        is_instance(graphql.GraphQLObjectType),
        has_attrs(
            name=name,
            fields=fields,
            description=description,
        ),
    )


def is_graphql_field(type=anything, args=anything, description=anything):
    return all_of(
        is_instance(graphql.GraphQLField),
        has_attrs(type=type, args=args, description=description),
    )


def is_graphql_argument(type=anything):
    return all_of(
        is_instance(graphql.GraphQLArgument),
        has_attrs(type=type),
    )
