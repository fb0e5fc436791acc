from precisely import assert_that, equal_to, has_attrs
import pytest

from bookgraph.config import Settings
from bookgraph.server import create_app
from bookgraph.store import create_store


@pytest.fixture
def store():
    return create_store()


@pytest.fixture
def client(store):
    app = create_app(settings=Settings(), store=store)
    app.config["TESTING"] = True
    return app.test_client()


def test_query_is_executed_against_store(client):
    response = client.post("/graphql", json={
        "query": "query { author(id: 2) { name books { name } } }",
    })

    assert_that(response, has_attrs(status_code=200))
    assert_that(response.get_json(), equal_to({
        "data": {
            "author": {
                "name": "jrr tolkien",
                "books": [{"name": "the fellowship of the ring"}],
            },
        },
    }))


def test_variables_and_operation_name_are_passed_to_execution(client):
    response = client.post("/graphql", json={
        "query": """
            query Book($id: Int) { book(id: $id) { name } }
            query Authors { authors { name } }
        """,
        "variables": {"id": 3},
        "operationName": "Book",
    })

    assert_that(response.get_json(), equal_to({
        "data": {"book": {"name": "the way of shadows"}},
    }))


def test_mutations_change_the_app_store(client, store):
    response = client.post("/graphql", json={
        "query": 'mutation { addAuthor(name: "ursula le guin") { id } }',
    })

    assert_that(response.get_json(), equal_to({"data": {"addAuthor": {"id": 4}}}))
    assert_that(len(store.authors), equal_to(4))

    response = client.post("/graphql", json={"query": "{ authors { name } }"})
    assert_that(response.get_json()["data"]["authors"][-1], equal_to({"name": "ursula le guin"}))


def test_invalid_document_is_rejected_with_bad_request(client):
    response = client.post("/graphql", json={"query": "{ books { title } }"})

    assert_that(response, has_attrs(status_code=400))
    assert_that(response.get_json(), equal_to({
        "data": None,
        "errors": [{
            "message": "Cannot query field 'title' on type 'Book'.",
            "locations": [{"line": 1, "column": 11}],
        }],
    }))


def test_request_without_query_is_rejected_with_bad_request(client):
    response = client.post("/graphql", json={"variables": {}})

    assert_that(response, has_attrs(status_code=400))
    assert_that(response.get_json()["data"], equal_to(None))


def test_request_with_variables_that_are_not_an_object_is_rejected_with_bad_request(client):
    response = client.post("/graphql", json={
        "query": "query ($id: Int) { book(id: $id) { name } }",
        "variables": "id",
    })

    assert_that(response, has_attrs(status_code=400))
    assert_that(response.get_json(), equal_to({
        "data": None,
        "errors": [{"message": "variables must be a JSON object"}],
    }))


def test_request_with_null_variables_is_executed(client):
    response = client.post("/graphql", json={
        "query": "{ book(id: 1) { name } }",
        "variables": None,
    })

    assert_that(response, has_attrs(status_code=200))
    assert_that(response.get_json(), equal_to({"data": {"book": {"name": "harry potter"}}}))


def test_request_that_is_not_json_is_rejected_with_bad_request(client):
    response = client.post("/graphql", data="{ books { name } }", content_type="text/plain")

    assert_that(response, has_attrs(status_code=400))


def test_graphiql_is_served_on_get(client):
    response = client.get("/graphql")

    assert_that(response, has_attrs(status_code=200))
    assert_that("graphiql" in response.get_data(as_text=True), equal_to(True))


def test_graphiql_can_be_disabled(store):
    app = create_app(settings=Settings(graphiql=False), store=store)

    response = app.test_client().get("/graphql")

    assert_that(response, has_attrs(status_code=404))


def test_settings_are_read_from_environment(monkeypatch):
    monkeypatch.setenv("BOOKGRAPH_PORT", "8080")
    monkeypatch.setenv("BOOKGRAPH_GRAPHIQL", "false")

    settings = Settings()

    assert_that(settings, has_attrs(port=8080, graphiql=False, host="127.0.0.1"))
