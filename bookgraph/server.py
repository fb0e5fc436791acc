import os

import flask

from .config import get_settings
from .graph import execute
from .logging import configure_logging, get_logger
from .store import create_store


logger = get_logger(__name__)


def local_path(path):
    return os.path.join(os.path.dirname(__file__), path)


def create_app(settings=None, store=None):
    if settings is None:
        settings = get_settings()
    if store is None:
        store = create_store()

    app = flask.Flask(__name__)

    @app.route("/graphql", methods=["GET"])
    def graphiql():
        if not settings.graphiql:
            flask.abort(404)

        with open(local_path("graphiql/index.html"), encoding="utf-8") as fileobj:
            return fileobj.read()

    @app.route("/graphql", methods=["POST"])
    def graphql():
        request = flask.request.get_json(silent=True)
        if not isinstance(request, dict) or not isinstance(request.get("query"), str):
            return _bad_request("request body must be a JSON object with a query string")

        variables = request.get("variables")
        if variables is not None and not isinstance(variables, dict):
            return _bad_request("variables must be a JSON object")

        operation_name = request.get("operationName")
        result = execute(
            request["query"],
            store=store,
            variables=variables or {},
            operation_name=operation_name,
        )

        logger.info(
            "GraphQL request served",
            operation_name=operation_name,
            error_count=len(result.errors or ()),
        )

        status = 400 if result.data is None else 200
        return flask.jsonify(result.formatted), status

    return app


def _bad_request(message):
    return flask.jsonify({"data": None, "errors": [{"message": message}]}), 400


def main():
    settings = get_settings()
    configure_logging(debug=settings.debug)

    app = create_app(settings=settings)
    logger.info("Server starting", host=settings.host, port=settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
