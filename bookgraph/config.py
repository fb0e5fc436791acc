"""
Configuration for the bookgraph server.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server settings loaded from ``BOOKGRAPH_*`` environment variables."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000)

    # Serve the GraphiQL explorer on GET /graphql
    graphiql: bool = Field(default=True)

    debug: bool = Field(default=False)

    model_config = {"env_prefix": "BOOKGRAPH_"}


@lru_cache
def get_settings():
    return Settings()
