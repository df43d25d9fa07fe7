"""
Shared pytest fixtures for the LUX query compiler tests.

The registry is loaded once per session; it is immutable, so sharing it
across tests is safe.
"""

import pytest

from lux_query.query.compiler import QueryCompiler
from lux_query.relations.resolver import RelationResolver
from lux_query.schema.scope_schema import ScopeSchema
from lux_query.templates import get_template_library


@pytest.fixture(scope="session")
def schema():
    """The packaged registry, generated entries included."""
    return ScopeSchema.load_default()


@pytest.fixture(scope="session")
def declared_schema():
    """The declared registry without the generated inverse entries."""
    return ScopeSchema.load_default(include_generated=False)


@pytest.fixture
def compiler(schema):
    return QueryCompiler(schema)


@pytest.fixture
def resolver():
    return RelationResolver()


@pytest.fixture(scope="session")
def library():
    """The packaged template catalogue."""
    return get_template_library()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every configuration variable so tests see defaults."""
    for name in (
        "LUX_QUERY_PROJECT_ROOT",
        "LUX_QUERY_INCLUDE_GENERATED",
        "LUX_QUERY_EXTRA_TERMS",
        "LUX_QUERY_CLAMP_LEVELS",
        "SEARCH_URI_HOST",
        "LUX_QUERY_LOG_LEVEL",
        "LUX_QUERY_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
