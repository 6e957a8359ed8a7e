"""Shared fixtures.

``repository`` is parametrised over every backend so the same contract
tests run against the in-memory, JSON and SQL implementations.
"""

from __future__ import annotations

import pytest

from produtos.infrastructure.persistence.database import (
    build_engine,
    create_schema,
    make_session_factory,
)
from produtos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from produtos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from produtos.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'produtos.db'}"


@pytest.fixture(params=["memory", "json", "sql"])
def repository(request, tmp_path, sqlite_url):
    if request.param == "memory":
        yield InMemoryProductRepository()
    elif request.param == "json":
        yield JsonProductRepository(tmp_path / "products.json")
    else:
        engine = build_engine(sqlite_url)
        create_schema(engine)
        yield SqlProductRepository(make_session_factory(engine))
        engine.dispose()
