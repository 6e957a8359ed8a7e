"""Composition root: wires a concrete repository to the domain interface.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from produtos.domain.repository.product_repository import ProductRepository
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
from produtos.infrastructure.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or load_settings()
    logger.debug("Using %s product backend", settings.backend)

    if settings.backend == "memory":
        return InMemoryProductRepository()
    if settings.backend == "sql":
        engine = build_engine(settings.sqlalchemy_url, echo=settings.echo_sql)
        create_schema(engine)
        return SqlProductRepository(make_session_factory(engine))
    return JsonProductRepository(settings.products_file)
