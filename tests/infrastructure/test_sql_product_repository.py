"""Tests specific to the SQLAlchemy backend."""

from decimal import Decimal

import pytest
from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError

from produtos.domain.exceptions import StorageError
from produtos.infrastructure.persistence.database import (
    build_engine,
    create_schema,
    make_session_factory,
    session_scope,
)
from produtos.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from produtos.infrastructure.persistence.tables import ProductRow
from tests.factories import make_product


@pytest.fixture
def engine(sqlite_url):
    engine = build_engine(sqlite_url)
    yield engine
    engine.dispose()


class TestSchema:

    def test_create_schema_creates_products_table(self, engine):
        create_schema(engine)

        columns = {c["name"] for c in inspect(engine).get_columns("products")}
        assert columns == {"id", "name", "description", "price_amount", "currency"}

    def test_create_schema_is_idempotent(self, engine):
        create_schema(engine)
        create_schema(engine)
        assert inspect(engine).has_table("products")


class TestSqlRows:

    def test_save_writes_one_row(self, engine):
        create_schema(engine)
        factory = make_session_factory(engine)
        repo = SqlProductRepository(factory)

        repo.save(make_product("P1", "Widget", "15.00"))
        repo.save(make_product("P1", "Widget v2", "16.50"))

        with session_scope(factory) as session:
            rows = session.scalars(select(ProductRow)).all()
        assert len(rows) == 1
        assert rows[0].name == "Widget v2"
        assert rows[0].price_amount == Decimal("16.50")

    def test_data_survives_a_new_engine(self, sqlite_url, engine):
        create_schema(engine)
        SqlProductRepository(make_session_factory(engine)).save(
            make_product("P1", "Widget", "15.00")
        )

        other = build_engine(sqlite_url)
        try:
            repo = SqlProductRepository(make_session_factory(other))
            assert repo.find_by_id("P1").name == "Widget"
        finally:
            other.dispose()


class TestSqlFailures:

    def test_missing_table_raises_storage_error(self, engine):
        repo = SqlProductRepository(make_session_factory(engine))

        with pytest.raises(StorageError, match="Database operation failed") as info:
            repo.find_by_id("P1")

        assert isinstance(info.value.__cause__, SQLAlchemyError)

    def test_failed_write_raises_storage_error(self, engine):
        repo = SqlProductRepository(make_session_factory(engine))

        with pytest.raises(StorageError):
            repo.save(make_product("P1", "Widget"))

    def test_unknown_driver_raises_storage_error(self):
        with pytest.raises(StorageError, match="Could not create database engine"):
            build_engine("nosuchdialect://localhost/db")

    def test_session_scope_rolls_back_on_error(self, engine):
        create_schema(engine)
        factory = make_session_factory(engine)

        with pytest.raises(RuntimeError):
            with session_scope(factory) as session:
                session.add(ProductRow(id="P1", name="Widget", price_amount=Decimal("1")))
                session.flush()
                raise RuntimeError("boom")

        assert SqlProductRepository(factory).count() == 0
