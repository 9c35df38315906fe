from unittest.mock import MagicMock

from product_catalog import database
from product_catalog.models import Product
from product_catalog.repositories.product_repository import SqlAlchemyProductRepository


def test_get_db_closes_session(monkeypatch):
    session = MagicMock()
    monkeypatch.setattr(database, "SessionLocal", lambda: session)

    sessions = database.get_db()
    assert next(sessions) is session
    session.close.assert_not_called()

    sessions.close()

    session.close.assert_called_once()


def test_get_db_session_is_bound_to_configured_engine(db, engine):
    assert db.get_bind() is engine

    saved = SqlAlchemyProductRepository(db).save(Product(name="product", price=100, amount=1))

    assert db.get(Product, saved.id) is saved
