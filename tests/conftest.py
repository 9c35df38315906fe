import pytest
from unittest.mock import MagicMock

from product_catalog import database
from product_catalog.database import Base, make_engine
from product_catalog.models import Product, SellingStatus
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.services.product_service import ProductService


@pytest.fixture
def make_product():
    def _make_product(**overrides) -> Product:
        fields = {
            "id": 0,
            "name": "product",
            "price": 340000,
            "amount": 10,
            "selling_status": SellingStatus.SELLING,
        }
        fields.update(overrides)
        return Product(**fields)

    return _make_product


@pytest.fixture
def product_repository():
    return MagicMock(spec=ProductRepository)


@pytest.fixture
def product_service(product_repository):
    return ProductService(product_repository)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    # Sesja z aplikacyjnego get_db, podpięta pod bazę w pamięci
    database.SessionLocal.configure(bind=engine)
    sessions = database.get_db()
    try:
        yield next(sessions)
    finally:
        sessions.close()
        database.SessionLocal.configure(bind=database.engine)
