# product_repository.py
from abc import ABC, abstractmethod
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging

from ..models import Product

logger = logging.getLogger(__name__)


class ProductRepository(ABC):

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Product]:
        """Return the product with the given id, or None"""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or changed product and return it"""


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, id: int) -> Optional[Product]:
        return self.db.get(Product, id)

    def save(self, product: Product) -> Product:
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Błąd przy zapisie produktu '{product.name}': {e}")
            raise
