# product_service.py
import logging

from ..exceptions import ProductNotFoundException
from ..models import Product, SellingStatus
from ..repositories.product_repository import ProductRepository
from ..schemas import ProductAddRequest, ProductStockUpRequest, ProductDto

logger = logging.getLogger(__name__)

SELLING_STOPPED_MESSAGE = "마지막 재고가 소진 되어 상품 판매가 중지 됩니다."
SELLING_CONTINUES_MESSAGE = "판매가 계속 됩니다."


class ProductService:
    """
    Logika biznesowa produktów.

    Reguła: produkt bez stanu magazynowego nie jest sprzedawany,
    a po uzupełnieniu stanu wraca do sprzedaży.
    """

    def __init__(self, repository: ProductRepository):
        self.repo = repository

    def _get_product(self, id: int) -> Product:
        product = self.repo.find_by_id(id)
        if product is None:
            logger.warning(f"Nie znaleziono produktu {id}")
            raise ProductNotFoundException(id)
        return product

    def selling_status_update(self, id: int) -> str:
        """Przelicza status sprzedaży na podstawie stanu magazynu"""
        product = self._get_product(id)

        if product.is_sold_out():
            product.stop_selling()
            self.repo.save(product)
            logger.info(f"Produkt {id} wyprzedany, sprzedaż wstrzymana")
            return SELLING_STOPPED_MESSAGE

        return SELLING_CONTINUES_MESSAGE

    def product_add(self, request: ProductAddRequest) -> ProductDto:
        """Dodaje nowy produkt"""
        product = Product(
            name=request.name,
            price=request.price,
            amount=request.amount,
            selling_status=SellingStatus.SELLING,
        )
        saved = self.repo.save(product)
        logger.info(f"Dodano produkt '{saved.name}' o id {saved.id}")
        return ProductDto.from_entity(saved)

    def product_stock_up(self, request: ProductStockUpRequest) -> ProductDto:
        """Zwiększa stan magazynu produktu"""
        product = self._get_product(request.id)

        product.stock_up(request.amount)
        self.repo.save(product)
        logger.info(f"Uzupełniono stan produktu {product.id} o {request.amount}, obecnie {product.amount}")

        return ProductDto.from_entity(product)
