# exceptions.py
from typing import Optional

PRODUCT_NOT_FOUND_MESSAGE = "일치하는 상품이 없습니다."


class ProductNotFoundException(Exception):
    """Raised when no product matches the requested id"""

    def __init__(self, product_id: Optional[int] = None):
        self.product_id = product_id
        self.message = PRODUCT_NOT_FOUND_MESSAGE
        super().__init__(self.message)
