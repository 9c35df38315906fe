# schemas.py
from pydantic import BaseModel, ConfigDict, Field

from .models import Product, SellingStatus


# Request schemas
class ProductAddRequest(BaseModel):
    name: str
    price: int = Field(..., ge=0)
    amount: int = Field(..., ge=0)


class ProductStockUpRequest(BaseModel):
    id: int
    amount: int = Field(..., ge=0)


# Response schemas
class ProductDto(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    price: int
    amount: int
    selling_status: str

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDto":
        """Mapuje encję na DTO, status jako nazwa wartości enuma"""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            amount=product.amount,
            selling_status=SellingStatus(product.selling_status).name,
        )
