# models.py
from sqlalchemy import String, Integer, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum
from .database import Base


class SellingStatus(str, Enum):
    SELLING = "SELLING"
    STOP_SELLING = "STOP_SELLING"


class Product(Base):
    """
    Produkt w katalogu.

    Stan sprzedaży zależy od stanu magazynu:
    SELLING -> STOP_SELLING gdy ilość spadnie do 0,
    STOP_SELLING -> SELLING gdy ilość wzrośnie powyżej 0.
    """
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String)
    price: Mapped[int] = mapped_column(Integer)
    amount: Mapped[int] = mapped_column(Integer, default=0)
    selling_status: Mapped[SellingStatus] = mapped_column(
        SAEnum(SellingStatus, native_enum=False), default=SellingStatus.SELLING
    )

    def __init__(self, **kwargs):
        # Column defaults only apply on INSERT, the entity needs them right away
        kwargs.setdefault("amount", 0)
        kwargs.setdefault("selling_status", SellingStatus.SELLING)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r}, "
            f"amount={self.amount!r}, selling_status={self.selling_status!r})"
        )

    def is_sold_out(self) -> bool:
        return self.amount == 0

    def stop_selling(self) -> None:
        self.selling_status = SellingStatus.STOP_SELLING

    def stock_up(self, amount: int) -> None:
        """Zwiększa stan magazynu; wyprzedany produkt wraca do sprzedaży"""
        if amount < 0:
            raise ValueError("Stock increase cannot be negative")

        self.amount += amount

        if amount > 0 and self.selling_status == SellingStatus.STOP_SELLING:
            self.selling_status = SellingStatus.SELLING
