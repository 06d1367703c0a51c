from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from .utils import round_money

# Source records are read-only; ids and skus arriving as numbers are kept as strings
# so that seller/product lookups never miss on a type mismatch.
_RECORD_CONFIG = ConfigDict(
    frozen=True, populate_by_name=True, coerce_numbers_to_str=True
)


class Seller(BaseModel):
    model_config = _RECORD_CONFIG

    id: str
    first_name: str = ""
    last_name: str = ""


class Product(BaseModel):
    model_config = _RECORD_CONFIG

    sku: str
    purchase_price: float


class PurchaseItem(BaseModel):
    """
    One line of a purchase record. `discount` is a whole percentage.
    Prices and discounts are not range-checked so refunds and odd lines still flow
    through the revenue strategy; only a non-positive quantity makes a line unusable.
    """

    model_config = _RECORD_CONFIG

    sku: str
    quantity: int = Field(..., gt=0)
    sale_price: float
    discount: float = 0


class PurchaseRecord(BaseModel):
    """A single checkout tied to one seller. It may contain no items at all."""

    model_config = _RECORD_CONFIG

    seller_id: str
    items: list[PurchaseItem] = Field(default_factory=list)


class Dataset(BaseModel):
    """
    Defines the input contract of the analyzer: the three collections an external
    loader hands over. Each collection must contain at least one record.
    """

    model_config = ConfigDict(frozen=True)

    sellers: list[Seller] = Field(..., min_length=1)
    products: list[Product] = Field(..., min_length=1)
    purchase_records: list[PurchaseRecord] = Field(..., min_length=1)


class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int = Field(..., ge=1)


class SellerResult(BaseModel):
    """
    Defines the data contract for a single row of the final seller ranking.
    Money fields are already rounded to two decimals.
    """

    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int = Field(default=0, ge=0)
    top_products: list[TopProduct] = Field(default_factory=list)
    bonus: float


@dataclass
class SellerStat:
    """
    Mutable per-seller accumulator. Lives only for the duration of one analysis
    and is frozen into a SellerResult at the end.
    """

    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    products_sold: dict[str, int] = field(default_factory=dict)
    bonus: float = 0.0
    top_products: list[TopProduct] = field(default_factory=list)

    @classmethod
    def from_seller(cls, seller: Seller) -> "SellerStat":
        return cls(id=seller.id, name=f"{seller.first_name} {seller.last_name}".strip())

    def to_result(self) -> SellerResult:
        return SellerResult(
            seller_id=self.id,
            name=self.name,
            revenue=round_money(self.revenue),
            profit=round_money(self.profit),
            sales_count=self.sales_count,
            top_products=list(self.top_products),
            bonus=round_money(self.bonus),
        )
