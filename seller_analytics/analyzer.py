import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from . import settings
from .errors import ConfigurationError, ValidationError
from .schemas import (
    Dataset,
    Product,
    PurchaseItem,
    Seller,
    SellerResult,
    SellerStat,
    TopProduct,
)
from .strategies import BonusCalculator, RevenueCalculator
from .utils import is_sequence, round_money

logger = logging.getLogger(__name__)

REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")

# Accepted spellings for each strategy when options come in as a mapping.
STRATEGY_KEYS = {
    "calculate_revenue": ("calculate_revenue", "calculateRevenue"),
    "calculate_bonus": ("calculate_bonus", "calculateBonus"),
}


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _reference(record: Any, name: str) -> str | None:
    # Ids and skus are compared as strings, matching the schema coercion.
    value = _field(record, name)
    return None if value is None else str(value)


class SalesAnalyzer:
    """
    Computes the seller performance ranking from sellers, products and purchase records.
    Follows a Validate -> Index -> Accumulate -> Rank pattern.

    Only the top products limit is kept on the instance. Indexes and accumulators
    are local to each `analyze` call, so one instance can be reused, even from
    inside a strategy it is currently calling.
    """

    def __init__(self, top_products_limit: int = settings.TOP_PRODUCTS_LIMIT):
        self.top_products_limit = top_products_limit

    def analyze(self, data: Any, options: Any) -> list[SellerResult]:
        """
        Orchestrates the analysis and returns one SellerResult per seller,
        ordered by profit descending.
        """
        # --- 1. VALIDATE ---
        sellers, products, purchase_records = self.validate_data(data)
        calculate_revenue, calculate_bonus = self.validate_options(options)

        # --- 2. INDEX ---
        seller_stats, seller_index, product_index = self.build_indexes(sellers, products)

        # --- 3. ACCUMULATE ---
        self.accumulate(purchase_records, seller_index, product_index, calculate_revenue)

        # --- 4. RANK & FINALIZE ---
        results = self.rank(seller_stats, calculate_bonus)

        logger.info(
            f"✅ Analyzed {len(results)} sellers from "
            f"{len(purchase_records)} purchase records."
        )
        return results

    def validate_data(self, data: Any) -> tuple[list[Seller], list[Product], list[Any]]:
        """
        Fail-fast structural checks on the dataset and its three collections.

        Sellers and products are coerced into their models here; rows that don't fit
        are skipped. Purchase records are passed through untouched and resolved
        one by one during accumulation.
        """
        if isinstance(data, Dataset):
            return list(data.sellers), list(data.products), list(data.purchase_records)

        if not isinstance(data, Mapping) or not data:
            raise ValidationError("data: expected a non-empty mapping")

        for field_name in REQUIRED_COLLECTIONS:
            rows = data.get(field_name)
            if rows is None:
                raise ValidationError(f"{field_name}: missing")
            if not is_sequence(rows):
                raise ValidationError(
                    f"{field_name}: expected a sequence, got {type(rows).__name__}"
                )
            if len(rows) == 0:
                raise ValidationError(f"{field_name}: must not be empty")

        sellers = self._coerce_rows("sellers", data["sellers"], Seller)
        products = self._coerce_rows("products", data["products"], Product)
        return sellers, products, list(data["purchase_records"])

    def _coerce_rows(self, field_name: str, rows, model):
        records = []
        for position, row in enumerate(rows):
            if isinstance(row, model):
                records.append(row)
                continue
            try:
                records.append(model.model_validate(row))
            except pydantic.ValidationError as e:
                logger.debug(f"Skipping {field_name}[{position}]: {e}")
        return records

    def validate_options(self, options: Any) -> tuple[RevenueCalculator, BonusCalculator]:
        if options is None:
            raise ConfigurationError("options: missing")
        if isinstance(options, (str, bytes, int, float, bool)):
            raise ConfigurationError(
                f"options: expected a configuration object, got {type(options).__name__}"
            )

        strategies = []
        for name, keys in STRATEGY_KEYS.items():
            strategy = None
            for key in keys:
                if isinstance(options, Mapping):
                    strategy = options.get(key)
                else:
                    strategy = getattr(options, key, None)
                if strategy is not None:
                    break

            if strategy is None:
                raise ConfigurationError(f"options.{name}: missing")
            if not callable(strategy):
                raise ConfigurationError(f"options.{name}: must be callable")
            strategies.append(strategy)

        return strategies[0], strategies[1]

    def build_indexes(
        self, sellers: list[Seller], products: list[Product]
    ) -> tuple[list[SellerStat], dict[str, SellerStat], dict[str, Product]]:
        """
        Creates one zeroed SellerStat per seller and the id/sku lookup tables.
        The stats come back in input order.
        """
        seller_stats = [SellerStat.from_seller(seller) for seller in sellers]
        seller_index = {stat.id: stat for stat in seller_stats}
        product_index = {product.sku: product for product in products}

        logger.debug(
            f"Indexed {len(seller_index)} sellers and {len(product_index)} products."
        )
        return seller_stats, seller_index, product_index

    def accumulate(
        self,
        purchase_records: list[Any],
        seller_index: dict[str, SellerStat],
        product_index: dict[str, Product],
        calculate_revenue: RevenueCalculator,
    ):
        skipped_records = 0
        skipped_items = 0

        for record in purchase_records:
            # Resolve the seller first; nothing else about an orphan record matters.
            seller = seller_index.get(_reference(record, "seller_id"))
            if seller is None:
                skipped_records += 1
                continue

            # One sale per record, however many items it carries.
            seller.sales_count += 1

            items = _field(record, "items")
            if not is_sequence(items):
                continue

            for raw_item in items:
                try:
                    item = (
                        raw_item
                        if isinstance(raw_item, PurchaseItem)
                        else PurchaseItem.model_validate(raw_item)
                    )
                except pydantic.ValidationError as e:
                    logger.debug(f"Skipping item of seller {seller.id}: {e}")
                    skipped_items += 1
                    continue

                product = product_index.get(item.sku)
                if product is None:
                    skipped_items += 1
                    continue

                cost = round_money(product.purchase_price * item.quantity)
                revenue = calculate_revenue(item, product)
                profit = round_money(revenue - cost)

                seller.revenue = round_money(seller.revenue + revenue)
                seller.profit = round_money(seller.profit + profit)

                seller.products_sold.setdefault(item.sku, 0)
                seller.products_sold[item.sku] += item.quantity

        if skipped_records or skipped_items:
            logger.debug(
                f"Skipped {skipped_records} records with unknown sellers "
                f"and {skipped_items} unusable items."
            )

    def rank(
        self, seller_stats: list[SellerStat], calculate_bonus: BonusCalculator
    ) -> list[SellerResult]:
        # sorted() is stable with reverse=True, so equal profits keep input order.
        ranked = sorted(seller_stats, key=lambda stat: stat.profit, reverse=True)
        total = len(ranked)

        for index, seller in enumerate(ranked):
            seller.bonus = calculate_bonus(index, total, seller)
            seller.top_products = self.top_products(seller.products_sold)

        return [seller.to_result() for seller in ranked]

    def top_products(self, products_sold: dict[str, int]) -> list[TopProduct]:
        ordered = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
        return [
            TopProduct(sku=sku, quantity=quantity)
            for sku, quantity in ordered[: self.top_products_limit]
        ]


def analyze_sales_data(data: Any, options: Any) -> list[SellerResult]:
    """Runs a fresh SalesAnalyzer over `data` with the strategies in `options`."""
    return SalesAnalyzer().analyze(data, options)
