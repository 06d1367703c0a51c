"""
Default revenue and bonus strategies.

The analyzer never hardcodes these formulas; it always calls whatever the
caller injects through the options object. The functions here are the
reference implementations most callers will pass.
"""

from dataclasses import dataclass
from typing import Callable

from . import settings
from .schemas import Product, PurchaseItem, SellerStat
from .utils import round_money

RevenueCalculator = Callable[[PurchaseItem, Product], float]
BonusCalculator = Callable[[int, int, SellerStat], float]


def calculate_simple_revenue(item: PurchaseItem, _product: Product) -> float:
    """
    Revenue of one purchase line: sale price times quantity, less the percentage discount.
    The discount coefficient is rounded to 4 decimals before it is applied.
    """
    discount_coefficient = round(1 - item.discount / 100, 4)
    return round_money(item.sale_price * item.quantity * discount_coefficient)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStat) -> float:
    """
    Bonus from the seller's position in the profit ranking (0-based `index` out of `total`).

    The top-rank check runs before the last-rank check, so a lone seller
    (index 0 of 1) gets the first-place rate.
    """
    if index == 0:
        return seller.profit * settings.BONUS_RATES["first"]
    elif index in (1, 2):
        return seller.profit * settings.BONUS_RATES["podium"]
    elif index == total - 1:
        return 0
    else:
        return seller.profit * settings.BONUS_RATES["default"]


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Strategy bundle handed to the analyzer.

    Strategies receive the validated models, not the raw input dicts:
    `calculate_revenue` gets a PurchaseItem and a Product, `calculate_bonus` gets
    the SellerStat accumulator. Read their fields by attribute (`item.sale_price`),
    not by key.
    """

    calculate_revenue: RevenueCalculator = calculate_simple_revenue
    calculate_bonus: BonusCalculator = calculate_bonus_by_profit


def default_options() -> AnalysisOptions:
    return AnalysisOptions()
