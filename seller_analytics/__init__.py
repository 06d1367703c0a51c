from .analyzer import SalesAnalyzer, analyze_sales_data
from .errors import AnalysisError, ConfigurationError, ValidationError
from .logger import setup_logger
from .schemas import (
    Dataset,
    Product,
    PurchaseItem,
    PurchaseRecord,
    Seller,
    SellerResult,
    SellerStat,
    TopProduct,
)
from .strategies import (
    AnalysisOptions,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    default_options,
)

__all__ = [
    "AnalysisError",
    "AnalysisOptions",
    "ConfigurationError",
    "Dataset",
    "Product",
    "PurchaseItem",
    "PurchaseRecord",
    "SalesAnalyzer",
    "Seller",
    "SellerResult",
    "SellerStat",
    "TopProduct",
    "ValidationError",
    "analyze_sales_data",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "default_options",
    "setup_logger",
]
