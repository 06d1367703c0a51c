import logging

import pandas as pd
import pydantic

from .errors import ValidationError
from .schemas import Dataset, SellerResult

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "rank",
    "seller_id",
    "name",
    "revenue",
    "profit",
    "sales_count",
    "bonus",
    "top_products",
]


def _frame_to_records(df: pd.DataFrame) -> list[dict]:
    # Ensure each record is a plain dict with string keys so pydantic can validate it
    records = df.to_dict("records")
    return [{str(k): v for k, v in rec.items()} for rec in records]


def dataset_from_frames(
    sellers_df: pd.DataFrame, products_df: pd.DataFrame, records_df: pd.DataFrame
) -> Dataset:
    """
    Builds a validated Dataset from three DataFrames, one row per record.
    `records_df` carries an `items` column holding a list of item dicts per row.
    """
    try:
        logger.info("Validating data against schema...")
        dataset = Dataset.model_validate(
            {
                "sellers": _frame_to_records(sellers_df),
                "products": _frame_to_records(products_df),
                "purchase_records": _frame_to_records(records_df),
            }
        )
    except pydantic.ValidationError as e:
        raise ValidationError(f"dataset: {e}") from e

    logger.info(
        f"✅ Data validation successful ({len(dataset.sellers)} sellers, "
        f"{len(dataset.products)} products, {len(dataset.purchase_records)} records)."
    )
    return dataset


def results_to_frame(results: list[SellerResult]) -> pd.DataFrame:
    """
    Flattens the ranked results into a DataFrame, one row per seller in rank order.
    Top products collapse into a "sku:qty, sku:qty" string for tabular consumers.
    """
    rows = []
    for rank, result in enumerate(results, start=1):
        row = result.model_dump(exclude={"top_products"})
        row["rank"] = rank
        row["top_products"] = ", ".join(
            f"{product.sku}:{product.quantity}" for product in result.top_products
        )
        rows.append(row)

    # Final Column Order
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
