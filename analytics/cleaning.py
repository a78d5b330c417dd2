"""
Data-quality audit and the two cleaning passes for the product table.

The passes must run in order: zero-price rows are deleted first, then the
monetary columns are rescaled from paise to rupees. Rows are never corrected,
only removed or rescaled.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from config.config import CleaningConfig
from connectors.inventory_db import InventoryDataset
from models.enums import RescalePolicy

logger = logging.getLogger(__name__)

PRICE_COLUMNS = ["mrp", "discounted_selling_price"]


@dataclass
class CleaningResult:
    products: pd.DataFrame
    rows_deleted: int
    rows_rescaled: int


def _zero_price_mask(products: pd.DataFrame) -> pd.Series:
    return (products["mrp"] == 0) | (products["discounted_selling_price"] == 0)


def zero_price_rows(products: pd.DataFrame) -> pd.DataFrame:
    """Rows whose MRP or selling price is exactly zero."""
    return products[_zero_price_mask(products)].reset_index(drop=True)


def remove_zero_prices(products: pd.DataFrame) -> tuple[pd.DataFrame, int]:
    """
    Delete rows whose MRP or selling price is zero.

    Returns:
        The remaining rows and the number of rows deleted.
    """
    mask = _zero_price_mask(products)
    deleted = int(mask.sum())
    return products[~mask].reset_index(drop=True), deleted


def rescale_prices(
    products: pd.DataFrame,
    policy: RescalePolicy = RescalePolicy.UNCONDITIONAL,
    threshold: float = 1000.0,
    divisor: float = 100.0,
) -> tuple[pd.DataFrame, int]:
    """
    Divide MRP and selling price by `divisor`.

    UNCONDITIONAL rescales every row. CONDITIONAL rescales only rows whose MRP
    is strictly greater than `threshold`; both price columns of such a row are
    rescaled together.

    Returns:
        The rescaled copy and the number of rows touched.
    """
    if divisor == 0:
        raise ValueError("Rescale divisor must be non-zero.")
    rescaled = products.copy()
    if policy == RescalePolicy.UNCONDITIONAL:
        mask = pd.Series(True, index=rescaled.index)
    elif policy == RescalePolicy.CONDITIONAL:
        mask = rescaled["mrp"] > threshold
    else:
        raise ValueError(f"Unsupported rescale policy: {policy}")

    for col in PRICE_COLUMNS:
        rescaled[col] = rescaled[col].astype(float)
        rescaled.loc[mask, col] = rescaled.loc[mask, col] / divisor
    return rescaled, int(mask.sum())


def clean_products(products: pd.DataFrame, config: CleaningConfig | None = None) -> CleaningResult:
    """Run both cleaning passes in order and report what changed."""
    config = config or CleaningConfig()
    remaining, deleted = remove_zero_prices(products)
    rescaled, touched = rescale_prices(
        remaining,
        policy=config.rescale_policy,
        threshold=config.rescale_threshold,
        divisor=config.rescale_divisor,
    )
    logger.info(
        f"Cleaning removed {deleted} zero-price rows and rescaled {touched} rows "
        f"({config.rescale_policy.value} policy)"
    )
    return CleaningResult(products=rescaled, rows_deleted=deleted, rows_rescaled=touched)


def clean_dataset(dataset: InventoryDataset, config: CleaningConfig | None = None) -> InventoryDataset:
    """New dataset whose product table has been cleaned; orders and suppliers are shared."""
    result = clean_products(dataset.products, config)
    return dataset.with_products(result.products)


def price_conversion_check(products: pd.DataFrame) -> pd.DataFrame:
    """The two price columns, for eyeballing the unit conversion."""
    return products[PRICE_COLUMNS].reset_index(drop=True)
