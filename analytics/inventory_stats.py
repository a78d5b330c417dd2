"""
Statistical views of the product table: percentile thresholds, outliers,
share of stock value and running stock weight.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def above_category_percentile(products: pd.DataFrame, q: float = 0.75) -> pd.DataFrame:
    """
    Products whose MRP is strictly above the q-th percentile of MRP within their category.

    The percentile is continuous (linear interpolation between ranks) and is
    computed over every product in the category, missing category included.

    Returns:
        DataFrame with columns name, category, mrp, p75_category_mrp.
    """
    if not 0 <= q <= 1:
        raise ValueError(f"Percentile must be between 0 and 1, got {q}")
    scored = products[["sku_id", "name", "category", "mrp"]].copy()
    scored["p75_category_mrp"] = scored.groupby("category", dropna=False)["mrp"].transform(
        lambda s: s.quantile(q)
    )
    above = scored[scored["mrp"] > scored["p75_category_mrp"]]
    return above[["name", "category", "mrp", "p75_category_mrp"]].reset_index(drop=True)


def discount_outliers(products: pd.DataFrame, k: float = 2.0) -> pd.DataFrame:
    """
    Products whose discount lies outside mean ± k standard deviations.

    Mean and (sample) standard deviation come from the whole table and are
    applied as fixed bounds. Rows without a discount value are never outliers.
    """
    discounts = products["discount_percent"]
    mean = discounts.mean()
    std = discounts.std()
    if pd.isna(std):
        logger.debug("Not enough discount values for a standard deviation; no outliers")
        return products.iloc[0:0][["name", "discount_percent"]].reset_index(drop=True)
    upper = mean + k * std
    lower = mean - k * std
    logger.debug(f"Discount outlier bounds: [{lower:.2f}, {upper:.2f}]")
    outliers = products[(discounts > upper) | (discounts < lower)]
    return outliers[["name", "discount_percent"]].reset_index(drop=True)


def stock_value_share(products: pd.DataFrame) -> pd.DataFrame:
    """
    Each SKU's stock value and its percentage of the total stock value.

    A zero total gives every row a 0.0 share rather than dividing by zero.
    """
    shares = products[["name"]].copy()
    shares["sku_value"] = products["discounted_selling_price"] * products["available_quantity"]
    total = shares["sku_value"].sum()
    if total == 0:
        shares["pct_share"] = shares["sku_value"].where(shares["sku_value"].isna(), 0.0)
    else:
        shares["pct_share"] = (100.0 * shares["sku_value"] / total).round(2)
    return shares.reset_index(drop=True)


def running_stock_weight(products: pd.DataFrame) -> pd.DataFrame:
    """
    Stock weight per SKU and its running total ordered by sku_id.

    A SKU with unknown weight or quantity adds nothing to the running total.
    """
    ordered = products.sort_values("sku_id")
    result = ordered[["sku_id", "name"]].copy()
    result["total_weight"] = ordered["weight_in_gms"] * ordered["available_quantity"]
    result["running_weight"] = result["total_weight"].fillna(0).cumsum()
    return result.reset_index(drop=True)
