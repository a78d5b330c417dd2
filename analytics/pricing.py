"""
Catalogue and pricing queries over the cleaned product table.

Grouped results keep products with a missing category in a group of their own.
"""

import logging

import pandas as pd

from models.weight_buckets import CATALOGUE_WEIGHT_BUCKETS, WeightBucketScheme

logger = logging.getLogger(__name__)


def _in_stock(products: pd.DataFrame) -> pd.DataFrame:
    return products[products["out_of_stock"] == False]  # noqa: E712


def top_discounted_products(products: pd.DataFrame, limit: int = 10) -> pd.DataFrame:
    """
    Highest discount percentages.

    Ties on discount are broken by MRP descending, then by sku_id ascending.
    Products without a discount value sort after all others.
    """
    ordered = products.sort_values(
        ["discount_percent", "mrp", "sku_id"],
        ascending=[False, False, True],
        na_position="last",
    )
    return ordered[["name", "mrp", "discount_percent"]].head(limit).reset_index(drop=True)


def high_mrp_out_of_stock(products: pd.DataFrame, threshold: float = 300.0) -> pd.DataFrame:
    """Out-of-stock products with MRP above `threshold`, most expensive first."""
    selected = products[(products["out_of_stock"] == True) & (products["mrp"] > threshold)]  # noqa: E712
    ordered = selected.sort_values(["mrp", "sku_id"], ascending=[False, True])
    return ordered[["name", "mrp"]].reset_index(drop=True)


def estimated_revenue_by_category(products: pd.DataFrame, in_stock_only: bool = False) -> pd.DataFrame:
    """
    Sum of selling price times available quantity per category.

    Args:
        products: Cleaned product table.
        in_stock_only: Restrict the roll-up to rows that are not out of stock.

    Returns:
        DataFrame with columns category, total_revenue ordered by revenue descending.
    """
    source = _in_stock(products) if in_stock_only else products
    revenue = (
        source.assign(_value=source["discounted_selling_price"] * source["available_quantity"])
        .groupby("category", dropna=False)["_value"]
        .sum(min_count=1)
        .reset_index(name="total_revenue")
    )
    return revenue.sort_values("total_revenue", ascending=False, na_position="last").reset_index(drop=True)


def premium_low_discount_products(
    products: pd.DataFrame,
    mrp_threshold: float = 500.0,
    discount_threshold: float = 10.0,
) -> pd.DataFrame:
    """Expensive products with a small discount, ordered by MRP then discount, both descending."""
    selected = products[
        (products["mrp"] > mrp_threshold) & (products["discount_percent"] < discount_threshold)
    ]
    ordered = selected.sort_values(["mrp", "discount_percent"], ascending=[False, False])
    return ordered[["name", "mrp", "discount_percent"]].reset_index(drop=True)


def top_categories_by_avg_discount(products: pd.DataFrame, limit: int = 5) -> pd.DataFrame:
    averages = (
        products.groupby("category", dropna=False)["discount_percent"]
        .mean()
        .round(2)
        .reset_index(name="avg_discount")
    )
    ordered = averages.sort_values("avg_discount", ascending=False, na_position="last")
    return ordered.head(limit).reset_index(drop=True)


def price_per_gram(products: pd.DataFrame, min_weight: float = 100.0) -> pd.DataFrame:
    """
    Selling price per gram, cheapest first.

    Only products weighing at least `min_weight` grams are included, and a
    non-positive weight is always excluded so the ratio never divides by zero.
    """
    weights = products["weight_in_gms"]
    selected = products[(weights >= min_weight) & (weights > 0)].copy()
    selected["price_per_gram"] = (
        selected["discounted_selling_price"] / selected["weight_in_gms"]
    ).round(2)
    ordered = selected.sort_values("price_per_gram", kind="stable", na_position="last")
    return ordered[
        ["name", "weight_in_gms", "discounted_selling_price", "price_per_gram"]
    ].reset_index(drop=True)


def weight_categories(
    products: pd.DataFrame, scheme: WeightBucketScheme = CATALOGUE_WEIGHT_BUCKETS
) -> pd.DataFrame:
    """Label every product with the bucket its weight falls into under `scheme`."""
    labelled = products[["name", "weight_in_gms"]].copy()
    labelled["weight_category"] = scheme.assign_series(products["weight_in_gms"])
    logger.debug(f"Bucketed {len(labelled)} products with scheme '{scheme.name}'")
    return labelled.reset_index(drop=True)


def inventory_weight_by_category(products: pd.DataFrame, in_stock_only: bool = False) -> pd.DataFrame:
    """Total stocked weight (grams times available quantity) per category, heaviest first."""
    source = _in_stock(products) if in_stock_only else products
    weights = (
        source.assign(_weight=source["weight_in_gms"] * source["available_quantity"])
        .groupby("category", dropna=False)["_weight"]
        .sum(min_count=1)
        .reset_index(name="total_weight")
    )
    return weights.sort_values("total_weight", ascending=False, na_position="last").reset_index(drop=True)
