"""
Order analyses: monthly trends, per-SKU sequences and per-category rankings.

Every function joins orders to products with an inner join on sku_id, so an
order whose SKU was removed during cleaning drops out of product-level views.
"""

import logging

import pandas as pd

from models.enums import SalesStatus
from models.weight_buckets import ORDER_WEIGHT_GROUPS, WeightBucketScheme

logger = logging.getLogger(__name__)


def _month_start(dates: pd.Series) -> pd.Series:
    return pd.to_datetime(dates).dt.to_period("M").dt.to_timestamp()


def _join_products(orders: pd.DataFrame, products: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    product_cols = ["sku_id"] + [c for c in columns if c != "sku_id"]
    return orders.merge(products[product_cols], on="sku_id", how="inner")


def monthly_sales_trend(orders: pd.DataFrame, window: int = 3) -> pd.DataFrame:
    """
    Monthly order totals with a trailing moving average.

    The average covers the current month and the `window - 1` months before it
    that have orders; the first months average over what is available.

    Returns:
        DataFrame with columns month, monthly_sales, moving_avg_3m.
    """
    if window < 1:
        raise ValueError("Moving average window must be at least 1.")
    monthly = (
        orders.assign(month=_month_start(orders["order_date"]))
        .groupby("month", dropna=False)["order_amount"]
        .sum()
        .reset_index(name="monthly_sales")
        .sort_values("month", na_position="last")
        .reset_index(drop=True)
    )
    monthly["moving_avg_3m"] = (
        monthly["monthly_sales"].rolling(window=window, min_periods=1).mean().round(2)
    )
    return monthly


def category_order_summary(
    orders: pd.DataFrame, products: pd.DataFrame, high_value_amount: float = 500.0
) -> pd.DataFrame:
    """Order count, sales and number of high-value orders per category, by sales descending."""
    joined = _join_products(orders, products, ["category"])
    joined["_high_value"] = (joined["order_amount"] > high_value_amount).astype(int)
    summary = (
        joined.groupby("category", dropna=False)
        .agg(
            num_orders=("order_id", "nunique"),
            total_sales=("order_amount", "sum"),
            high_value_orders=("_high_value", "sum"),
        )
        .reset_index()
    )
    return summary.sort_values("total_sales", ascending=False).reset_index(drop=True)


def increasing_monthly_orders(orders: pd.DataFrame, products: pd.DataFrame) -> pd.DataFrame:
    """
    SKU-months where ordered quantity rose over the SKU's previous month with orders.

    A SKU's first month compares against zero, so any first month with units counts
    as an increase.

    Returns:
        DataFrame with columns name, order_month, monthly_qty, prev_qty (NaN for the first month).
    """
    monthly = (
        orders.assign(order_month=_month_start(orders["order_date"]))
        .groupby(["sku_id", "order_month"], dropna=False)["quantity_ordered"]
        .sum()
        .reset_index(name="monthly_qty")
        .sort_values(["sku_id", "order_month"])
    )
    monthly["prev_qty"] = monthly.groupby("sku_id", dropna=False)["monthly_qty"].shift(1)
    rising = monthly[monthly["monthly_qty"] > monthly["prev_qty"].fillna(0)]
    joined = _join_products(rising, products, ["name"])
    joined = joined.sort_values(["sku_id", "order_month"])
    return joined[["name", "order_month", "monthly_qty", "prev_qty"]].reset_index(drop=True)


def order_sequence(orders: pd.DataFrame) -> pd.DataFrame:
    """Chronological 1-based order number within each SKU; same-day orders keep order_id order."""
    ordered = orders.sort_values(["sku_id", "order_date", "order_id"], na_position="last").copy()
    ordered["order_seq"] = ordered.groupby("sku_id", dropna=False).cumcount() + 1
    return ordered[
        ["sku_id", "order_id", "order_date", "quantity_ordered", "order_seq"]
    ].reset_index(drop=True)


def best_sellers(orders: pd.DataFrame, products: pd.DataFrame, threshold: int = 500) -> pd.DataFrame:
    """Total units per product name, flagged 'Best Seller' above `threshold` units."""
    joined = _join_products(orders, products, ["name"])
    totals = joined.groupby("name", dropna=False)["quantity_ordered"].sum().reset_index(name="total_units")
    totals["status"] = [
        SalesStatus.BEST_SELLER.value if units > threshold else SalesStatus.NORMAL.value
        for units in totals["total_units"]
    ]
    return totals.sort_values(["total_units", "name"], ascending=[False, True]).reset_index(drop=True)


def cumulative_daily_sales(orders: pd.DataFrame, products: pd.DataFrame) -> pd.DataFrame:
    """Daily sales per category with a running total inside each category, ordered by date."""
    joined = _join_products(orders, products, ["category"])
    daily = (
        joined.groupby(["category", "order_date"], dropna=False)["order_amount"]
        .sum()
        .reset_index(name="daily_sales")
        .sort_values(["category", "order_date"], na_position="last")
        .reset_index(drop=True)
    )
    daily["cumulative_sales"] = daily.groupby("category", dropna=False)["daily_sales"].cumsum()
    return daily


def orders_with_weight_group(
    orders: pd.DataFrame,
    products: pd.DataFrame,
    scheme: WeightBucketScheme = ORDER_WEIGHT_GROUPS,
) -> pd.DataFrame:
    """Each order with its product's weight and weight group."""
    joined = _join_products(orders, products, ["name", "weight_in_gms"])
    joined["weight_group"] = scheme.assign_series(joined["weight_in_gms"])
    return joined[["order_id", "name", "weight_in_gms", "weight_group", "order_amount"]].reset_index(
        drop=True
    )


def top_selling_per_category(orders: pd.DataFrame, products: pd.DataFrame) -> pd.DataFrame:
    """
    The single best-selling product in each category by total units.

    Exactly one row per category is returned; a tie on units goes to the
    alphabetically first product name.
    """
    joined = _join_products(orders, products, ["category", "name"])
    units = (
        joined.groupby(["category", "name"], dropna=False)["quantity_ordered"]
        .sum()
        .reset_index(name="total_units")
    )
    ranked = units.sort_values(
        ["category", "total_units", "name"], ascending=[True, False, True], na_position="last"
    )
    ranked["rn"] = ranked.groupby("category", dropna=False).cumcount() + 1
    top = ranked[ranked["rn"] == 1]
    logger.debug(f"Selected top sellers for {len(top)} categories")
    return top[["category", "name", "total_units"]].reset_index(drop=True)
