"""Supplier roll-ups. Products join suppliers with an inner join on supplier_id."""

import pandas as pd


def _join_suppliers(products: pd.DataFrame, suppliers: pd.DataFrame) -> pd.DataFrame:
    linked = products[products["supplier_id"].notna()].copy()
    linked["supplier_id"] = linked["supplier_id"].astype("int64")
    renamed = suppliers.rename(columns={"name": "supplier_name"}).copy()
    renamed["supplier_id"] = pd.to_numeric(renamed["supplier_id"]).astype("int64")
    return linked.merge(renamed, on="supplier_id", how="inner")


def suppliers_with_high_discount(
    products: pd.DataFrame, suppliers: pd.DataFrame, threshold: float = 15.0
) -> pd.DataFrame:
    """Suppliers whose products average more than `threshold` percent discount."""
    joined = _join_suppliers(products, suppliers)
    averages = (
        joined.groupby("supplier_name", dropna=False)["discount_percent"]
        .mean()
        .reset_index(name="avg_discount")
    )
    selected = averages[averages["avg_discount"] > threshold].copy()
    selected["avg_discount"] = selected["avg_discount"].round(2)
    return selected.sort_values("avg_discount", ascending=False).reset_index(drop=True)


def stock_value_by_region(products: pd.DataFrame, suppliers: pd.DataFrame) -> pd.DataFrame:
    """Total stock value of each supplier region's products, highest first."""
    joined = _join_suppliers(products, suppliers)
    joined["_value"] = joined["discounted_selling_price"] * joined["available_quantity"]
    totals = (
        joined.groupby("region", dropna=False)["_value"]
        .sum(min_count=1)
        .reset_index(name="total_value")
    )
    return totals.sort_values("total_value", ascending=False, na_position="last").reset_index(drop=True)
