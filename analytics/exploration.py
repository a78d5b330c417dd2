"""Exploration queries over the raw or cleaned product table."""

import pandas as pd

from models.inventory import NULL_AUDIT_COLUMNS


def count_rows(products: pd.DataFrame) -> int:
    return int(len(products))


def sample_rows(products: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """First `n` rows in table order."""
    return products.head(n).reset_index(drop=True)


def rows_with_nulls(products: pd.DataFrame) -> pd.DataFrame:
    """Rows with a missing value in any audited column."""
    return products[products[NULL_AUDIT_COLUMNS].isna().any(axis=1)].reset_index(drop=True)


def distinct_categories(products: pd.DataFrame) -> pd.DataFrame:
    """Sorted distinct categories; a missing category is kept and ordered last."""
    categories = products[["category"]].drop_duplicates()
    return categories.sort_values("category", na_position="last").reset_index(drop=True)


def stock_status_counts(products: pd.DataFrame) -> pd.DataFrame:
    """Number of SKUs per out-of-stock flag."""
    counts = (
        products.groupby("out_of_stock", dropna=False)["sku_id"]
        .count()
        .reset_index(name="count")
    )
    return counts


def duplicate_names(products: pd.DataFrame) -> pd.DataFrame:
    """
    Product names that appear on more than one SKU.

    Returns:
        DataFrame with columns name, num_skus ordered by num_skus descending.
    """
    counts = products.groupby("name", dropna=False)["sku_id"].count().reset_index(name="num_skus")
    dupes = counts[counts["num_skus"] > 1]
    return dupes.sort_values(["num_skus", "name"], ascending=[False, True]).reset_index(drop=True)
