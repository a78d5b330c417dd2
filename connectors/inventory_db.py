"""
Module: connectors.inventory_db

Loads the product catalogue, orders and suppliers once into a read-only in-memory dataset.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from models.inventory import (
    CSV_HEADER_MAP,
    ORDER_COLUMNS,
    PRODUCT_COLUMNS,
    REQUIRED_PRODUCT_COLUMNS,
)
from models.supplier import SUPPLIER_COLUMNS

logger = logging.getLogger(__name__)

_PRODUCT_NUMERIC = [
    "mrp",
    "discount_percent",
    "available_quantity",
    "discounted_selling_price",
    "weight_in_gms",
    "quantity",
    "supplier_id",
]
_TRUE_STRINGS = {"true", "t", "1", "yes", "y"}
_FALSE_STRINGS = {"false", "f", "0", "no", "n"}


def _require_columns(frame: pd.DataFrame, required: list[str], table: str) -> None:
    missing = [c for c in required if c not in frame.columns]
    if missing:
        raise ValueError(f"{table} data is missing required columns: {missing}")


def _coerce_bool(value):
    if pd.isna(value):
        return None
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot interpret '{value}' as a stock flag.")
    return bool(value)


def normalize_products(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Map catalogue headers to attribute names and coerce column types.

    Header matching is case-insensitive, so both the raw export header
    (``Category,name,mrp,discountPercent,...``) and snake_case headers work.
    When no sku_id column is present, sequential ids starting at 1 are assigned
    in file order.

    Raises:
        ValueError: If required columns are missing or sku_id is missing or not unique.
    """
    renames = {}
    for col in raw.columns:
        key = str(col).strip()
        target = CSV_HEADER_MAP.get(key.lower(), key)
        renames[col] = target
    products = raw.rename(columns=renames).copy()
    _require_columns(products, REQUIRED_PRODUCT_COLUMNS, "Product")

    if "sku_id" not in products.columns:
        products.insert(0, "sku_id", range(1, len(products) + 1))
    if "supplier_id" not in products.columns:
        products["supplier_id"] = float("nan")

    for col in _PRODUCT_NUMERIC:
        products[col] = pd.to_numeric(products[col], errors="coerce")
    if products["sku_id"].isna().any():
        raise ValueError("Product data has missing or non-numeric 'sku_id' values.")
    products["sku_id"] = products["sku_id"].astype("int64")
    if products["sku_id"].duplicated().any():
        raise ValueError("Product data must have unique 'sku_id' values.")

    if products["out_of_stock"].dtype != bool:
        products["out_of_stock"] = products["out_of_stock"].map(_coerce_bool).astype(object)
        if products["out_of_stock"].notna().all():
            products["out_of_stock"] = products["out_of_stock"].astype(bool)

    for col in ("category", "name"):
        products[col] = products[col].astype(object).where(products[col].notna(), None)

    return products[PRODUCT_COLUMNS].reset_index(drop=True)


def normalize_orders(raw: pd.DataFrame | None) -> pd.DataFrame:
    if raw is None:
        return pd.DataFrame(
            {
                "order_id": pd.Series(dtype="int64"),
                "sku_id": pd.Series(dtype="int64"),
                "order_date": pd.Series(dtype="datetime64[ns]"),
                "quantity_ordered": pd.Series(dtype="int64"),
                "order_amount": pd.Series(dtype="float64"),
            }
        )
    _require_columns(raw, ORDER_COLUMNS, "Order")
    orders = raw[ORDER_COLUMNS].copy()
    orders["order_date"] = pd.to_datetime(orders["order_date"], errors="coerce")
    for col in ("quantity_ordered", "order_amount"):
        orders[col] = pd.to_numeric(orders[col], errors="coerce")
    return orders.reset_index(drop=True)


def normalize_suppliers(raw: pd.DataFrame | None) -> pd.DataFrame:
    if raw is None:
        return pd.DataFrame(
            {
                "supplier_id": pd.Series(dtype="int64"),
                "name": pd.Series(dtype=object),
                "region": pd.Series(dtype=object),
            }
        )
    _require_columns(raw, SUPPLIER_COLUMNS, "Supplier")
    return raw[SUPPLIER_COLUMNS].copy().reset_index(drop=True)


@dataclass(frozen=True, eq=False)
class InventoryDataset:
    """
    Immutable snapshot of the three tables.

    Accessors hand out copies, so queries can never change the snapshot.
    Cleaning produces a new dataset via ``with_products`` instead of mutating this one.
    """

    _products: pd.DataFrame = field(repr=False)
    _orders: pd.DataFrame = field(repr=False)
    _suppliers: pd.DataFrame = field(repr=False)

    @classmethod
    def from_frames(
        cls,
        products: pd.DataFrame,
        orders: pd.DataFrame | None = None,
        suppliers: pd.DataFrame | None = None,
    ) -> InventoryDataset:
        return cls(
            normalize_products(products),
            normalize_orders(orders),
            normalize_suppliers(suppliers),
        )

    @classmethod
    def from_csv(
        cls,
        products_csv: str | Path,
        orders_csv: str | Path | None = None,
        suppliers_csv: str | Path | None = None,
    ) -> InventoryDataset:
        """Read the catalogue (and optional auxiliary tables) from delimited text files."""
        raw_products = pd.read_csv(products_csv)
        logger.info(f"Loaded {len(raw_products)} product rows from {products_csv}")
        raw_orders = pd.read_csv(orders_csv) if orders_csv else None
        if raw_orders is not None:
            logger.info(f"Loaded {len(raw_orders)} order rows from {orders_csv}")
        raw_suppliers = pd.read_csv(suppliers_csv) if suppliers_csv else None
        if raw_suppliers is not None:
            logger.info(f"Loaded {len(raw_suppliers)} supplier rows from {suppliers_csv}")
        return cls.from_frames(raw_products, raw_orders, raw_suppliers)

    @property
    def products(self) -> pd.DataFrame:
        return self._products.copy()

    @property
    def orders(self) -> pd.DataFrame:
        return self._orders.copy()

    @property
    def suppliers(self) -> pd.DataFrame:
        return self._suppliers.copy()

    def with_products(self, products: pd.DataFrame) -> InventoryDataset:
        """New dataset sharing orders and suppliers but with a replaced product table."""
        return InventoryDataset(normalize_products(products), self._orders, self._suppliers)

    def summary(self) -> dict[str, int]:
        return {
            "products": len(self._products),
            "orders": len(self._orders),
            "suppliers": len(self._suppliers),
        }

    def to_sqlite(self, connection: sqlite3.Connection) -> None:
        """Write the tables as ``zepto``, ``orders`` and ``suppliers``, replacing existing ones."""
        self._products.to_sql("zepto", connection, if_exists="replace", index=False)
        self._orders.to_sql("orders", connection, if_exists="replace", index=False)
        self._suppliers.to_sql("suppliers", connection, if_exists="replace", index=False)
        logger.info(f"Exported dataset to SQLite: {self.summary()}")
