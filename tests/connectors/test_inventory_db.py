import sqlite3

import pandas as pd
import pytest

from connectors.inventory_db import (
    InventoryDataset,
    normalize_orders,
    normalize_products,
    normalize_suppliers,
)
from models.inventory import PRODUCT_COLUMNS

RAW_CSV = (
    "Category,name,mrp,discountPercent,availableQuantity,discountedSellingPrice,"
    "weightInGms,outOfStock,quantity\n"
    "Fruits & Vegetables,Onion,2500,10,3,2250,1000,FALSE,1000\n"
    "Dairy,Milk,3000,0,0,3000,500,TRUE,500\n"
    ",Mystery,1000,5,1,950,,FALSE,1\n"
)


@pytest.fixture
def products_csv(tmp_path):
    path = tmp_path / "zepto.csv"
    path.write_text(RAW_CSV)
    return path


def test_from_csv_maps_raw_headers(products_csv):
    dataset = InventoryDataset.from_csv(products_csv)
    products = dataset.products
    assert list(products.columns) == PRODUCT_COLUMNS
    assert products["sku_id"].tolist() == [1, 2, 3]
    assert products["out_of_stock"].tolist() == [False, True, False]
    assert products["category"].iloc[2] is None
    assert pd.isna(products["weight_in_gms"].iloc[2])
    assert products["supplier_id"].isna().all()


def test_from_csv_with_orders_and_suppliers(tmp_path, products_csv):
    orders_csv = tmp_path / "orders.csv"
    orders_csv.write_text(
        "order_id,sku_id,order_date,quantity_ordered,order_amount\n1,1,2024-01-05,2,45.0\n"
    )
    suppliers_csv = tmp_path / "suppliers.csv"
    suppliers_csv.write_text("supplier_id,name,region\n1,FreshFarm,North\n")

    dataset = InventoryDataset.from_csv(products_csv, orders_csv, suppliers_csv)

    assert dataset.summary() == {"products": 3, "orders": 1, "suppliers": 1}
    assert dataset.orders["order_date"].iloc[0] == pd.Timestamp("2024-01-05")


def test_missing_required_column_raises():
    raw = pd.DataFrame({"name": ["Onion"], "mrp": [10]})
    with pytest.raises(ValueError, match="missing required columns"):
        normalize_products(raw)


def test_duplicate_sku_ids_raise(products_df):
    duplicated = pd.concat([products_df, products_df.iloc[[0]]])
    with pytest.raises(ValueError, match="unique"):
        normalize_products(duplicated)


def test_unreadable_stock_flag_raises(products_df):
    bad = products_df.astype({"out_of_stock": object})
    bad.loc[0, "out_of_stock"] = "maybe"
    with pytest.raises(ValueError):
        normalize_products(bad)


def test_optional_tables_default_to_empty(products_df):
    dataset = InventoryDataset.from_frames(products_df)
    assert dataset.orders.empty
    assert list(dataset.orders.columns) == list(normalize_orders(None).columns)
    assert dataset.suppliers.empty
    assert list(normalize_suppliers(None).columns) == ["supplier_id", "name", "region"]


def test_accessors_return_copies(dataset):
    products = dataset.products
    products.loc[0, "mrp"] = -1
    assert dataset.products.loc[0, "mrp"] == 50.0


def test_with_products_leaves_source_dataset(dataset):
    smaller = dataset.with_products(dataset.products.iloc[:2])
    assert len(smaller.products) == 2
    assert len(dataset.products) == 7
    assert smaller.orders.equals(dataset.orders)


def test_to_sqlite(dataset):
    connection = sqlite3.connect(":memory:")
    try:
        dataset.to_sqlite(connection)
        count = pd.read_sql("SELECT COUNT(*) AS n FROM zepto", connection)["n"].iloc[0]
        orders = pd.read_sql("SELECT * FROM orders", connection)
        suppliers = pd.read_sql("SELECT * FROM suppliers", connection)
    finally:
        connection.close()
    assert count == 7
    assert len(orders) == 8
    assert suppliers["name"].tolist() == ["FreshFarm", "DailyGoods", "Staples Co"]


def test_missing_sku_id_raises(products_df):
    bad = products_df.astype({"sku_id": float})
    bad.loc[2, "sku_id"] = None
    with pytest.raises(ValueError, match="sku_id"):
        normalize_products(bad)
