from datetime import date

import pytest
from pandas.api.types import is_datetime64_any_dtype

from models.enums import QuerySection, RescalePolicy, SalesStatus
from models.inventory import (
    ORDER_COLUMNS,
    PRODUCT_COLUMNS,
    Order,
    Product,
    orders_to_frame,
    products_to_frame,
)
from models.supplier import SUPPLIER_COLUMNS, Supplier, suppliers_to_frame


def test_product_requires_name():
    with pytest.raises(ValueError):
        Product(1, "")


def test_products_to_frame_column_order():
    frame = products_to_frame([Product(1, "Paneer", "Dairy"), Product(2, "Curd", "Dairy")])
    assert list(frame.columns) == PRODUCT_COLUMNS
    assert frame["sku_id"].tolist() == [1, 2]


def test_orders_to_frame_parses_dates():
    frame = orders_to_frame([Order(1, 1, date(2024, 5, 1), 2, 90.0)])
    assert list(frame.columns) == ORDER_COLUMNS
    assert is_datetime64_any_dtype(frame["order_date"])


def test_suppliers_to_frame():
    frame = suppliers_to_frame([Supplier(1, "FreshFarm", "North"), Supplier(2, "Unplaced")])
    assert list(frame.columns) == SUPPLIER_COLUMNS
    assert frame["region"].isna().tolist() == [False, True]


def test_enum_values():
    assert RescalePolicy("conditional") is RescalePolicy.CONDITIONAL
    assert SalesStatus.BEST_SELLER.value == "Best Seller"
    assert QuerySection.SALES.value == "sales"
