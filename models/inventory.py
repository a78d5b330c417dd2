"""
Inventory-related data models for zepto-inventory-analytics.
Includes the Product and Order records, their table schemas and the CSV header mapping.
"""

from dataclasses import asdict, dataclass
from datetime import date

import pandas as pd

PRODUCT_COLUMNS = [
    "sku_id",
    "category",
    "name",
    "mrp",
    "discount_percent",
    "available_quantity",
    "discounted_selling_price",
    "weight_in_gms",
    "out_of_stock",
    "quantity",
    "supplier_id",
]

ORDER_COLUMNS = ["order_id", "sku_id", "order_date", "quantity_ordered", "order_amount"]

# Raw catalogue header (lower-cased) -> attribute name
CSV_HEADER_MAP = {
    "category": "category",
    "name": "name",
    "mrp": "mrp",
    "discountpercent": "discount_percent",
    "availablequantity": "available_quantity",
    "discountedsellingprice": "discounted_selling_price",
    "weightingms": "weight_in_gms",
    "outofstock": "out_of_stock",
    "quantity": "quantity",
    "supplier_id": "supplier_id",
    "supplierid": "supplier_id",
    "sku_id": "sku_id",
}

# Columns every products CSV must provide; sku_id and supplier_id are optional
REQUIRED_PRODUCT_COLUMNS = [c for c in PRODUCT_COLUMNS if c not in ("sku_id", "supplier_id")]

# Columns audited for missing values
NULL_AUDIT_COLUMNS = [
    "name",
    "category",
    "mrp",
    "discount_percent",
    "discounted_selling_price",
    "weight_in_gms",
    "available_quantity",
    "out_of_stock",
    "quantity",
]


@dataclass
class Product:
    """
    One catalogue row. Prices are in whatever unit the source uses (paise before cleaning).
    """

    sku_id: int
    name: str
    category: str | None = None
    mrp: float | None = None
    discount_percent: float | None = None
    available_quantity: int | None = None
    discounted_selling_price: float | None = None
    weight_in_gms: float | None = None
    out_of_stock: bool = False
    quantity: int | None = None
    supplier_id: int | None = None

    def __post_init__(self):
        if not self.name:
            raise ValueError(f"Product {self.sku_id} must have a name.")


@dataclass
class Order:
    """
    Data model for an order line against a single SKU.
    """

    order_id: int
    sku_id: int
    order_date: date | None
    quantity_ordered: int
    order_amount: float


def products_to_frame(products: list[Product]) -> pd.DataFrame:
    """Build a products table with the canonical column order."""
    return pd.DataFrame([asdict(p) for p in products], columns=PRODUCT_COLUMNS)


def orders_to_frame(orders: list[Order]) -> pd.DataFrame:
    """Build an orders table; order_date is converted to datetime64."""
    frame = pd.DataFrame([asdict(o) for o in orders], columns=ORDER_COLUMNS)
    frame["order_date"] = pd.to_datetime(frame["order_date"])
    return frame
