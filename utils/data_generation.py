import numpy as np
import pandas as pd

from models.inventory import ORDER_COLUMNS
from models.supplier import SUPPLIER_COLUMNS

CATEGORIES = [
    "Fruits & Vegetables",
    "Dairy, Bread & Batter",
    "Munchies",
    "Cooking Essentials",
    "Beverages",
    "Biscuits",
    "Ice Cream & Desserts",
    "Home & Cleaning",
    "Personal Care",
    "Health & Hygiene",
    "Packaged Food",
    "Chocolates & Candies",
]

REGIONS = ["North", "South", "East", "West"]

# Raw catalogue export header, in file order
RAW_PRODUCT_HEADER = [
    "Category",
    "name",
    "mrp",
    "discountPercent",
    "availableQuantity",
    "discountedSellingPrice",
    "weightInGms",
    "outOfStock",
    "quantity",
]


def generate_synthetic_inventory_data(
    num_products: int = 60,
    num_suppliers: int = 6,
    num_orders: int = 400,
    start_date_str: str = "2024-01-01",
    end_date_str: str = "2024-06-30",
    seed: int = 42,
    zero_price_fraction: float = 0.03,
    null_fraction: float = 0.02,
    duplicate_name_fraction: float = 0.1,
    out_of_stock_prob: float = 0.12,
    mrp_paise_low: int = 1000,
    mrp_paise_high: int = 120000,
    max_discount_percent: int = 51,
    max_available_quantity: int = 10,
    max_order_quantity: int = 40,
) -> tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
    """
    Generates a synthetic quick-commerce catalogue with orders and suppliers.

    The product frame mimics the raw catalogue export: raw headers, prices in
    paise, a few zero-price rows, a few missing values and some product names
    repeated across SKUs, so the audit and cleaning passes have work to do.

    Args:
        num_products: Number of catalogue rows.
        num_suppliers: Number of suppliers products are spread over.
        num_orders: Number of order lines.
        start_date_str: First possible order date (YYYY-MM-DD).
        end_date_str: Last possible order date (YYYY-MM-DD).
        seed: Random seed for reproducibility.
        zero_price_fraction: Share of rows whose MRP is set to zero.
        null_fraction: Share of rows with a missing category or weight.
        duplicate_name_fraction: Share of rows reusing an earlier product name.
        out_of_stock_prob: Probability a product is flagged out of stock.
        mrp_paise_low: Lowest MRP in paise.
        mrp_paise_high: Highest MRP in paise.
        max_discount_percent: Exclusive upper bound on discount percent.
        max_available_quantity: Inclusive upper bound on units in stock.
        max_order_quantity: Inclusive upper bound on units per order line.

    Returns:
        A tuple containing:
        - products_df: raw catalogue rows (raw headers plus supplier_id).
        - orders_df: order lines with amounts in rupees.
        - suppliers_df: supplier metadata.
    """
    rng = np.random.default_rng(seed)

    supplier_ids = list(range(1, num_suppliers + 1))
    suppliers_df = pd.DataFrame(
        {
            "supplier_id": supplier_ids,
            "name": [f"Supplier {i:02d}" for i in supplier_ids],
            "region": [REGIONS[(i - 1) % len(REGIONS)] for i in supplier_ids],
        },
        columns=SUPPLIER_COLUMNS,
    )

    rows = []
    for i in range(num_products):
        category = CATEGORIES[i % len(CATEGORIES)]
        if i > 0 and rng.random() < duplicate_name_fraction:
            name = rows[int(rng.integers(0, i))]["name"]
        else:
            name = f"{category.split()[0].rstrip(',')} Item {i + 1:03d}"

        # Prices are whole paise; selling price never exceeds MRP
        mrp = int(rng.integers(mrp_paise_low, mrp_paise_high) // 100 * 100)
        discount = int(rng.integers(0, max_discount_percent))
        selling = int(round(mrp * (100 - discount) / 100, -2))
        weight = int(rng.choice([50, 100, 200, 250, 500, 750, 1000, 2000, 5000, 10000]))
        available = int(rng.integers(0, max_available_quantity + 1))
        out_of_stock = bool(rng.random() < out_of_stock_prob)

        row = {
            "Category": category,
            "name": name,
            "mrp": mrp,
            "discountPercent": discount,
            "availableQuantity": available,
            "discountedSellingPrice": selling,
            "weightInGms": weight,
            "outOfStock": out_of_stock,
            "quantity": weight,
            "supplier_id": supplier_ids[i % num_suppliers] if num_suppliers else None,
        }
        if rng.random() < zero_price_fraction:
            row["mrp"] = 0
        if rng.random() < null_fraction:
            row["Category" if rng.random() < 0.5 else "weightInGms"] = None
        rows.append(row)

    products_df = pd.DataFrame(rows, columns=RAW_PRODUCT_HEADER + ["supplier_id"])

    dates = pd.date_range(start=start_date_str, end=end_date_str)
    sku_ids = rng.integers(1, num_products + 1, size=num_orders) if num_products else []
    orders = []
    for order_id, sku_id in enumerate(sku_ids, start=1):
        product = rows[int(sku_id) - 1]
        qty = int(rng.integers(1, max_order_quantity + 1))
        unit_price = product["discountedSellingPrice"] / 100
        orders.append(
            {
                "order_id": order_id,
                "sku_id": int(sku_id),
                "order_date": dates[int(rng.integers(0, len(dates)))],
                "quantity_ordered": qty,
                "order_amount": round(unit_price * qty, 2),
            }
        )
    orders_df = pd.DataFrame(orders, columns=ORDER_COLUMNS)

    print(
        f"Generated {len(products_df)} products, {len(orders_df)} orders, "
        f"{len(suppliers_df)} suppliers."
    )
    return products_df, orders_df, suppliers_df
