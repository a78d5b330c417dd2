import os
import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import analytics`, `import utils`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Charts are rendered off-screen during tests
os.environ.setdefault("MPLBACKEND", "Agg")

from connectors.inventory_db import InventoryDataset  # noqa: E402
from models.inventory import Order, Product, orders_to_frame, products_to_frame  # noqa: E402
from models.supplier import Supplier, suppliers_to_frame  # noqa: E402


@pytest.fixture
def products_df():
    """Small cleaned catalogue (prices already in rupees)."""
    return products_to_frame(
        [
            Product(1, "Onion 1kg", "Fruits & Vegetables", 50.0, 10.0, 5, 45.0, 1000, False, 1000, 1),
            Product(2, "Milk", "Dairy", 30.0, 0.0, 10, 30.0, 500, False, 500, 2),
            Product(3, "Chips", "Munchies", 20.0, 25.0, 8, 15.0, 50, False, 50, 1),
            Product(4, "Basmati Rice", "Cooking Essentials", 600.0, 5.0, 2, 570.0, 5000, True, 5000, 3),
            Product(5, "Ghee", "Cooking Essentials", 700.0, 8.0, 0, 644.0, 1000, True, 1000, 3),
            Product(6, "Chips", "Munchies", 40.0, 25.0, 4, 30.0, 100, False, 100, 2),
            Product(7, "Mystery Box", None, 100.0, 50.0, 1, 50.0, 0, False, 1, None),
        ]
    )


@pytest.fixture
def orders_df():
    return orders_to_frame(
        [
            Order(1, 1, date(2024, 1, 5), 10, 450.0),
            Order(2, 3, date(2024, 1, 20), 5, 75.0),
            Order(3, 1, date(2024, 2, 3), 20, 900.0),
            Order(4, 4, date(2024, 2, 10), 1, 570.0),
            Order(5, 1, date(2024, 3, 15), 15, 675.0),
            Order(6, 3, date(2024, 3, 15), 8, 120.0),
            Order(7, 6, date(2024, 3, 15), 8, 240.0),
            Order(8, 6, date(2024, 3, 1), 2, 60.0),
        ]
    )


@pytest.fixture
def suppliers_df():
    return suppliers_to_frame(
        [
            Supplier(1, "FreshFarm", "North"),
            Supplier(2, "DailyGoods", "South"),
            Supplier(3, "Staples Co", "North"),
        ]
    )


@pytest.fixture
def dataset(products_df, orders_df, suppliers_df) -> InventoryDataset:
    return InventoryDataset.from_frames(products_df, orders_df, suppliers_df)
