"""
Registry of the named analysis queries.

Each entry is a stateless read over an InventoryDataset and an AnalysisConfig,
so any query can be run on its own or the whole catalogue can be run in report
order. Nothing here mutates the dataset.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from config.config import AnalysisConfig
from connectors.inventory_db import InventoryDataset
from models.enums import QuerySection
from models.weight_buckets import (
    CATALOGUE_WEIGHT_BUCKETS,
    COMPACT_WEIGHT_BUCKETS,
    ORDER_WEIGHT_GROUPS,
)

from . import cleaning, exploration, inventory_stats, pricing, sales, suppliers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryDefinition:
    name: str
    section: QuerySection
    description: str
    run: Callable[[InventoryDataset, AnalysisConfig], Any]


_QUERIES = [
    # Exploration
    QueryDefinition(
        "row_count", QuerySection.EXPLORATION, "Total number of product rows",
        lambda ds, cfg: exploration.count_rows(ds.products),
    ),
    QueryDefinition(
        "sample_rows", QuerySection.EXPLORATION, "First rows of the product table",
        lambda ds, cfg: exploration.sample_rows(ds.products, n=cfg.sample_size),
    ),
    QueryDefinition(
        "rows_with_nulls", QuerySection.EXPLORATION, "Rows with a missing value in any audited column",
        lambda ds, cfg: exploration.rows_with_nulls(ds.products),
    ),
    QueryDefinition(
        "distinct_categories", QuerySection.EXPLORATION, "Distinct product categories",
        lambda ds, cfg: exploration.distinct_categories(ds.products),
    ),
    QueryDefinition(
        "stock_status_counts", QuerySection.EXPLORATION, "Products in stock vs out of stock",
        lambda ds, cfg: exploration.stock_status_counts(ds.products),
    ),
    QueryDefinition(
        "duplicate_names", QuerySection.EXPLORATION, "Product names listed on more than one SKU",
        lambda ds, cfg: exploration.duplicate_names(ds.products),
    ),
    # Cleaning audit
    QueryDefinition(
        "zero_price_rows", QuerySection.CLEANING, "Products with MRP or selling price equal to zero",
        lambda ds, cfg: cleaning.zero_price_rows(ds.products),
    ),
    QueryDefinition(
        "price_conversion_check", QuerySection.CLEANING, "MRP and selling price after conversion",
        lambda ds, cfg: cleaning.price_conversion_check(ds.products),
    ),
    # Pricing
    QueryDefinition(
        "top_discounted_products", QuerySection.PRICING, "Best-value products by discount percent",
        lambda ds, cfg: pricing.top_discounted_products(ds.products, limit=cfg.top_discount_limit),
    ),
    QueryDefinition(
        "high_mrp_out_of_stock", QuerySection.PRICING, "High-MRP products that are out of stock",
        lambda ds, cfg: pricing.high_mrp_out_of_stock(ds.products, threshold=cfg.high_mrp_threshold),
    ),
    QueryDefinition(
        "estimated_revenue_by_category", QuerySection.PRICING, "Estimated revenue per category",
        lambda ds, cfg: pricing.estimated_revenue_by_category(ds.products),
    ),
    QueryDefinition(
        "in_stock_revenue_by_category", QuerySection.PRICING,
        "Estimated revenue per category, in-stock products only",
        lambda ds, cfg: pricing.estimated_revenue_by_category(ds.products, in_stock_only=True),
    ),
    QueryDefinition(
        "premium_low_discount_products", QuerySection.PRICING, "Expensive products with a small discount",
        lambda ds, cfg: pricing.premium_low_discount_products(
            ds.products,
            mrp_threshold=cfg.premium_mrp_threshold,
            discount_threshold=cfg.low_discount_threshold,
        ),
    ),
    QueryDefinition(
        "top_categories_by_avg_discount", QuerySection.PRICING, "Categories with the highest average discount",
        lambda ds, cfg: pricing.top_categories_by_avg_discount(ds.products, limit=cfg.top_category_limit),
    ),
    QueryDefinition(
        "price_per_gram", QuerySection.PRICING, "Selling price per gram",
        lambda ds, cfg: pricing.price_per_gram(ds.products, min_weight=cfg.min_weight_for_price_per_gram),
    ),
    QueryDefinition(
        "weight_categories", QuerySection.PRICING, "Low / Medium / Bulk weight buckets",
        lambda ds, cfg: pricing.weight_categories(ds.products, scheme=CATALOGUE_WEIGHT_BUCKETS),
    ),
    QueryDefinition(
        "weight_categories_compact", QuerySection.PRICING, "Weight buckets with inclusive 500 g / 5 kg cutoffs",
        lambda ds, cfg: pricing.weight_categories(ds.products, scheme=COMPACT_WEIGHT_BUCKETS),
    ),
    QueryDefinition(
        "inventory_weight_by_category", QuerySection.PRICING, "Total inventory weight per category",
        lambda ds, cfg: pricing.inventory_weight_by_category(ds.products),
    ),
    QueryDefinition(
        "in_stock_weight_by_category", QuerySection.PRICING,
        "Total inventory weight per category, in-stock products only",
        lambda ds, cfg: pricing.inventory_weight_by_category(ds.products, in_stock_only=True),
    ),
    # Sales
    QueryDefinition(
        "monthly_sales_trend", QuerySection.SALES, "Monthly sales with a trailing moving average",
        lambda ds, cfg: sales.monthly_sales_trend(ds.orders, window=cfg.moving_average_window),
    ),
    QueryDefinition(
        "category_order_summary", QuerySection.SALES, "Orders, sales and high-value orders per category",
        lambda ds, cfg: sales.category_order_summary(
            ds.orders, ds.products, high_value_amount=cfg.high_value_order_amount
        ),
    ),
    QueryDefinition(
        "increasing_monthly_orders", QuerySection.SALES, "SKUs with month-over-month order growth",
        lambda ds, cfg: sales.increasing_monthly_orders(ds.orders, ds.products),
    ),
    QueryDefinition(
        "order_sequence", QuerySection.SALES, "Order sequence number per SKU",
        lambda ds, cfg: sales.order_sequence(ds.orders),
    ),
    QueryDefinition(
        "best_sellers", QuerySection.SALES, "Best sellers by total units ordered",
        lambda ds, cfg: sales.best_sellers(ds.orders, ds.products, threshold=cfg.best_seller_units),
    ),
    QueryDefinition(
        "cumulative_daily_sales", QuerySection.SALES, "Daily and cumulative sales per category",
        lambda ds, cfg: sales.cumulative_daily_sales(ds.orders, ds.products),
    ),
    QueryDefinition(
        "orders_with_weight_group", QuerySection.SALES, "Orders with Light / Medium / Heavy weight group",
        lambda ds, cfg: sales.orders_with_weight_group(ds.orders, ds.products, scheme=ORDER_WEIGHT_GROUPS),
    ),
    QueryDefinition(
        "top_selling_per_category", QuerySection.SALES, "Top-selling product in each category",
        lambda ds, cfg: sales.top_selling_per_category(ds.orders, ds.products),
    ),
    # Inventory statistics
    QueryDefinition(
        "above_category_percentile", QuerySection.INVENTORY, "Products priced above their category's percentile",
        lambda ds, cfg: inventory_stats.above_category_percentile(ds.products, q=cfg.category_percentile),
    ),
    QueryDefinition(
        "discount_outliers", QuerySection.INVENTORY, "Discount outliers beyond the standard-deviation band",
        lambda ds, cfg: inventory_stats.discount_outliers(ds.products, k=cfg.outlier_std_multiplier),
    ),
    QueryDefinition(
        "stock_value_share", QuerySection.INVENTORY, "Each SKU's share of total stock value",
        lambda ds, cfg: inventory_stats.stock_value_share(ds.products),
    ),
    QueryDefinition(
        "running_stock_weight", QuerySection.INVENTORY, "Cumulative stock weight by SKU id",
        lambda ds, cfg: inventory_stats.running_stock_weight(ds.products),
    ),
    # Suppliers
    QueryDefinition(
        "suppliers_with_high_discount", QuerySection.SUPPLIERS, "Suppliers with a high average discount",
        lambda ds, cfg: suppliers.suppliers_with_high_discount(
            ds.products, ds.suppliers, threshold=cfg.supplier_discount_threshold
        ),
    ),
    QueryDefinition(
        "stock_value_by_region", QuerySection.SUPPLIERS, "Stock value per supplier region",
        lambda ds, cfg: suppliers.stock_value_by_region(ds.products, ds.suppliers),
    ),
]

QUERY_REGISTRY: dict[str, QueryDefinition] = {q.name: q for q in _QUERIES}


def list_queries(section: QuerySection | None = None) -> list[QueryDefinition]:
    """Query definitions in report order, optionally limited to one section."""
    return [q for q in _QUERIES if section is None or q.section == section]


def get_query(name: str) -> QueryDefinition:
    """
    Look up a query by name.

    Raises:
        KeyError: If no query has that name.
    """
    if name not in QUERY_REGISTRY:
        available = ", ".join(QUERY_REGISTRY.keys())
        raise KeyError(f"Unknown query: {name}. Available: {available}")
    return QUERY_REGISTRY[name]


def run_query(name: str, dataset: InventoryDataset, config: AnalysisConfig | None = None) -> Any:
    query = get_query(name)
    logger.debug(f"Running query '{name}'")
    return query.run(dataset, config or AnalysisConfig())


def run_all(
    dataset: InventoryDataset,
    config: AnalysisConfig | None = None,
    section: QuerySection | None = None,
) -> dict[str, Any]:
    """Run every query (or one section) and return results keyed by query name, in report order."""
    config = config or AnalysisConfig()
    queries = list_queries(section)
    logger.info(f"Running {len(queries)} queries over {dataset.summary()}")
    return {q.name: q.run(dataset, config) for q in queries}
