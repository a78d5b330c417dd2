"""Analysis Tools for the Zepto Inventory Catalogue"""

from .catalogue import (
    QUERY_REGISTRY,
    QueryDefinition,
    get_query,
    list_queries,
    run_all,
    run_query,
)
from .cleaning import (
    CleaningResult,
    clean_dataset,
    clean_products,
    price_conversion_check,
    remove_zero_prices,
    rescale_prices,
    zero_price_rows,
)
from .exploration import (
    count_rows,
    distinct_categories,
    duplicate_names,
    rows_with_nulls,
    sample_rows,
    stock_status_counts,
)
from .inventory_stats import (
    above_category_percentile,
    discount_outliers,
    running_stock_weight,
    stock_value_share,
)
from .pricing import (
    estimated_revenue_by_category,
    high_mrp_out_of_stock,
    inventory_weight_by_category,
    premium_low_discount_products,
    price_per_gram,
    top_categories_by_avg_discount,
    top_discounted_products,
    weight_categories,
)
from .sales import (
    best_sellers,
    category_order_summary,
    cumulative_daily_sales,
    increasing_monthly_orders,
    monthly_sales_trend,
    order_sequence,
    orders_with_weight_group,
    top_selling_per_category,
)
from .suppliers import stock_value_by_region, suppliers_with_high_discount


__all__ = [
    # Catalogue
    "QUERY_REGISTRY",
    "QueryDefinition",
    "get_query",
    "list_queries",
    "run_all",
    "run_query",
    # Cleaning
    "CleaningResult",
    "clean_dataset",
    "clean_products",
    "price_conversion_check",
    "remove_zero_prices",
    "rescale_prices",
    "zero_price_rows",
    # Exploration
    "count_rows",
    "distinct_categories",
    "duplicate_names",
    "rows_with_nulls",
    "sample_rows",
    "stock_status_counts",
    # Inventory statistics
    "above_category_percentile",
    "discount_outliers",
    "running_stock_weight",
    "stock_value_share",
    # Pricing
    "estimated_revenue_by_category",
    "high_mrp_out_of_stock",
    "inventory_weight_by_category",
    "premium_low_discount_products",
    "price_per_gram",
    "top_categories_by_avg_discount",
    "top_discounted_products",
    "weight_categories",
    # Sales
    "best_sellers",
    "category_order_summary",
    "cumulative_daily_sales",
    "increasing_monthly_orders",
    "monthly_sales_trend",
    "order_sequence",
    "orders_with_weight_group",
    "top_selling_per_category",
    # Suppliers
    "stock_value_by_region",
    "suppliers_with_high_discount",
]
