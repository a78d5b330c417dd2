"""
End-to-end inventory analysis report.

Loads the catalogue (from the CSVs named by ZEPTO_PRODUCTS_CSV / ZEPTO_ORDERS_CSV /
ZEPTO_SUPPLIERS_CSV, or synthetic data when no catalogue is configured), prints
the data-quality audit, applies the cleaning passes and prints every query in
the catalogue. Charts are written when ZEPTO_CHART_DIR is set.
"""

from pathlib import Path

import pandas as pd

from analytics.catalogue import list_queries, run_all
from analytics.cleaning import clean_products, price_conversion_check
from config.config import Settings, load_settings_from_env
from connectors.inventory_db import InventoryDataset
from models.enums import QuerySection
from models.weight_buckets import WEIGHT_SCHEMES
from utils.data_generation import generate_synthetic_inventory_data
from utils.logger import get_logger

logger = get_logger("demos.inventory_analysis")


def load_dataset(settings: Settings) -> InventoryDataset:
    sources = settings.sources
    if sources.products_csv:
        return InventoryDataset.from_csv(
            sources.products_csv,
            orders_csv=sources.orders_csv,
            suppliers_csv=sources.suppliers_csv,
        )
    logger.info("No products CSV configured; using synthetic data")
    products, orders, suppliers = generate_synthetic_inventory_data()
    return InventoryDataset.from_frames(products, orders, suppliers)


def _print_result(name: str, description: str, result) -> None:
    print(f"\n--- {name}: {description} ---")
    if isinstance(result, pd.DataFrame):
        if result.empty:
            print("(no rows)")
        else:
            print(result.head(15).to_string(index=False))
            if len(result) > 15:
                print(f"... {len(result) - 15} more rows")
    else:
        print(result)


def run_report(settings: Settings | None = None) -> dict:
    """
    Run the audit, cleaning and analysis steps and print each result.

    Returns:
        Dict with the raw audit results, cleaning counts and analysis results.
    """
    settings = settings or load_settings_from_env()
    raw = load_dataset(settings)

    print("=" * 60)
    print("STEP 1: Data exploration and audit (raw data)")
    print("=" * 60)
    audit_sections = (QuerySection.EXPLORATION, QuerySection.CLEANING)
    audit = {}
    for section in audit_sections:
        results = run_all(raw, settings.analysis, section=section)
        for query in list_queries(section):
            if query.name == "price_conversion_check":
                continue
            _print_result(query.name, query.description, results[query.name])
        audit.update(results)

    print("\n" + "=" * 60)
    print("STEP 2: Cleaning")
    print("=" * 60)
    cleaning = clean_products(raw.products, settings.cleaning)
    dataset = raw.with_products(cleaning.products)
    print(f"Rows deleted (zero price): {cleaning.rows_deleted}")
    print(f"Rows rescaled ({settings.cleaning.rescale_policy.value}): {cleaning.rows_rescaled}")
    print(f"Rows remaining: {len(cleaning.products)}")
    _print_result(
        "price_conversion_check", "MRP and selling price after conversion",
        price_conversion_check(cleaning.products),
    )

    print("\n" + "=" * 60)
    print("STEP 3: Analysis (cleaned data)")
    print("=" * 60)
    analysis = run_all(dataset, settings.analysis)
    print("\nWeight bucket rules:")
    for scheme in WEIGHT_SCHEMES.values():
        rules = "; ".join(rule.describe() for rule in scheme.rules)
        print(f"  {scheme.name}: {rules}; otherwise {scheme.default_label}")
    for query in list_queries():
        if query.section in (QuerySection.PRICING, QuerySection.SALES,
                             QuerySection.INVENTORY, QuerySection.SUPPLIERS):
            _print_result(query.name, query.description, analysis[query.name])

    if settings.sources.chart_dir:
        from analytics.visualization import plot_category_revenue, plot_monthly_sales_trend

        chart_dir = Path(settings.sources.chart_dir)
        chart_dir.mkdir(parents=True, exist_ok=True)
        plot_monthly_sales_trend(analysis["monthly_sales_trend"], save_path=str(chart_dir / "monthly_sales.png"))
        plot_category_revenue(
            analysis["estimated_revenue_by_category"], save_path=str(chart_dir / "category_revenue.png")
        )

    logger.info("Report complete")
    return {
        "audit": audit,
        "rows_deleted": cleaning.rows_deleted,
        "rows_rescaled": cleaning.rows_rescaled,
        "analysis": analysis,
    }


def main() -> None:
    run_report()


if __name__ == "__main__":
    main()
