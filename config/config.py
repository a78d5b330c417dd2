"""
Configuration classes for zepto-inventory-analytics.
Defines cleaning policy, query thresholds and data sources in a type-safe, extensible way.
"""

import os
from dataclasses import dataclass, field

from models.enums import RescalePolicy
from utils.env import load_project_dotenv


@dataclass
class CleaningConfig:
    rescale_policy: RescalePolicy = RescalePolicy.UNCONDITIONAL
    rescale_threshold: float = 1000.0  # Only used by RescalePolicy.CONDITIONAL
    rescale_divisor: float = 100.0  # paise -> rupees


@dataclass
class AnalysisConfig:
    sample_size: int = 10
    top_discount_limit: int = 10
    high_mrp_threshold: float = 300.0
    premium_mrp_threshold: float = 500.0
    low_discount_threshold: float = 10.0
    top_category_limit: int = 5
    min_weight_for_price_per_gram: float = 100.0
    moving_average_window: int = 3
    category_percentile: float = 0.75
    outlier_std_multiplier: float = 2.0
    high_value_order_amount: float = 500.0
    best_seller_units: int = 500
    supplier_discount_threshold: float = 15.0


@dataclass
class DataSourceConfig:
    products_csv: str | None = None
    orders_csv: str | None = None
    suppliers_csv: str | None = None
    chart_dir: str | None = None


@dataclass
class Settings:
    cleaning: CleaningConfig = field(default_factory=CleaningConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    sources: DataSourceConfig = field(default_factory=DataSourceConfig)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else default


def load_settings_from_env() -> Settings:
    """
    Build Settings from ZEPTO_* environment variables, after loading the project `.env`.

    Recognised variables:
        ZEPTO_PRODUCTS_CSV, ZEPTO_ORDERS_CSV, ZEPTO_SUPPLIERS_CSV: input files
        ZEPTO_CHART_DIR: directory for rendered charts (charts skipped if unset)
        ZEPTO_RESCALE_POLICY: 'unconditional' (default) or 'conditional'
        ZEPTO_RESCALE_THRESHOLD: MRP above which CONDITIONAL rescales a row
    """
    load_project_dotenv()

    policy_raw = os.getenv("ZEPTO_RESCALE_POLICY", "").strip().lower()
    try:
        policy = RescalePolicy(policy_raw) if policy_raw else RescalePolicy.UNCONDITIONAL
    except ValueError:
        valid = ", ".join(p.value for p in RescalePolicy)
        raise ValueError(
            f"Invalid ZEPTO_RESCALE_POLICY '{policy_raw}'. Expected one of: {valid}"
        )

    cleaning = CleaningConfig(
        rescale_policy=policy,
        rescale_threshold=_env_float("ZEPTO_RESCALE_THRESHOLD", 1000.0),
    )
    sources = DataSourceConfig(
        products_csv=os.getenv("ZEPTO_PRODUCTS_CSV") or None,
        orders_csv=os.getenv("ZEPTO_ORDERS_CSV") or None,
        suppliers_csv=os.getenv("ZEPTO_SUPPLIERS_CSV") or None,
        chart_dir=os.getenv("ZEPTO_CHART_DIR") or None,
    )
    return Settings(cleaning=cleaning, sources=sources)


# Example usage:
# settings = load_settings_from_env()
# strict = CleaningConfig(rescale_policy=RescalePolicy.CONDITIONAL, rescale_threshold=1000.0)
