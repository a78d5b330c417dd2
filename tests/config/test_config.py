import pytest

from config.config import (
    AnalysisConfig,
    CleaningConfig,
    DataSourceConfig,
    Settings,
    load_settings_from_env,
)
from models.enums import RescalePolicy

ZEPTO_VARS = [
    "ZEPTO_RESCALE_POLICY",
    "ZEPTO_RESCALE_THRESHOLD",
    "ZEPTO_PRODUCTS_CSV",
    "ZEPTO_ORDERS_CSV",
    "ZEPTO_SUPPLIERS_CSV",
    "ZEPTO_CHART_DIR",
]


@pytest.fixture
def clean_env(monkeypatch):
    """No ZEPTO_* variables and no .env loading."""
    for var in ZEPTO_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("config.config.load_project_dotenv", lambda: False)
    return monkeypatch


def test_cleaning_config_defaults():
    config = CleaningConfig()
    assert config.rescale_policy is RescalePolicy.UNCONDITIONAL
    assert config.rescale_threshold == 1000.0
    assert config.rescale_divisor == 100.0


def test_analysis_config_defaults():
    config = AnalysisConfig()
    assert config.sample_size == 10
    assert config.top_discount_limit == 10
    assert config.high_mrp_threshold == 300.0
    assert config.premium_mrp_threshold == 500.0
    assert config.low_discount_threshold == 10.0
    assert config.top_category_limit == 5
    assert config.min_weight_for_price_per_gram == 100.0
    assert config.moving_average_window == 3
    assert config.category_percentile == 0.75
    assert config.outlier_std_multiplier == 2.0
    assert config.high_value_order_amount == 500.0
    assert config.best_seller_units == 500
    assert config.supplier_discount_threshold == 15.0


def test_settings_default_factory_gives_separate_instances():
    first = Settings()
    second = Settings()
    assert first.analysis is not second.analysis
    first.analysis.sample_size = 3
    assert second.analysis.sample_size == 10
    assert first.sources == DataSourceConfig()


def test_load_settings_defaults(clean_env):
    settings = load_settings_from_env()
    assert settings.cleaning == CleaningConfig()
    assert settings.sources.products_csv is None
    assert settings.sources.chart_dir is None


def test_load_settings_from_env_values(clean_env):
    clean_env.setenv("ZEPTO_RESCALE_POLICY", "Conditional")
    clean_env.setenv("ZEPTO_RESCALE_THRESHOLD", "2000")
    clean_env.setenv("ZEPTO_PRODUCTS_CSV", "data/zepto.csv")
    clean_env.setenv("ZEPTO_ORDERS_CSV", "data/orders.csv")
    clean_env.setenv("ZEPTO_CHART_DIR", "charts")

    settings = load_settings_from_env()

    assert settings.cleaning.rescale_policy is RescalePolicy.CONDITIONAL
    assert settings.cleaning.rescale_threshold == 2000.0
    assert settings.sources.products_csv == "data/zepto.csv"
    assert settings.sources.orders_csv == "data/orders.csv"
    assert settings.sources.suppliers_csv is None
    assert settings.sources.chart_dir == "charts"


def test_load_settings_invalid_policy(clean_env):
    clean_env.setenv("ZEPTO_RESCALE_POLICY", "sometimes")
    with pytest.raises(ValueError, match="ZEPTO_RESCALE_POLICY"):
        load_settings_from_env()
