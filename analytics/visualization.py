"""Charts for the sales trend and category revenue reports."""

import logging

import matplotlib.pyplot as plt
import pandas as pd

logger = logging.getLogger(__name__)


def _finish(fig, save_path: str | None) -> None:
    if save_path:
        fig.savefig(save_path, bbox_inches="tight")
        logger.info(f"Chart saved to {save_path}")
        plt.close(fig)
    else:
        plt.show()


def plot_monthly_sales_trend(trend: pd.DataFrame, save_path: str | None = None):
    """
    Line chart of monthly sales with the moving average overlaid.

    Args:
        trend: Output of ``monthly_sales_trend``.
        save_path: Optional path to save the chart. If None, displays the plot.
    """
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(trend["month"], trend["monthly_sales"], marker="o", label="Monthly sales")
    ax.plot(trend["month"], trend["moving_avg_3m"], linestyle="--", label="3-month moving average")
    ax.set_title("Monthly Sales Trend")
    ax.set_xlabel("Month")
    ax.set_ylabel("Sales (₹)")
    ax.legend()
    fig.autofmt_xdate()
    _finish(fig, save_path)
    return fig


def plot_category_revenue(revenue: pd.DataFrame, save_path: str | None = None, top_n: int = 10):
    """Horizontal bar chart of estimated revenue for the top categories."""
    top = revenue.head(top_n).iloc[::-1]
    labels = top["category"].fillna("(no category)").astype(str)
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.barh(labels, top["total_revenue"].fillna(0), color="skyblue")
    ax.set_title("Estimated Revenue by Category")
    ax.set_xlabel("Revenue (₹)")
    plt.tight_layout()
    _finish(fig, save_path)
    return fig
