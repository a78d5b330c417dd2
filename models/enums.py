"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class RescalePolicy(str, Enum):
    """How monetary columns are converted from paise to rupees during cleaning"""

    UNCONDITIONAL = "unconditional"  # every row is divided
    CONDITIONAL = "conditional"  # only rows whose MRP exceeds the threshold


class SalesStatus(str, Enum):
    """Seller classification by total units ordered"""

    BEST_SELLER = "Best Seller"
    NORMAL = "Normal"


class QuerySection(str, Enum):
    """Sections of the analysis catalogue, in report order"""

    EXPLORATION = "exploration"
    CLEANING = "cleaning"
    PRICING = "pricing"
    SALES = "sales"
    INVENTORY = "inventory"
    SUPPLIERS = "suppliers"
