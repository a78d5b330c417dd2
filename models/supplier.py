"""
Data models for suppliers.
"""

from dataclasses import asdict, dataclass

import pandas as pd

SUPPLIER_COLUMNS = ["supplier_id", "name", "region"]


@dataclass
class Supplier:
    """
    Represents a supplier that products can reference through supplier_id.
    """

    supplier_id: int
    name: str
    region: str | None = None


def suppliers_to_frame(suppliers: list[Supplier]) -> pd.DataFrame:
    return pd.DataFrame([asdict(s) for s in suppliers], columns=SUPPLIER_COLUMNS)
