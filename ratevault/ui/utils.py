"""Utility functions for the RateVault UI."""
from typing import List

import pandas as pd

from ratevault import UnitCategory
from ratevault.formatting import format_value

UNIT_WIDGET_PREFIX = "unit_value_"


def unit_widget_key(unit_id: str) -> str:
    return f"{UNIT_WIDGET_PREFIX}{unit_id}"


def category_label(category: UnitCategory) -> str:
    return f"{category.icon} {category.name}"


def catalog_frame(category: UnitCategory, pinned_ids: List[str]) -> pd.DataFrame:
    """Tabular view of a category for the catalog browser."""
    rows = [
        {
            "ID": unit.id,
            "Unit": unit.name,
            "Symbol": unit.symbol,
            "Per base unit": format_value(unit.base_multiplier),
            "Pinned": unit.id in pinned_ids,
        }
        for unit in category.units
    ]
    return pd.DataFrame(rows, columns=["ID", "Unit", "Symbol", "Per base unit", "Pinned"])
