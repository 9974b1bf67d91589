"""
Reference Table Loader for Verification Module.

Discovers and loads reference tables from the test_values/ directory.
Every ``{table_id}_reference.json`` file is one table.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ratevault.catalog import default_unit_ids, get_category

from .schemas import normalize_category_name, validate_reference, ValidationError


@dataclass
class ReferenceTable:
    """
    Represents a single reference table.

    Attributes:
        table_id: Identifier taken from the file name
        reference_path: Path to the reference JSON file
        reference_data: Loaded reference dictionary
        category: Catalog category id the cases run in
        errors: Any validation errors encountered during loading
    """
    table_id: str
    reference_path: Path
    reference_data: Dict[str, Any] = field(default_factory=dict)
    category: str = ""
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if the table has no validation errors."""
        return len(self.errors) == 0

    @property
    def label(self) -> str:
        """Return a human-readable label for the table."""
        return self.reference_data.get("description", self.table_id)

    @property
    def cases(self) -> List[Dict[str, Any]]:
        cases = self.reference_data.get("cases", [])
        return cases if isinstance(cases, list) else []

    @property
    def tolerance(self) -> Optional[float]:
        return self.reference_data.get("tolerance")


class TestLoader:
    """
    Discovers and loads reference tables from a directory.

    Usage:
        loader = TestLoader("test_values")
        tables = loader.discover()

        for table in tables:
            if table.is_valid:
                print(f"Loaded {table.table_id} with {len(table.cases)} cases")
    """

    __test__ = False

    def __init__(self, test_dir: str = "test_values"):
        """
        Initialize the loader.

        Args:
            test_dir: Path to directory containing reference JSON files
        """
        self.test_dir = Path(test_dir)

    def discover(self) -> List[ReferenceTable]:
        """
        Discover and load all reference tables from the test directory.

        Returns:
            List of ReferenceTable objects (may include invalid tables with errors)
        """
        if not self.test_dir.exists():
            return []

        return [
            self._load_table(reference_path.stem.replace("_reference", ""), reference_path)
            for reference_path in sorted(self.test_dir.glob("*_reference.json"))
        ]

    def load_single(self, table_id: str) -> Optional[ReferenceTable]:
        """
        Load a single reference table by id.

        Args:
            table_id: The table identifier (e.g., "length")

        Returns:
            ReferenceTable if found, None otherwise
        """
        reference_path = self.test_dir / f"{table_id}_reference.json"
        if not reference_path.exists():
            return None
        return self._load_table(table_id, reference_path)

    def _load_table(self, table_id: str, reference_path: Path) -> ReferenceTable:
        """
        Load and validate a reference table from a file.

        Args:
            table_id: Table identifier
            reference_path: Path to reference file

        Returns:
            ReferenceTable with loaded data and any validation errors
        """
        errors: List[ValidationError] = []
        reference_data: Dict[str, Any] = {}
        category = ""

        try:
            with open(reference_path, "r", encoding="utf-8") as f:
                reference_data = json.load(f)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                "reference_path",
                f"Invalid JSON in reference file: {e}"
            ))
        except OSError as e:
            errors.append(ValidationError(
                "reference_path",
                f"Error reading reference file: {e}"
            ))
        else:
            errors.extend(validate_reference(reference_data))
            raw_category = reference_data.get("category") if isinstance(reference_data, dict) else None
            if isinstance(raw_category, str):
                category = normalize_category_name(raw_category)
                if get_category(category) is None:
                    errors.append(ValidationError(
                        "category",
                        f"Unknown category: {raw_category}",
                        raw_category
                    ))
            if not isinstance(reference_data, dict):
                reference_data = {}

        return ReferenceTable(
            table_id=table_id,
            reference_path=reference_path,
            reference_data=reference_data,
            category=category,
            errors=errors,
        )

    def get_available_tables(self) -> List[str]:
        """
        Get list of available table ids without loading them.

        Returns:
            List of table id strings
        """
        if not self.test_dir.exists():
            return []

        return sorted(f.stem.replace("_reference", "") for f in self.test_dir.glob("*_reference.json"))


def create_sample_reference(category_id: str, output_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Create a sample reference JSON structure for a category.

    One case per default unit, converting ``1`` of the category's base unit.
    Expected values are placeholders to be replaced with verified figures.

    Args:
        category_id: Catalog category id
        output_path: Optional path to write the sample file

    Returns:
        Sample reference dictionary
    """
    category = get_category(normalize_category_name(category_id))
    if category is None:
        raise ValueError(f"Unknown category: {category_id}")

    sample = {
        "category": category.id,
        "description": f"Reference conversions for {category.name}",
        "source": "",
        "tolerance": 1e-6,
        "cases": [
            {
                "value": 1,
                "from": category.base_unit_id,
                "to": unit_id,
                "expected": 0.0,
            }
            for unit_id in default_unit_ids(category.id)
            if unit_id != category.base_unit_id
        ],
    }

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(sample, f, indent=2)

    return sample


__all__ = [
    "ReferenceTable",
    "TestLoader",
    "create_sample_reference",
]
