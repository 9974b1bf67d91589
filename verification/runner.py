"""
Test Runner for Verification Module.

Executes the conversion engine for every case of a reference table,
collecting results in a structured format for comparison.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ratevault import convert
from ratevault.errors import ConversionError

from .loader import ReferenceTable

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """
    Engine output for one reference case.

    Attributes:
        index: Position of the case in its table
        value: Input value
        from_unit: Source unit id
        to_unit: Target unit id
        actual: Converted value (None if the engine raised)
        success: Whether the conversion completed
        error_type: Exception class name if the engine raised
        error_message: Exception message if the engine raised
    """
    index: int
    value: float
    from_unit: str
    to_unit: str
    actual: Optional[float] = None
    success: bool = True
    error_type: str = ""
    error_message: str = ""

    @property
    def key(self) -> str:
        return f"{self.value:g} {self.from_unit}->{self.to_unit}"


@dataclass
class TableResult:
    """
    Complete result for a single reference table.

    Attributes:
        table: The reference table that was executed
        results: One CaseResult per case, in table order
    """
    table: ReferenceTable
    results: List[CaseResult] = field(default_factory=list)


class TestRunner:
    """
    Executes the conversion engine for reference tables.

    Usage:
        runner = TestRunner()
        table_result = runner.run_table(table)
    """

    __test__ = False

    def __init__(self, verbose: bool = False):
        """
        Initialize the test runner.

        Args:
            verbose: If True, print progress messages
        """
        self.verbose = verbose

    def run_case(self, category_id: str, index: int, case: Dict[str, Any]) -> CaseResult:
        """
        Convert a single reference case.

        Args:
            category_id: Category the conversion runs in
            index: Position of the case in its table
            case: Case dictionary with value/from/to

        Returns:
            CaseResult containing the engine output or the raised error
        """
        result = CaseResult(
            index=index,
            value=float(case["value"]),
            from_unit=case["from"],
            to_unit=case["to"],
        )

        try:
            result.actual = convert(result.value, result.from_unit, result.to_unit, category_id)
        except ConversionError as e:
            result.success = False
            result.error_type = type(e).__name__
            result.error_message = str(e)
            logger.debug("Case %d in %s raised %s: %s", index, category_id, result.error_type, e)

        return result

    def run_table(self, table: ReferenceTable) -> TableResult:
        """
        Run every case of a reference table.

        Args:
            table: ReferenceTable to execute

        Returns:
            TableResult containing one result per case
        """
        table_result = TableResult(table=table)

        if self.verbose:
            print(f"\nRunning reference table: {table.table_id} ({len(table.cases)} cases)")

        for index, case in enumerate(table.cases):
            table_result.results.append(self.run_case(table.category, index, case))

        return table_result

    def run_all(self, tables: List[ReferenceTable]) -> List[TableResult]:
        """
        Run all valid reference tables.

        Args:
            tables: List of reference tables to execute

        Returns:
            List of TableResult objects
        """
        results: List[TableResult] = []

        for table in tables:
            if table.is_valid:
                results.append(self.run_table(table))
            else:
                logger.warning("Skipping invalid reference table %s", table.table_id)
                if self.verbose:
                    print(f"\n⚠ Skipping invalid table: {table.table_id}")
                    for error in table.errors:
                        print(f"  - {error.path}: {error.message}")

        return results


__all__ = [
    "CaseResult",
    "TableResult",
    "TestRunner",
]
