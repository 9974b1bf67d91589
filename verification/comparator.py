"""
Error Comparator for Verification Module.

Computes error statistics between engine outputs and reference values.
Provides per-case and per-table metrics for validation.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .runner import CaseResult, TableResult


# =============================================================================
# Default Tolerances
# =============================================================================

# Engine results are rounded to 6 decimals, so half a unit in the last place
DEFAULT_ABS_TOLERANCE = 5e-7
# Relative tolerance (%) for large magnitudes where 6 decimals are noise
DEFAULT_REL_TOLERANCE = 1e-6


@dataclass
class CaseComparison:
    """
    Comparison result for a single reference case.

    Attributes:
        key: Human-readable case identifier ("1 mi->km")
        actual: Engine value (None if the engine raised)
        expected: Reference value (None for expected errors)
        abs_error: Absolute error
        rel_error: Relative error (%)
        tolerance: Absolute tolerance applied
        passed: Whether the case is within tolerance
        expected_error: Exception name the reference demands, if any
        actual_error: Exception name the engine raised, if any
    """
    key: str
    actual: Optional[float] = None
    expected: Optional[float] = None
    abs_error: float = 0.0
    rel_error: float = 0.0
    tolerance: float = DEFAULT_ABS_TOLERANCE
    passed: bool = True
    expected_error: str = ""
    actual_error: str = ""
    note: str = ""


@dataclass
class TableComparison:
    """
    Comparison results for a reference table.

    Attributes:
        table_id: Reference table identifier
        category: Category the cases ran in
        cases: CaseComparison per case
        max_abs: Maximum absolute error
        max_rel: Maximum relative error (%)
        rms: Root mean square of absolute errors
    """
    table_id: str
    category: str
    cases: List[CaseComparison] = field(default_factory=list)
    max_abs: float = 0.0
    max_rel: float = 0.0
    rms: float = 0.0

    @property
    def passed_count(self) -> int:
        return sum(1 for case in self.cases if case.passed)

    @property
    def failed_count(self) -> int:
        return len(self.cases) - self.passed_count

    @property
    def overall_pass(self) -> bool:
        return bool(self.cases) and self.failed_count == 0


# =============================================================================
# Comparison Functions
# =============================================================================

def relative_error(actual: float, expected: float) -> float:
    """Relative error in percent; 100% when the reference is zero and the value is not."""
    abs_err = abs(actual - expected)
    if abs(expected) > 1e-12:
        return 100.0 * abs_err / abs(expected)
    return 0.0 if abs_err < 1e-12 else 100.0


def compare_case(
    result: CaseResult,
    case: Dict[str, Any],
    table_tolerance: Optional[float] = None,
) -> CaseComparison:
    """
    Compare one engine result against its reference case.

    A case passes when its absolute error is within tolerance or its relative
    error is within DEFAULT_REL_TOLERANCE.  Expected-error cases pass when the
    engine raised an exception of that class name.
    """
    tolerance = case.get("tolerance", table_tolerance)
    comparison = CaseComparison(
        key=result.key,
        actual=result.actual,
        tolerance=float(tolerance) if tolerance is not None else DEFAULT_ABS_TOLERANCE,
        actual_error=result.error_type,
        note=case.get("note", ""),
    )

    if "expected_error" in case:
        comparison.expected_error = case["expected_error"]
        comparison.passed = result.error_type == comparison.expected_error
        return comparison

    comparison.expected = float(case["expected"])
    if not result.success or result.actual is None:
        comparison.passed = False
        comparison.abs_error = math.inf
        comparison.rel_error = 100.0
        return comparison

    comparison.abs_error = abs(result.actual - comparison.expected)
    comparison.rel_error = relative_error(result.actual, comparison.expected)
    comparison.passed = (
        comparison.abs_error <= comparison.tolerance
        or comparison.rel_error <= DEFAULT_REL_TOLERANCE
    )
    return comparison


def compare_table(table_result: TableResult) -> TableComparison:
    """
    Compare every case of a table run against its reference values.

    Args:
        table_result: Engine output for one reference table

    Returns:
        TableComparison with per-case and aggregate metrics
    """
    table = table_result.table
    comparison = TableComparison(table_id=table.table_id, category=table.category)

    for result in table_result.results:
        case = table.cases[result.index]
        comparison.cases.append(compare_case(result, case, table.tolerance))

    numeric = [
        case for case in comparison.cases
        if not case.expected_error and math.isfinite(case.abs_error)
    ]
    if numeric:
        abs_errors = [case.abs_error for case in numeric]
        comparison.max_abs = max(abs_errors)
        comparison.max_rel = max(case.rel_error for case in numeric)
        comparison.rms = math.sqrt(sum(e ** 2 for e in abs_errors) / len(abs_errors))

    return comparison


__all__ = [
    "CaseComparison",
    "TableComparison",
    "DEFAULT_ABS_TOLERANCE",
    "DEFAULT_REL_TOLERANCE",
    "relative_error",
    "compare_case",
    "compare_table",
]
