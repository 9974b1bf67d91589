"""
Excel Report Generator for Verification Module.

Generates Excel workbooks with:
- A summary sheet (one row per reference table)
- A sheet per table (Engine vs Reference vs Errors)
- Conditional formatting for pass/fail and tolerances
"""

import io
import math
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from xlsxwriter.workbook import Workbook

from .comparator import TableComparison, DEFAULT_REL_TOLERANCE

ENGINE = "xlsxwriter"
_TABLE_START_ROW = 4


class VerificationReporter:
    """
    Generates Excel verification reports.

    Usage:
        reporter = VerificationReporter()
        reporter.add_table_comparison(comparison)
        reporter.save("reports/verification.xlsx")
    """

    def __init__(self, output_path: Optional[str] = None):
        """
        Initialize the reporter.

        Args:
            output_path: Path to save the Excel file (optional, can set later)
        """
        self.output_path = Path(output_path) if output_path else None
        self.comparisons: List[TableComparison] = []

    def add_table_comparison(self, comparison: TableComparison):
        """Add a table comparison to the report."""
        self.comparisons.append(comparison)

    def summary_frame(self) -> pd.DataFrame:
        rows = [
            {
                "Table": comparison.table_id,
                "Category": comparison.category,
                "Status": "PASS" if comparison.overall_pass else "FAIL",
                "Cases": len(comparison.cases),
                "Passed": comparison.passed_count,
                "Failed": comparison.failed_count,
                "Max Abs Error": comparison.max_abs,
                "Max Rel Error (%)": comparison.max_rel,
            }
            for comparison in self.comparisons
        ]
        return pd.DataFrame(rows, columns=[
            "Table", "Category", "Status", "Cases", "Passed", "Failed",
            "Max Abs Error", "Max Rel Error (%)",
        ])

    @staticmethod
    def table_frame(comparison: TableComparison) -> pd.DataFrame:
        rows = []
        for case in comparison.cases:
            numeric = not case.expected_error
            rows.append({
                "Case": case.key,
                "Engine": case.actual if case.actual is not None else case.actual_error,
                "Reference": case.expected if numeric else case.expected_error,
                "Abs Error": case.abs_error if numeric and math.isfinite(case.abs_error) else None,
                "Rel Error (%)": case.rel_error if numeric else None,
                "Tolerance": case.tolerance if numeric else None,
                "Status": "PASS" if case.passed else "FAIL",
                "Note": case.note,
            })
        return pd.DataFrame(rows, columns=[
            "Case", "Engine", "Reference", "Abs Error", "Rel Error (%)",
            "Tolerance", "Status", "Note",
        ])

    def generate(self, output_path: Optional[str] = None) -> bytes:
        """
        Generate the Excel workbook.

        Args:
            output_path: Optional path to save file (overrides constructor path)

        Returns:
            Excel file as bytes
        """
        if output_path:
            self.output_path = Path(output_path)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine=ENGINE) as writer:
            formats = self._create_formats(writer.book)
            self._write_summary_sheet(writer, formats)
            for comparison in self.comparisons:
                self._write_table_sheet(writer, formats, comparison)

        data = output.getvalue()
        if self.output_path:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "wb") as f:
                f.write(data)

        return data

    def save(self, output_path: str):
        """
        Generate and save the Excel report.

        Args:
            output_path: Path to save the file
        """
        self.generate(output_path)

    def _create_formats(self, workbook: Workbook) -> Dict[str, Any]:
        """Create all cell formats for the workbook."""
        return {
            "header_main": workbook.add_format({
                'bold': True, 'font_size': 14, 'bg_color': '#1F4E79',
                'font_color': 'white', 'border': 1, 'align': 'center', 'valign': 'vcenter'
            }),
            "pass": workbook.add_format({
                'bold': True, 'bg_color': '#C6EFCE', 'font_color': '#006100'
            }),
            "fail": workbook.add_format({
                'bold': True, 'bg_color': '#FFC7CE', 'font_color': '#9C0006'
            }),
            "num_6dec": workbook.add_format({'num_format': '0.000000'}),
            "sci": workbook.add_format({'num_format': '0.00E+00'}),
            "error_good": workbook.add_format({'bg_color': '#C6EFCE', 'font_color': '#006100'}),
            "error_bad": workbook.add_format({'bg_color': '#FFC7CE', 'font_color': '#9C0006'}),
        }

    def _write_status_formats(self, ws, formats: Dict, column: int, last_row: int):
        for value, fmt in (("PASS", formats["pass"]), ("FAIL", formats["fail"])):
            ws.conditional_format(_TABLE_START_ROW + 1, column, last_row, column, {
                'type': 'cell', 'criteria': '==', 'value': f'"{value}"', 'format': fmt,
            })

    def _write_summary_sheet(self, writer: pd.ExcelWriter, formats: Dict):
        """Write the summary sheet with overall results."""
        frame = self.summary_frame()
        frame.to_excel(writer, sheet_name="Summary", startrow=_TABLE_START_ROW, index=False)
        ws = writer.sheets["Summary"]

        ws.merge_range(0, 0, 0, len(frame.columns) - 1, "RateVault Verification Report", formats["header_main"])
        ws.write(1, 0, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        ws.write(2, 0, f"Total Tables: {len(self.comparisons)}")

        last_row = _TABLE_START_ROW + max(len(frame), 1)
        self._write_status_formats(ws, formats, frame.columns.get_loc("Status"), last_row)

        ws.set_column(0, 1, 16)
        ws.set_column(2, 5, 10)
        ws.set_column(6, 6, 14, formats["sci"])
        ws.set_column(7, 7, 18, formats["sci"])

    def _write_table_sheet(self, writer: pd.ExcelWriter, formats: Dict, comparison: TableComparison):
        """Write a sheet for a single reference table."""
        # Excel sheet names are limited to 31 characters
        sheet_name = comparison.table_id[:31].replace("/", "-").replace("\\", "-")
        frame = self.table_frame(comparison)
        frame.to_excel(writer, sheet_name=sheet_name, startrow=_TABLE_START_ROW, index=False)
        ws = writer.sheets[sheet_name]

        ws.merge_range(0, 0, 0, len(frame.columns) - 1,
                       f"Verification: {comparison.table_id} ({comparison.category})",
                       formats["header_main"])
        status = "PASS" if comparison.overall_pass else "FAIL"
        ws.write(2, 0, f"Status: {status}", formats["pass"] if comparison.overall_pass else formats["fail"])
        ws.write(2, 2, f"Passed: {comparison.passed_count}/{len(comparison.cases)}")
        ws.write(2, 4, f"Max Rel Error: {comparison.max_rel:.3g}%")

        last_row = _TABLE_START_ROW + max(len(frame), 1)
        rel_col = frame.columns.get_loc("Rel Error (%)")
        ws.conditional_format(_TABLE_START_ROW + 1, rel_col, last_row, rel_col, {
            'type': 'cell', 'criteria': '<=', 'value': DEFAULT_REL_TOLERANCE, 'format': formats["error_good"],
        })
        self._write_status_formats(ws, formats, frame.columns.get_loc("Status"), last_row)

        ws.set_column(0, 0, 28)
        ws.set_column(1, 2, 18, formats["num_6dec"])
        ws.set_column(3, 5, 14, formats["sci"])
        ws.set_column(6, 6, 10)
        ws.set_column(7, 7, 30)


def generate_markdown_summary(comparisons: List[TableComparison]) -> str:
    """
    Generate a Markdown summary of verification results.

    Args:
        comparisons: List of TableComparison objects

    Returns:
        Markdown formatted string
    """
    lines = [
        "# RateVault Verification Summary",
        "",
        f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        f"**Total Tables:** {len(comparisons)}",
        "",
        "## Results",
        "",
        "| Table | Category | Status | Passed | Max Rel Error (%) |",
        "|-------|----------|--------|--------|-------------------|",
    ]

    passed = 0
    for comp in comparisons:
        status = "✅ PASS" if comp.overall_pass else "❌ FAIL"
        if comp.overall_pass:
            passed += 1
        lines.append(
            f"| {comp.table_id} | {comp.category} | {status} "
            f"| {comp.passed_count}/{len(comp.cases)} | {comp.max_rel:.3g} |"
        )

    failures = [(comp.table_id, case) for comp in comparisons for case in comp.cases if not case.passed]
    if failures:
        lines.extend(["", "## Failed Cases", ""])
        for table_id, case in failures:
            if case.expected_error:
                detail = f"expected {case.expected_error}, got {case.actual_error or case.actual}"
            else:
                detail = f"expected {case.expected!r}, got {case.actual if case.actual is not None else case.actual_error}"
            lines.append(f"- `{table_id}` {case.key}: {detail}")

    lines.extend([
        "",
        f"**Overall:** {passed}/{len(comparisons)} passed",
    ])

    return "\n".join(lines)


__all__ = [
    "VerificationReporter",
    "generate_markdown_summary",
]
