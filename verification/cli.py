"""
Command-Line Interface for Verification Module.

Provides CLI commands for running verification tables and generating reports.

Usage:
    python run_verification.py [OPTIONS]

Options:
    --category ID       Run only specified reference table(s)
    --output PATH       Output Excel report path
    --verbose           Print detailed progress
    --list              List available reference tables
    --create-sample ID  Create sample reference file for a category
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .loader import TestLoader, create_sample_reference
from .runner import TestRunner
from .comparator import compare_table, TableComparison
from .reporter import VerificationReporter, generate_markdown_summary


def run_verification(
    test_dir: str = "test_values",
    categories: Optional[List[str]] = None,
    output_path: str = "reports/verification_report.xlsx",
    verbose: bool = False,
) -> List[TableComparison]:
    """
    Run the verification suite.

    Args:
        test_dir: Path to test_values directory
        categories: Optional list of table ids to run (None = all)
        output_path: Path for Excel report
        verbose: Print progress messages

    Returns:
        List of TableComparison results
    """
    loader = TestLoader(test_dir)

    if categories:
        tables = [loader.load_single(c) for c in categories]
        tables = [t for t in tables if t is not None]
    else:
        tables = loader.discover()

    if not tables:
        print(f"No reference tables found in {test_dir}/")
        return []

    if verbose:
        print(f"Found {len(tables)} reference table(s)")

    runner = TestRunner(verbose=verbose)
    table_results = runner.run_all(tables)
    if not table_results:
        print("No valid reference tables to run")
        return []

    comparisons: List[TableComparison] = []
    reporter = VerificationReporter(output_path)

    for table_result in table_results:
        comparison = compare_table(table_result)
        comparisons.append(comparison)
        reporter.add_table_comparison(comparison)

        if verbose:
            status = "PASS" if comparison.overall_pass else "FAIL"
            print(f"  {comparison.table_id}: {status} "
                  f"({comparison.passed_count}/{len(comparison.cases)} cases, "
                  f"max error: {comparison.max_rel:.3g}%)")
            for case in comparison.cases:
                if not case.passed:
                    print(f"    ✗ {case.key}: got {case.actual if case.actual is not None else case.actual_error}")

    reporter.save(output_path)
    print(f"\nReport saved to: {output_path}")

    passed = sum(1 for c in comparisons if c.overall_pass)
    print(f"\nSummary: {passed}/{len(comparisons)} passed")

    return comparisons


def list_test_cases(test_dir: str = "test_values"):
    """List available reference tables."""
    loader = TestLoader(test_dir)
    tables = loader.discover()

    if not tables:
        print(f"No reference tables found in {test_dir}/")
        return

    print(f"\nAvailable reference tables in {test_dir}/:")
    print("-" * 60)

    for table in tables:
        status = "✓" if table.is_valid else "✗"
        print(f"  {status} {table.table_id}")
        print(f"      Reference: {table.reference_path.name}")
        print(f"      Category: {table.category or 'None'}")
        print(f"      Cases: {len(table.cases)}")
        if not table.is_valid:
            for error in table.errors[:2]:
                print(f"      Error: {error.path}: {error.message}")
        print()


def create_sample(category_id: str, test_dir: str = "test_values"):
    """Create a sample reference file for a category."""
    test_path = Path(test_dir)
    test_path.mkdir(parents=True, exist_ok=True)

    output_path = test_path / f"{category_id}_reference.json"
    create_sample_reference(category_id, output_path)

    print(f"Created sample reference file: {output_path}")
    print("Edit this file with verified reference values.")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="RateVault Verification Suite - Check the conversion engine against reference tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_verification.py                        # Run all tables
  python run_verification.py --category length      # Run specific table
  python run_verification.py --list                 # List available tables
  python run_verification.py --create-sample speed  # Create sample reference file
        """
    )

    parser.add_argument(
        "--category", "-c",
        action="append",
        help="Reference table id(s) to run (can specify multiple times)"
    )
    parser.add_argument(
        "--output", "-o",
        default="reports/verification_report.xlsx",
        help="Output Excel report path (default: reports/verification_report.xlsx)"
    )
    parser.add_argument(
        "--test-dir", "-d",
        default="test_values",
        help="Directory containing reference files (default: test_values)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed progress"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available reference tables"
    )
    parser.add_argument(
        "--create-sample",
        metavar="CATEGORY",
        help="Create a sample reference file for the specified category"
    )
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Also output Markdown summary to console"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        list_test_cases(args.test_dir)
        return 0

    if args.create_sample:
        try:
            create_sample(args.create_sample, args.test_dir)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    comparisons = run_verification(
        test_dir=args.test_dir,
        categories=args.category,
        output_path=args.output,
        verbose=args.verbose,
    )

    if args.markdown and comparisons:
        print("\n" + generate_markdown_summary(comparisons))

    if not comparisons:
        return 1
    if all(c.overall_pass for c in comparisons):
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
