"""
Standalone Verification Module for the RateVault conversion engine.

This module checks the engine against reference conversion tables. It is
isolated from the main codebase and imports the engine as a dependency.

Key Components:
- schemas: JSON schema definitions for reference tables
- loader: Discovers and loads reference tables from test_values/
- runner: Executes the engine for every case
- comparator: Computes error statistics
- reporter: Generates Excel validation reports
- cli: Command-line interface

Usage:
    python run_verification.py [--category ID] [--output PATH]
"""

from .schemas import REFERENCE_SCHEMA, ValidationError, validate_reference
from .loader import ReferenceTable, TestLoader, create_sample_reference
from .runner import CaseResult, TableResult, TestRunner
from .comparator import CaseComparison, TableComparison, compare_case, compare_table
from .reporter import VerificationReporter, generate_markdown_summary

__all__ = [
    "REFERENCE_SCHEMA",
    "ValidationError",
    "validate_reference",
    "ReferenceTable",
    "TestLoader",
    "create_sample_reference",
    "CaseResult",
    "TableResult",
    "TestRunner",
    "CaseComparison",
    "TableComparison",
    "compare_case",
    "compare_table",
    "VerificationReporter",
    "generate_markdown_summary",
]
