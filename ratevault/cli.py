"""
Command-Line Interface for the unit converter.

Usage:
    ratevault convert VALUE FROM TO [--category CATEGORY]
    ratevault categories
    ratevault units CATEGORY

Examples:
    ratevault convert 1 mi km             # 1 mi = 1.609344 km
    ratevault convert 98.6 f c            # category inferred from the first unit
    ratevault convert 1 c mps --category speed
"""

import argparse
import logging
import sys
from typing import List, Optional

from .catalog import get_category, get_unit, list_categories
from .config import normalize_number_system
from .errors import ConversionError
from .formatting import format_value
from .settings import load_config
from .units import convert

logger = logging.getLogger(__name__)


def run_convert(value: float, from_unit_id: str, to_unit_id: str,
                category_id: Optional[str] = None, number_system: str = "international") -> int:
    if category_id is None:
        found = get_unit(from_unit_id)
        if found is None:
            print(f"Unknown unit: {from_unit_id}", file=sys.stderr)
            return 1
        category_id = found[1].id
        logger.debug("Inferred category %s from unit %s", category_id, from_unit_id)

    try:
        result = convert(value, from_unit_id, to_unit_id, category_id)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    category = get_category(category_id)
    from_unit = category.get_unit(from_unit_id) if category else None
    to_unit = category.get_unit(to_unit_id) if category else None
    from_symbol = from_unit.symbol if from_unit else from_unit_id
    to_symbol = to_unit.symbol if to_unit else to_unit_id
    print(f"{format_value(value, number_system)} {from_symbol} = {format_value(result, number_system)} {to_symbol}")
    return 0


def list_category_table() -> int:
    print(f"{'ID':<14}{'Name':<18}{'Units':>5}")
    print("-" * 37)
    for category in list_categories():
        print(f"{category.id:<14}{category.name:<18}{len(category.units):>5}")
    return 0


def list_unit_table(category_id: str) -> int:
    category = get_category(category_id)
    if category is None:
        print(f"Unknown category: {category_id}", file=sys.stderr)
        return 1

    print(f"\n{category.icon} {category.name} (base unit: {category.base_unit.symbol})")
    print("-" * 60)
    for unit in category.units:
        print(f"  {unit.id:<18}{unit.symbol:<10}{unit.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratevault",
        description="Convert values between units of length, weight, temperature and more",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ratevault convert 1 mi km                    # Linear conversion
  ratevault convert 0 c f                      # Temperature
  ratevault convert 8 l100km mpg_us            # Fuel economy
  ratevault units length                       # List units in a category
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert a value")
    convert_parser.add_argument("value", type=float, help="Value to convert")
    convert_parser.add_argument("from_unit", help="Source unit id (e.g. mi)")
    convert_parser.add_argument("to_unit", help="Target unit id (e.g. km)")
    convert_parser.add_argument(
        "--category", "-c",
        help="Category id; inferred from the source unit when omitted"
    )
    convert_parser.add_argument(
        "--number-system", "-n",
        default=None,
        help="Digit grouping: international or indian (default: from RATEVAULT_NUMBER_SYSTEM)"
    )

    subparsers.add_parser("categories", help="List unit categories")

    units_parser = subparsers.add_parser("units", help="List the units of a category")
    units_parser.add_argument("category", help="Category id (e.g. length)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "categories":
        return list_category_table()
    if args.command == "units":
        return list_unit_table(args.category)

    number_system = normalize_number_system(args.number_system or load_config().NUMBER_SYSTEM)
    return run_convert(args.value, args.from_unit, args.to_unit, args.category, number_system)


if __name__ == "__main__":
    sys.exit(main())
