"""
Demo — демонстрация публичного API fractionlib

Печатает примеры вычислений с Fraction и MixedNumber в stdout.

Использование:
    fractionlib-demo [--section {all,fraction,mixed}] [-v]
    python -m fractionlib.demo
"""

import argparse
import logging
import sys
from typing import Sequence

from fractionlib.core.domain import Fraction, MixedNumber

LOG = logging.getLogger(__name__)

SECTIONS = ("all", "fraction", "mixed")


# =============================================================================
# FRACTION EXAMPLES
# =============================================================================


def print_fraction_examples() -> None:
    print("--- Fraction Examples ---")

    one_half = Fraction(1, 2)
    one_third = Fraction(1, 3)
    two_thirds = Fraction(2, 3)

    print(f"1/2 = {one_half}")
    print(f"1/3 = {one_third}")
    print(f"2/3 = {two_thirds}")
    print()

    LOG.debug("Fraction arithmetic")
    print("Arithmetic Operations:")
    print(f"1/2 + 1/3 = {one_half + one_third}")
    print(f"2/3 - 1/2 = {two_thirds - one_half}")
    print(f"1/2 * 2/3 = {one_half * two_thirds}")
    print(f"2/3 / 1/2 = {two_thirds / one_half}")
    print()

    print("Automatic Simplification:")
    print(f"6/8 simplifies to {Fraction(6, 8)}")
    print()

    LOG.debug("Fraction comparisons")
    print("Comparisons:")
    print(f"1/2 < 2/3? {one_half < two_thirds}")
    print(f"1/2 == 2/4? {one_half == Fraction(2, 4)}")
    print(f"2/3 > 1/3? {two_thirds > one_third}")
    print()

    print("Conversions:")
    print(f"1/2 as float: {float(one_half)}")
    print(f"2/3 as decimal: {two_thirds.to_decimal():.4f}")
    print(f"Integer 5 as fraction: {Fraction.from_int(5)}")
    print()

    LOG.debug("Fraction parsing")
    print("Parsing:")
    print(f"Parsed '3/4': {Fraction.parse('3/4')}")
    print(f"Parsed '7': {Fraction.parse('7')}")
    print()


# =============================================================================
# MIXED NUMBER EXAMPLES
# =============================================================================


def print_mixed_examples() -> None:
    print("--- Mixed Number Examples ---")

    two_and_half = MixedNumber(2, 1, 2)
    one_and_quarter = MixedNumber(1, 1, 4)
    three_quarters = MixedNumber(0, 3, 4)

    print(f"2 1/2 = {two_and_half}")
    print(f"1 1/4 = {one_and_quarter}")
    print(f"3/4 = {three_quarters}")
    print()

    LOG.debug("Mixed number arithmetic")
    print("Mixed Number Arithmetic:")
    print(f"2 1/2 + 1 1/4 = {two_and_half + one_and_quarter}")
    print(f"2 1/2 - 1 1/4 = {two_and_half - one_and_quarter}")
    print(f"2 1/2 * 1 1/4 = {two_and_half * one_and_quarter}")
    print(f"2 1/2 / 1 1/4 = {two_and_half / one_and_quarter}")
    print()

    print("Conversions:")
    improper = two_and_half.to_improper_fraction()
    print(f"2 1/2 as improper fraction: {improper}")
    print(f"5/2 as mixed number: {MixedNumber.from_fraction(improper)}")
    print()

    LOG.debug("Mixed number parsing")
    print("Parsing Mixed Numbers:")
    for text in ("3 1/4", "7/4", "5"):
        print(f"Parsed '{text}': {MixedNumber.parse(text)}")
    print()

    print("Complex Calculation:")
    print("Recipe scaling example:")
    print("Original recipe calls for 2 1/2 cups flour")
    print("We want to make 1 1/2 times the recipe")
    original_amount = MixedNumber(2, 1, 2)
    scale_factor = MixedNumber(1, 1, 2)
    scaled_amount = original_amount * scale_factor
    print(f"{original_amount} * {scale_factor} = {scaled_amount} cups flour needed")
    print()

    LOG.debug("Sorting measurements")
    print("Comparison Example:")
    measurements = [
        MixedNumber(1, 1, 4),
        MixedNumber(2, 1, 2),
        MixedNumber(1, 3, 4),
        MixedNumber(2, 0, 1),
    ]
    print("Unsorted measurements:")
    for measurement in measurements:
        print(f"  {measurement}")
    print()
    print("Sorted measurements:")
    for measurement in sorted(measurements):
        print(f"  {measurement}")
    print()


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fractionlib-demo",
        description="Print example computations with fractions and mixed numbers.",
    )
    parser.add_argument(
        "--section",
        "-s",
        choices=SECTIONS,
        default="all",
        help="which group of examples to print (default: all)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="log progress to stderr"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    LOG.debug("Running demo section '%s'", args.section)

    print("=== fractionlib Demo ===")
    print()
    if args.section in ("all", "fraction"):
        print_fraction_examples()
    if args.section in ("all", "mixed"):
        print_mixed_examples()
    print("=== Demo Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
