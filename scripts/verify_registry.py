#!/usr/bin/env python3
"""Verify the CurrencyMetadata registry against Babel CLDR data.

Checks:
    1. Structural: Registry codes not recognized by Babel.
    2. Discrepancies: Registry fraction digits differ from
       babel.numbers.get_currency_precision().

Discrepancies are informational. Formatting always uses Babel's value; the
registry digits are display metadata.

Exit codes:
    0: All checks passed (discrepancies are warnings, not failures).
    1: Structural errors (unknown currencies, import failures).

Usage:
    verify_registry.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys


def _check_unrecognized(registry: dict[str, int], babel_currencies: set[str]) -> list[str]:
    """Check registry currencies not recognized by Babel."""
    return [
        f"  {code}: In CurrencyMetadata but not recognized by Babel"
        for code in registry
        if code not in babel_currencies
    ]


def _check_discrepancies(registry: dict[str, int], babel_currencies: set[str]) -> list[str]:
    """Compare registry digits against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    return [
        f"  {code}: registry={digits}, Babel CLDR={get_currency_precision(code)}"
        for code, digits in sorted(registry.items())
        if code in babel_currencies and get_currency_precision(code) != digits
    ]


def _print_section(header: str, lines: list[str]) -> None:
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Verify CurrencyMetadata against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every registry entry with its Babel precision.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run registry verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import get_currency_precision, list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from kurrency import CurrencyMetadata  # noqa: PLC0415

    registry = {entry.code: entry.fraction_digits for entry in CurrencyMetadata.get_all()}
    babel_currencies = list_currencies()

    errors = _check_unrecognized(registry, babel_currencies)
    discrepancies = _check_discrepancies(registry, babel_currencies)

    print("CurrencyMetadata Verification")
    print("=" * 50)
    print(f"Registry entries: {len(registry)}")
    print(f"Babel currencies: {len(babel_currencies)}")
    print()

    if args.verbose:
        for code, digits in registry.items():
            babel_digits = get_currency_precision(code) if code in babel_currencies else "-"
            print(f"  {code}: registry={digits}, Babel={babel_digits}")
        print()

    _print_section("[ERROR] Structural errors", errors)
    _print_section("[WARN] Registry vs Babel discrepancies", discrepancies)

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    if discrepancies:
        print(f"[PASS] {len(discrepancies)} discrepancy(ies).")
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
