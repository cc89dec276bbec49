"""
Run Function on Input JSON
==========================

Runs the rural delivery customization over a function input file and prints
the result JSON, the same shape the function host would receive.

Usage:
    python -m rural_delivery.scripts.run_function input.json
    python -m rural_delivery.scripts.run_function - < input.json
    python -m rural_delivery.scripts.run_function input.json --summary
"""

import argparse
import json
import sys
from pathlib import Path

import polars as pl

from rural_delivery.pipeline import (
    load_configuration,
    load_cart,
    normalize_methods,
    normalize_postcodes,
    classify,
    evaluate_options,
)
from rural_delivery.transform import cart_delivery_options_transform_run
from rural_delivery.version import VERSION


# =============================================================================
# HELPERS
# =============================================================================

def read_input(source: str) -> dict:
    """Read function input JSON from a file path, or stdin when source is '-'."""
    if source == "-":
        return json.load(sys.stdin)

    path = Path(source)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def print_summary(run_input: dict) -> None:
    """Print configuration, classification and per-option decisions."""
    config = load_configuration(run_input)
    cart = load_cart(run_input)
    keep_methods = normalize_methods(config.rural_methods_to_keep)
    postcodes = normalize_postcodes(config.postcode_entries)
    is_rural = classify(config, cart.destination)

    print("=" * 60)
    print(f"RURAL DELIVERY SUMMARY (v{VERSION})")
    print("=" * 60)
    print(f"  Enabled:          {config.enabled}")
    print(f"  Postcode tokens:  {len(postcodes):,}")
    print(f"  Keep methods:     {', '.join(sorted(keep_methods)) or '(none)'}")
    print(f"  Delivery groups:  {len(cart.groups):,}")
    print(f"  Destination zip:  {cart.destination.zip or '(none)'}")
    print(f"  Rural:            {is_rural}")

    if not (config.enabled and cart.groups and keep_methods):
        print("\n  Early exit - no options evaluated")
        return

    df = evaluate_options(cart, keep_methods, is_rural)
    print()
    with pl.Config(
        tbl_rows=-1,
        tbl_width_chars=400,
        fmt_str_lengths=200,
        tbl_hide_dataframe_shape=True,
    ):
        print(df.select([
            "group_index", "option_index", "handle", "title",
            "is_keep_method", "group_has_keep", "hide_rule", "hidden",
        ]))


# =============================================================================
# MAIN
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Run the rural delivery customization on a function input JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rural_delivery.scripts.run_function input.json
  python -m rural_delivery.scripts.run_function - < input.json
  python -m rural_delivery.scripts.run_function input.json --summary
        """
    )
    parser.add_argument(
        "input",
        type=str,
        help="Path to function input JSON, or '-' for stdin"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print configuration and per-option decisions before the result"
    )

    args = parser.parse_args()

    try:
        run_input = read_input(args.input)
    except (OSError, ValueError) as e:
        print(f"Error: could not read input: {e}", file=sys.stderr)
        sys.exit(1)

    if args.summary:
        print_summary(run_input)
        print("\n" + "=" * 60)
        print("RESULT")
        print("=" * 60)

    result = cart_delivery_options_transform_run(run_input)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
