"""
Build Configuration JSON
========================

Builds the rural shipping configuration blob for the delivery customization
metafield from postcode text, preset postcode tables, and keep-list methods.

Usage:
    python -m rural_delivery.scripts.build_config --preset north --methods "Rural Courier"
    python -m rural_delivery.scripts.build_config --postcodes "9013, 9012" --methods "rural shipping"
    python -m rural_delivery.scripts.build_config --preset all --methods "rural courier" --disabled
"""

import argparse
import sys

from rural_delivery.data import NAMESPACE, KEY, TYPE, PRESETS, get_preset, LIST_TEXT_SEPARATOR
from rural_delivery.settings import build_configuration, serialize_configuration


def collect_postcodes_text(postcodes_text: str | None, presets: list[str]) -> str:
    """Combine typed postcode text with preset tables into one form field value."""
    parts = [postcodes_text] if postcodes_text else []
    for region in presets:
        parts.append(LIST_TEXT_SEPARATOR.join(get_preset(region)))
    return "\n".join(parts)


def main():
    parser = argparse.ArgumentParser(
        description="Build the rural shipping configuration metafield JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Presets: {', '.join(sorted(PRESETS))}

Examples:
  python -m rural_delivery.scripts.build_config --preset north --methods "Rural Courier"
  python -m rural_delivery.scripts.build_config --postcodes "9013, 9012" --methods "rural shipping"
        """
    )
    parser.add_argument(
        "--postcodes",
        type=str,
        default="",
        help="Comma or newline separated postcodes"
    )
    parser.add_argument(
        "--preset",
        type=str,
        nargs="+",
        default=[],
        choices=sorted(PRESETS),
        help="Preset postcode tables to include"
    )
    parser.add_argument(
        "--methods",
        type=str,
        default="",
        help="Comma or newline separated method handles/titles to keep for rural carts"
    )
    parser.add_argument(
        "--disabled",
        action="store_true",
        help="Write the configuration with enabled=false"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print metafield coordinates and counts to stderr"
    )

    args = parser.parse_args()

    config = build_configuration(
        enabled=not args.disabled,
        postcodes_text=collect_postcodes_text(args.postcodes, args.preset),
        methods_text=args.methods,
    )

    if args.verbose:
        print("=" * 60, file=sys.stderr)
        print(f"Metafield:  {NAMESPACE}.{KEY} ({TYPE})", file=sys.stderr)
        print(f"Enabled:    {config['enabled']}", file=sys.stderr)
        print(f"Postcodes:  {len(config['postcodes']):,}", file=sys.stderr)
        print(f"Methods:    {len(config['ruralMethodsToKeep']):,}", file=sys.stderr)
        print("=" * 60, file=sys.stderr)

    if not config["ruralMethodsToKeep"]:
        print("Warning: no methods to keep - the function will make no changes", file=sys.stderr)

    print(serialize_configuration(config))


if __name__ == "__main__":
    main()
