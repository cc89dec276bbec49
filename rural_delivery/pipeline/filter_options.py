"""
Filter Delivery Options

Builds a frame of every delivery option in the cart, flags keep-list matches,
and evaluates the hide rule for the destination's classification.

Frame stages (see columns.py):
    1. build_options_frame  - one row per option, in cart traversal order
    2. supplement_options   - lowercased keys, keep flags, per-group keep window
    3. apply_rule           - hidden flag from the selected HideRule
"""

import polars as pl

from ..rules import HideRule, get_rule
from .columns import INPUT_COLS, SUPPLEMENT_COLS, validate_columns
from .load_cart import Cart


OPTIONS_SCHEMA = {
    "group_index": pl.Int64,
    "option_index": pl.Int64,
    "handle": pl.Utf8,
    "title": pl.Utf8,
}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def filter_options(cart: Cart, keep_methods: frozenset[str], is_rural: bool) -> list[str]:
    """
    Get the handles of options to hide, in cart traversal order.

    Options with an empty handle are never returned.

    Args:
        cart: Loaded cart
        keep_methods: Normalized keep-list tokens
        is_rural: Destination classification

    Returns:
        Handles to hide (groups in cart order, options in group order)
    """
    df = evaluate_options(cart, keep_methods, is_rural)

    return (
        df
        .filter(pl.col("hidden") & (pl.col("handle") != ""))
        .sort(["group_index", "option_index"])
        .get_column("handle")
        .to_list()
    )


def evaluate_options(cart: Cart, keep_methods: frozenset[str], is_rural: bool) -> pl.DataFrame:
    """Build, supplement and decide the options frame (all columns kept)."""
    df = build_options_frame(cart)
    df = supplement_options(df, keep_methods)
    df = apply_rule(df, get_rule(is_rural))
    return df


# =============================================================================
# STAGES
# =============================================================================

def build_options_frame(cart: Cart) -> pl.DataFrame:
    """One row per delivery option, in cart traversal order."""
    rows = {c: [] for c in INPUT_COLS}
    for group_index, group in enumerate(cart.groups):
        for option_index, option in enumerate(group.options):
            rows["group_index"].append(group_index)
            rows["option_index"].append(option_index)
            rows["handle"].append(option.handle)
            rows["title"].append(option.title)

    return pl.DataFrame(rows, schema=OPTIONS_SCHEMA)


def supplement_options(df: pl.DataFrame, keep_methods: frozenset[str]) -> pl.DataFrame:
    """
    Add keep-list matching columns.

    Handle and title are matched independently; either one on the keep list
    makes the option a keep method.
    """
    validate_columns(df.columns, INPUT_COLS)

    df = df.with_columns([
        pl.col("handle").str.to_lowercase().alias("handle_key"),
        pl.col("title").str.to_lowercase().alias("title_key"),
    ])

    if keep_methods:
        keep = sorted(keep_methods)
        is_keep = pl.col("handle_key").is_in(keep) | pl.col("title_key").is_in(keep)
    else:
        is_keep = pl.lit(False)

    df = df.with_columns(is_keep.alias("is_keep_method"))

    # Window over the group: does this group offer at least one keep method?
    return df.with_columns(
        pl.col("is_keep_method").any().over("group_index").alias("group_has_keep")
    )


def apply_rule(df: pl.DataFrame, rule: type[HideRule]) -> pl.DataFrame:
    """Add the hidden flag for a single hide rule."""
    validate_columns(df.columns, SUPPLEMENT_COLS)

    return df.with_columns([
        pl.lit(rule.name).alias("hide_rule"),
        rule.hide().fill_null(False).alias("hidden"),
    ])
