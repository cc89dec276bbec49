"""
Column Schema Definitions

Documents the columns of the delivery options frame at each stage.
"""


# =============================================================================
# INPUT COLUMNS (built from the cart by build_options_frame)
# =============================================================================

INPUT_COLS = [
    "group_index",              # Position of the delivery group in the cart
    "option_index",             # Position of the option within its group
    "handle",                   # Option handle as supplied (emitted in operations)
    "title",                    # Option title as supplied
]


# =============================================================================
# SUPPLEMENT COLUMNS (added by supplement_options)
# =============================================================================

SUPPLEMENT_COLS = [
    "handle_key",               # Lowercased handle
    "title_key",                # Lowercased title
    "is_keep_method",           # Handle or title is on the keep list
    "group_has_keep",           # Any option in the same group is a keep method
]


# =============================================================================
# DECISION COLUMNS (added by apply_rule)
# =============================================================================

DECISION_COLS = [
    "hide_rule",                # Name of the rule that was evaluated
    "hidden",                   # Rule hides this option
]


ALL_COLS = INPUT_COLS + SUPPLEMENT_COLS + DECISION_COLS


def validate_columns(columns: list[str], required: list[str]) -> None:
    """
    Check that all required columns are present.

    Raises:
        ValueError: If any required column is missing
    """
    missing = [c for c in required if c not in columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")
