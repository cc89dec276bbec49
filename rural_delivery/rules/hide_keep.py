"""
Hide Keep Methods (HIDE_KEEP)

Keep-list methods are rural-only extras, so standard (non-rural) destinations
don't see them.
"""

import polars as pl
from .base import HideRule, STANDARD


class HIDE_KEEP(HideRule):
    """Standard - hide every option whose handle or title is on the keep list."""

    # Identity
    name = "HIDE_KEEP"

    # Scope
    destination = STANDARD

    # Uses default requires_keep_option = False

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.col("is_keep_method")
