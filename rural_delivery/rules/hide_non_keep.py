"""
Hide Non-Keep Methods (HIDE_NON_KEEP)

Rural destinations only see the keep-list methods.

If a group offers no keep-list method at all, nothing in that group is hidden,
so a rural checkout never ends up with zero delivery options.
"""

import polars as pl
from .base import HideRule, RURAL


class HIDE_NON_KEEP(HideRule):
    """Rural - hide every option whose handle and title both miss the keep list."""

    # Identity
    name = "HIDE_NON_KEEP"

    # Scope
    destination = RURAL

    # Fallback (leave the group alone when it has no keep option)
    requires_keep_option = True

    @classmethod
    def conditions(cls) -> pl.Expr:
        return ~pl.col("is_keep_method")
