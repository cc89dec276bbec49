"""
Hide Rule Base Class

Shared base class for delivery option hide rules.
"""

from abc import ABC
import polars as pl


# Destination classes a rule can apply to
RURAL = "rural"
STANDARD = "standard"

DESTINATIONS = (RURAL, STANDARD)


class HideRule(ABC):
    """
    Base class for all hide rules.

    Rules are evaluated over the options frame built by filter_options (see
    pipeline/columns.py for the columns available to conditions()).

    Attributes:
        IDENTITY
            name                 - Short code (e.g., "HIDE_NON_KEEP")

        SCOPE
            destination          - "rural" or "standard"; exactly one rule per destination

        FALLBACK
            requires_keep_option - Only hide within groups that have at least one
                                   keep option, so a group is never left empty
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # SCOPE
    # -------------------------------------------------------------------------
    destination: str

    # -------------------------------------------------------------------------
    # FALLBACK
    # -------------------------------------------------------------------------
    requires_keep_option: bool = False

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when an option is hidden.

        Default hides nothing. Override in concrete rules.
        """
        return pl.lit(False)

    @classmethod
    def hide(cls) -> pl.Expr:
        """conditions() gated by the keep-option fallback when required."""
        expr = cls.conditions()
        if cls.requires_keep_option:
            expr = expr & pl.col("group_has_keep")
        return expr
