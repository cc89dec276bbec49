"""
Hide Rules Package

Exports all hide rule classes and the lookup by destination class.

Each destination class (rural, standard) has exactly one rule. The filter picks
the rule for the cart's classification and evaluates it over every option.
"""

from .base import HideRule, RURAL, STANDARD, DESTINATIONS
from .hide_non_keep import HIDE_NON_KEEP
from .hide_keep import HIDE_KEEP


# All rules
ALL = [HIDE_NON_KEEP, HIDE_KEEP]


# =============================================================================
# HELPERS
# =============================================================================

def get_rule(is_rural: bool) -> type[HideRule]:
    """Get the hide rule for a destination classification."""
    destination = RURAL if is_rural else STANDARD
    return next(r for r in ALL if r.destination == destination)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_rules() -> None:
    """
    Validate hide rule configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    names = [r.name for r in ALL]
    for name in sorted({n for n in names if names.count(n) > 1}):
        errors.append(f"{name}: duplicate rule name")

    for r in ALL:
        if r.destination not in DESTINATIONS:
            errors.append(f"{r.name}: unknown destination '{r.destination}'")

    for destination in DESTINATIONS:
        count = sum(1 for r in ALL if r.destination == destination)
        if count != 1:
            errors.append(f"destination '{destination}': expected exactly 1 rule, found {count}")

    if errors:
        raise ValueError("Hide rule configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_rules()

__all__ = [
    # Base
    "HideRule",
    "RURAL",
    "STANDARD",
    "DESTINATIONS",
    # Rule classes
    "HIDE_NON_KEEP",
    "HIDE_KEEP",
    # Lists
    "ALL",
    # Helpers
    "get_rule",
    "validate_rules",
]
