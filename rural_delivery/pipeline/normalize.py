"""
Normalize

Canonicalizes configured and cart-supplied strings into comparable tokens.

Postcodes are reduced to lowercase ASCII letters and digits. A single
configured entry may hold several postcodes mashed together by operator error
("9013. 9012", "0792,0793", "3979-4884"), so entries are split on any run of
other characters before stripping.

Methods keep their inner spacing ("Rural Courier" -> "rural courier") so
multi-word titles match as whole strings. Blank method entries are dropped, so
a keep list of only blanks is empty and never matches untitled options.
"""

import re

# Runs of anything outside the postcode alphabet
NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def normalize_postcode(value: str | None) -> str:
    """Lowercase a postcode and strip everything but a-z and 0-9."""
    if not value:
        return ""
    return NON_ALPHANUMERIC.sub("", str(value).lower())


def normalize_postcodes(entries) -> frozenset[str]:
    """
    Expand configured postcode entries into a set of normalized tokens.

    Examples:
        ["9013"]        -> {"9013"}
        ["9013. 9012"]  -> {"9013", "9012"}
        ["AB1 2CD"]     -> {"ab1", "2cd"}
    """
    tokens = set()
    for entry in entries or ():
        pieces = NON_ALPHANUMERIC.split(str(entry).lower())
        tokens.update(p for p in map(normalize_postcode, pieces) if p)
    return frozenset(tokens)


def normalize_method(value: str | None) -> str:
    """Trim and lowercase a method handle or title."""
    if value is None:
        return ""
    return str(value).strip().lower()


def normalize_methods(entries) -> frozenset[str]:
    """Normalize configured keep-list entries, dropping blanks."""
    return frozenset(m for m in map(normalize_method, entries or ()) if m)
