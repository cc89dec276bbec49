"""
Rural Delivery Data

Reference data and configuration constants.

Structure:
    - reference/metafield.py: Metafield coordinates and wire field names
    - reference/preset_postcodes.py: Preset rural postcode tables
"""

from .reference.metafield import (
    NAMESPACE,
    KEY,
    TYPE,
    FIELD_ENABLED,
    FIELD_POSTCODES,
    FIELD_METHODS_TO_KEEP,
    FIELD_COUNTRY_CODES,
    LIST_TEXT_SEPARATOR,
)
from .reference.preset_postcodes import (
    PRESET_POSTCODES_NORTH,
    PRESET_POSTCODES_SOUTH,
    ALL_POSTCODES,
    PRESETS,
    get_preset,
)

__all__ = [
    # Metafield coordinates
    "NAMESPACE",
    "KEY",
    "TYPE",
    # Wire field names
    "FIELD_ENABLED",
    "FIELD_POSTCODES",
    "FIELD_METHODS_TO_KEEP",
    "FIELD_COUNTRY_CODES",
    "LIST_TEXT_SEPARATOR",
    # Presets
    "PRESET_POSTCODES_NORTH",
    "PRESET_POSTCODES_SOUTH",
    "ALL_POSTCODES",
    "PRESETS",
    "get_preset",
]
