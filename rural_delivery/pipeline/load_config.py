"""
Load Configuration

Extracts the merchant configuration from the function input and parses it
into a Configuration record.

The payload sits on the delivery customization metafield in one of two shapes:
    - value:      JSON text (input queries that select `value`)
    - jsonValue:  already-decoded object (input queries that select `jsonValue`)

Anything missing or malformed maps to the disabled default. This function
never raises.
"""

import json
from dataclasses import dataclass, field

from ..data import (
    FIELD_ENABLED,
    FIELD_POSTCODES,
    FIELD_METHODS_TO_KEEP,
    FIELD_COUNTRY_CODES,
)


# =============================================================================
# CONFIGURATION RECORD
# =============================================================================

@dataclass(frozen=True)
class Configuration:
    """
    Merchant rural shipping configuration.

    Attributes:
        enabled                 - Master switch; False means no operations
        postcodes               - Raw configured postcode entries (may be malformed)
        rural_methods_to_keep   - Raw method handles/titles to keep for rural carts
        country_codes           - Legacy field, aliased to postcodes when those are empty
    """

    enabled: bool = False
    postcodes: tuple[str, ...] = field(default_factory=tuple)
    rural_methods_to_keep: tuple[str, ...] = field(default_factory=tuple)
    country_codes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def postcode_entries(self) -> tuple[str, ...]:
        """Postcode entries to classify against, falling back to legacy country codes."""
        return self.postcodes or self.country_codes


DISABLED = Configuration()


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def load_configuration(run_input) -> Configuration:
    """
    Load the configuration carried by a function input.

    Args:
        run_input: Function input mapping with
            deliveryCustomization.metafield.{value | jsonValue}

    Returns:
        Parsed Configuration, or DISABLED if absent or unparseable
    """
    customization = get_mapping(run_input, "deliveryCustomization")
    metafield = get_mapping(customization, "metafield")
    if not metafield:
        return DISABLED

    value = metafield.get("value")
    if isinstance(value, str):
        return parse_configuration(value)

    return parse_configuration(metafield.get("jsonValue"))


def parse_configuration(payload) -> Configuration:
    """
    Parse a configuration payload (JSON text or decoded mapping).

    Non-list values for the list fields are treated as empty.
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            return DISABLED

    if not isinstance(payload, dict):
        return DISABLED

    return Configuration(
        enabled=bool(payload.get(FIELD_ENABLED)),
        postcodes=_text_list(payload.get(FIELD_POSTCODES)),
        rural_methods_to_keep=_text_list(payload.get(FIELD_METHODS_TO_KEEP)),
        country_codes=_text_list(payload.get(FIELD_COUNTRY_CODES)),
    )


# =============================================================================
# HELPERS
# =============================================================================

def get_mapping(obj, key: str) -> dict:
    """Return obj[key] if obj is a mapping and the value is a mapping, else {}."""
    if not isinstance(obj, dict):
        return {}
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def to_text(value) -> str:
    """
    Coerce a scalar from decoded JSON to text.

    Integral floats render without a decimal part (9013.0 -> "9013") so that
    numeric postcodes compare the same as their string form.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _text_list(value) -> tuple[str, ...]:
    """Coerce a decoded JSON list to a tuple of strings; anything else is empty."""
    if not isinstance(value, list):
        return ()
    return tuple(to_text(v) for v in value if v is not None)
