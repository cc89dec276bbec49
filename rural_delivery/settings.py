"""
Settings Builder

Pure helpers behind the admin settings form: turn the operator's free-text
fields into the configuration blob stored on the metafield, and turn a stored
blob back into form defaults.

Persisting the blob (metafieldsSet on the delivery customization) is left to
the host application.
"""

import json
import re

from .data import (
    FIELD_ENABLED,
    FIELD_POSTCODES,
    FIELD_METHODS_TO_KEEP,
    LIST_TEXT_SEPARATOR,
)
from .pipeline import parse_configuration

# Form list fields accept one entry per line or comma-separated entries
LIST_SEPARATORS = re.compile(r"[\n,]")


def parse_list_text(text: str | None) -> list[str]:
    """
    Split form text into trimmed, non-empty entries.

    Examples:
        "9013, 9012\\n9010" -> ["9013", "9012", "9010"]
        " , ,"              -> []
    """
    if not text:
        return []
    return [t.strip() for t in LIST_SEPARATORS.split(str(text)) if t.strip()]


def build_configuration(enabled: bool, postcodes_text: str | None, methods_text: str | None) -> dict:
    """
    Build the configuration blob from settings form fields.

    Postcodes are stored as typed (the engine tolerates malformed entries);
    method names are lowercased.

    Returns:
        Dict with enabled, postcodes, ruralMethodsToKeep
    """
    return {
        FIELD_ENABLED: bool(enabled),
        FIELD_POSTCODES: parse_list_text(postcodes_text),
        FIELD_METHODS_TO_KEEP: [t.lower() for t in parse_list_text(methods_text)],
    }


def serialize_configuration(config: dict) -> str:
    """JSON text for the metafield value."""
    return json.dumps(config)


def settings_form_defaults(metafield_value, customization_enabled: bool = False) -> dict:
    """
    Form defaults for a stored configuration.

    Falls back to the customization's own enabled flag when nothing usable is
    stored. Legacy countryCodes entries are shown as postcodes only when no
    postcodes are stored, the same fallback the engine classifies with.

    Args:
        metafield_value: Stored JSON text (or decoded mapping), may be None
        customization_enabled: Whether the delivery customization itself is enabled

    Returns:
        Dict with enabled, postcodes_text, methods_text
    """
    defaults = {
        "enabled": bool(customization_enabled),
        "postcodes_text": "",
        "methods_text": "",
    }

    if isinstance(metafield_value, str):
        try:
            payload = json.loads(metafield_value)
        except ValueError:
            return defaults
    else:
        payload = metafield_value

    if not isinstance(payload, dict):
        return defaults

    config = parse_configuration(payload)
    defaults["enabled"] = config.enabled
    defaults["postcodes_text"] = LIST_TEXT_SEPARATOR.join(config.postcode_entries)
    defaults["methods_text"] = LIST_TEXT_SEPARATOR.join(config.rural_methods_to_keep)
    return defaults
