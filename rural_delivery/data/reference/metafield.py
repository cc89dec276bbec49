"""
Metafield Configuration

Where the merchant configuration lives on the delivery customization, and the
field names of the JSON blob stored there.
"""

NAMESPACE = "rural_shipping"
KEY = "config"
TYPE = "json"

# Wire field names (camelCase, as stored)
FIELD_ENABLED = "enabled"
FIELD_POSTCODES = "postcodes"
FIELD_METHODS_TO_KEEP = "ruralMethodsToKeep"
FIELD_COUNTRY_CODES = "countryCodes"        # Legacy alias for postcodes

# Joiner used when rendering configured lists back into form text
LIST_TEXT_SEPARATOR = ", "
