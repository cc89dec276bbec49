"""
Classify Destination

Decides whether a cart's destination counts as rural.

Policy is postcode-only: the destination is rural when its normalized postcode
is one of the configured postcode tokens. Country code plays no part.
"""

from .load_config import Configuration
from .load_cart import DeliveryAddress
from .normalize import normalize_postcode, normalize_postcodes


def classify(config: Configuration, address: DeliveryAddress) -> bool:
    """
    Check whether an address is rural under the configuration.

    Short-circuits to False (without reading the address) when the
    configuration is disabled or has no postcode tokens.

    Args:
        config: Loaded configuration
        address: Destination address (first delivery group)

    Returns:
        True if the destination postcode is configured as rural
    """
    if not config.enabled:
        return False

    postcodes = normalize_postcodes(config.postcode_entries)
    if not postcodes:
        return False

    destination_zip = normalize_postcode(address.zip)
    return bool(destination_zip) and destination_zip in postcodes
