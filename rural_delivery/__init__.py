"""
Rural Delivery Module

Delivery customization that hides shipping methods by destination postcode.
Rural carts only see the configured keep-list methods; everyone else sees
everything but those.
"""

from .transform import cart_delivery_options_transform_run
from .version import VERSION

__all__ = ["cart_delivery_options_transform_run", "VERSION"]
