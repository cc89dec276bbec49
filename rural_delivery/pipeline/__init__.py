"""
Pipeline Package

Core decision logic (host-agnostic):
- load_config: Parse the metafield configuration
- load_cart: Parse the cart snapshot into typed records
- normalize: Canonicalize postcodes and method names
- classify: Decide whether the destination is rural
- filter_options: Evaluate hide rules over the cart's delivery options
"""

from .load_config import Configuration, DISABLED, load_configuration, parse_configuration
from .load_cart import Cart, DeliveryGroup, DeliveryAddress, DeliveryOption, load_cart
from .normalize import normalize_postcode, normalize_postcodes, normalize_method, normalize_methods
from .classify import classify
from .filter_options import filter_options, evaluate_options
