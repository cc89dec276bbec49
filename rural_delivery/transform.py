"""
Rural Delivery Customization

Function input in, operations out. Runs once per cart evaluation for the
cart.delivery-options.transform.run target and decides which delivery options
to hide under the merchant's rural shipping policy.

INPUT
-----
    deliveryCustomization.metafield.value       - Configuration JSON text
    deliveryCustomization.metafield.jsonValue   - or the decoded configuration
    cart.deliveryGroups[]
        .deliveryAddress.{countryCode, zip}
        .deliveryOptions[].{handle, title}

CONFIGURATION
-------------
    enabled             - Master switch
    postcodes           - Rural postcodes (entries may hold several, e.g. "9013. 9012")
    ruralMethodsToKeep  - Method handles/titles only rural carts should see
    countryCodes        - Legacy alias for postcodes

POLICY
------
    Rural (destination postcode configured):
        hide everything not on the keep list, unless the group offers no
        keep method at all (then hide nothing in that group)
    Standard:
        hide the keep-list methods

OUTPUT
------
    {"operations": [{"deliveryOptionHide": {"deliveryOptionHandle": ...}}, ...]}

USAGE
-----
    from rural_delivery.transform import cart_delivery_options_transform_run
    result = cart_delivery_options_transform_run(run_input)
"""

from .pipeline import (
    load_configuration,
    load_cart,
    normalize_methods,
    classify,
    filter_options,
)


def no_changes() -> dict:
    """Result that leaves the cart's delivery options untouched."""
    return {"operations": []}


def hide_operation(handle: str) -> dict:
    """Wire shape of a single hide operation."""
    return {"deliveryOptionHide": {"deliveryOptionHandle": handle}}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def cart_delivery_options_transform_run(run_input) -> dict:
    """
    Decide which delivery options to hide for a cart.

    Never raises: missing or malformed input gives no operations.

    Args:
        run_input: Function input (see module docstring)

    Returns:
        {"operations": [...]} in cart traversal order

    Evaluation order (each step may return early with no operations):
        1. Configuration disabled
        2. Cart has no delivery groups
        3. Keep list empty after normalization
        4. Classify destination (first group's address)
        5. Apply the hide rule for the classification to every group
    """
    config = load_configuration(run_input)
    if not config.enabled:
        return no_changes()

    cart = load_cart(run_input)
    if not cart.groups:
        return no_changes()

    keep_methods = normalize_methods(config.rural_methods_to_keep)
    if not keep_methods:
        return no_changes()

    is_rural = classify(config, cart.destination)
    handles = filter_options(cart, keep_methods, is_rural)

    return {"operations": [hide_operation(h) for h in handles]}
