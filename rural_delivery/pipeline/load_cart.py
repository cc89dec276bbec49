"""
Load Cart

Turns the cart snapshot from the function input into typed records.

Malformed pieces degrade instead of raising:
    - missing cart or deliveryGroups -> no groups
    - group that is not an object    -> empty group (keeps its position)
    - missing deliveryAddress        -> empty address
    - option that is not an object   -> skipped
"""

from dataclasses import dataclass, field

from .load_config import get_mapping, to_text


# =============================================================================
# CART RECORDS
# =============================================================================

@dataclass(frozen=True)
class DeliveryAddress:
    country_code: str = ""
    zip: str = ""


@dataclass(frozen=True)
class DeliveryOption:
    handle: str = ""
    title: str = ""


@dataclass(frozen=True)
class DeliveryGroup:
    address: DeliveryAddress = field(default_factory=DeliveryAddress)
    options: tuple[DeliveryOption, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Cart:
    groups: tuple[DeliveryGroup, ...] = field(default_factory=tuple)

    @property
    def destination(self) -> DeliveryAddress:
        """First group's address, used as the destination for the whole cart."""
        if not self.groups:
            return DeliveryAddress()
        return self.groups[0].address


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def load_cart(run_input) -> Cart:
    """
    Load the cart carried by a function input.

    Args:
        run_input: Function input mapping with cart.deliveryGroups[]

    Returns:
        Cart with groups in input order
    """
    groups = get_mapping(run_input, "cart").get("deliveryGroups")
    if not isinstance(groups, list):
        return Cart()

    return Cart(groups=tuple(
        _load_group(group) if isinstance(group, dict) else DeliveryGroup()
        for group in groups
    ))


def _load_group(group: dict) -> DeliveryGroup:
    address = get_mapping(group, "deliveryAddress")
    options = group.get("deliveryOptions")
    if not isinstance(options, list):
        options = []

    return DeliveryGroup(
        address=DeliveryAddress(
            country_code=to_text(address.get("countryCode")),
            zip=to_text(address.get("zip")),
        ),
        options=tuple(
            DeliveryOption(
                handle=to_text(option.get("handle")),
                title=to_text(option.get("title")),
            )
            for option in options
            if isinstance(option, dict)
        ),
    )
