"""
Tests for Rural Delivery Customization

Run with: pytest rural_delivery/tests/ -v
"""

import json

import pytest

from rural_delivery.transform import cart_delivery_options_transform_run, hide_operation


# =============================================================================
# FIXTURES
# =============================================================================

def make_input(config, groups, as_json_value: bool = False) -> dict:
    """Build a function input with the configuration on the metafield."""
    if config is None:
        metafield = None
    elif as_json_value:
        metafield = {"jsonValue": config}
    else:
        metafield = {"value": json.dumps(config)}

    return {
        "deliveryCustomization": {"metafield": metafield},
        "cart": {"deliveryGroups": groups},
    }


def make_group(zip_code: str, options: list[tuple[str, str]], country: str = "NZ") -> dict:
    return {
        "deliveryAddress": {"countryCode": country, "zip": zip_code},
        "deliveryOptions": [{"handle": h, "title": t} for h, t in options],
    }


def hidden_handles(result: dict) -> list[str]:
    return [op["deliveryOptionHide"]["deliveryOptionHandle"] for op in result["operations"]]


@pytest.fixture
def courier_options() -> list[tuple[str, str]]:
    """Rural courier plus two standard methods."""
    return [
        ("rural-courier", "Rural Courier"),
        ("standard", "Standard"),
        ("express", "Express"),
    ]


# =============================================================================
# TESTS: DISABLED / EARLY EXITS
# =============================================================================

class TestEarlyExits:
    """Guard checks that return no operations."""

    def test_missing_metafield(self):
        """No configuration behaves as disabled."""
        run_input = make_input(None, [make_group("9010", [])])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_disabled(self, courier_options):
        run_input = make_input({"enabled": False}, [make_group("9010", courier_options)])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_disabled_ignores_matching_postcode(self, courier_options):
        """enabled=false wins even when postcode and keep list would match."""
        config = {
            "enabled": False,
            "postcodes": ["9010"],
            "ruralMethodsToKeep": ["rural-courier"],
        }
        run_input = make_input(config, [make_group("9010", courier_options)])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_enabled_missing(self, courier_options):
        config = {"postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [make_group("9010", courier_options)])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_invalid_json_value(self, courier_options):
        run_input = make_input(None, [make_group("9010", courier_options)])
        run_input["deliveryCustomization"]["metafield"] = {"value": "{not json"}
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_json_array_value(self, courier_options):
        """A payload that parses but is not an object is disabled."""
        run_input = make_input(None, [make_group("9010", courier_options)])
        run_input["deliveryCustomization"]["metafield"] = {"value": "[1, 2, 3]"}
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_no_delivery_groups(self):
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        assert cart_delivery_options_transform_run(make_input(config, [])) == {"operations": []}

    def test_missing_cart(self):
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [])
        del run_input["cart"]
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_empty_keep_list(self):
        """Scenario D: empty keep list short-circuits even on a rural match."""
        config = {"enabled": True, "postcodes": ["90210"], "ruralMethodsToKeep": []}
        run_input = make_input(config, [make_group("90210", [("standard", "Standard")], "US")])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    @pytest.mark.parametrize("zip_code", ["90210", "10001"])
    def test_blank_keep_list(self, zip_code):
        """Keep list of blanks normalizes to empty - no-op for rural and standard."""
        config = {"enabled": True, "postcodes": ["90210"], "ruralMethodsToKeep": ["", "   "]}
        run_input = make_input(config, [make_group(zip_code, [("standard", "Standard")], "US")])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_keep_list_not_a_list(self, courier_options):
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": "rural-courier"}
        run_input = make_input(config, [make_group("9010", courier_options)])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    @pytest.mark.parametrize("run_input", [None, [], "cart", 42, {}])
    def test_garbage_input(self, run_input):
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}


# =============================================================================
# TESTS: STANDARD (NON-RURAL) DESTINATIONS
# =============================================================================

class TestStandardDestination:
    """Keep-list methods are hidden from non-rural destinations."""

    def test_hides_keep_methods(self, courier_options):
        """Scenario A: non-rural destination only loses the rural courier."""
        config = {
            "enabled": True,
            "postcodes": ["9999"],
            "ruralMethodsToKeep": ["rural courier", "rural-courier"],
        }
        run_input = make_input(config, [make_group("10001", courier_options, "US")])

        result = cart_delivery_options_transform_run(run_input)
        assert result == {"operations": [hide_operation("rural-courier")]}

    def test_no_postcodes_configured(self, courier_options):
        """No postcodes means never rural - keep list is hidden everywhere."""
        config = {"enabled": True, "postcodes": [], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [make_group("9010", courier_options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["rural-courier"]

    def test_title_match_hidden(self):
        config = {"enabled": True, "postcodes": ["9999"], "ruralMethodsToKeep": ["Rural Special"]}
        options = [("rs-1", "Rural Special"), ("standard", "Standard")]
        run_input = make_input(config, [make_group("10001", options, "US")])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["rs-1"]

    def test_missing_zip(self, courier_options):
        """No destination postcode is never rural."""
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        group = make_group("", courier_options)
        del group["deliveryAddress"]["zip"]
        run_input = make_input(config, [group])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["rural-courier"]


# =============================================================================
# TESTS: RURAL DESTINATIONS
# =============================================================================

class TestRuralDestination:
    """Rural destinations only see keep-list methods."""

    def test_hides_non_keep_methods(self, courier_options):
        """Scenario B: rural destination loses standard and express, in order."""
        config = {
            "enabled": True,
            "postcodes": ["9010", "9020"],
            "ruralMethodsToKeep": ["rural-courier", "rural courier"],
        }
        run_input = make_input(config, [make_group("9010", courier_options)])

        result = cart_delivery_options_transform_run(run_input)
        assert result == {
            "operations": [hide_operation("standard"), hide_operation("express")]
        }

    def test_fallback_when_no_keep_option(self):
        """Scenario C: nothing on the keep list offered - hide nothing."""
        config = {"enabled": True, "postcodes": ["9013"], "ruralMethodsToKeep": ["rural shipping"]}
        options = [("intl", "International Shipping"), ("standard", "Standard")]
        run_input = make_input(config, [make_group("9013", options)])
        assert cart_delivery_options_transform_run(run_input) == {"operations": []}

    def test_keep_by_title_case_insensitive(self):
        config = {"enabled": True, "postcodes": ["10001"], "ruralMethodsToKeep": ["rural special"]}
        options = [("keep-by-title", "Rural Special"), ("drop-1", "Other")]
        run_input = make_input(config, [make_group("10001", options, "US")])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["drop-1"]

    def test_keep_list_entries_trimmed_and_lowercased(self):
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["  RURAL-Courier "]}
        options = [("rural-courier", "Courier"), ("standard", "Standard")]
        run_input = make_input(config, [make_group("9010", options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard"]

    def test_postcode_match_regardless_of_country(self):
        config = {
            "enabled": True,
            "postcodes": ["9013", "9015"],
            "ruralMethodsToKeep": ["international shipping", "rural shipping"],
        }
        options = [("international shipping", "International Shipping"), ("standard", "Standard")]
        run_input = make_input(config, [make_group("9013", options, "US")])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard"]

    def test_malformed_postcode_entry(self):
        """'9013. 9012' is read as two postcodes."""
        config = {"enabled": True, "postcodes": ["9013. 9012"], "ruralMethodsToKeep": ["rural shipping"]}
        options = [
            ("international", "International Shipping"),
            ("standard", "Standard"),
            ("rural", "Rural Shipping"),
        ]
        run_input = make_input(config, [make_group("9013", options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == [
            "international",
            "standard",
        ]

    def test_destination_zip_formatting(self, courier_options):
        """Case and punctuation in the cart postcode don't prevent a match."""
        config = {"enabled": True, "postcodes": ["SW1A 1AA"], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [make_group("SW1A", courier_options, "GB")])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard", "express"]

    def test_numeric_postcodes(self, courier_options):
        config = {"enabled": True, "postcodes": [9010], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [make_group("9010", courier_options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard", "express"]

    def test_legacy_country_codes_alias(self, courier_options):
        """countryCodes stands in for postcodes when postcodes are absent."""
        config = {"enabled": True, "countryCodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [make_group("9010", courier_options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard", "express"]

    def test_json_value_payload(self, courier_options):
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        run_input = make_input(config, [make_group("9010", courier_options)], as_json_value=True)
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard", "express"]

    def test_empty_handle_never_emitted(self):
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        options = [("rural-courier", "Rural Courier"), ("", "Mystery"), ("standard", "Standard")]
        run_input = make_input(config, [make_group("9010", options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["standard"]

    def test_handle_emitted_as_supplied(self):
        """Operations carry the original handle, not the lowercased key."""
        config = {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}
        options = [("rural-courier", "Rural Courier"), ("Std-NZ", "Standard")]
        run_input = make_input(config, [make_group("9010", options)])
        assert hidden_handles(cart_delivery_options_transform_run(run_input)) == ["Std-NZ"]


# =============================================================================
# TESTS: MULTIPLE DELIVERY GROUPS
# =============================================================================

class TestMultipleGroups:
    """First group's address decides; each group is filtered on its own."""

    @pytest.fixture
    def config(self) -> dict:
        return {"enabled": True, "postcodes": ["9010"], "ruralMethodsToKeep": ["rural-courier"]}

    def test_first_group_address_decides(self, config, courier_options):
        """Second group's rural postcode is ignored when the first is standard."""
        groups = [
            make_group("10001", courier_options, "US"),
            make_group("9010", courier_options),
        ]
        result = cart_delivery_options_transform_run(make_input(config, groups))
        assert hidden_handles(result) == ["rural-courier", "rural-courier"]

    def test_fallback_is_per_group(self, config, courier_options):
        """A rural group without keep options is left alone; others are filtered."""
        groups = [
            make_group("9010", courier_options),
            make_group("9010", [("standard-2", "Standard"), ("express-2", "Express")]),
            make_group("9010", [("rural-courier", "Rural Courier"), ("pickup", "Pickup")]),
        ]
        result = cart_delivery_options_transform_run(make_input(config, groups))
        assert hidden_handles(result) == ["standard", "express", "pickup"]

    def test_group_without_options(self, config, courier_options):
        groups = [make_group("9010", []), make_group("9010", courier_options)]
        result = cart_delivery_options_transform_run(make_input(config, groups))
        assert hidden_handles(result) == ["standard", "express"]

    def test_malformed_first_group_is_not_rural(self, config):
        """A non-object first group gives an empty destination, so the cart is standard."""
        groups = [None, make_group("9010", [("rural-courier", "Rural Courier"), ("standard", "Standard")])]
        result = cart_delivery_options_transform_run(make_input(config, groups))
        assert hidden_handles(result) == ["rural-courier"]
