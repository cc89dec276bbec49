"""Static reference data: metafield coordinates and preset postcode tables."""
