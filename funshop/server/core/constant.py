"""Project-wide constants for the HTTP server."""

PROJECT_NAME = "FunShop"
API_V1_STR = "/api/v1"
VERSION = "1.0.0"
SCHEMA_VERSION = "v1"

SHOP_DESCRIPTION = (
    "FunShop is a marketplace for second-hand and collectible items. "
    "Every listing is a single piece sold by a member of the community."
)
INFORMATION_SECTIONS = ("About us", "How buying works", "Becoming a seller", "Shipping", "Contacts")
