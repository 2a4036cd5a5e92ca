"""Version 1 of the FunShop HTTP API."""
