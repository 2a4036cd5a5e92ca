"""HTTP API of the FunShop server."""
