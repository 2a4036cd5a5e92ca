"""
Service layer of the FunShop server.

Services hold the business rules of the storefront and sit between the API
routers and the repositories. They raise ``funshop.core.errors`` exceptions,
never ``HTTPException``.
"""
