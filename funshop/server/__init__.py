"""
FunShop Server Package.

This package contains the web server implementation of the FunShop storefront.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Mapping of domain errors to HTTP responses.
    middleware: Request logging and timing.
    services: Business logic and request dependencies.
    templates: Jinja2 templates of the transactional emails.
"""
