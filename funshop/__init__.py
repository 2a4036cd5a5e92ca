"""FunShop.

A small second-hand storefront served as a JSON API.

Core subpackages
----------------

- ``funshop.core``:

  - Logging, monitoring and domain error types.
  - The database layer: SQLModel entities, one repository per table, and the
    engine/session factory.
  - Pydantic I/O models exchanged with API clients.

- ``funshop.server``:

  - The FastAPI application, its routers and request dependencies.
  - Services that group repository calls into transactions (checkout,
    seller onboarding, cart merging) and send transactional email.

Typical purchase workflow
-------------------------

1. A visitor browses ``/api/v1/products`` and adds items to the cart. Guests
   keep their cart in the signed session cookie.
2. On login or registration the guest cart is merged into ``cart_items``.
3. ``POST /api/v1/checkout`` writes the address, payment method and one order
   row per item, marks each product sold and flags its watchers, all in one
   transaction.
4. The order summary is kept in the session and a confirmation email is sent
   in the background.
"""
