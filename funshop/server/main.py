"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(sessions, CORS, request logging), registers the exception handlers and
includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from funshop.core.database import init_db
from funshop.core.logging_config import get_logger, setup_logging
from funshop.core.monitoring import initialize_logfire

from .api.v1 import (
    admin,
    auth,
    cart,
    checkout,
    health,
    information,
    members,
    observed,
    orders,
    products,
    reviews,
    search,
    sellers,
    users,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables and the bootstrap administrator on startup.
    """
    logger.info("Starting up FunShop Server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down FunShop Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    FunShop Server API

    Backend of the FunShop storefront: accounts, product listings, cart,
    checkout, order history, watch lists, reviews, seller onboarding and
    the admin dashboard.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session.secret_key,
    session_cookie=settings.session.cookie_name,
    max_age=settings.session.max_age,
    https_only=settings.session.https_only,
    same_site="lax",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth")
app.include_router(products.router, prefix=f"{constant.API_V1_STR}/products")
app.include_router(cart.router, prefix=f"{constant.API_V1_STR}/cart")
app.include_router(checkout.router, prefix=f"{constant.API_V1_STR}/checkout")
app.include_router(orders.router, prefix=f"{constant.API_V1_STR}/orders")
app.include_router(observed.router, prefix=f"{constant.API_V1_STR}/observed")
app.include_router(reviews.router, prefix=f"{constant.API_V1_STR}/reviews")
app.include_router(sellers.router, prefix=f"{constant.API_V1_STR}/sellers")
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users")
app.include_router(members.router, prefix=f"{constant.API_V1_STR}/members")
app.include_router(search.router, prefix=f"{constant.API_V1_STR}/search")
app.include_router(information.router, prefix=f"{constant.API_V1_STR}/information")
app.include_router(admin.router, prefix=f"{constant.API_V1_STR}/admin")


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "funshop.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
