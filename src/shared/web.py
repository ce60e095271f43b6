"""FastAPI application factory.

Each request is wrapped in the correct domain context based on URL prefix.
Domains must be initialized before ``create_app`` is called.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalogue.domain import catalogue
from ordering.domain import ordering
from shared.errors import register_exception_handlers

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/foods": catalogue,
    "/categories": catalogue,
    "/orders": ordering,
    "/admin/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match — pass through (health check, docs, etc.)
    return await call_next(request)


async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
            },
        }
    )


def create_app() -> FastAPI:
    from catalogue.api import category_router, food_router
    from ordering.api import admin_order_router, order_router

    app = FastAPI(
        title="FoodOrder API",
        description="Food ordering storefront — Catalogue & Ordering domains",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(domain_context_middleware)

    app.include_router(food_router)
    app.include_router(category_router)
    app.include_router(order_router)
    app.include_router(admin_order_router)
    app.add_api_route("/health", health, methods=["GET"])

    register_exception_handlers(app)
    return app
