"""Brewbar FastAPI application.

Serves the menu, account registration, order placement and menu/offer
administration. Each request runs inside the domain context its URL prefix
belongs to; the order ledger is composed here, with its catalogue and
identity lookups injected.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied. Without a domain.toml
# every domain runs on Protean's in-memory providers.
from catalogue.domain import catalogue
from catalogue.lookup import MenuCatalog, OfferCatalog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.directory import AccountDirectory
from identity.domain import identity
from ordering.domain import ordering
from ordering.ledger import OrderLedger
from ordering.order.book import OrderBook
from ordering.pricing import OrderPricingEngine
from protean.integrations.fastapi import register_exception_handlers
from shared.errors import register_error_handlers
from shared.logging import configure_logging

configure_logging()

identity.init()
catalogue.init()
ordering.init()


def build_ledger() -> OrderLedger:
    """Wire the order ledger to the stores it reads from and writes to."""
    pricing = OrderPricingEngine(menu=MenuCatalog(catalogue), offers=OfferCatalog(catalogue))
    return OrderLedger(accounts=AccountDirectory(identity), pricing=pricing, orders=OrderBook(ordering))


# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/coffee": catalogue,
    "/api/menu": catalogue,
    "/api/offers": catalogue,
    "/api/account": identity,
    "/api/order": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Brewbar API",
    description="Coffee-shop ordering backend: menu, accounts, orders and offers",
)
app.state.ledger = build_ledger()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: health check, docs
    return await call_next(request)


register_exception_handlers(app)
register_error_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import menu_router, offer_router  # noqa: E402
from identity.api import router as identity_router  # noqa: E402
from ordering.api import order_router  # noqa: E402

app.include_router(menu_router)
app.include_router(offer_router)
app.include_router(identity_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
            },
        }
    )
