"""Storefront FastAPI application.

Single-domain web server: authentication, product catalogue and order
placement. Commands are processed synchronously inside each request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from storefront/domain.toml:
#   - unset        → in-memory stores
#   - "sqlite"     → local sqlite file
#   - "production" → PostgreSQL at DATABASE_URL
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront.domain import storefront

storefront.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="E-commerce backend: authentication, product catalogue and orders",
    docs_url="/api/docs",
    openapi_url="/api/docs/openapi.json",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Middleware, error mapping and routers
# ---------------------------------------------------------------------------
from storefront.api.auth import router as auth_router  # noqa: E402
from storefront.api.errors import register_error_handlers  # noqa: E402
from storefront.api.middleware import install_middleware  # noqa: E402
from storefront.api.orders import router as order_router  # noqa: E402
from storefront.api.products import router as product_router  # noqa: E402

install_middleware(app, storefront)
register_error_handlers(app)

app.include_router(auth_router)
app.include_router(product_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": storefront.name}})
