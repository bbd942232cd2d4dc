# storefront/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import CORS_ORIGINS, LOG_LEVEL
from storefront.core.db import init_models
from storefront.routers import (
    auth_router,
    catalog_router,
    cart_router,
    quotations_router,
    enquiry_router,
    admin_router,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Auto Parts Storefront API",
    description="FastAPI backend for the auto-parts catalog, cart, quotations and admin panels",
    version="0.1.0"
)
# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Cart-Id"],
)


# Health check endpoint
@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "Backend is running"}

# Register routers
app.include_router(auth_router)
app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(quotations_router)
app.include_router(enquiry_router)
app.include_router(admin_router)


@app.on_event("startup")
async def on_startup():
    await init_models()
