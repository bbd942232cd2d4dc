# storefront/routers/__init__.py

from .auth_router import router as auth_router
from .catalog_router import router as catalog_router
from .cart_router import router as cart_router
from .quotations_router import router as quotations_router
from .enquiry_router import router as enquiry_router
from .admin import router as admin_router

__all__ = [
    "auth_router",
    "catalog_router",
    "cart_router",
    "quotations_router",
    "enquiry_router",
    "admin_router",
]
