from fastapi import APIRouter
from .products_router import router as products_router
from .new_arrivals_router import router as new_arrivals_router
from .quotations_router import router as quotations_router
from .enquiries_router import router as enquiries_router
from .dashboard_router import router as dashboard_router

router = APIRouter(prefix="/admin")

router.include_router(dashboard_router)
router.include_router(products_router)
router.include_router(new_arrivals_router)
router.include_router(quotations_router)
router.include_router(enquiries_router)
