# storefront/services/admin_service.py
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.quotation_models import QuotationStatus
from storefront.models.user_models import Profile
from storefront.schemas.admin_schemas import AdminStats
from storefront.services.product_service import count_products
from storefront.services.quotation_service import count_quotations


async def get_admin_stats(db: AsyncSession) -> AdminStats:
    total_customers = (await db.execute(select(func.count(Profile.id)))).scalar() or 0
    return AdminStats(
        total_products=await count_products(db),
        total_quotations=await count_quotations(db),
        pending_quotations=await count_quotations(db, QuotationStatus.pending),
        total_customers=total_customers,
    )
