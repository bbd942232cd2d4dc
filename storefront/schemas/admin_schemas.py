# storefront/schemas/admin_schemas.py
from pydantic import BaseModel


class AdminStats(BaseModel):
    total_products: int = 0
    total_quotations: int = 0
    pending_quotations: int = 0
    total_customers: int = 0
