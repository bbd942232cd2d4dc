# storefront/models/__init__.py
from storefront.models.user_models import User, UserRole, Profile
from storefront.models.activity_models import UserActivity
from storefront.models.catalog_models import Brand, Category, Product, NewArrival
from storefront.models.quotation_models import Quotation, QuotationItem, QuotationStatus
from storefront.models.enquiry_models import PartsEnquiry, EnquiryPriority
