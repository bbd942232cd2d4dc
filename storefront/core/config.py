# storefront/core/config.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

# -----------------------
# Database Config
# -----------------------
DB_TYPE = os.getenv("DB_TYPE", "sqlite").lower()

if DB_TYPE == "postgres":
    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL is required for Postgres setup")
elif DB_TYPE == "sqlite":
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./storefront.db")
else:
    raise ValueError(f"Unsupported DB_TYPE: {DB_TYPE}")

# -----------------------
# JWT Config
# -----------------------
JWT_SECRET = os.getenv("JWT_SECRET")
if not JWT_SECRET:
    raise ValueError("JWT_SECRET environment variable must be set")

JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES", "120"))

# -----------------------
# Quotation Config
# -----------------------
TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.05"))  # flat VAT on every quotation
QUOTATION_VALIDITY_DAYS = int(os.getenv("QUOTATION_VALIDITY_DAYS", "30"))

# -----------------------
# Cart storage
# -----------------------
CART_STORAGE_DIR = os.getenv("CART_STORAGE_DIR", "./.carts")

# -----------------------
# HTTP / logging
# -----------------------
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
