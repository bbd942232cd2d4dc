# storefront/scripts/seed.py
"""
Create the admin account and the brand / category lookups.

    ADMIN_EMAIL=... ADMIN_PASSWORD=... python -m storefront.scripts.seed
"""
import asyncio
import os

from sqlalchemy import select

from storefront.core.db import AsyncSessionLocal, init_models
from storefront.core.security import hash_password
from storefront.models.catalog_models import Brand, Category
from storefront.models.user_models import ADMIN_ROLE, User, UserRole, Profile

BRANDS = ["BMW", "Mercedes-Benz", "Audi", "Volkswagen"]
CATEGORIES = ["Engine", "Brakes", "Transmission", "Electrical", "Suspension"]


async def seed_lookups(session):
    for model, names in ((Brand, BRANDS), (Category, CATEGORIES)):
        existing = set((await session.execute(select(model.name))).scalars().all())
        session.add_all(model(name=name) for name in names if name not in existing)


async def seed_admin(session, email: str, password: str):
    result = await session.execute(select(User).where(User.email == email.lower()))
    user = result.scalars().first()
    if user is None:
        user = User(
            email=email.lower(),
            password_hash=hash_password(password),
            is_active=True,
            profile=Profile(full_name="Administrator"),
            roles=[UserRole(role=ADMIN_ROLE)],
        )
        session.add(user)
        print(f"Admin user {email} created!")
    elif not user.is_admin:
        user.roles.append(UserRole(role=ADMIN_ROLE))
        print(f"Admin role granted to {email}")


async def main():
    await init_models()
    async with AsyncSessionLocal() as session:
        await seed_lookups(session)
        await seed_admin(
            session,
            os.getenv("ADMIN_EMAIL", "admin@example.com"),
            os.getenv("ADMIN_PASSWORD", "admin123"),
        )
        await session.commit()


if __name__ == "__main__":
    asyncio.run(main())
