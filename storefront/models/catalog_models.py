# storefront/models/catalog_models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, Float, Numeric, CheckConstraint, Index,
    ForeignKey, DateTime, func
)
from sqlalchemy.orm import relationship
from storefront.core.db import Base


class Brand(Base):
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    products = relationship("Product", back_populates="brand")


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    products = relationship("Product", back_populates="category")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(String, nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
    image_url = Column(String, nullable=True)
    in_stock = Column(Boolean, default=True, nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False)
    sku = Column(String(64), nullable=True)

    brand_id = Column(Integer, ForeignKey("brands.id", ondelete="SET NULL"), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    brand = relationship("Brand", back_populates="products", lazy="selectin")
    category = relationship("Category", back_populates="products", lazy="selectin")
    new_arrivals = relationship(
        "NewArrival",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(price >= 0, name="check_product_price_non_negative"),
        CheckConstraint(stock_quantity >= 0, name="check_product_stock_non_negative"),
        Index("ix_product_name_brand", "name", "brand_id"),
    )

    @property
    def brand_name(self):
        return self.brand.name if self.brand else None

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"


class NewArrival(Base):
    __tablename__ = "new_arrivals"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    original_price = Column(Numeric(12, 2), nullable=True)
    sale_price = Column(Numeric(12, 2), nullable=True)
    discount_percentage = Column(Integer, nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_best_seller = Column(Boolean, default=False, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    arrival_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    product = relationship("Product", back_populates="new_arrivals", lazy="selectin")

    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="check_new_arrival_rating_range"),
    )

    @property
    def product_name(self):
        return self.product.name if self.product else None

    @property
    def image_url(self):
        return self.product.image_url if self.product else None

    @property
    def brand_name(self):
        return self.product.brand_name if self.product else None

    @property
    def category_name(self):
        return self.product.category_name if self.product else None
