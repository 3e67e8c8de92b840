"""Models for the product tables"""
import enum

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    PrimaryKeyConstraint,
    String,
)
from sqlalchemy.orm import query_expression, relationship

from catalog.db.models.base import Base, IDPrimaryKey


class ProductType(str, enum.Enum):
    SIMPLE = "simple"
    CONFIGURABLE = "configurable"


class ProductStatus(enum.IntEnum):
    ENABLED = 1
    DISABLED = 2


class Product(Base, IDPrimaryKey):
    __tablename__ = "catalog_product"
    sku = Column(String(64), index=True, unique=True, nullable=False)
    name = Column(String)
    type_id = Column(String(32), nullable=False, default=ProductType.SIMPLE.value)
    status = Column(Integer, nullable=False, default=ProductStatus.ENABLED.value)

    # Only populated when a child is loaded through its parent link
    parent_id = query_expression()

    configurable_attributes = relationship(
        "Attribute", secondary=lambda: ConfigurableAttribute.__table__
    )
    attribute_values = relationship("ProductAttributeValue", back_populates="product")


class ProductSuperLink(Base):
    __tablename__ = "catalog_product_super_link"
    parent_id = Column(Integer, ForeignKey("catalog_product.id"), nullable=False)
    child_id = Column(Integer, ForeignKey("catalog_product.id"), nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("parent_id", "child_id"),
        Index("catalog_product_super_link_idx_child", "child_id"),
    )


class ConfigurableAttribute(Base):
    __tablename__ = "catalog_product_super_attribute"
    product_id = Column(Integer, ForeignKey("catalog_product.id"), nullable=False)
    attribute_id = Column(Integer, ForeignKey("eav_attribute.id"), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    __table_args__ = (PrimaryKeyConstraint("product_id", "attribute_id"),)
