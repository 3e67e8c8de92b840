"""Models for attribute metadata and values"""
from sqlalchemy import Column, ForeignKey, Integer, PrimaryKeyConstraint, String, Text
from sqlalchemy.orm import relationship

from catalog.db.models.base import Base, IDPrimaryKey


class Attribute(Base, IDPrimaryKey):
    __tablename__ = "eav_attribute"
    code = Column(String(255), index=True, unique=True, nullable=False)
    label = Column(String)


class ProductAttributeValue(Base):
    __tablename__ = "catalog_product_attribute_value"
    product_id = Column(Integer, ForeignKey("catalog_product.id"), nullable=False)
    attribute_id = Column(Integer, ForeignKey("eav_attribute.id"), nullable=False)
    value = Column(Text)

    product = relationship("Product", back_populates="attribute_values")
    attribute = relationship("Attribute", lazy="joined")

    __table_args__ = (PrimaryKeyConstraint("product_id", "attribute_id"),)
