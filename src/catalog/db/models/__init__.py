from catalog.db.models.attribute import Attribute, ProductAttributeValue
from catalog.db.models.base import Base
from catalog.db.models.product import (
    ConfigurableAttribute,
    Product,
    ProductStatus,
    ProductSuperLink,
    ProductType,
)

__all__ = [
    "Attribute",
    "Base",
    "ConfigurableAttribute",
    "Product",
    "ProductAttributeValue",
    "ProductStatus",
    "ProductSuperLink",
    "ProductType",
]
