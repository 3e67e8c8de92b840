"""Lookup of the attributes that distinguish a configurable product's variants"""
from typing import Set

from sqlalchemy import inspect

from catalog.db.models import Product, ProductType
from catalog.exceptions import VariantAttributesUnavailable


def variant_attribute_codes(product: Product) -> Set[str]:
    """
    Return the codes of the configurable attributes of ``product``.

    The product must have been loaded with its ``configurable_attributes``;
    no query is issued here, so the lookup is safe to call from async code.
    """
    if product.type_id != ProductType.CONFIGURABLE.value:
        raise VariantAttributesUnavailable(
            f"Product {product.sku!r} is not a configurable product."
        )
    if "configurable_attributes" in inspect(product).unloaded:
        raise VariantAttributesUnavailable(
            f"Configurable attributes of {product.sku!r} were not loaded."
        )
    return {attribute.code for attribute in product.configurable_attributes}
