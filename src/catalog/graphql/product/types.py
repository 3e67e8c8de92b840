from typing import List, Optional

import strawberry
from strawberry.types import Info

from catalog.graphql.product.dataloaders import VariantsByParentLoader
from catalog.graphql.product.selection import requested_attribute_codes
from catalog.variants.attributes import variant_attribute_codes


@strawberry.type
class ProductAttribute:
    code: str
    value: Optional[str]


@strawberry.type
class SimpleProduct:
    id: strawberry.ID
    sku: str
    name: Optional[str]

    @strawberry.field
    def attributes(self, codes: Optional[List[str]] = None) -> List[ProductAttribute]:
        """
        Attribute values loaded with the product. Only the codes requested here
        and the parent's variant-defining attributes are loaded for variants.
        """
        values = [
            ProductAttribute(code=value.attribute.code, value=value.value)
            for value in self.attribute_values
        ]
        if codes is not None:
            values = [value for value in values if value.code in codes]
        return sorted(values, key=lambda value: value.code)


@strawberry.type
class ConfigurableVariant:
    sku: str
    product: SimpleProduct


@strawberry.type
class ConfigurableProduct:
    id: strawberry.ID
    sku: str
    name: Optional[str]

    @strawberry.field
    def configurable_options(self) -> List[str]:
        return sorted(variant_attribute_codes(self))

    @strawberry.field
    async def variants(self, info: Info) -> List[ConfigurableVariant]:
        collection = info.context["variants"]
        collection.register_parent(self)
        collection.add_attributes(requested_attribute_codes(info))
        records = await VariantsByParentLoader(info.context).load(self.id)
        return [
            ConfigurableVariant(sku=record.display_id, product=record.entity)
            for record in records
        ]
