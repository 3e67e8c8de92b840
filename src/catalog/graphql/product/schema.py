from typing import List, Optional

import strawberry
from strawberry.types import Info

from catalog.graphql.product.dataloaders import ProductBySkuLoader
from catalog.graphql.product.types import ConfigurableProduct


@strawberry.type
class Query:
    @strawberry.field
    async def product(self, info: Info, sku: str) -> Optional[ConfigurableProduct]:
        return await ProductBySkuLoader(info.context).load(sku)

    @strawberry.field
    async def products(self, info: Info, skus: List[str]) -> List[ConfigurableProduct]:
        """Unknown skus are left out of the result."""
        products = await ProductBySkuLoader(info.context).load_many(skus)
        return [product for product in products if product is not None]
