from sqlalchemy import select
from sqlalchemy.orm import selectinload

from catalog.db.models import Product, ProductType
from catalog.graphql.core.dataloader import DataLoader


class ProductBySkuLoader(DataLoader):
    """Configurable products by sku, None for unknown skus"""

    context_key = "product_by_sku"

    async def batch_load_fn(self, keys):
        query = (
            select(Product)
            .where(
                Product.sku.in_(keys),
                Product.type_id == ProductType.CONFIGURABLE.value,
            )
            .options(selectinload(Product.configurable_attributes))
        )
        res = await self.context["db"].execute(query)
        products = {product.sku: product for product in res.scalars().all()}
        return [products.get(key) for key in keys]


class VariantsByParentLoader(DataLoader):
    """
    Reads children from the request's variant collection. Resolvers register
    their parent on the collection before calling ``load``; the batch runs on
    the next loop iteration, after every resolver of the current tick has
    registered, so the collection fetches once for all of them.
    """

    context_key = "variants_by_parent"

    async def batch_load_fn(self, keys):
        collection = self.context["variants"]
        return [await collection.get_children(key) for key in keys]
