from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from catalog.db.models import Product as ProductModel, ProductType
from catalog.variants import VariantCollection
from catalog.variants.source import SqlChildDataSource
from dependencies.db import get_db
from schemas.product import ConfigurableProduct, Variant

router = APIRouter()


@router.get("/{sku}/variants", responses={status.HTTP_200_OK: {"model": ConfigurableProduct}})
async def get_product_variants(
    sku: str,
    attributes: List[str] = Query(default=[]),
    db=Depends(get_db),
):
    query = (
        select(ProductModel)
        .where(
            ProductModel.sku == sku,
            ProductModel.type_id == ProductType.CONFIGURABLE.value,
        )
        .options(selectinload(ProductModel.configurable_attributes))
    )
    res = await db.execute(query)
    product = res.scalars().first()
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Configurable product {sku!r} not found.",
        )

    collection = VariantCollection(SqlChildDataSource(db))
    collection.register_parent(product)
    collection.add_attributes(attributes)
    records = await collection.get_children(product.id)
    variants = [
        Variant(
            sku=record.display_id,
            name=record.entity.name,
            attributes={
                value.attribute.code: value.value
                for value in record.entity.attribute_values
            },
        )
        for record in records
    ]
    return ConfigurableProduct(sku=product.sku, name=product.name, variants=variants)
