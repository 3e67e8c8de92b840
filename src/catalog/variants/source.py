"""Data sources the variant collection reads child products from"""
import logging
from typing import Iterable, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload, with_expression

from catalog.db.models import (
    Attribute,
    Product,
    ProductAttributeValue,
    ProductStatus,
    ProductSuperLink,
)
from catalog.exceptions import DataAccessError

logger = logging.getLogger(__name__)


class ChildDataSource(Protocol):
    async def fetch_children(
        self,
        parent: Product,
        attribute_codes: Iterable[str],
        status: ProductStatus = ProductStatus.ENABLED,
    ) -> Sequence[Product]:
        ...


class SqlChildDataSource:
    """
    Loads the children of one configurable product per call. Every child
    carries the ``parent_id`` of the link row it was reached through, and only
    the attribute values for ``attribute_codes`` are loaded with it.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def build_query(self, parent: Product, attribute_codes: Iterable[str], status: ProductStatus):
        selected_attributes = select(Attribute.id).where(
            Attribute.code.in_(sorted(attribute_codes))
        )
        return (
            select(Product)
            .join(ProductSuperLink, ProductSuperLink.child_id == Product.id)
            .where(
                ProductSuperLink.parent_id == parent.id,
                Product.status == int(status),
            )
            .options(
                with_expression(Product.parent_id, ProductSuperLink.parent_id),
                selectinload(
                    Product.attribute_values.and_(
                        ProductAttributeValue.attribute_id.in_(selected_attributes)
                    )
                ),
            )
            .order_by(Product.id)
            # children loaded earlier by another query get this link's expression
            .execution_options(populate_existing=True)
        )

    async def fetch_children(
        self,
        parent: Product,
        attribute_codes: Iterable[str],
        status: ProductStatus = ProductStatus.ENABLED,
    ) -> Sequence[Product]:
        query = self.build_query(parent, attribute_codes, status)
        try:
            res = await self.session.execute(query)
        except SQLAlchemyError as exc:
            logger.error("Failed to load children of product %s: %s", parent.id, exc)
            raise DataAccessError(
                f"Could not load variants of product {parent.sku!r}."
            ) from exc
        children = res.scalars().all()
        # A child linked to several parents must keep this parent's link and
        # attribute selection, so the next query builds its own instance.
        for child in children:
            self.session.expunge(child)
        return children
