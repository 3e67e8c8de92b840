"""Defines context getter for fastapi route"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.variants import VariantCollection
from catalog.variants.source import SqlChildDataSource
from dependencies.db import get_db


def build_context(db: AsyncSession) -> dict:
    """
    Every request gets its own variant collection, so parents registered by
    one request are never visible to another.
    """
    return {"db": db, "variants": VariantCollection(SqlChildDataSource(db))}


async def get_context_for_fastapi(db=Depends(get_db)):
    return build_context(db)
