"""Composes all queries and returns schema"""
import strawberry
from strawberry.extensions import QueryDepthLimiter

from catalog.graphql.product.schema import Query as ProductQuery
from catalog.settings import get_settings

settings = get_settings()


@strawberry.type
class Query(ProductQuery):
    """
    We have to inherit from every Query we want. Each module in this folder
    would expose Query, and we import that into this file, and add it just like
    ProductQuery.
    """


schema = strawberry.federation.Schema(
    Query,
    extensions=[
        QueryDepthLimiter(max_depth=settings.max_query_depth),
    ],
)
