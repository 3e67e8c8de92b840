"""Main api module for the app"""
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from catalog.exception_handler import data_access_exception_handler, default_exception_handler
from catalog.exceptions import DataAccessError
from catalog.graphql.core.context import get_context_for_fastapi
from catalog.graphql.schema import schema
from catalog.routers import product
from catalog.settings import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Catalog",
    # for dev
    debug=os.getenv("DEBUG", default="0") == "1",
)
app.add_exception_handler(DataAccessError, data_access_exception_handler)
app.add_exception_handler(Exception, default_exception_handler)

# add middlewares
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_headers=["*"],
    allow_methods=["OPTIONS", "GET", "POST"],
)

# add routes
app.include_router(product.router, prefix="/products", tags=["Products"])

# graphql route
graphql_app = GraphQLRouter(schema, context_getter=get_context_for_fastapi)
app.include_router(graphql_app, prefix="/graphql")
