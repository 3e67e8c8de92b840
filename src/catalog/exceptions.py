"""Errors raised by the catalog service"""


class CatalogError(Exception):
    pass


class DataAccessError(CatalogError):
    """The backing store failed while loading catalog data."""


class VariantAttributesUnavailable(DataAccessError):
    """The attributes that distinguish a product's variants could not be determined."""
