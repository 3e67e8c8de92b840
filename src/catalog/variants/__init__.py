from catalog.variants.collection import ChildRecord, VariantCollection

__all__ = ["ChildRecord", "VariantCollection"]
