from typing import Dict, List, Optional

from pydantic import BaseModel


class Variant(BaseModel):
    sku: str
    name: Optional[str] = None
    attributes: Dict[str, Optional[str]]


class ConfigurableProduct(BaseModel):
    sku: str
    name: Optional[str] = None
    variants: List[Variant]
