"""Collection for fetching configurable child product data"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Hashable, Iterable, List, Optional, Set

from catalog.db.models import ProductStatus
from catalog.variants.attributes import variant_attribute_codes
from catalog.variants.source import ChildDataSource

logger = logging.getLogger(__name__)

ChildrenMap = Dict[Hashable, List["ChildRecord"]]


@dataclass(frozen=True)
class ChildRecord:
    entity: Any
    display_id: str


class VariantCollection:
    """
    Batches the lookup of child products for a set of configurable parents.

    Create one collection per request and share it between resolvers. Parents
    and attribute codes are registered first; the first read then fetches the
    children of every registered parent, one query per parent, and caches the
    result keyed by the parent id each child reports. Registering a parent
    that wasn't seen before drops the cached result, so the next read fetches
    again with the new parent included.

    Not safe for use from several threads.
    """

    def __init__(
        self,
        source: ChildDataSource,
        variant_attributes: Callable[[Any], Iterable[str]] = variant_attribute_codes,
        link_field: str = "id",
    ):
        self.source = source
        self.variant_attributes = variant_attributes
        self.link_field = link_field

        self._parents: Dict[Hashable, Any] = {}
        self._attribute_codes: Set[str] = set()
        self._children_map: Optional[ChildrenMap] = None
        # bumped on every new parent, lets a fetch notice late registrations
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def attribute_codes(self) -> FrozenSet[str]:
        return frozenset(self._attribute_codes)

    @property
    def parent_keys(self) -> List[Hashable]:
        return list(self._parents)

    def register_parent(self, parent: Any) -> None:
        key = getattr(parent, self.link_field)
        if key in self._parents:
            return

        if self._children_map is not None:
            logger.debug("Parent %s registered after fetch, dropping cached children", key)
            self._children_map = None
        self._parents[key] = parent
        self._generation += 1

    def add_attributes(self, codes: Iterable[str]) -> None:
        self._attribute_codes.update(codes)

    async def get_children(self, parent_key: Hashable) -> List[ChildRecord]:
        """Children of ``parent_key``; empty for unknown or childless parents."""
        children_map = await self.fetch()
        return list(children_map.get(parent_key, ()))

    async def fetch(self) -> ChildrenMap:
        if not self._parents:
            return {}
        if self._children_map is not None:
            return self._children_map

        async with self._lock:
            # another reader may have finished the fetch while we waited
            if self._children_map is not None:
                return self._children_map

            generation = self._generation
            children_map = await self._fetch_all(list(self._parents.values()))
            if generation == self._generation:
                self._children_map = children_map
            else:
                logger.debug("Parents registered during fetch, result not cached")
            return children_map

    async def _fetch_all(self, parents: List[Any]) -> ChildrenMap:
        children_map: ChildrenMap = {}
        count = 0
        for parent in parents:
            codes = self._attribute_codes | set(self.variant_attributes(parent))
            children = await self.source.fetch_children(
                parent, codes, status=ProductStatus.ENABLED
            )
            for child in children:
                # grouped by the child's own link, not by the parent we asked for
                children_map.setdefault(child.parent_id, []).append(
                    ChildRecord(entity=child, display_id=child.sku)
                )
                count += 1

        logger.debug("Fetched %d children for %d parents", count, len(parents))
        return children_map
