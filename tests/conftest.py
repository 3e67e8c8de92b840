"""Shared test fixtures for the catalog tests."""

from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.db.models import (
    Attribute,
    Base,
    ConfigurableAttribute,
    Product,
    ProductAttributeValue,
    ProductStatus,
    ProductSuperLink,
    ProductType,
)
from catalog.exceptions import DataAccessError


# ─── Sample catalog ───────────────────────────────────────────────────────────

COLOR, SIZE, MATERIAL = 1, 2, 3
SHIRT, MUG, LAMP, PLAIN_TEE, BUNDLE = 10, 20, 30, 40, 50


def _child(id, sku, name, status=ProductStatus.ENABLED, **values):
    codes = {"color": COLOR, "size": SIZE, "material": MATERIAL}
    return [
        Product(
            id=id,
            sku=sku,
            name=name,
            type_id=ProductType.SIMPLE.value,
            status=status.value,
        ),
        *[
            ProductAttributeValue(product_id=id, attribute_id=codes[code], value=value)
            for code, value in values.items()
        ],
    ]


def sample_catalog():
    rows = [
        Attribute(id=COLOR, code="color", label="Color"),
        Attribute(id=SIZE, code="size", label="Size"),
        Attribute(id=MATERIAL, code="material", label="Material"),
        Product(id=SHIRT, sku="SHIRT", name="Shirt", type_id=ProductType.CONFIGURABLE.value),
        Product(id=MUG, sku="MUG", name="Mug", type_id=ProductType.CONFIGURABLE.value),
        Product(id=LAMP, sku="LAMP", name="Lamp", type_id=ProductType.CONFIGURABLE.value),
        Product(id=PLAIN_TEE, sku="PLAIN-TEE", name="Plain tee", type_id=ProductType.SIMPLE.value),
        # shares SHIRT-RED-S with SHIRT, but varies on size only
        Product(id=BUNDLE, sku="BUNDLE", name="Bundle", type_id=ProductType.CONFIGURABLE.value),
        ConfigurableAttribute(product_id=SHIRT, attribute_id=COLOR, position=0),
        ConfigurableAttribute(product_id=SHIRT, attribute_id=SIZE, position=1),
        ConfigurableAttribute(product_id=MUG, attribute_id=COLOR, position=0),
        ConfigurableAttribute(product_id=LAMP, attribute_id=COLOR, position=0),
        ConfigurableAttribute(product_id=BUNDLE, attribute_id=SIZE, position=0),
    ]
    rows += _child(11, "SHIRT-RED-S", "Shirt red S", color="red", size="S", material="cotton")
    rows += _child(12, "SHIRT-BLUE-M", "Shirt blue M", color="blue", size="M", material="cotton")
    rows += _child(
        13, "SHIRT-GREEN-L", "Shirt green L", status=ProductStatus.DISABLED, color="green", size="L"
    )
    rows += _child(21, "MUG-WHITE", "Mug white", color="white", material="ceramic")
    rows += [
        ProductSuperLink(parent_id=SHIRT, child_id=11),
        ProductSuperLink(parent_id=SHIRT, child_id=12),
        ProductSuperLink(parent_id=SHIRT, child_id=13),
        ProductSuperLink(parent_id=MUG, child_id=21),
        ProductSuperLink(parent_id=BUNDLE, child_id=11),
    ]
    return rows


# ─── Database fixtures ────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as seed:
        seed.add_all(sample_catalog())
        await seed.commit()

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# ─── In-memory fakes ──────────────────────────────────────────────────────────

def make_parent(id, *variant_codes, sku=None):
    return SimpleNamespace(id=id, sku=sku or f"P{id}", variant_codes=set(variant_codes))


def make_child(sku, parent_id):
    return SimpleNamespace(sku=sku, parent_id=parent_id)


def variant_codes_of(parent):
    return parent.variant_codes


class FakeChildSource:
    """Child source returning canned children and recording every call."""

    def __init__(self, children_by_parent=None, fail_for=()):
        self.children_by_parent = children_by_parent or {}
        self.fail_for = set(fail_for)
        self.calls = []

    async def fetch_children(self, parent, attribute_codes, status=ProductStatus.ENABLED):
        self.calls.append((parent.id, frozenset(attribute_codes), status))
        if parent.id in self.fail_for:
            raise DataAccessError("backing store unavailable")
        return list(self.children_by_parent.get(parent.id, []))

    @property
    def fetched_parents(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def source() -> FakeChildSource:
    return FakeChildSource(
        {
            1: [make_child("C1", 1)],
            2: [make_child("C2", 2), make_child("C3", 2)],
            3: [make_child("C4", 3)],
        }
    )
