"""Pytest configuration and fixtures"""
import asyncio
import pytest

from rocketshoes_cart.domain.cart_codec import serialize_cart
from rocketshoes_cart.domain.errors import ProductNotFound, ServiceFailure
from rocketshoes_cart.domain.services.cart_manager import CartManager
from rocketshoes_cart.ports.interfaces import CartItem, Product, Stock
from rocketshoes_cart.repo.store import MemoryPersistenceStore

CART_KEY = "@RocketShoes:cart"


class FakeStock:
    """Stock lookup backed by a dict; ids in `failing` raise ServiceFailure."""

    def __init__(self, amounts=None, failing=()):
        self.amounts = dict(amounts or {})
        self.failing = set(failing)
        self.calls = []

    async def get(self, product_id):
        self.calls.append(product_id)
        await asyncio.sleep(0)
        if product_id in self.failing:
            raise ServiceFailure("stock down")
        if product_id not in self.amounts:
            raise ProductNotFound(product_id)
        return Stock(id=product_id, amount=self.amounts[product_id])


class FakeCatalog:
    def __init__(self, products=None, failing=()):
        self.products = dict(products or {})
        self.failing = set(failing)
        self.calls = []

    async def get(self, product_id):
        self.calls.append(product_id)
        await asyncio.sleep(0)
        if product_id in self.failing:
            raise ServiceFailure("catalog down")
        if product_id not in self.products:
            raise ProductNotFound(product_id)
        return self.products[product_id]


class FlakyStore(MemoryPersistenceStore):
    """Memory store whose writes (or reads) can be switched off."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail_writes = False
        self.fail_reads = False
        self.writes = 0

    def read(self, key):
        if self.fail_reads:
            raise ServiceFailure("store unavailable")
        return super().read(key)

    def write(self, key, value):
        if self.fail_writes:
            raise ServiceFailure("store unavailable")
        self.writes += 1
        super().write(key, value)


class RecordingSink:
    def __init__(self):
        self.toasts = []

    def notify(self, message, severity):
        self.toasts.append((message, severity))

    @property
    def messages(self):
        return [m for m, _ in self.toasts]


class RaisingSink(RecordingSink):
    """Records the toast, then fails like a broken UI channel."""

    def notify(self, message, severity):
        super().notify(message, severity)
        raise RuntimeError("toast channel down")


def make_product(product_id):
    return Product(
        id=product_id,
        title=f"Tênis {product_id}",
        price=100.0 + product_id,
        image=f"https://img.test/{product_id}.jpg",
    )


def make_item(product_id, amount):
    return CartItem.from_product(make_product(product_id), amount=amount)


@pytest.fixture
def stock():
    return FakeStock({1: 3, 2: 5, 3: 1, 4: 0})


@pytest.fixture
def catalog():
    return FakeCatalog({i: make_product(i) for i in (1, 2, 3, 4)})


@pytest.fixture
def store():
    return FlakyStore()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_manager(stock, catalog, store, sink):
    """Build a CartManager, optionally seeding the persisted cart first."""

    def _make(items=None, **kwargs):
        if items is not None:
            store.data[CART_KEY] = serialize_cart(tuple(items))
        return CartManager(stock, catalog, store, sink, storage_key=CART_KEY, **kwargs)

    return _make
