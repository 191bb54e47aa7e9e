
"""Portas hexagonais (interfaces) e DTOs do carrinho."""
from __future__ import annotations
from enum import Enum
from typing import Protocol
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

class Product(BaseModel):
    """Metadados de produto como retornados pela API (/products/:id)."""
    id: int
    title: str
    price: float
    image: str

class Stock(BaseModel):
    """Estoque disponível de um produto (/stock/:id). Somente leitura."""
    id: int
    amount: NonNegativeInt

class CartItem(BaseModel):
    """Linha do carrinho: um produto distinto e a quantidade mantida."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: float
    image_url: str
    amount: PositiveInt = Field(description="Quantidade no carrinho, sempre >= 1")

    @classmethod
    def from_product(cls, product: Product, amount: int = 1) -> "CartItem":
        return cls(id=product.id, name=product.title, price=product.price, image_url=product.image, amount=amount)

    def with_amount(self, amount: int) -> "CartItem":
        """Retorna cópia com nova quantidade (valida amount >= 1)."""
        return CartItem(**(self.model_dump() | {"amount": amount}))

Cart = tuple[CartItem, ...]

class Severity(str, Enum):
    INFO = "info"
    ERROR = "error"

class StockPort(Protocol):
    async def get(self, product_id: int) -> Stock: ...

class CatalogPort(Protocol):
    async def get(self, product_id: int) -> Product: ...

class PersistencePort(Protocol):
    def read(self, key: str) -> str | None: ...
    def write(self, key: str, value: str) -> None: ...

class NotificationPort(Protocol):
    def notify(self, message: str, severity: Severity) -> None: ...
