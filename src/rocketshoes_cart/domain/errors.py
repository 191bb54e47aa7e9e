
"""Taxonomia de erros do carrinho."""
from __future__ import annotations

class CartError(Exception):
    """Base para todos os erros do carrinho."""

class OutOfStock(CartError):
    """Quantidade solicitada acima do estoque disponível."""
    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(f"produto {product_id}: solicitado {requested}, disponível {available}")
        self.product_id = product_id
        self.requested = requested
        self.available = available

class ItemNotFound(CartError):
    """Operação sobre linha inexistente no carrinho."""
    def __init__(self, product_id: int):
        super().__init__(f"produto {product_id} não está no carrinho")
        self.product_id = product_id

class InvalidQuantity(CartError):
    def __init__(self, amount: int):
        super().__init__(f"quantidade inválida: {amount}")
        self.amount = amount

class ServiceFailure(CartError):
    """Falha ao falar com estoque, catálogo ou armazenamento (rede, payload, store)."""

class ProductNotFound(ServiceFailure):
    def __init__(self, product_id: int):
        super().__init__(f"produto {product_id} não encontrado")
        self.product_id = product_id

class CorruptSnapshot(CartError):
    """Snapshot persistido ilegível ou inconsistente."""
