
"""Gerenciador de carrinho: estado único, validado contra estoque e gravado write-through.

Fluxo de toda operação: validar (estoque) -> calcular novo carrinho -> persistir -> publicar.
Qualquer falha antes da publicação mantém o carrinho anterior, em memória e no store.
"""
from __future__ import annotations
import asyncio
from typing import Callable
from ...core.logging import get_logger
from ...ports.interfaces import (
    Cart, CartItem, CatalogPort, NotificationPort, PersistencePort, StockPort,
)
from .. import messages
from ..cart_codec import deserialize_cart, serialize_cart
from ..errors import CorruptSnapshot, InvalidQuantity, ItemNotFound, OutOfStock

log = get_logger()

Observer = Callable[[Cart], None]

class CartManager:
    """Dono exclusivo do carrinho; expõe apenas add/remove/update e leitura."""

    def __init__(
        self,
        stock: StockPort,
        catalog: CatalogPort,
        store: PersistencePort,
        notifier: NotificationPort,
        *,
        storage_key: str = "@RocketShoes:cart",
        notify_on_increment: bool = False,
    ):
        self.stock = stock
        self.catalog = catalog
        self.store = store
        self.notifier = notifier
        self.storage_key = storage_key
        self.notify_on_increment = notify_on_increment
        self._observers: list[Observer] = []
        self._lock = asyncio.Lock()
        self._cart: Cart = self._restore()

    # ---------- Leitura ----------
    @property
    def cart(self) -> Cart:
        return self._cart

    def items_amount(self) -> dict[int, int]:
        """Mapa id -> quantidade no carrinho."""
        return {item.id: item.amount for item in self._cart}

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Registra observador chamado após cada mutação confirmada. Retorna função de cancelamento."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)
        return unsubscribe

    # ---------- Operações ----------
    async def add_product(self, product_id: int) -> None:
        """Incrementa o produto em 1 ou o insere com amount=1."""
        async with self._lock:
            cart = self._cart
            try:
                stock = await self.stock.get(product_id)
                current = next((item.amount for item in cart if item.id == product_id), 0)
                candidate = current + 1
                if candidate > stock.amount:
                    raise OutOfStock(product_id, candidate, stock.amount)

                if current:
                    updated = _replace_amount(cart, product_id, candidate)
                    inserted = False
                else:
                    product = await self.catalog.get(product_id)
                    updated = cart + (CartItem.from_product(product, amount=1),)
                    inserted = True

                self._commit(updated)
            except OutOfStock as e:
                log.info("cart_add_rejected", product_id=product_id, requested=e.requested, available=e.available)
                self._notify(messages.OUT_OF_STOCK)
                return
            except Exception:
                log.exception("cart_add_failed", product_id=product_id)
                self._notify(messages.ADD_FAILED)
                return

        log.info("cart_add_ok", product_id=product_id, amount=candidate, inserted=inserted)
        if inserted or self.notify_on_increment:
            self._notify(messages.ADDED)

    def remove_product(self, product_id: int) -> None:
        """Remove a linha inteira do produto, qualquer que seja a quantidade."""
        try:
            if not any(item.id == product_id for item in self._cart):
                raise ItemNotFound(product_id)
            self._commit(tuple(item for item in self._cart if item.id != product_id))
        except ItemNotFound:
            log.info("cart_remove_rejected", product_id=product_id)
            self._notify(messages.REMOVE_FAILED)
            return
        except Exception:
            log.exception("cart_remove_failed", product_id=product_id)
            self._notify(messages.REMOVE_FAILED)
            return
        log.info("cart_remove_ok", product_id=product_id)

    async def update_product_amount(self, product_id: int, amount: int) -> None:
        """Define a quantidade exata de uma linha existente.

        Ordem das validações: quantidade < 1, estoque, existência da linha.
        Zerar não remove; para remover use remove_product.
        """
        async with self._lock:
            cart = self._cart
            try:
                if amount < 1:
                    raise InvalidQuantity(amount)
                stock = await self.stock.get(product_id)
                if amount > stock.amount:
                    raise OutOfStock(product_id, amount, stock.amount)
                if not any(item.id == product_id for item in cart):
                    raise ItemNotFound(product_id)
                self._commit(_replace_amount(cart, product_id, amount))
            except OutOfStock as e:
                log.info("cart_update_rejected", product_id=product_id, requested=e.requested, available=e.available)
                self._notify(messages.OUT_OF_STOCK)
                return
            except (InvalidQuantity, ItemNotFound) as e:
                log.info("cart_update_rejected", product_id=product_id, reason=str(e))
                self._notify(messages.UPDATE_FAILED)
                return
            except Exception:
                log.exception("cart_update_failed", product_id=product_id)
                self._notify(messages.UPDATE_FAILED)
                return
        log.info("cart_update_ok", product_id=product_id, amount=amount)

    # ---------- Internos ----------
    def _restore(self) -> Cart:
        """Lê o snapshot persistido; ausente, corrompido ou ilegível vira carrinho vazio."""
        try:
            raw = self.store.read(self.storage_key)
        except Exception:
            log.exception("cart_snapshot_read_failed", key=self.storage_key)
            return ()
        if not raw:
            return ()
        try:
            cart = deserialize_cart(raw)
        except CorruptSnapshot as e:
            log.warning("cart_snapshot_corrupt", key=self.storage_key, error=str(e))
            return ()
        log.info("cart_restored", key=self.storage_key, lines=len(cart))
        return cart

    def _commit(self, cart: Cart) -> None:
        # Grava antes de publicar: se o store falhar, nada muda em memória
        self.store.write(self.storage_key, serialize_cart(cart))
        self._cart = cart
        for callback in list(self._observers):
            try:
                callback(cart)
            except Exception:
                log.exception("cart_observer_failed")

    def _notify(self, message: str) -> None:
        try:
            self.notifier.notify(message, messages.SEVERITY[message])
        except Exception:
            log.exception("cart_notify_failed", message=message)

def _replace_amount(cart: Cart, product_id: int, amount: int) -> Cart:
    """Nova tupla com amount trocado na linha product_id, mantendo a posição."""
    return tuple(item.with_amount(amount) if item.id == product_id else item for item in cart)
