
"""Serialização do snapshot do carrinho (lista JSON de CartItem, todos os campos)."""
from __future__ import annotations
from pydantic import TypeAdapter, ValidationError
from ..ports.interfaces import Cart, CartItem
from .errors import CorruptSnapshot

_items = TypeAdapter(list[CartItem])

def serialize_cart(cart: Cart) -> str:
    return _items.dump_json(list(cart)).decode()

def deserialize_cart(raw: str | bytes) -> Cart:
    """Valida e reconstrói o carrinho.

    :raises CorruptSnapshot: JSON inválido, registro incompleto, amount < 1 ou id duplicado.
    """
    try:
        items = _items.validate_json(raw)
    except ValidationError as e:
        raise CorruptSnapshot(str(e)) from e
    ids = [i.id for i in items]
    if len(ids) != len(set(ids)):
        raise CorruptSnapshot("ids duplicados no snapshot")
    return tuple(items)
