"""
Tests for the cart snapshot codec
"""

import json
import pytest

from rocketshoes_cart.domain.cart_codec import deserialize_cart, serialize_cart
from rocketshoes_cart.domain.errors import CorruptSnapshot

from conftest import make_item


def test_serialize_writes_every_field():
    data = json.loads(serialize_cart((make_item(1, 2),)))

    assert data == [{
        "id": 1,
        "name": "Tênis 1",
        "price": 101.0,
        "image_url": "https://img.test/1.jpg",
        "amount": 2,
    }]


def test_empty_cart():
    assert serialize_cart(()) == "[]"
    assert deserialize_cart("[]") == ()


def test_order_is_preserved():
    cart = (make_item(3, 1), make_item(1, 2), make_item(2, 1))

    assert [i.id for i in deserialize_cart(serialize_cart(cart))] == [3, 1, 2]


@pytest.mark.parametrize("raw", [
    "{not json",
    '{"id": 1}',
    '[{"id": 1, "name": "x", "price": 1.0, "amount": 1}]',
    '[{"id": 1, "name": "x", "price": 1.0, "image_url": "u", "amount": 0}]',
    '[{"id": 1, "name": "x", "price": 1.0, "image_url": "u", "amount": 1},'
    ' {"id": 1, "name": "x", "price": 1.0, "image_url": "u", "amount": 2}]',
])
def test_corrupt_snapshots_are_rejected(raw):
    with pytest.raises(CorruptSnapshot):
        deserialize_cart(raw)
