"""カートシリアライズのテスト."""
import json
from decimal import Decimal

import pytest

from cart_sync.domain.entities import Cart, CartLine
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import MalformedCartError
from cart_sync.domain.value_objects import Money, ProductAttributes
from cart_sync.infrastructure.repositories import deserialize_cart, serialize_cart


def _cart() -> Cart:
    return Cart.of([
        CartLine(
            product_id=ProductId(7),
            attributes=ProductAttributes(title="軽量シューズ", price=Money.of("179.90"), image="a.jpg"),
            amount=2,
        ),
    ])


class TestSerializeCart:
    """serialize_cart のテスト."""

    def test_レコードのJSON配列に変換する(self) -> None:
        records = json.loads(serialize_cart(_cart()))
        assert records == [
            {"id": 7, "title": "軽量シューズ", "price": "179.90", "image": "a.jpg", "amount": 2}
        ]

    def test_空のカートは空配列(self) -> None:
        assert serialize_cart(Cart.empty()) == "[]"

    def test_非ASCII文字をエスケープしない(self) -> None:
        assert "軽量シューズ" in serialize_cart(_cart())


class TestDeserializeCart:
    """deserialize_cart のテスト."""

    def test_数値の価格と画像なしのレコードを読み込める(self) -> None:
        cart = deserialize_cart('[{"id": 1, "title": "Shoe", "price": 139.9, "amount": 3}]')
        line = cart.find_line(ProductId(1))
        assert line.price.value == Decimal("139.9")
        assert line.attributes.image == ""
        assert line.amount == 3

    def test_順序を保つ(self) -> None:
        value = json.dumps([
            {"id": 9, "title": "B", "price": "1", "amount": 1},
            {"id": 7, "title": "A", "price": "1", "amount": 1},
        ])
        assert [line.product_id.value for line in deserialize_cart(value).get_lines()] == [9, 7]

    @pytest.mark.parametrize(
        "value",
        [
            "not json",
            '{"id": 1}',
            '[{"id": 1, "title": "Shoe", "price": "1"}]',
            '[{"id": 1, "title": "Shoe", "price": "1", "amount": 0}]',
            '[{"id": "abc", "title": "Shoe", "price": "1", "amount": 1}]',
            '[1, 2]',
            '[{"id": 1, "title": "A", "price": "1", "amount": 1}, '
            '{"id": 1, "title": "A", "price": "1", "amount": 2}]',
        ],
    )
    def test_不正な値はMalformedCartError(self, value: str) -> None:
        with pytest.raises(MalformedCartError):
            deserialize_cart(value)

    def test_深くネストした値はMalformedCartError(self) -> None:
        value = "[" * 100000 + "]" * 100000
        with pytest.raises(MalformedCartError):
            deserialize_cart(value)
