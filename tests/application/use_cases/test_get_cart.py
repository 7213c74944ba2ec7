"""GetCartUseCase のテスト."""
from decimal import Decimal

from cart_sync.application import CartEngine
from cart_sync.application.use_cases import GetCartUseCase
from cart_sync.domain.entities import Cart, CartLine
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.value_objects import Money, ProductAttributes
from cart_sync.infrastructure.providers import MockProductCatalog, MockStockOracle
from cart_sync.infrastructure.repositories import InMemoryCartMirror


def _make_engine(cart: Cart | None = None) -> CartEngine:
    return CartEngine(
        cart_mirror=InMemoryCartMirror(),
        product_catalog=MockProductCatalog(),
        stock_oracle=MockStockOracle(),
        initial_cart=cart,
    )


class TestGetCartUseCase:
    """GetCartUseCase のテスト."""

    def test_空のカート(self) -> None:
        result = GetCartUseCase(_make_engine()).execute()
        assert result.is_empty is True
        assert result.lines == []
        assert result.item_count == 0
        assert result.total_amount == Money.zero()

    def test_行ごとの小計と合計を返す(self) -> None:
        cart = Cart.of([
            CartLine(
                product_id=ProductId(1),
                attributes=ProductAttributes(title="靴A", price=Money.of("179.90"), image="a.jpg"),
                amount=2,
            ),
            CartLine(
                product_id=ProductId(2),
                attributes=ProductAttributes(title="靴B", price=Money.of("139.90")),
                amount=1,
            ),
        ])

        result = GetCartUseCase(_make_engine(cart)).execute()

        assert result.item_count == 2
        assert result.lines[0].product_id == 1
        assert result.lines[0].image == "a.jpg"
        assert result.lines[0].subtotal.value == Decimal("359.80")
        assert result.total_amount.value == Decimal("499.70")
        assert result.amounts_by_product == {1: 2, 2: 1}
