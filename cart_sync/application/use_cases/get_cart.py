"""カート取得ユースケース."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cart_sync.domain.value_objects import Money

if TYPE_CHECKING:
    from cart_sync.application.cart_engine import CartEngine


@dataclass(frozen=True)
class CartLineDTO:
    """カート行DTO."""

    product_id: int
    title: str
    image: str
    price: Money
    amount: int
    subtotal: Money


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    lines: list[CartLineDTO]
    item_count: int
    amounts_by_product: dict[int, int]
    total_amount: Money
    is_empty: bool


class GetCartUseCase:
    """メモリ上の現在のカートを表示用に取得するユースケース."""

    def __init__(self, cart_engine: CartEngine) -> None:
        """初期化.

        Args:
            cart_engine: カート同期エンジン
        """
        self._cart_engine = cart_engine

    def execute(self) -> GetCartResult:
        """カートを取得する.

        Returns:
            カート取得結果
        """
        cart = self._cart_engine.cart

        lines = [
            CartLineDTO(
                product_id=line.product_id.value,
                title=line.title,
                image=line.attributes.image,
                price=line.price,
                amount=line.amount,
                subtotal=line.subtotal,
            )
            for line in cart.get_lines()
        ]

        return GetCartResult(
            lines=lines,
            item_count=cart.get_item_count(),
            amounts_by_product={
                product_id.value: amount
                for product_id, amount in cart.get_amounts_by_product().items()
            },
            total_amount=cart.get_total_amount(),
            is_empty=cart.is_empty(),
        )
