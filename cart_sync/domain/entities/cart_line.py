"""カート行エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ..identifiers import ProductId
from ..value_objects import Money, ProductAttributes


@dataclass(frozen=True)
class CartLine:
    """カート内の1商品分の行."""

    product_id: ProductId
    attributes: ProductAttributes
    amount: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"amount must be an integer: {self.amount!r}")
        if self.amount < 1:
            raise ValueError(f"amount must be at least 1: {self.amount}")

    @classmethod
    def create(cls, product_id: ProductId, attributes: ProductAttributes) -> CartLine:
        """数量1の新しい行を作成する."""
        return cls(product_id=product_id, attributes=attributes, amount=1)

    def with_amount(self, amount: int) -> CartLine:
        """数量を差し替えた新しい行を返す."""
        return replace(self, amount=amount)

    def increase(self, delta: int) -> CartLine:
        """数量に増分を加えた新しい行を返す（負の増分も可）."""
        return self.with_amount(self.amount + delta)

    @property
    def title(self) -> str:
        """商品名."""
        return self.attributes.title

    @property
    def price(self) -> Money:
        """単価."""
        return self.attributes.price

    @property
    def subtotal(self) -> Money:
        """小計（単価 x 数量）."""
        return self.attributes.price.multiply(self.amount)
