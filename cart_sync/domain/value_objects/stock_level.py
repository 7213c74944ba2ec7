"""在庫数の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import ProductId


@dataclass(frozen=True)
class StockLevel:
    """ある時点での商品の在庫数（外部の在庫台帳から取得する読み取り専用の事実）."""

    product_id: ProductId
    available_amount: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.available_amount, bool) or not isinstance(self.available_amount, int):
            raise ValueError(f"available_amount must be an integer: {self.available_amount!r}")
        if self.available_amount < 0:
            raise ValueError("available_amount cannot be negative")

    def allows_more_than(self, amount: int) -> bool:
        """指定数量からさらに追加できる在庫があるか判定する."""
        return amount < self.available_amount
