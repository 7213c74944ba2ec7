"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Money:
    """商品価格・小計・合計を表現する値オブジェクト."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, Decimal):
            raise ValueError(f"Money value must be a Decimal: {self.value!r}")
        if not self.value.is_finite():
            raise ValueError("Money value must be finite")
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @classmethod
    def of(cls, value: int | float | str | Decimal) -> Money:
        """数値または文字列からMoneyを生成する.

        float は文字列表現を経由して変換する（179.9 -> Decimal("179.9")）。
        """
        if isinstance(value, bool):
            raise ValueError(f"Invalid money value: {value!r}")
        try:
            return cls(Decimal(str(value)))
        except InvalidOperation as e:
            raise ValueError(f"Invalid money value: {value!r}") from e

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def format(self) -> str:
        """表示用フォーマット（例: "$1,079.70"）."""
        return f"${self.value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
