"""商品識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    """商品カタログ上の商品ID."""

    value: int

    def __post_init__(self) -> None:
        """バリデーション."""
        # bool は int のサブクラスなので明示的に弾く
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"ProductId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"ProductId must be positive: {self.value}")

    @classmethod
    def parse(cls, raw: str | int) -> ProductId:
        """文字列または整数から生成する."""
        if isinstance(raw, str):
            try:
                return cls(int(raw.strip()))
            except ValueError as e:
                raise ValueError(f"Invalid ProductId: {raw!r}") from e
        return cls(raw)

    def __str__(self) -> str:
        """文字列表現."""
        return str(self.value)
