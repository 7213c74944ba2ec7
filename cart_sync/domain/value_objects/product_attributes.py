"""商品表示属性の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from .money import Money


@dataclass(frozen=True)
class ProductAttributes:
    """カタログから取得した商品の表示属性.

    カート行の作成時点でコピーされ、以降は更新されない。
    """

    title: str
    price: Money
    image: str = ""

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Product title cannot be empty")
