"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..identifiers import ProductId
from ..value_objects import Money, ProductAttributes

from .cart_line import CartLine


@dataclass
class Cart:
    """商品IDで一意な行を順序付きで保持するカート（集約ルート）."""

    _lines: list[CartLine] = field(default_factory=list)

    def __post_init__(self) -> None:
        """バリデーション."""
        seen: set[ProductId] = set()
        for line in self._lines:
            if line.product_id in seen:
                raise ValueError(f"Duplicate cart line for product {line.product_id}")
            seen.add(line.product_id)

    @classmethod
    def empty(cls) -> Cart:
        """空のカートを作成する."""
        return cls(_lines=[])

    @classmethod
    def of(cls, lines: list[CartLine]) -> Cart:
        """行のリストからカートを作成する."""
        return cls(_lines=list(lines))

    def copy(self) -> Cart:
        """同じ行を持つ別のカートを返す."""
        return Cart(_lines=list(self._lines))

    def find_line(self, product_id: ProductId) -> CartLine | None:
        """指定商品の行を取得する."""
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def contains(self, product_id: ProductId) -> bool:
        """指定商品の行があるか判定する."""
        return self.find_line(product_id) is not None

    def add_line(self, product_id: ProductId, attributes: ProductAttributes) -> CartLine:
        """数量1の新しい行を末尾に追加する."""
        if self.contains(product_id):
            raise ValueError(f"Cart already contains product {product_id}")
        line = CartLine.create(product_id, attributes)
        self._lines.append(line)
        return line

    def replace_line(self, line: CartLine) -> None:
        """同じ商品IDの行を位置を保ったまま差し替える."""
        for i, current in enumerate(self._lines):
            if current.product_id == line.product_id:
                self._lines[i] = line
                return
        raise ValueError(f"Cart does not contain product {line.product_id}")

    def remove_line(self, product_id: ProductId) -> bool:
        """指定商品の行を削除する."""
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                self._lines.pop(i)
                return True
        return False

    def get_lines(self) -> list[CartLine]:
        """行のリストを取得（防御的コピー）."""
        return list(self._lines)

    def get_item_count(self) -> int:
        """商品の種類数を取得する."""
        return len(self._lines)

    def get_amounts_by_product(self) -> dict[ProductId, int]:
        """商品IDごとの数量を取得する."""
        return {line.product_id: line.amount for line in self._lines}

    def get_total_amount(self) -> Money:
        """合計金額を計算する."""
        total = Money.zero()
        for line in self._lines:
            total = total.add(line.subtotal)
        return total

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._lines) == 0
