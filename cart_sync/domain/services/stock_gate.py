"""在庫ゲートドメインサービス."""
from ..entities import CartLine
from ..identifiers import ProductId
from ..value_objects import StockLevel


class StockExceededError(Exception):
    """在庫数を超える数量が要求されたエラー."""

    def __init__(self, product_id: ProductId, amount: int, available_amount: int) -> None:
        self.product_id = product_id
        self.amount = amount
        self.available_amount = available_amount
        super().__init__(
            f"Stock exceeded for product {product_id}: "
            f"amount={amount}, available={available_amount}"
        )


class StockGate:
    """カート行の数量変更が在庫上許されるかを判定するサービス.

    判定は変更前の数量と在庫数の比較で行う。新規行の追加は判定しない。
    """

    @staticmethod
    def can_increase(line: CartLine, stock: StockLevel) -> bool:
        """既存行の数量をさらに増やせるか判定する."""
        if line.product_id != stock.product_id:
            raise ValueError(
                f"Stock level for {stock.product_id} does not match line {line.product_id}"
            )
        return stock.allows_more_than(line.amount)

    @classmethod
    def ensure_can_increase(cls, line: CartLine, stock: StockLevel) -> None:
        """既存行の数量を増やせない場合は例外を送出する.

        Raises:
            StockExceededError: 数量が既に在庫数以上の場合
        """
        if not cls.can_increase(line, stock):
            raise StockExceededError(line.product_id, line.amount, stock.available_amount)
