"""モック在庫照会."""
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import StockOracle, StockOracleError
from cart_sync.domain.value_objects import StockLevel

# サンプルの在庫数 (id -> 在庫数)
SAMPLE_STOCK = {1: 3, 2: 5, 3: 2, 4: 1, 5: 5, 6: 10}


class MockStockOracle(StockOracle):
    """モック在庫照会（開発・テスト用）."""

    def __init__(self, stock: dict[ProductId, int] | None = None) -> None:
        """初期化.

        Args:
            stock: 商品IDごとの在庫数（省略時はサンプル在庫）
        """
        if stock is None:
            stock = {ProductId(product_id): amount for product_id, amount in SAMPLE_STOCK.items()}
        self._stock = dict(stock)
        self._unavailable = False

    def set_stock(self, product_id: ProductId, available_amount: int) -> None:
        """在庫数を設定する（テスト用）."""
        self._stock[product_id] = available_amount

    def set_unavailable(self, unavailable: bool = True) -> None:
        """在庫照会を到達不能にする（テスト用）."""
        self._unavailable = unavailable

    def get_stock(self, product_id: ProductId) -> StockLevel:
        """在庫数を取得する."""
        if self._unavailable:
            raise StockOracleError("Stock oracle is unavailable")
        if product_id not in self._stock:
            raise StockOracleError(f"Stock not found: {product_id}")
        return StockLevel(product_id=product_id, available_amount=self._stock[product_id])
