"""HTTP 在庫照会."""
import logging

from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import StockOracle, StockOracleError
from cart_sync.domain.value_objects import StockLevel
from cart_sync.infrastructure.clients import ShopApiClient, ShopApiError

logger = logging.getLogger(__name__)


class HttpStockOracle(StockOracle):
    """在庫API (GET /stock/{id} -> {"id", "amount"}) から在庫数を取得する."""

    def __init__(self, client: ShopApiClient | None = None) -> None:
        """初期化.

        Args:
            client: 商品・在庫API クライアント
        """
        self._client = client or ShopApiClient()

    def get_stock(self, product_id: ProductId) -> StockLevel:
        """在庫数を取得する."""
        try:
            data = self._client.get_resource(f"stock/{product_id.value}")
        except ShopApiError as e:
            raise StockOracleError(f"Failed to get stock for {product_id}: {e}") from e

        if data is None:
            raise StockOracleError(f"Stock not found: {product_id}")
        if "id" in data and str(data["id"]) != str(product_id.value):
            logger.warning(f"Stock payload for another product: {data!r}")
            raise StockOracleError(
                f"Stock payload id {data['id']!r} does not match {product_id}"
            )

        try:
            return StockLevel(product_id=product_id, available_amount=data["amount"])
        except (KeyError, ValueError) as e:
            logger.warning(f"Invalid stock payload: {data!r}")
            raise StockOracleError(f"Invalid stock payload: {e}") from e
