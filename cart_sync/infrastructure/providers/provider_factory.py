"""商品カタログ・在庫照会 ファクトリ."""
import logging
import os

from cart_sync.domain.ports import ProductCatalog, StockOracle

logger = logging.getLogger(__name__)


def _use_mock() -> bool:
    """モックプロバイダを使用するか判定する."""
    provider_type = os.environ.get("CART_DATA_PROVIDER")
    if provider_type and provider_type not in ("mock", "http"):
        logger.warning("Unknown CART_DATA_PROVIDER=%s, falling back to HTTP", provider_type)
    return provider_type == "mock"


def create_product_catalog() -> ProductCatalog:
    """環境変数に基づいてProductCatalogを生成する.

    CART_DATA_PROVIDER:
        "mock" → MockProductCatalog（ローカル開発・テスト用）
        "http" → HttpProductCatalog
        未設定  → HttpProductCatalog（デフォルト）
    """
    if _use_mock():
        from cart_sync.infrastructure.providers.mock_product_catalog import MockProductCatalog

        return MockProductCatalog()

    from cart_sync.infrastructure.providers.http_product_catalog import HttpProductCatalog

    return HttpProductCatalog()


def create_stock_oracle() -> StockOracle:
    """環境変数に基づいてStockOracleを生成する.

    CART_DATA_PROVIDER の扱いは create_product_catalog と同じ。
    """
    if _use_mock():
        from cart_sync.infrastructure.providers.mock_stock_oracle import MockStockOracle

        return MockStockOracle()

    from cart_sync.infrastructure.providers.http_stock_oracle import HttpStockOracle

    return HttpStockOracle()
