"""プロバイダ実装モジュール."""
from .http_product_catalog import HttpProductCatalog
from .http_stock_oracle import HttpStockOracle
from .mock_product_catalog import MockProductCatalog
from .mock_stock_oracle import MockStockOracle
from .provider_factory import create_product_catalog, create_stock_oracle

__all__ = [
    "HttpProductCatalog",
    "HttpStockOracle",
    "MockProductCatalog",
    "MockStockOracle",
    "create_product_catalog",
    "create_stock_oracle",
]
