"""ポートモジュール."""
from .cart_mirror import CartMirror, MalformedCartError, MirrorError
from .collaborator_error import CollaboratorError
from .notification_sink import NotificationSink
from .product_catalog import CatalogError, ProductCatalog, ProductNotFoundError
from .stock_oracle import StockOracle, StockOracleError

__all__ = [
    "CartMirror",
    "CatalogError",
    "CollaboratorError",
    "MalformedCartError",
    "MirrorError",
    "NotificationSink",
    "ProductCatalog",
    "ProductNotFoundError",
    "StockOracle",
    "StockOracleError",
]
