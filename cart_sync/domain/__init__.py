"""ドメイン層モジュール."""
from .entities import Cart, CartLine
from .enums import CartOperation, CartOperationStatus
from .identifiers import ProductId
from .ports import (
    CartMirror,
    CatalogError,
    CollaboratorError,
    MalformedCartError,
    MirrorError,
    NotificationSink,
    ProductCatalog,
    ProductNotFoundError,
    StockOracle,
    StockOracleError,
)
from .services import StockExceededError, StockGate
from .value_objects import Money, ProductAttributes, StockLevel

__all__ = [
    # Identifiers
    "ProductId",
    # Enums
    "CartOperation",
    "CartOperationStatus",
    # Value Objects
    "Money",
    "ProductAttributes",
    "StockLevel",
    # Entities
    "Cart",
    "CartLine",
    # Ports
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
    # Services
    "StockExceededError",
    "StockGate",
]
