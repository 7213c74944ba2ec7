"""アプリケーション層モジュール."""
from .cart_engine import CartEngine, CartOperationResult

__all__ = [
    "CartEngine",
    "CartOperationResult",
]
