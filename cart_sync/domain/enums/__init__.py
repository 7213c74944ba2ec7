"""列挙型モジュール."""
from .cart_operation import CartOperation
from .cart_operation_status import CartOperationStatus

__all__ = [
    "CartOperation",
    "CartOperationStatus",
]
