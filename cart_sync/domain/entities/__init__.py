"""エンティティモジュール."""
from .cart import Cart
from .cart_line import CartLine

__all__ = [
    "Cart",
    "CartLine",
]
