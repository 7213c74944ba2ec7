"""値オブジェクトモジュール."""
from .money import Money
from .product_attributes import ProductAttributes
from .stock_level import StockLevel

__all__ = [
    "Money",
    "ProductAttributes",
    "StockLevel",
]
