"""ドメインサービスモジュール."""
from .stock_gate import StockExceededError, StockGate

__all__ = [
    "StockExceededError",
    "StockGate",
]
