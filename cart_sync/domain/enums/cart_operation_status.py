"""カート操作結果ステータスの列挙型."""
from enum import Enum


class CartOperationStatus(Enum):
    """カート操作の終了状態."""

    SUCCESS = "success"
    NO_OP = "no_op"
    STOCK_EXCEEDED = "stock_exceeded"
    FAILED = "failed"

    def is_committed(self) -> bool:
        """ミラーとメモリ上のカートが更新されたか."""
        return self is CartOperationStatus.SUCCESS

    def is_rejected(self) -> bool:
        """利用者への通知が必要な結果か."""
        return self in (CartOperationStatus.STOCK_EXCEEDED, CartOperationStatus.FAILED)
