"""在庫照会インターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import ProductId
from ..value_objects import StockLevel
from .collaborator_error import CollaboratorError


class StockOracleError(CollaboratorError):
    """在庫照会エラー."""

    pass


class StockOracle(ABC):
    """商品の現在の在庫数を回答するインターフェース."""

    @abstractmethod
    def get_stock(self, product_id: ProductId) -> StockLevel:
        """在庫数を取得する.

        Raises:
            StockOracleError: 在庫を取得できない場合
        """
        pass
