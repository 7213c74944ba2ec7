"""商品カタログインターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import ProductId
from ..value_objects import ProductAttributes
from .collaborator_error import CollaboratorError


class CatalogError(CollaboratorError):
    """商品カタログ取得エラー."""

    pass


class ProductNotFoundError(CatalogError):
    """商品が見つからないエラー."""

    def __init__(self, product_id: ProductId) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class ProductCatalog(ABC):
    """商品の表示属性を提供するカタログのインターフェース."""

    @abstractmethod
    def get_product(self, product_id: ProductId) -> ProductAttributes:
        """商品の表示属性を取得する.

        Raises:
            ProductNotFoundError: 商品が存在しない場合
            CatalogError: カタログに到達できない場合
        """
        pass
