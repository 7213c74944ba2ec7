"""ポート（ProductCatalog, StockOracle, CartMirror, NotificationSink）のテスト."""
from abc import ABC

import pytest

from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import (
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


class TestPortsAreAbstract:
    """ポートが抽象基底クラスであることのテスト."""

    @pytest.mark.parametrize(
        "port", [ProductCatalog, StockOracle, CartMirror, NotificationSink]
    )
    def test_抽象基底クラスである(self, port) -> None:
        """ABCを継承していることを確認."""
        assert issubclass(port, ABC)

    @pytest.mark.parametrize(
        "port", [ProductCatalog, StockOracle, CartMirror, NotificationSink]
    )
    def test_直接インスタンス化できない(self, port) -> None:
        with pytest.raises(TypeError):
            port()


class TestCollaboratorErrors:
    """協調先エラーの階層のテスト."""

    @pytest.mark.parametrize(
        "error_class", [CatalogError, StockOracleError, MirrorError]
    )
    def test_協調先エラーを継承している(self, error_class) -> None:
        assert issubclass(error_class, CollaboratorError)

    def test_ProductNotFoundErrorはCatalogError(self) -> None:
        error = ProductNotFoundError(ProductId(7))
        assert isinstance(error, CatalogError)
        assert error.product_id == ProductId(7)
        assert "7" in str(error)

    def test_MalformedCartErrorはMirrorError(self) -> None:
        assert issubclass(MalformedCartError, MirrorError)
