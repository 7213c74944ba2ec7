"""カート同期エンジン.

メモリ上のカート、永続化ミラー、在庫照会の3つを整合させる。
各操作はミラーを読み直してから判断し、成功時のみミラーとメモリの両方を更新する。
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from cart_sync.application.use_cases import (
    AddToCartUseCase,
    RemoveFromCartUseCase,
    UpdateCartAmountUseCase,
)
from cart_sync.domain.entities import Cart
from cart_sync.domain.enums import CartOperation, CartOperationStatus
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import (
    CartMirror,
    CollaboratorError,
    MalformedCartError,
    ProductCatalog,
    StockOracle,
)
from cart_sync.domain.services import StockExceededError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartOperationResult:
    """カート操作の結果.

    cart は操作完了後のメモリ上のカート（失敗時は操作前のまま）。
    """

    operation: CartOperation
    status: CartOperationStatus
    product_id: ProductId
    cart: Cart
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """カートが更新されたか."""
        return self.status.is_committed()


class CartEngine:
    """カートの追加・削除・数量変更を在庫と永続化ミラーに同期させるエンジン.

    単一の操作主体を前提とし、操作同士の直列化は行わない。
    """

    def __init__(
        self,
        cart_mirror: CartMirror,
        product_catalog: ProductCatalog,
        stock_oracle: StockOracle,
        initial_cart: Cart | None = None,
    ) -> None:
        """初期化.

        Args:
            cart_mirror: カートミラー
            product_catalog: 商品カタログ
            stock_oracle: 在庫照会
            initial_cart: メモリ上のカートの初期値（省略時は空）
        """
        self._cart_mirror = cart_mirror
        self._cart = initial_cart.copy() if initial_cart is not None else Cart.empty()
        self._add_to_cart = AddToCartUseCase(cart_mirror, product_catalog, stock_oracle)
        self._remove_from_cart = RemoveFromCartUseCase(cart_mirror)
        self._update_cart_amount = UpdateCartAmountUseCase(cart_mirror, stock_oracle)

    @property
    def cart(self) -> Cart:
        """現在のカート（読み取り用のコピー）."""
        return self._cart.copy()

    def restore(self) -> Cart:
        """ミラーからメモリ上のカートを復元する.

        ミラーが空・解釈不能・読み込み不能の場合は空のカートで始める。
        """
        try:
            stored = self._cart_mirror.load()
        except MalformedCartError as e:
            logger.warning(f"Stored cart is malformed, starting with an empty cart: {e}")
            stored = None
        except CollaboratorError as e:
            logger.error(f"Failed to restore cart from mirror: {e}")
            stored = None

        self._cart = stored if stored is not None else Cart.empty()
        return self.cart

    def add_item(self, product_id: ProductId) -> CartOperationResult:
        """商品をカートに1つ追加する."""
        return self._run(
            CartOperation.ADD_ITEM,
            product_id,
            lambda: self._add_to_cart.execute(product_id).cart,
        )

    def remove_item(self, product_id: ProductId) -> CartOperationResult:
        """商品の行をカートから削除する."""

        def action() -> Cart | None:
            result = self._remove_from_cart.execute(product_id)
            return result.cart if result.removed else None

        return self._run(CartOperation.REMOVE_ITEM, product_id, action)

    def update_amount(self, product_id: ProductId, delta: int) -> CartOperationResult:
        """商品の数量に増分を加える."""

        def action() -> Cart | None:
            result = self._update_cart_amount.execute(product_id, delta)
            return result.cart if result.updated else None

        return self._run(CartOperation.UPDATE_AMOUNT, product_id, action)

    def _run(
        self,
        operation: CartOperation,
        product_id: ProductId,
        action: Callable[[], Cart | None],
    ) -> CartOperationResult:
        """操作を実行し、結果を型付きで返す.

        action はミラーへの書き込みまで済ませた新しいカートを返す。
        None の場合は変更なし。
        """
        try:
            updated = action()
        except StockExceededError as e:
            logger.warning(f"{operation.value} rejected: {e}")
            return self._result(operation, CartOperationStatus.STOCK_EXCEEDED, product_id, str(e))
        except (CollaboratorError, ValueError) as e:
            logger.error(f"{operation.value} failed for product {product_id}: {e}", exc_info=True)
            return self._result(operation, CartOperationStatus.FAILED, product_id, str(e))

        if updated is None:
            return self._result(operation, CartOperationStatus.NO_OP, product_id)

        # ミラーへの書き込みが完了してからメモリを更新する
        self._cart = updated
        logger.info(
            f"{operation.value} committed for product {product_id} "
            f"({updated.get_item_count()} lines)"
        )
        return self._result(operation, CartOperationStatus.SUCCESS, product_id)

    def _result(
        self,
        operation: CartOperation,
        status: CartOperationStatus,
        product_id: ProductId,
        error: str | None = None,
    ) -> CartOperationResult:
        return CartOperationResult(
            operation=operation,
            status=status,
            product_id=product_id,
            cart=self.cart,
            error=error,
        )
