"""カート削除ユースケース."""
from dataclasses import dataclass

from cart_sync.domain.entities import Cart
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import CartMirror


@dataclass(frozen=True)
class RemoveFromCartResult:
    """カート削除結果."""

    cart: Cart | None
    removed: bool


class RemoveFromCartUseCase:
    """カートから商品の行を削除するユースケース."""

    def __init__(self, cart_mirror: CartMirror) -> None:
        """初期化.

        Args:
            cart_mirror: カートミラー
        """
        self._cart_mirror = cart_mirror

    def execute(self, product_id: ProductId) -> RemoveFromCartResult:
        """商品の行を削除する.

        行が存在しない場合は何もしない（エラーにもしない）。

        Args:
            product_id: 商品ID

        Returns:
            削除結果（ミラーが空の場合は cart=None）

        Raises:
            MirrorError: ミラーの読み書きに失敗した場合
        """
        cart = self._cart_mirror.load()
        if cart is None:
            return RemoveFromCartResult(cart=None, removed=False)

        if not cart.remove_line(product_id):
            return RemoveFromCartResult(cart=cart, removed=False)

        self._cart_mirror.save(cart)

        return RemoveFromCartResult(cart=cart, removed=True)
