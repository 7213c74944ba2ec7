"""カート数量変更ユースケース."""
from dataclasses import dataclass

from cart_sync.domain.entities import Cart, CartLine
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import CartMirror, StockOracle
from cart_sync.domain.services import StockGate


@dataclass(frozen=True)
class UpdateCartAmountResult:
    """カート数量変更結果."""

    cart: Cart | None
    line: CartLine | None
    updated: bool


class UpdateCartAmountUseCase:
    """カート行の数量を増分で変更するユースケース."""

    def __init__(self, cart_mirror: CartMirror, stock_oracle: StockOracle) -> None:
        """初期化.

        Args:
            cart_mirror: カートミラー
            stock_oracle: 在庫照会
        """
        self._cart_mirror = cart_mirror
        self._stock_oracle = stock_oracle

    def execute(self, product_id: ProductId, delta: int) -> UpdateCartAmountResult:
        """数量に増分を加える.

        在庫判定は変更前の数量で行うため、2以上の増分では在庫数を超えることがある。

        Args:
            product_id: 商品ID
            delta: 数量の増分（負数で減算）

        Returns:
            数量変更結果（ミラーが空、または行が無い場合は updated=False）

        Raises:
            StockExceededError: 変更前の数量が既に在庫数以上の場合
            ValueError: 変更後の数量が1未満になる場合
            CollaboratorError: 在庫・ミラーの呼び出しに失敗した場合
        """
        cart = self._cart_mirror.load()
        stock = self._stock_oracle.get_stock(product_id)
        if cart is None:
            return UpdateCartAmountResult(cart=None, line=None, updated=False)

        current = cart.find_line(product_id)
        if current is None:
            return UpdateCartAmountResult(cart=cart, line=None, updated=False)

        StockGate.ensure_can_increase(current, stock)
        line = current.increase(delta)
        cart.replace_line(line)

        self._cart_mirror.save(cart)

        return UpdateCartAmountResult(cart=cart, line=line, updated=True)
