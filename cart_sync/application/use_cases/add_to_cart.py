"""カート追加ユースケース."""
from dataclasses import dataclass

from cart_sync.domain.entities import Cart, CartLine
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import CartMirror, ProductCatalog, StockOracle
from cart_sync.domain.services import StockGate


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果."""

    cart: Cart
    line: CartLine
    created: bool


class AddToCartUseCase:
    """商品をカートに1つ追加するユースケース."""

    def __init__(
        self,
        cart_mirror: CartMirror,
        product_catalog: ProductCatalog,
        stock_oracle: StockOracle,
    ) -> None:
        """初期化.

        Args:
            cart_mirror: カートミラー
            product_catalog: 商品カタログ
            stock_oracle: 在庫照会
        """
        self._cart_mirror = cart_mirror
        self._product_catalog = product_catalog
        self._stock_oracle = stock_oracle

    def execute(self, product_id: ProductId) -> AddToCartResult:
        """商品をカートに追加する.

        未登録の商品は数量1の行として末尾に追加する（在庫判定なし）。
        登録済みの商品は在庫が残っている場合のみ数量を1増やす。

        Args:
            product_id: 商品ID

        Returns:
            カート追加結果

        Raises:
            StockExceededError: 登録済みの数量が既に在庫数以上の場合
            CollaboratorError: カタログ・在庫・ミラーの呼び出しに失敗した場合
        """
        cart = self._cart_mirror.load() or Cart.empty()
        attributes = self._product_catalog.get_product(product_id)
        stock = self._stock_oracle.get_stock(product_id)

        current = cart.find_line(product_id)
        if current is None:
            line = cart.add_line(product_id, attributes)
            created = True
        else:
            StockGate.ensure_can_increase(current, stock)
            line = current.increase(1)
            cart.replace_line(line)
            created = False

        self._cart_mirror.save(cart)

        return AddToCartResult(cart=cart, line=line, created=created)
