"""モック商品カタログ."""
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import CatalogError, ProductCatalog, ProductNotFoundError
from cart_sync.domain.value_objects import Money, ProductAttributes

# サンプルの商品 (id, 商品名, 価格, 画像)
SAMPLE_PRODUCTS = [
    (1, "軽量ウォーキングシューズ", "179.90", "https://example.com/images/shoes-1.jpg"),
    (2, "ランニングシューズ VR", "139.90", "https://example.com/images/shoes-2.jpg"),
    (3, "アダプトテクノロジーシューズ", "219.90", "https://example.com/images/shoes-3.jpg"),
    (4, "トレイルランニングシューズ", "139.90", "https://example.com/images/shoes-4.jpg"),
    (5, "クッションスニーカー", "139.90", "https://example.com/images/shoes-5.jpg"),
    (6, "ストリートスニーカー", "219.90", "https://example.com/images/shoes-6.jpg"),
]


class MockProductCatalog(ProductCatalog):
    """モック商品カタログ（開発・テスト用）."""

    def __init__(self, products: dict[ProductId, ProductAttributes] | None = None) -> None:
        """初期化.

        Args:
            products: 商品の初期データ（省略時はサンプル商品）
        """
        if products is None:
            products = {
                ProductId(product_id): ProductAttributes(
                    title=title, price=Money.of(price), image=image
                )
                for product_id, title, price, image in SAMPLE_PRODUCTS
            }
        self._products = dict(products)
        self._unavailable = False
        self.call_count = 0

    def add_product(self, product_id: ProductId, attributes: ProductAttributes) -> None:
        """商品を登録する（テスト用）."""
        self._products[product_id] = attributes

    def set_unavailable(self, unavailable: bool = True) -> None:
        """カタログを到達不能にする（テスト用）."""
        self._unavailable = unavailable

    def get_product(self, product_id: ProductId) -> ProductAttributes:
        """商品の表示属性を取得する."""
        self.call_count += 1
        if self._unavailable:
            raise CatalogError("Product catalog is unavailable")
        attributes = self._products.get(product_id)
        if attributes is None:
            raise ProductNotFoundError(product_id)
        return attributes
