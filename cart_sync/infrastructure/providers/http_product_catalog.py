"""HTTP 商品カタログ."""
import logging

from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import CatalogError, ProductCatalog, ProductNotFoundError
from cart_sync.domain.value_objects import Money, ProductAttributes
from cart_sync.infrastructure.clients import ShopApiClient, ShopApiError

logger = logging.getLogger(__name__)


class HttpProductCatalog(ProductCatalog):
    """商品API (GET /products/{id}) から表示属性を取得するカタログ."""

    def __init__(self, client: ShopApiClient | None = None) -> None:
        """初期化.

        Args:
            client: 商品・在庫API クライアント
        """
        self._client = client or ShopApiClient()

    def get_product(self, product_id: ProductId) -> ProductAttributes:
        """商品の表示属性を取得する."""
        try:
            data = self._client.get_resource(f"products/{product_id.value}")
        except ShopApiError as e:
            raise CatalogError(f"Failed to get product {product_id}: {e}") from e

        if data is None:
            raise ProductNotFoundError(product_id)
        if "id" in data and str(data["id"]) != str(product_id.value):
            logger.warning(f"Product payload for another product: {data!r}")
            raise CatalogError(
                f"Product payload id {data['id']!r} does not match {product_id}"
            )
        return self._to_product_attributes(data)

    def _to_product_attributes(self, data: dict) -> ProductAttributes:
        """API レスポンスを ProductAttributes に変換する."""
        try:
            return ProductAttributes(
                title=data["title"],
                price=Money.of(data["price"]),
                image=data.get("image") or "",
            )
        except (KeyError, ValueError) as e:
            logger.warning(f"Invalid product payload: {data!r}")
            raise CatalogError(f"Invalid product payload: {e}") from e
