"""依存性注入コンテナ."""
import os

from cart_sync.application import CartEngine
from cart_sync.domain.ports import CartMirror, NotificationSink, ProductCatalog, StockOracle
from cart_sync.infrastructure import InMemoryCartMirror, LoggingNotificationSink


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    # CART_MIRROR_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("CART_MIRROR_TABLE_NAME") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    CART_MIRROR_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _cart_mirror: CartMirror | None = None
    _product_catalog: ProductCatalog | None = None
    _stock_oracle: StockOracle | None = None
    _notification_sink: NotificationSink | None = None
    _cart_engine: CartEngine | None = None

    @classmethod
    def get_cart_mirror(cls) -> CartMirror:
        """カートミラーを取得する."""
        if cls._cart_mirror is None:
            if _use_dynamodb():
                from cart_sync.infrastructure import DynamoDBCartMirror

                cls._cart_mirror = DynamoDBCartMirror()
            else:
                cls._cart_mirror = InMemoryCartMirror()
        return cls._cart_mirror

    @classmethod
    def set_cart_mirror(cls, mirror: CartMirror) -> None:
        """カートミラーを設定する（テスト用）."""
        cls._cart_mirror = mirror

    @classmethod
    def get_product_catalog(cls) -> ProductCatalog:
        """商品カタログを取得する."""
        if cls._product_catalog is None:
            from cart_sync.infrastructure.providers import create_product_catalog

            cls._product_catalog = create_product_catalog()
        return cls._product_catalog

    @classmethod
    def set_product_catalog(cls, catalog: ProductCatalog) -> None:
        """商品カタログを設定する（テスト用）."""
        cls._product_catalog = catalog

    @classmethod
    def get_stock_oracle(cls) -> StockOracle:
        """在庫照会を取得する."""
        if cls._stock_oracle is None:
            from cart_sync.infrastructure.providers import create_stock_oracle

            cls._stock_oracle = create_stock_oracle()
        return cls._stock_oracle

    @classmethod
    def set_stock_oracle(cls, oracle: StockOracle) -> None:
        """在庫照会を設定する（テスト用）."""
        cls._stock_oracle = oracle

    @classmethod
    def get_notification_sink(cls) -> NotificationSink:
        """通知先を取得する."""
        if cls._notification_sink is None:
            cls._notification_sink = LoggingNotificationSink()
        return cls._notification_sink

    @classmethod
    def set_notification_sink(cls, sink: NotificationSink) -> None:
        """通知先を設定する（テスト用）."""
        cls._notification_sink = sink

    @classmethod
    def get_cart_engine(cls) -> CartEngine:
        """カート同期エンジンを取得する.

        初回取得時にミラーからカートを復元する。
        """
        if cls._cart_engine is None:
            engine = CartEngine(
                cart_mirror=cls.get_cart_mirror(),
                product_catalog=cls.get_product_catalog(),
                stock_oracle=cls.get_stock_oracle(),
            )
            engine.restore()
            cls._cart_engine = engine
        return cls._cart_engine

    @classmethod
    def set_cart_engine(cls, engine: CartEngine) -> None:
        """カート同期エンジンを設定する（テスト用）."""
        cls._cart_engine = engine

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_mirror = None
        cls._product_catalog = None
        cls._stock_oracle = None
        cls._notification_sink = None
        cls._cart_engine = None
