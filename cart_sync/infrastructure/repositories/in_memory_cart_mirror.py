"""カートミラーのインメモリ実装."""
import os

from cart_sync.domain.entities import Cart
from cart_sync.domain.ports import CartMirror

from .cart_serializer import deserialize_cart, serialize_cart

DEFAULT_MIRROR_KEY = "@cart-sync:cart"


class InMemoryCartMirror(CartMirror):
    """カートミラーのインメモリ実装.

    ブラウザの localStorage と同様に、キーごとにシリアライズ済みの文字列を保持する。
    """

    def __init__(self, key: str | None = None, storage: dict[str, str] | None = None) -> None:
        """初期化.

        Args:
            key: カートを保存するキー
            storage: 共有するキー・値ストア（省略時は新規）
        """
        self._key = key or os.environ.get("CART_MIRROR_KEY", DEFAULT_MIRROR_KEY)
        self._storage: dict[str, str] = storage if storage is not None else {}

    @property
    def key(self) -> str:
        """保存キー."""
        return self._key

    def load(self) -> Cart | None:
        """保存済みのカートを読み込む."""
        value = self._storage.get(self._key)
        if value is None:
            return None
        return deserialize_cart(value)

    def save(self, cart: Cart) -> None:
        """カートを丸ごと書き込む."""
        self._storage[self._key] = serialize_cart(cart)

    def get_raw(self) -> str | None:
        """保存されているシリアライズ済みの値を取得する."""
        return self._storage.get(self._key)

    def set_raw(self, value: str) -> None:
        """シリアライズ済みの値を直接書き込む."""
        self._storage[self._key] = value
