"""InMemoryCartMirror のテスト."""
from cart_sync.domain.entities import Cart
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.value_objects import Money, ProductAttributes
from cart_sync.infrastructure.repositories import InMemoryCartMirror


class TestInMemoryCartMirror:
    """InMemoryCartMirror のテスト."""

    def test_未保存ならNone(self) -> None:
        assert InMemoryCartMirror().load() is None

    def test_保存したカートを読み込める(self) -> None:
        mirror = InMemoryCartMirror()
        cart = Cart.empty()
        cart.add_line(ProductId(1), ProductAttributes(title="Shoe", price=Money.of(10)))

        mirror.save(cart)

        assert mirror.load() == cart

    def test_読み込んだカートは保存後の変更の影響を受けない(self) -> None:
        mirror = InMemoryCartMirror()
        cart = Cart.empty()
        mirror.save(cart)
        cart.add_line(ProductId(1), ProductAttributes(title="Shoe", price=Money.of(10)))

        assert mirror.load().is_empty() is True

    def test_ストアを共有すると別インスタンスから読める(self) -> None:
        storage: dict[str, str] = {}
        InMemoryCartMirror(key="k", storage=storage).save(Cart.empty())
        assert InMemoryCartMirror(key="k", storage=storage).load() == Cart.empty()
        assert storage == {"k": "[]"}

    def test_キーは環境変数で変更できる(self, monkeypatch) -> None:
        monkeypatch.setenv("CART_MIRROR_KEY", "@test:cart")
        assert InMemoryCartMirror().key == "@test:cart"

    def test_キーのデフォルト値(self, monkeypatch) -> None:
        monkeypatch.delenv("CART_MIRROR_KEY", raising=False)
        assert InMemoryCartMirror().key == "@cart-sync:cart"
