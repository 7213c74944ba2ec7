"""ProductIdのテスト."""
import pytest

from cart_sync.domain.identifiers import ProductId


class TestProductId:
    """ProductIdの単体テスト."""

    def test_正の整数で生成できる(self) -> None:
        assert ProductId(7).value == 7

    def test_0以下はエラー(self) -> None:
        with pytest.raises(ValueError):
            ProductId(0)
        with pytest.raises(ValueError):
            ProductId(-1)

    def test_boolはエラー(self) -> None:
        with pytest.raises(ValueError):
            ProductId(True)

    def test_文字列から生成できる(self) -> None:
        assert ProductId.parse("12") == ProductId(12)
        assert ProductId.parse(" 3 ") == ProductId(3)

    def test_数値でない文字列はエラー(self) -> None:
        with pytest.raises(ValueError):
            ProductId.parse("abc")

    def test_文字列表現(self) -> None:
        assert str(ProductId(42)) == "42"

    def test_同じ値は等価でハッシュ可能(self) -> None:
        assert ProductId(1) == ProductId(1)
        assert len({ProductId(1), ProductId(1), ProductId(2)}) == 2
