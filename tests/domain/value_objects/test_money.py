"""Moneyのテスト."""
from decimal import Decimal

import pytest

from cart_sync.domain.value_objects import Money


class TestMoney:
    """Moneyの単体テスト."""

    def test_floatは文字列表現を経由して変換される(self) -> None:
        assert Money.of(179.9).value == Decimal("179.9")

    def test_文字列と整数から生成できる(self) -> None:
        assert Money.of("139.90").value == Decimal("139.90")
        assert Money.of(100).value == Decimal("100")

    def test_負の金額はエラー(self) -> None:
        with pytest.raises(ValueError):
            Money.of(-1)

    def test_数値でない文字列はエラー(self) -> None:
        with pytest.raises(ValueError):
            Money.of("free")

    def test_boolはエラー(self) -> None:
        with pytest.raises(ValueError):
            Money.of(True)

    def test_加算と乗算(self) -> None:
        total = Money.of("179.90").multiply(2).add(Money.of("139.90"))
        assert total.value == Decimal("499.70")

    def test_負の係数はエラー(self) -> None:
        with pytest.raises(ValueError):
            Money.of(10).multiply(-1)

    def test_表示用フォーマット(self) -> None:
        assert Money.of("1079.7").format() == "$1,079.70"
        assert str(Money.zero()) == "$0.00"
