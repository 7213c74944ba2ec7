"""列挙型（CartOperation, CartOperationStatus）のテスト."""
from cart_sync.domain.enums import CartOperation
from cart_sync.domain.enums import CartOperationStatus


class TestCartOperation:
    """CartOperationの単体テスト."""

    def test_ADD_ITEMが定義されている(self) -> None:
        """ADD_ITEMメンバーが存在することを確認."""
        assert CartOperation.ADD_ITEM.value == "add_item"

    def test_REMOVE_ITEMが定義されている(self) -> None:
        """REMOVE_ITEMメンバーが存在することを確認."""
        assert CartOperation.REMOVE_ITEM.value == "remove_item"

    def test_UPDATE_AMOUNTが定義されている(self) -> None:
        """UPDATE_AMOUNTメンバーが存在することを確認."""
        assert CartOperation.UPDATE_AMOUNT.value == "update_amount"


class TestCartOperationStatus:
    """CartOperationStatusの単体テスト."""

    def test_値が定義されている(self) -> None:
        assert CartOperationStatus.SUCCESS.value == "success"
        assert CartOperationStatus.NO_OP.value == "no_op"
        assert CartOperationStatus.STOCK_EXCEEDED.value == "stock_exceeded"
        assert CartOperationStatus.FAILED.value == "failed"

    def test_SUCCESSのみ確定済み(self) -> None:
        """SUCCESSだけがis_committedを返すことを確認."""
        committed = [status for status in CartOperationStatus if status.is_committed()]
        assert committed == [CartOperationStatus.SUCCESS]

    def test_在庫超過と失敗は拒否扱い(self) -> None:
        """STOCK_EXCEEDEDとFAILEDがis_rejectedを返すことを確認."""
        assert CartOperationStatus.STOCK_EXCEEDED.is_rejected() is True
        assert CartOperationStatus.FAILED.is_rejected() is True

    def test_成功と変更なしは拒否扱いでない(self) -> None:
        assert CartOperationStatus.SUCCESS.is_rejected() is False
        assert CartOperationStatus.NO_OP.is_rejected() is False
