"""DynamoDBCartMirror のテスト."""
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from cart_sync.domain.entities import Cart
from cart_sync.domain.identifiers import ProductId
from cart_sync.domain.ports import MalformedCartError, MirrorError
from cart_sync.domain.value_objects import Money, ProductAttributes
from cart_sync.infrastructure.repositories.dynamodb_cart_mirror import DynamoDBCartMirror


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
        operation,
    )


@pytest.fixture
def mock_table():
    with patch("cart_sync.infrastructure.repositories.dynamodb_cart_mirror.boto3") as mock_boto3:
        table = MagicMock()
        mock_boto3.resource.return_value.Table.return_value = table
        yield table


class TestDynamoDBCartMirror:
    """DynamoDBCartMirror のテスト."""

    def test_テーブル名とキーを環境変数から取得する(self, mock_table, monkeypatch) -> None:
        monkeypatch.setenv("CART_MIRROR_TABLE_NAME", "test-mirror")
        monkeypatch.setenv("CART_MIRROR_KEY", "@test:cart")
        with patch(
            "cart_sync.infrastructure.repositories.dynamodb_cart_mirror.boto3"
        ) as mock_boto3:
            mirror = DynamoDBCartMirror()
            mock_boto3.resource.return_value.Table.assert_called_once_with("test-mirror")
        assert mirror._key == "@test:cart"

    def test_アイテムが無ければNone(self, mock_table) -> None:
        mock_table.get_item.return_value = {}
        mirror = DynamoDBCartMirror(table_name="t", key="k")

        assert mirror.load() is None
        mock_table.get_item.assert_called_once_with(Key={"storage_key": "k"}, ConsistentRead=True)

    def test_保存値をカートに変換する(self, mock_table) -> None:
        mock_table.get_item.return_value = {
            "Item": {
                "storage_key": "k",
                "value": '[{"id": 7, "title": "Shoe", "price": "179.90", "image": "", "amount": 2}]',
            }
        }
        mirror = DynamoDBCartMirror(table_name="t", key="k")

        cart = mirror.load()

        assert cart.find_line(ProductId(7)).amount == 2

    def test_解釈できない保存値はMalformedCartError(self, mock_table) -> None:
        mock_table.get_item.return_value = {"Item": {"storage_key": "k", "value": "oops"}}
        mirror = DynamoDBCartMirror(table_name="t", key="k")

        with pytest.raises(MalformedCartError):
            mirror.load()

    def test_カートを丸ごと書き込む(self, mock_table) -> None:
        mirror = DynamoDBCartMirror(table_name="t", key="k")
        cart = Cart.empty()
        cart.add_line(ProductId(7), ProductAttributes(title="Shoe", price=Money.of("1.5")))

        mirror.save(cart)

        item = mock_table.put_item.call_args.kwargs["Item"]
        assert item["storage_key"] == "k"
        assert item["value"] == '[{"id": 7, "title": "Shoe", "price": "1.5", "image": "", "amount": 1}]'
        assert "updated_at" in item

    def test_読み込み失敗はMirrorError(self, mock_table) -> None:
        mock_table.get_item.side_effect = _client_error("GetItem")
        mirror = DynamoDBCartMirror(table_name="t", key="k")

        with pytest.raises(MirrorError):
            mirror.load()

    def test_書き込み失敗はMirrorError(self, mock_table) -> None:
        mock_table.put_item.side_effect = _client_error("PutItem")
        mirror = DynamoDBCartMirror(table_name="t", key="k")

        with pytest.raises(MirrorError):
            mirror.save(Cart.empty())
