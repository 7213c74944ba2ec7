"""カートミラーのDynamoDB実装."""
import logging
import os
from datetime import datetime, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cart_sync.domain.entities import Cart
from cart_sync.domain.ports import CartMirror, MirrorError

from .cart_serializer import deserialize_cart, serialize_cart
from .in_memory_cart_mirror import DEFAULT_MIRROR_KEY

logger = logging.getLogger(__name__)


class DynamoDBCartMirror(CartMirror):
    """カートミラーのDynamoDB実装.

    パーティションキー storage_key の1アイテムに、シリアライズ済みカートを
    value 属性として丸ごと保存する。
    """

    def __init__(self, table_name: str | None = None, key: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "CART_MIRROR_TABLE_NAME", "cart-sync-mirror"
        )
        self._key = key or os.environ.get("CART_MIRROR_KEY", DEFAULT_MIRROR_KEY)
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def load(self) -> Cart | None:
        """保存済みのカートを読み込む."""
        try:
            response = self._table.get_item(
                Key={"storage_key": self._key},
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to load cart mirror {self._key}: {e}")
            raise MirrorError(f"Failed to load cart: {e}") from e

        item = response.get("Item")
        if item is None or item.get("value") is None:
            return None
        return deserialize_cart(item["value"])

    def save(self, cart: Cart) -> None:
        """カートを丸ごと書き込む."""
        item = {
            "storage_key": self._key,
            "value": serialize_cart(cart),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self._table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to save cart mirror {self._key}: {e}")
            raise MirrorError(f"Failed to save cart: {e}") from e
