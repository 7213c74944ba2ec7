"""リポジトリ実装モジュール."""
from .cart_serializer import deserialize_cart, serialize_cart
from .dynamodb_cart_mirror import DynamoDBCartMirror
from .in_memory_cart_mirror import InMemoryCartMirror

__all__ = [
    "DynamoDBCartMirror",
    "InMemoryCartMirror",
    "deserialize_cart",
    "serialize_cart",
]
