"""インフラストラクチャ層モジュール."""
from .notifications import InMemoryNotificationSink, LoggingNotificationSink
from .providers import MockProductCatalog, MockStockOracle
from .repositories import DynamoDBCartMirror, InMemoryCartMirror

__all__ = [
    "DynamoDBCartMirror",
    "InMemoryCartMirror",
    "InMemoryNotificationSink",
    "LoggingNotificationSink",
    "MockProductCatalog",
    "MockStockOracle",
]
