"""クライアント実装."""
from .shop_api_client import ShopApiClient, ShopApiError

__all__ = ["ShopApiClient", "ShopApiError"]
