"""商品・在庫API クライアント.

GET {base_url}/products/{id} と GET {base_url}/stock/{id} を提供する
REST API（json-server 互換）と HTTP 通信する。
"""
import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3333"


class ShopApiError(Exception):
    """商品・在庫API エラー."""

    pass


class ShopApiClient:
    """商品・在庫API クライアント."""

    DEFAULT_TIMEOUT = 10  # seconds

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        """初期化.

        Args:
            base_url: API サーバーの URL (例: http://localhost:3333)
            timeout: リクエストタイムアウト秒数（省略時は CART_API_TIMEOUT）

        Raises:
            ValueError: タイムアウトが正の数でない場合
        """
        self._base_url = (base_url or os.environ.get("CART_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self._timeout = timeout if timeout is not None else self._timeout_from_env()
        if self._timeout <= 0:
            raise ValueError(f"Timeout must be a positive number of seconds: {self._timeout}")
        self._session = self._create_session()

    def _timeout_from_env(self) -> float:
        """環境変数 CART_API_TIMEOUT からタイムアウト秒数を取得する."""
        raw = os.environ.get("CART_API_TIMEOUT")
        if raw is None:
            return float(self.DEFAULT_TIMEOUT)
        try:
            return float(raw)
        except ValueError as e:
            raise ValueError(
                f"CART_API_TIMEOUT must be a number of seconds, got {raw!r}"
            ) from e

    def _create_session(self) -> requests.Session:
        """リトライ機能付きの HTTP セッションを作成する."""
        session = requests.Session()

        # リトライ設定
        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def get_resource(self, path: str) -> dict[str, Any] | None:
        """リソースを1件取得する.

        Args:
            path: base_url からの相対パス (例: products/1)

        Returns:
            レスポンスボディ（404の場合はNone）

        Raises:
            ShopApiError: 通信に失敗した、またはレスポンスが不正な場合
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = self._session.get(url, timeout=self._timeout)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to get {url}: {e}")
            raise ShopApiError(f"Failed to get {path}: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise ShopApiError(f"Invalid response for {path}: {e}") from e

        if not isinstance(data, dict):
            raise ShopApiError(f"Unexpected response for {path}: {type(data).__name__}")
        return data
