"""カートミラー（永続化スロット）インターフェース."""
from abc import ABC, abstractmethod

from ..entities import Cart
from .collaborator_error import CollaboratorError


class MirrorError(CollaboratorError):
    """ミラーの読み書きエラー."""

    pass


class MalformedCartError(MirrorError):
    """保存されているカートの値が解釈できないエラー."""

    pass


class CartMirror(ABC):
    """シリアライズ済みカートを1つのキーに丸ごと保持する永続化スロット.

    キーをまたいだトランザクションは持たない。値は常に丸ごと読み書きする。
    """

    @abstractmethod
    def load(self) -> Cart | None:
        """保存済みのカートを読み込む.

        Returns:
            カート（未保存の場合はNone）

        Raises:
            MalformedCartError: 保存値が解釈できない場合
            MirrorError: 読み込みに失敗した場合
        """
        pass

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """カートを丸ごと書き込む.

        Raises:
            MirrorError: 書き込みに失敗した場合
        """
        pass
