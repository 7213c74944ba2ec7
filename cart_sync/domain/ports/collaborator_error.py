"""外部協調者エラーの基底クラス."""


class CollaboratorError(Exception):
    """カタログ・在庫・ミラーなど外部協調者の呼び出し失敗."""

    pass
