"""Term editor exceptions.

通常の編集操作（追加/削除/差分取得）は例外を投げず、False / [] / None を返します。
ここで定義する例外は呼び出し側のプログラミングエラーや設定ミスを表します。
"""


class TermEditorError(Exception):
    """term editor 系例外の基底クラス."""


class EditorNotInitializedError(TermEditorError):
    """re_init() 前にエディタが使われた場合の例外.

    Attributes:
        field_name: 対象フィールド名
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Editor for '{field_name}' used before re_init(product)")


class LanguageNotConfiguredError(TermEditorError):
    """アクティブ言語が解決できない状態でローカライズ済みフィールドを書き出そうとした場合の例外.

    Attributes:
        field_name: 対象フィールド名
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        message = (
            f"No active language configured while serializing '{field_name}'. "
            "Set 'language' in settings or CATALOG_TERM_EDITOR_LANGUAGE."
        )
        super().__init__(message)


class UnknownFieldError(TermEditorError, KeyError):
    """登録されていないフィールド名でバインディングを引いた場合の例外.

    Attributes:
        field_name: 指定されたフィールド名
        known: 登録済みフィールド名
    """

    def __init__(self, field_name: str, known: list[str]) -> None:
        self.field_name = field_name
        self.known = known
        super().__init__(f"Unknown field: '{field_name}'. Known fields: {', '.join(known)}")

    def __str__(self) -> str:
        # KeyError は repr() した文字列を返すため、メッセージをそのまま返す
        return str(self.args[0])


class MissingMessageError(TermEditorError, KeyError):
    """表示文字列のキーがどの言語のカタログにも存在しない場合の例外."""

    def __init__(self, key: str, languages: list[str]) -> None:
        self.key = key
        self.languages = languages
        super().__init__(f"Message '{key}' not found (searched: {', '.join(languages)})")

    def __str__(self) -> str:
        return str(self.args[0])
