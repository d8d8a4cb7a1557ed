"""アクティブ言語の解決.

ローカライズ済みフィールドの編集では、ユーザーの表示言語で用語を扱い、
新規用語には "<言語コード>:<用語>" 形式のタグを採番します。
その言語コードをどこから取るかをここで抽象化します。
"""

from __future__ import annotations

import re
from typing import Protocol

_LANGUAGE_CODE = re.compile(r"^[a-z]{2,3}$")


def is_language_code(code: str) -> bool:
    """ISO 639 形式（小文字2〜3文字）の言語コードかどうか."""
    if not isinstance(code, str):
        return False
    return bool(_LANGUAGE_CODE.match(code))


class LanguageResolver(Protocol):
    """現在の言語コードを返すサービス.

    設定ミスの環境でのみ None を返します。キャッシュはしません（呼び出しごとに解決）。
    """

    def get_language(self) -> str | None: ...


class StaticLanguageResolver:
    """固定の言語コードを返すリゾルバ."""

    def __init__(self, language: str | None) -> None:
        if language is not None and not is_language_code(language):
            msg = f"Invalid language code: '{language}'"
            raise ValueError(msg)
        self.language = language

    def get_language(self) -> str | None:
        return self.language

    def __repr__(self) -> str:
        return f"StaticLanguageResolver({self.language!r})"
