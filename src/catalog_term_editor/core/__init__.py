"""用語編集のコア処理群.

- 用語エディタ（作業中の用語リスト、追加/削除、変更検出、差分パッチ生成）
- ローカライズ済みタグの対応付け（表示名 ⇔ 言語プレフィックス付きタグ）
- 商品レコード / パッチ
"""

from .language import LanguageResolver, StaticLanguageResolver
from .localized import LocalizedSource, LocalizedStatus, LocalizedTermEditor, resolve_localized_source
from .product import Product
from .term_editor import SEPARATOR, EditSession, TermEditor, split_string

__all__ = [
    "SEPARATOR",
    "EditSession",
    "LanguageResolver",
    "LocalizedSource",
    "LocalizedStatus",
    "LocalizedTermEditor",
    "Product",
    "StaticLanguageResolver",
    "TermEditor",
    "resolve_localized_source",
    "split_string",
]
